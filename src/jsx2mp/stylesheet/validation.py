"""
Declaration Validation.

Checks a declaration's raw value against the value kind its property accepts
(length, number, color, or an enumerated keyword set). Validation is advisory:
failures are logged and pushed to a `MessageSink`, and the caller keeps the
best-effort converted value.
"""

import re
from typing import Callable, Dict, Optional

from rich.markup import escape

from jsx2mp.stylesheet.colors import parse_color
from jsx2mp.stylesheet.messages import MessageSink, default_sink
from jsx2mp.stylesheet.nodes import Position
from jsx2mp.utils.console import log_error, log_warning

Validator = Callable[[str], bool]

_LENGTH_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)(px|rpx|rem|em|vw|vh|%)?$")
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)$")
_VAR_RE = re.compile(r"^var\(--.*\)$")
_GLOBAL_KEYWORDS = {"inherit", "initial", "unset"}


def _is_length(value: str) -> bool:
  return value == "auto" or bool(_LENGTH_RE.match(value))


def _is_number(value: str) -> bool:
  return bool(_NUMBER_RE.match(value))


def _is_color(value: str) -> bool:
  return value.lower() == "currentcolor" or parse_color(value) is not None


def _one_of(*keywords: str) -> Validator:
  allowed = set(keywords)

  def check(value: str) -> bool:
    return value in allowed

  return check


def _lengths(max_count: int) -> Validator:
  def check(value: str) -> bool:
    tokens = value.split()
    return 0 < len(tokens) <= max_count and all(_is_length(t) for t in tokens)

  return check


def _any(value: str) -> bool:
  return bool(value.strip())


VALIDATORS: Dict[str, Validator] = {
  # Box model
  "width": _is_length,
  "height": _is_length,
  "minWidth": _is_length,
  "maxWidth": _is_length,
  "minHeight": _is_length,
  "maxHeight": _is_length,
  "top": _is_length,
  "right": _is_length,
  "bottom": _is_length,
  "left": _is_length,
  "margin": _lengths(4),
  "marginTop": _is_length,
  "marginRight": _is_length,
  "marginBottom": _is_length,
  "marginLeft": _is_length,
  "padding": _lengths(4),
  "paddingTop": _is_length,
  "paddingRight": _is_length,
  "paddingBottom": _is_length,
  "paddingLeft": _is_length,
  "boxSizing": _one_of("border-box", "content-box"),
  # Borders
  "border": _any,
  "borderTop": _any,
  "borderRight": _any,
  "borderBottom": _any,
  "borderLeft": _any,
  "borderWidth": _lengths(4),
  "borderTopWidth": _is_length,
  "borderRightWidth": _is_length,
  "borderBottomWidth": _is_length,
  "borderLeftWidth": _is_length,
  "borderStyle": _any,
  "borderColor": _any,
  "borderTopColor": _is_color,
  "borderRightColor": _is_color,
  "borderBottomColor": _is_color,
  "borderLeftColor": _is_color,
  "borderRadius": _lengths(4),
  "borderTopLeftRadius": _is_length,
  "borderTopRightRadius": _is_length,
  "borderBottomLeftRadius": _is_length,
  "borderBottomRightRadius": _is_length,
  # Layout
  "display": _one_of("flex", "none", "block", "inline", "inline-block", "inline-flex"),
  "position": _one_of("relative", "absolute", "fixed", "sticky", "static"),
  "zIndex": _is_number,
  "overflow": _one_of("visible", "hidden", "scroll", "auto"),
  "flex": _any,
  "flexGrow": _is_number,
  "flexShrink": _is_number,
  "flexBasis": _is_length,
  "flexDirection": _one_of("row", "row-reverse", "column", "column-reverse"),
  "flexWrap": _one_of("nowrap", "wrap", "wrap-reverse"),
  "justifyContent": _one_of("flex-start", "flex-end", "center", "space-between", "space-around", "space-evenly"),
  "alignItems": _one_of("flex-start", "flex-end", "center", "baseline", "stretch"),
  "alignSelf": _one_of("auto", "flex-start", "flex-end", "center", "baseline", "stretch"),
  "alignContent": _one_of("flex-start", "flex-end", "center", "space-between", "space-around", "stretch"),
  # Text
  "color": _is_color,
  "backgroundColor": _is_color,
  "fontSize": _is_length,
  "fontWeight": _one_of("normal", "bold", "bolder", "lighter", "100", "200", "300", "400", "500", "600", "700", "800", "900"),
  "fontStyle": _one_of("normal", "italic", "oblique"),
  "fontFamily": _any,
  "lineHeight": _is_length,
  "textAlign": _one_of("left", "right", "center", "justify", "start", "end"),
  "textDecoration": _one_of("none", "underline", "overline", "line-through"),
  "textOverflow": _one_of("clip", "ellipsis"),
  "whiteSpace": _one_of("normal", "nowrap", "pre", "pre-wrap", "pre-line"),
  "lines": _is_number,
  # Visual
  "opacity": _is_number,
  "visibility": _one_of("visible", "hidden"),
  "backgroundImage": _any,
  "transform": _any,
  "transformOrigin": _any,
  "transition": _any,
  "transitionProperty": _any,
  "transitionDuration": _any,
  "transitionTimingFunction": _any,
  "transitionDelay": _any,
}


class Validation:
  """
  Validates declarations against `VALIDATORS`.
  """

  @classmethod
  def validate(
    cls,
    camel_case_property: str,
    prop: str,
    value: str,
    selectors: str = "",
    position: Optional[Position] = None,
    log: bool = False,
    sink: Optional[MessageSink] = None,
  ) -> bool:
    """
    Validates a single declaration.

    Args:
        camel_case_property (str): Converted property name used for lookup.
        prop (str): Property as written in the stylesheet.
        value (str): Raw value (quotes already stripped).
        selectors (str): Joined selectors of the owning rule, for the message.
        position (Optional[Position]): Declaration position, for the message.
        log (bool): If True, failures are logged and pushed to the sink.
        sink (Optional[MessageSink]): Destination; the default sink if None.

    Returns:
        bool: True if the declaration is valid.
    """
    text = str(value).strip()
    validator = VALIDATORS.get(camel_case_property)

    if validator is None:
      # Vendor-prefixed and custom (`--x`) properties are passed through untouched
      if prop.startswith("-"):
        return True
      cls._report(f'"{prop}" is not a supported property in "{selectors}"', position, log, sink, warn=True)
      return False

    if text in _GLOBAL_KEYWORDS or _VAR_RE.match(text) or validator(text):
      return True

    cls._report(f'"{prop}: {text}" is not a valid value in "{selectors}"', position, log, sink)
    return False

  @staticmethod
  def _report(detail: str, position: Optional[Position], log: bool, sink: Optional[MessageSink], warn: bool = False) -> None:
    if not log:
      return
    pos = position or Position()
    message = f"line: {pos.start.line}, column: {pos.start.column} - {detail}"
    if warn:
      log_warning(escape(message))
    else:
      log_error(message)
    (sink or default_sink()).push(message)
