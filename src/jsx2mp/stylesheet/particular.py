"""
Particular Property Handlers.

Some CSS properties do not map 1:1 onto a target style key. A shorthand such
as `border: 1px solid red` must be expanded into several keys, and the
shorthand itself removed. Each such property registers a pure handler:

    handler(value) -> ParticularResult(values={...}, delete_original=bool)

Handlers are looked up by camelCased property name from the static
`PARTICULAR` table, filled at import time by `register_particular`.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from jsx2mp.stylesheet.colors import normalize_color, parse_color


@dataclass(frozen=True)
class ParticularResult:
  """
  Outcome of a particular handler.

  Attributes:
      values (Dict[str, Any]): Keys merged into the style object.
      delete_original (bool): If True, the original camelCased key is removed.
  """

  values: Dict[str, Any] = field(default_factory=dict)
  delete_original: bool = False


ParticularHandler = Callable[[Any], ParticularResult]

PARTICULAR: Dict[str, ParticularHandler] = {}

BORDER_STYLES = {"none", "hidden", "dotted", "dashed", "solid", "double", "groove", "ridge", "inset", "outset"}
TIMING_FUNCTIONS = {"ease", "linear", "ease-in", "ease-out", "ease-in-out", "step-start", "step-end"}

_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)$")
_TIME_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)m?s$")
_SIDES = ("Top", "Right", "Bottom", "Left")


def register_particular(prop: str) -> Callable[[ParticularHandler], ParticularHandler]:
  """
  Decorator registering `func` as the handler for camelCased property `prop`.
  """

  def decorator(func: ParticularHandler) -> ParticularHandler:
    PARTICULAR[prop] = func
    return func

  return decorator


def get_particular(prop: str) -> Optional[ParticularHandler]:
  return PARTICULAR.get(prop)


def split_tokens(value: Any) -> List[str]:
  """
  Splits a shorthand value on whitespace, keeping parenthesized groups intact.

  `1px solid rgba(0, 0, 0, 0.5)` -> `['1px', 'solid', 'rgba(0, 0, 0, 0.5)']`
  """
  if not isinstance(value, str):
    return [str(value)]

  tokens: List[str] = []
  depth = 0
  current = ""
  for char in value.strip():
    if char == "(":
      depth += 1
    elif char == ")":
      depth -= 1
    if char.isspace() and depth == 0:
      if current:
        tokens.append(current)
        current = ""
      continue
    current += char
  if current:
    tokens.append(current)
  return tokens


def coerce_number(token: str) -> Any:
  """`'10'` -> 10, `'1.5'` -> 1.5, anything else unchanged."""
  if _NUMBER_RE.match(token):
    number = float(token)
    return int(number) if number.is_integer() and "." not in token else number
  return token


def expand_box(prefix: str, value: Any, suffix: str = "", transform: Callable[[str], Any] = coerce_number) -> Dict[str, Any]:
  """
  Expands a 1-4 value box shorthand into four side keys.

  Args:
      prefix (str): Key prefix (e.g. "margin", "border").
      value: Shorthand value.
      suffix (str): Key suffix (e.g. "Width" for `borderTopWidth`).
      transform: Applied to every side token.

  Returns:
      Dict[str, Any]: `{prefix}{Side}{suffix}` keys, or {} if the value has
      more than four tokens.
  """
  tokens = split_tokens(value)
  if len(tokens) == 1:
    sides = tokens * 4
  elif len(tokens) == 2:
    sides = [tokens[0], tokens[1], tokens[0], tokens[1]]
  elif len(tokens) == 3:
    sides = [tokens[0], tokens[1], tokens[2], tokens[1]]
  elif len(tokens) == 4:
    sides = tokens
  else:
    return {}
  return {f"{prefix}{side}{suffix}": transform(token) for side, token in zip(_SIDES, sides)}


def _box_handler(prefix: str, suffix: str = "", transform: Callable[[str], Any] = coerce_number) -> ParticularHandler:
  def handler(value: Any) -> ParticularResult:
    values = expand_box(prefix, value, suffix, transform)
    return ParticularResult(values=values, delete_original=bool(values))

  return handler


def _border_handler(prefix: str) -> ParticularHandler:
  def handler(value: Any) -> ParticularResult:
    values: Dict[str, Any] = {}
    for token in split_tokens(value):
      if token.lower() in BORDER_STYLES:
        values[f"{prefix}Style"] = token.lower()
      elif parse_color(token) is not None:
        values[f"{prefix}Color"] = normalize_color(token)
      else:
        values[f"{prefix}Width"] = coerce_number(token)
    return ParticularResult(values=values, delete_original=True)

  return handler


for _prop in ("margin", "padding"):
  register_particular(_prop)(_box_handler(_prop))

register_particular("borderWidth")(_box_handler("border", "Width"))
register_particular("borderStyle")(_box_handler("border", "Style", str))
register_particular("borderColor")(_box_handler("border", "Color", normalize_color))

register_particular("border")(_border_handler("border"))
for _side in _SIDES:
  register_particular(f"border{_side}")(_border_handler(f"border{_side}"))


@register_particular("flex")
def flex(value: Any) -> ParticularResult:
  """
  Expands `flex` into grow/shrink/basis. A single number is kept as is.
  """
  if not isinstance(value, str):
    return ParticularResult()

  keyword = value.strip().lower()
  if keyword == "none":
    return ParticularResult({"flexGrow": 0, "flexShrink": 0, "flexBasis": "auto"}, delete_original=True)
  if keyword == "auto":
    return ParticularResult({"flexGrow": 1, "flexShrink": 1, "flexBasis": "auto"}, delete_original=True)

  tokens = split_tokens(value)
  if len(tokens) == 1:
    return ParticularResult()

  values: Dict[str, Any] = {"flexGrow": coerce_number(tokens[0])}
  if len(tokens) == 2:
    second = coerce_number(tokens[1])
    # `flex: 1 30px` sets the basis, `flex: 1 2` sets the shrink
    if isinstance(second, str):
      values["flexBasis"] = second
    else:
      values["flexShrink"] = second
  else:
    values["flexShrink"] = coerce_number(tokens[1])
    values["flexBasis"] = coerce_number(tokens[2])
  return ParticularResult(values, delete_original=True)


@register_particular("transition")
def transition(value: Any) -> ParticularResult:
  """
  Expands a single `transition` into its four longhand properties.

  Lists of transitions (comma separated) are left untouched.
  """
  if not isinstance(value, str) or _has_top_level_comma(value):
    return ParticularResult()

  values: Dict[str, Any] = {}
  times: List[str] = []
  for token in split_tokens(value):
    if _TIME_RE.match(token):
      times.append(token)
    elif token in TIMING_FUNCTIONS or token.startswith("cubic-bezier(") or token.startswith("steps("):
      values["transitionTimingFunction"] = token
    else:
      values["transitionProperty"] = token

  if times:
    values["transitionDuration"] = times[0]
  if len(times) > 1:
    values["transitionDelay"] = times[1]
  return ParticularResult(values, delete_original=True)


def _has_top_level_comma(value: str) -> bool:
  depth = 0
  for char in value:
    if char == "(":
      depth += 1
    elif char == ")":
      depth -= 1
    elif char == "," and depth == 0:
      return True
  return False


@register_particular("fontWeight")
def font_weight(value: Any) -> ParticularResult:
  """Numeric weights are emitted as strings (`700` -> `"700"`)."""
  if isinstance(value, (int, float)) and not isinstance(value, bool):
    return ParticularResult({"fontWeight": str(int(value))})
  return ParticularResult()


@register_particular("lineHeight")
def line_height(value: Any) -> ParticularResult:
  """Unitless line heights are interpreted in rem."""
  if isinstance(value, (int, float)) and not isinstance(value, bool):
    return ParticularResult({"lineHeight": f"{value}rem"})
  return ParticularResult()
