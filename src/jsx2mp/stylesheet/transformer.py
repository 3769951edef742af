"""
Style Declaration Transformer.

Converts parsed CSS rules into target-platform style objects. Every
declaration of a rule runs through the same pipeline, in source order so that
later declarations for a property overwrite earlier ones:

1.  **Property**: kebab-case to camelCase (`-webkit-x` becomes `WebkitX`).
2.  **Value**: quotes stripped, numbers coerced, colors normalized. CSS
    variable references (`var(--x)`) pass through untouched.
3.  **Theme**: with a theme, `var(--brand-color)` is stored as the theme
    binding `brandColor`. Without one the raw reference is kept and the
    remaining stages are skipped for that declaration.
4.  **Validation**: advisory, reported to a `MessageSink`.
5.  **Particular expansion**: shorthand properties are expanded (and the
    shorthand removed) by the handlers in `jsx2mp.stylesheet.particular`.

Selectors are sanitized once per rule by `sanitize_selector`; a rejected
selector means no style object is emitted for it.
"""

import re
from typing import Any, Dict, Iterable, Optional

from jsx2mp.stylesheet.colors import normalize_color
from jsx2mp.stylesheet.messages import MessageSink, default_sink
from jsx2mp.stylesheet.nodes import Position, Rule
from jsx2mp.stylesheet.particular import get_particular
from jsx2mp.stylesheet.validation import Validation
from jsx2mp.utils.console import log_error

StyleObject = Dict[str, Any]

TEXT_TAG = "text"

QUOTES_RE = re.compile(r"['\"]")
VAR_RE = re.compile(r"^var\(--(.*)\)$")
NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
SELECTOR_RE = re.compile(r"^[.@#][a-zA-Z0-9_:\-]+$")
PROP_SEPARATOR_RE = re.compile(r"[-_\s]+")
PROP_WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z0-9]+")
VENDOR_PREFIX_RE = re.compile(r"^-\w")
CONVERTED_VENDOR_RE = re.compile(r"^(Webkit|Moz|Ms|O)[A-Z]")

COLOR_PROPERTIES = {
  "color",
  "backgroundColor",
  "borderColor",
  "borderBottomColor",
  "borderTopColor",
  "borderRightColor",
  "borderLeftColor",
}


def _to_number(text: str) -> Any:
  number = float(text)
  # `1e3` and `10.` are whole numbers
  if number.is_integer():
    return int(number)
  return number


class StyleTransformer:
  """
  Converts rules into style objects.

  Args:
      sink (Optional[MessageSink]): Destination for advisory messages. The
          process-wide default sink is used if omitted.
  """

  def __init__(self, sink: Optional[MessageSink] = None):
    self.sink = sink or default_sink()

  def sanitize_selector(
    self,
    selector: str,
    transform_descendant_combinator: bool = False,
    position: Optional[Position] = None,
    log: bool = False,
  ) -> Optional[str]:
    """
    Turns a selector into a style-object key.

    Bare tag selectors receive the `@` tag marker. With `log` enabled, any
    selector that is not a single class, id or tag selector is rejected (unless
    descendant combinators are being transformed).

    Args:
        selector (str): Selector as written (e.g. ".my-class", "view").
        transform_descendant_combinator (bool): Accept compound selectors.
        position (Optional[Position]): Rule position for the error message.
        log (bool): Enable rejection and reporting.

    Returns:
        Optional[str]: Sanitized key, or None if the selector was rejected.
    """
    if re.match(r"^[a-zA-Z]", selector):
      selector = "@" + selector

    if log and not transform_descendant_combinator and not SELECTOR_RE.match(selector):
      pos = position or Position()
      message = (
        f'line: {pos.start.line}, column: {pos.start.column} - "{selector}" is not a valid selector '
        f'(e.g. ".abc、.abcBcd、.abc_bcd")'
      )
      log_error(message)
      self.sink.push(message)
      return None

    return re.sub(r"\s", "_", selector).replace(".", "")

  def convert_prop(self, prop: str) -> str:
    """
    Converts a CSS property to camelCase.

    Words are separated by `-`, `_`, whitespace or a case change, and are
    case-normalized (`FONT-SIZE` -> `fontSize`). A leading vendor hyphen
    produces PascalCase (`-webkit-box-flex` -> `WebkitBoxFlex`); the custom
    property marker `--` does not (`--brand-color` -> `brandColor`). Already
    converted names are returned unchanged.
    """
    stripped = prop.strip()
    words = [w.lower() for chunk in PROP_SEPARATOR_RE.split(stripped) for w in PROP_WORD_RE.findall(chunk)]
    if not words:
      return prop
    result = words[0] + "".join(w[:1].upper() + w[1:] for w in words[1:])

    if VENDOR_PREFIX_RE.match(stripped) or CONVERTED_VENDOR_RE.match(stripped):
      result = result[:1].upper() + result[1:]
    return result

  def convert_value(self, property: str, value: Any) -> Any:
    """
    Coerces a declaration value.

    Args:
        property (str): camelCased property name.
        value: Raw value (quotes already stripped).

    Returns:
        Any: `var()` references unchanged, numbers as int/float, colors of
        color-bearing properties normalized, other strings unchanged.
    """
    if not isinstance(value, str):
      return value

    if VAR_RE.match(value):
      return value

    if NUMBER_RE.match(value.strip()):
      return _to_number(value.strip())

    if property in COLOR_PROPERTIES:
      return normalize_color(value)

    return value

  def convert_css_variable_value(self, value: str) -> str:
    """`var(--brand-color)` -> `brandColor`."""
    match = VAR_RE.match(value)
    name = match.group(1) if match else value.replace("--", "", 1)
    return re.sub(r"-(\w)", lambda m: m.group(1).upper(), name)

  def convert(self, rule: Rule, log: bool = False, theme: bool = False) -> Optional[StyleObject]:
    """
    Converts one rule to a style object.

    Args:
        rule (Rule): Parsed rule.
        log (bool): Report validation failures.
        theme (bool): Resolve CSS variable references to theme bindings.

    Returns:
        Optional[StyleObject]: The style, or None for `text` rules.
    """
    if rule.tag_name == TEXT_TAG:
      return None

    style: StyleObject = {}
    selectors = ", ".join(rule.selectors)

    for declaration in rule.declarations:
      if declaration.type != "declaration":
        continue

      raw_value = QUOTES_RE.sub("", declaration.value)
      camel_case_property = self.convert_prop(declaration.property)
      value = self.convert_value(camel_case_property, raw_value)
      style[camel_case_property] = value

      if isinstance(value, str) and VAR_RE.match(value):
        if theme:
          style[camel_case_property] = self.convert_css_variable_value(value)
        continue

      Validation.validate(
        camel_case_property,
        declaration.property,
        raw_value,
        selectors,
        declaration.position,
        log,
        sink=self.sink,
      )

      handler = get_particular(camel_case_property)
      if handler:
        result = handler(value)
        if result.delete_original:
          del style[camel_case_property]
        style.update(result.values)

    return style

  def convert_stylesheet(
    self,
    rules: Iterable[Rule],
    log: bool = False,
    theme: bool = False,
    transform_descendant_combinator: bool = False,
  ) -> Dict[str, StyleObject]:
    """
    Converts a whole stylesheet into `{selector key: style object}`.

    Rules sharing a selector are merged, later rules winning. Rules whose
    selector is rejected and `text` rules are skipped.

    Args:
        rules (Iterable[Rule]): Parsed rules in source order.
        log (bool): Enable selector rejection and validation reporting.
        theme (bool): Resolve CSS variables to theme bindings.
        transform_descendant_combinator (bool): Accept compound selectors.

    Returns:
        Dict[str, StyleObject]: The style sheet object.
    """
    sheet: Dict[str, StyleObject] = {}

    for rule in rules:
      keys = []
      for selector in rule.selectors:
        key = self.sanitize_selector(selector, transform_descendant_combinator, rule.position, log)
        if key is not None:
          keys.append(key)
      if not keys:
        continue

      style = self.convert(rule, log=log, theme=theme)
      if style is None:
        continue

      for key in keys:
        sheet.setdefault(key, {}).update(style)

    return sheet
