"""
Color Normalization.

Converts CSS color notations to the single `rgba(r,g,b,a)` form understood by
every target platform. Supported inputs:

- named colors (`red`, `rebeccapurple`) and `transparent`,
- hex: `#rgb`, `#rgba`, `#rrggbb`, `#rrggbbaa`,
- functional: `rgb()`, `rgba()`, `hsl()`, `hsla()` (comma or space separated,
  numbers or percentages).

Values that are not recognized as a color (keywords such as `inherit`,
`currentColor`, CSS variables) are returned unchanged.
"""

import re
from typing import Any, List, Optional, Tuple

RGBA = Tuple[int, int, int, float]

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC_RE = re.compile(r"^(rgba?|hsla?)\((.*)\)$", re.IGNORECASE)
_SPLIT_RE = re.compile(r"\s*[,/]\s*|\s+")

NAMED_COLORS = {
  "aliceblue": 0xF0F8FF,
  "antiquewhite": 0xFAEBD7,
  "aqua": 0x00FFFF,
  "aquamarine": 0x7FFFD4,
  "azure": 0xF0FFFF,
  "beige": 0xF5F5DC,
  "bisque": 0xFFE4C4,
  "black": 0x000000,
  "blanchedalmond": 0xFFEBCD,
  "blue": 0x0000FF,
  "blueviolet": 0x8A2BE2,
  "brown": 0xA52A2A,
  "burlywood": 0xDEB887,
  "cadetblue": 0x5F9EA0,
  "chartreuse": 0x7FFF00,
  "chocolate": 0xD2691E,
  "coral": 0xFF7F50,
  "cornflowerblue": 0x6495ED,
  "cornsilk": 0xFFF8DC,
  "crimson": 0xDC143C,
  "cyan": 0x00FFFF,
  "darkblue": 0x00008B,
  "darkcyan": 0x008B8B,
  "darkgoldenrod": 0xB8860B,
  "darkgray": 0xA9A9A9,
  "darkgreen": 0x006400,
  "darkgrey": 0xA9A9A9,
  "darkkhaki": 0xBDB76B,
  "darkmagenta": 0x8B008B,
  "darkolivegreen": 0x556B2F,
  "darkorange": 0xFF8C00,
  "darkorchid": 0x9932CC,
  "darkred": 0x8B0000,
  "darksalmon": 0xE9967A,
  "darkseagreen": 0x8FBC8F,
  "darkslateblue": 0x483D8B,
  "darkslategray": 0x2F4F4F,
  "darkslategrey": 0x2F4F4F,
  "darkturquoise": 0x00CED1,
  "darkviolet": 0x9400D3,
  "deeppink": 0xFF1493,
  "deepskyblue": 0x00BFFF,
  "dimgray": 0x696969,
  "dimgrey": 0x696969,
  "dodgerblue": 0x1E90FF,
  "firebrick": 0xB22222,
  "floralwhite": 0xFFFAF0,
  "forestgreen": 0x228B22,
  "fuchsia": 0xFF00FF,
  "gainsboro": 0xDCDCDC,
  "ghostwhite": 0xF8F8FF,
  "gold": 0xFFD700,
  "goldenrod": 0xDAA520,
  "gray": 0x808080,
  "green": 0x008000,
  "greenyellow": 0xADFF2F,
  "grey": 0x808080,
  "honeydew": 0xF0FFF0,
  "hotpink": 0xFF69B4,
  "indianred": 0xCD5C5C,
  "indigo": 0x4B0082,
  "ivory": 0xFFFFF0,
  "khaki": 0xF0E68C,
  "lavender": 0xE6E6FA,
  "lavenderblush": 0xFFF0F5,
  "lawngreen": 0x7CFC00,
  "lemonchiffon": 0xFFFACD,
  "lightblue": 0xADD8E6,
  "lightcoral": 0xF08080,
  "lightcyan": 0xE0FFFF,
  "lightgoldenrodyellow": 0xFAFAD2,
  "lightgray": 0xD3D3D3,
  "lightgreen": 0x90EE90,
  "lightgrey": 0xD3D3D3,
  "lightpink": 0xFFB6C1,
  "lightsalmon": 0xFFA07A,
  "lightseagreen": 0x20B2AA,
  "lightskyblue": 0x87CEFA,
  "lightslategray": 0x778899,
  "lightslategrey": 0x778899,
  "lightsteelblue": 0xB0C4DE,
  "lightyellow": 0xFFFFE0,
  "lime": 0x00FF00,
  "limegreen": 0x32CD32,
  "linen": 0xFAF0E6,
  "magenta": 0xFF00FF,
  "maroon": 0x800000,
  "mediumaquamarine": 0x66CDAA,
  "mediumblue": 0x0000CD,
  "mediumorchid": 0xBA55D3,
  "mediumpurple": 0x9370DB,
  "mediumseagreen": 0x3CB371,
  "mediumslateblue": 0x7B68EE,
  "mediumspringgreen": 0x00FA9A,
  "mediumturquoise": 0x48D1CC,
  "mediumvioletred": 0xC71585,
  "midnightblue": 0x191970,
  "mintcream": 0xF5FFFA,
  "mistyrose": 0xFFE4E1,
  "moccasin": 0xFFE4B5,
  "navajowhite": 0xFFDEAD,
  "navy": 0x000080,
  "oldlace": 0xFDF5E6,
  "olive": 0x808000,
  "olivedrab": 0x6B8E23,
  "orange": 0xFFA500,
  "orangered": 0xFF4500,
  "orchid": 0xDA70D6,
  "palegoldenrod": 0xEEE8AA,
  "palegreen": 0x98FB98,
  "paleturquoise": 0xAFEEEE,
  "palevioletred": 0xDB7093,
  "papayawhip": 0xFFEFD5,
  "peachpuff": 0xFFDAB9,
  "peru": 0xCD853F,
  "pink": 0xFFC0CB,
  "plum": 0xDDA0DD,
  "powderblue": 0xB0E0E6,
  "purple": 0x800080,
  "rebeccapurple": 0x663399,
  "red": 0xFF0000,
  "rosybrown": 0xBC8F8F,
  "royalblue": 0x4169E1,
  "saddlebrown": 0x8B4513,
  "salmon": 0xFA8072,
  "sandybrown": 0xF4A460,
  "seagreen": 0x2E8B57,
  "seashell": 0xFFF5EE,
  "sienna": 0xA0522D,
  "silver": 0xC0C0C0,
  "skyblue": 0x87CEEB,
  "slateblue": 0x6A5ACD,
  "slategray": 0x708090,
  "slategrey": 0x708090,
  "snow": 0xFFFAFA,
  "springgreen": 0x00FF7F,
  "steelblue": 0x4682B4,
  "tan": 0xD2B48C,
  "teal": 0x008080,
  "thistle": 0xD8BFD8,
  "tomato": 0xFF6347,
  "turquoise": 0x40E0D0,
  "violet": 0xEE82EE,
  "wheat": 0xF5DEB3,
  "white": 0xFFFFFF,
  "whitesmoke": 0xF5F5F5,
  "yellow": 0xFFFF00,
  "yellowgreen": 0x9ACD32,
}


def _clamp(value: float, low: float, high: float) -> float:
  return max(low, min(high, value))


def _parse_channel(token: str) -> float:
  """Parses an rgb channel (`255` or `100%`) to 0..255."""
  if token.endswith("%"):
    return _clamp(float(token[:-1]) * 255 / 100, 0, 255)
  return _clamp(float(token), 0, 255)


def _parse_alpha(token: str) -> float:
  if token.endswith("%"):
    return _clamp(float(token[:-1]) / 100, 0, 1)
  return _clamp(float(token), 0, 1)


def _parse_hue(token: str) -> float:
  if token.endswith("deg"):
    token = token[:-3]
  return (float(token) % 360 + 360) % 360 / 360


def _parse_percentage(token: str) -> float:
  return _clamp(float(token.rstrip("%")) / 100, 0, 1)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
  if t < 0:
    t += 1
  if t > 1:
    t -= 1
  if t < 1 / 6:
    return p + (q - p) * 6 * t
  if t < 1 / 2:
    return q
  if t < 2 / 3:
    return p + (q - p) * (2 / 3 - t) * 6
  return p


def _hsl_to_rgb(h: float, s: float, lightness: float) -> Tuple[int, int, int]:
  q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
  p = 2 * lightness - q
  r = _hue_to_rgb(p, q, h + 1 / 3)
  g = _hue_to_rgb(p, q, h)
  b = _hue_to_rgb(p, q, h - 1 / 3)
  return round(r * 255), round(g * 255), round(b * 255)


def _from_hex(digits: str) -> RGBA:
  if len(digits) in (3, 4):
    digits = "".join(c * 2 for c in digits)
  r, g, b = int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
  a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
  return r, g, b, a


def _from_function(name: str, args: List[str]) -> Optional[RGBA]:
  name = name.lower()
  if len(args) not in (3, 4):
    return None
  alpha = _parse_alpha(args[3]) if len(args) == 4 else 1.0

  if name.startswith("rgb"):
    r, g, b = (round(_parse_channel(t)) for t in args[:3])
    return r, g, b, alpha

  r, g, b = _hsl_to_rgb(_parse_hue(args[0]), _parse_percentage(args[1]), _parse_percentage(args[2]))
  return r, g, b, alpha


def parse_color(value: str) -> Optional[RGBA]:
  """
  Parses a CSS color into an (r, g, b, a) tuple.

  Args:
      value (str): The CSS color text.

  Returns:
      Optional[RGBA]: The channels, or None if `value` is not a color.
  """
  text = value.strip()
  lowered = text.lower()

  if lowered == "transparent":
    return 0, 0, 0, 0.0

  if lowered in NAMED_COLORS:
    packed = NAMED_COLORS[lowered]
    return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF, 1.0

  hex_match = _HEX_RE.match(text)
  if hex_match:
    return _from_hex(hex_match.group(1))

  func_match = _FUNC_RE.match(text)
  if func_match:
    args = [t for t in _SPLIT_RE.split(func_match.group(2).strip()) if t]
    try:
      return _from_function(func_match.group(1), args)
    except ValueError:
      return None

  return None


def _format_alpha(alpha: float) -> str:
  rounded = round(alpha, 3)
  if rounded == int(rounded):
    return str(int(rounded))
  return f"{rounded:g}"


def normalize_color(value: Any) -> Any:
  """
  Normalizes a CSS color to `rgba(r,g,b,a)`.

  Args:
      value: The raw property value.

  Returns:
      Any: The normalized color string, or `value` unchanged if it is not a
      recognizable color.
  """
  if not isinstance(value, str):
    return value
  rgba = parse_color(value)
  if rgba is None:
    return value
  r, g, b, a = rgba
  return f"rgba({r},{g},{b},{_format_alpha(a)})"
