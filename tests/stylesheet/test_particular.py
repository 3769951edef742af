"""
Tests for Particular Property Handlers.

Verifies the static handler table and the expansion/deletion results of
each registered shorthand.
"""

import pytest

from jsx2mp.stylesheet.particular import (
  PARTICULAR,
  ParticularResult,
  get_particular,
  register_particular,
  split_tokens,
)


@pytest.fixture
def scratch_registry():
  """Removes handlers registered by a test."""
  before = dict(PARTICULAR)
  yield
  PARTICULAR.clear()
  PARTICULAR.update(before)


def test_registered_properties():
  for prop in ("border", "borderTop", "borderLeft", "borderWidth", "margin", "padding", "flex", "transition"):
    assert get_particular(prop) is not None
  assert get_particular("color") is None


def test_register_particular_decorator(scratch_registry):
  @register_particular("customProp")
  def custom(value):
    return ParticularResult({"customA": value}, delete_original=True)

  assert get_particular("customProp") is custom
  assert custom("x") == ParticularResult({"customA": "x"}, True)


def test_split_tokens_keeps_functions_whole():
  assert split_tokens("1px solid rgba(0, 0, 0, 0.5)") == ["1px", "solid", "rgba(0, 0, 0, 0.5)"]
  assert split_tokens(0) == ["0"]


@pytest.mark.parametrize(
  "value, expected",
  [
    (10, {"paddingTop": 10, "paddingRight": 10, "paddingBottom": 10, "paddingLeft": 10}),
    ("1px 2px 3px", {"paddingTop": "1px", "paddingRight": "2px", "paddingBottom": "3px", "paddingLeft": "2px"}),
    ("1px 2px 3px 4px", {"paddingTop": "1px", "paddingRight": "2px", "paddingBottom": "3px", "paddingLeft": "4px"}),
  ],
)
def test_padding_box_expansion(value, expected):
  result = get_particular("padding")(value)
  assert result.delete_original is True
  assert result.values == expected


def test_box_expansion_with_too_many_values_keeps_original():
  result = get_particular("margin")("1px 2px 3px 4px 5px")
  assert result == ParticularResult()


def test_border_shorthand():
  result = get_particular("border")("1px solid red")
  assert result.delete_original is True
  assert result.values == {"borderWidth": "1px", "borderStyle": "solid", "borderColor": "rgba(255,0,0,1)"}


def test_border_side_shorthand():
  result = get_particular("borderTop")("2px dashed #000")
  assert result.values == {
    "borderTopWidth": "2px",
    "borderTopStyle": "dashed",
    "borderTopColor": "rgba(0,0,0,1)",
  }


def test_border_color_expansion_normalizes():
  result = get_particular("borderColor")("red blue")
  assert result.values == {
    "borderTopColor": "rgba(255,0,0,1)",
    "borderRightColor": "rgba(0,0,255,1)",
    "borderBottomColor": "rgba(255,0,0,1)",
    "borderLeftColor": "rgba(0,0,255,1)",
  }


def test_flex_variants():
  flex = get_particular("flex")
  assert flex(1) == ParticularResult()
  assert flex("none").values == {"flexGrow": 0, "flexShrink": 0, "flexBasis": "auto"}
  assert flex("1 30px").values == {"flexGrow": 1, "flexBasis": "30px"}
  assert flex("2 3").values == {"flexGrow": 2, "flexShrink": 3}
  assert flex("1 0 auto").values == {"flexGrow": 1, "flexShrink": 0, "flexBasis": "auto"}


def test_transition_expansion():
  result = get_particular("transition")("opacity 0.3s ease-in 100ms")
  assert result.delete_original is True
  assert result.values == {
    "transitionProperty": "opacity",
    "transitionDuration": "0.3s",
    "transitionTimingFunction": "ease-in",
    "transitionDelay": "100ms",
  }


def test_transition_list_is_left_untouched():
  assert get_particular("transition")("opacity 1s, transform 2s") == ParticularResult()


def test_font_weight_and_line_height():
  assert get_particular("fontWeight")(700).values == {"fontWeight": "700"}
  assert get_particular("fontWeight")("bold") == ParticularResult()
  assert get_particular("lineHeight")(1.5).values == {"lineHeight": "1.5rem"}
  assert get_particular("lineHeight")("20px") == ParticularResult()
