"""
Tests for Color Normalization.
"""

import pytest

from jsx2mp.stylesheet.colors import normalize_color, parse_color


@pytest.mark.parametrize(
  "value, expected",
  [
    ("red", "rgba(255,0,0,1)"),
    ("RebeccaPurple", "rgba(102,51,153,1)"),
    ("transparent", "rgba(0,0,0,0)"),
    ("#000", "rgba(0,0,0,1)"),
    ("#f00f", "rgba(255,0,0,1)"),
    ("#00ff00", "rgba(0,255,0,1)"),
    ("#0000ff80", "rgba(0,0,255,0.502)"),
    ("rgb(10, 20, 30)", "rgba(10,20,30,1)"),
    ("rgba(10,20,30,0.5)", "rgba(10,20,30,0.5)"),
    ("rgb(100%, 0%, 0%)", "rgba(255,0,0,1)"),
    ("rgb(0 0 0 / 25%)", "rgba(0,0,0,0.25)"),
    ("hsl(0, 100%, 50%)", "rgba(255,0,0,1)"),
    ("hsl(120, 100%, 25%)", "rgba(0,128,0,1)"),
    ("hsla(240, 100%, 50%, 0.3)", "rgba(0,0,255,0.3)"),
  ],
)
def test_normalize_color(value, expected):
  assert normalize_color(value) == expected


@pytest.mark.parametrize("value", ["inherit", "currentColor", "var(--c)", "#ggg", "rgb(1,2)", "not-a-color"])
def test_unrecognized_values_pass_through(value):
  assert normalize_color(value) == value
  assert parse_color(value) is None


def test_non_string_values_pass_through():
  assert normalize_color(0) == 0
  assert normalize_color(None) is None


def test_channels_are_clamped():
  assert parse_color("rgb(300, -5, 12)") == (255, 0, 12, 1.0)
