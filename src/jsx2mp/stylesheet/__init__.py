"""
Stylesheet transformation.

Converts parsed CSS rules into target-platform style objects.
"""

from jsx2mp.stylesheet.messages import MessageSink
from jsx2mp.stylesheet.nodes import Declaration, Position, Rule
from jsx2mp.stylesheet.transformer import StyleObject, StyleTransformer

__all__ = [
  "Declaration",
  "MessageSink",
  "Position",
  "Rule",
  "StyleObject",
  "StyleTransformer",
]
