"""
Stylesheet AST Nodes.

Data structures for the rules and declarations produced by the external CSS
parser. `from_dict` accepts the parser's JSON shape
(`{"type": "rule", "selectors": [...], "declarations": [...]}`).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Location:
  line: int = 0
  column: int = 0


@dataclass
class Position:
  """
  Source span of a node.

  Attributes:
      start (Location): First character of the node.
      end (Optional[Location]): Character after the node, when known.
  """

  start: Location = field(default_factory=Location)
  end: Optional[Location] = None

  @classmethod
  def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Position":
    if not data:
      return cls()
    start = data.get("start") or {}
    end = data.get("end")
    return cls(
      start=Location(line=start.get("line", 0), column=start.get("column", 0)),
      end=Location(line=end.get("line", 0), column=end.get("column", 0)) if end else None,
    )


@dataclass
class Declaration:
  """
  A `property: value` pair, or a comment when `type` is "comment".
  """

  property: str = ""
  value: str = ""
  type: str = "declaration"
  position: Position = field(default_factory=Position)

  @classmethod
  def from_dict(cls, data: Dict[str, Any]) -> "Declaration":
    return cls(
      property=data.get("property", ""),
      value=data.get("value", ""),
      type=data.get("type", "declaration"),
      position=Position.from_dict(data.get("position")),
    )


@dataclass
class Rule:
  """
  A style rule.

  Attributes:
      selectors (List[str]): Selector strings as written.
      declarations (List[Declaration]): Declarations in source order.
      tag_name (Optional[str]): Tag the rule was attached to, if any.
      position (Position): Source span of the rule.
  """

  selectors: List[str] = field(default_factory=list)
  declarations: List[Declaration] = field(default_factory=list)
  tag_name: Optional[str] = None
  position: Position = field(default_factory=Position)

  @classmethod
  def from_dict(cls, data: Dict[str, Any]) -> "Rule":
    return cls(
      selectors=list(data.get("selectors", [])),
      declarations=[Declaration.from_dict(d) for d in data.get("declarations", [])],
      tag_name=data.get("tagName"),
      position=Position.from_dict(data.get("position")),
    )
