"""
Style Command Handler.

Implements `jsx2mp style`: loads a css parser AST from JSON, converts it with
the `StyleTransformer` and prints (or writes) the resulting style sheet object.
Advisory messages collected during conversion are summarized at the end.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.table import Table

from jsx2mp.stylesheet.messages import MessageSink
from jsx2mp.stylesheet.nodes import Rule
from jsx2mp.stylesheet.transformer import StyleTransformer
from jsx2mp.utils.console import console, log_error, log_success, log_warning


def load_rules(data: Any) -> List[Rule]:
  """
  Extracts rules from the css parser JSON.

  Accepts either a full AST (`{"type": "stylesheet", "stylesheet": {"rules": [...]}}`)
  or a bare list of rule objects. Non-rule nodes (comments, at-rules) are skipped.
  """
  if isinstance(data, dict):
    data = data.get("stylesheet", {}).get("rules", [])
  return [Rule.from_dict(node) for node in data if node.get("type", "rule") == "rule"]


def handle_style(
  input_path: Path,
  theme: bool = False,
  log: bool = False,
  descendant: bool = False,
  output_path: Optional[Path] = None,
) -> int:
  """
  Handles the 'style' command.

  Args:
      input_path: JSON file holding the parsed stylesheet.
      theme: Resolve CSS variables to theme bindings.
      log: Enable selector rejection and validation reporting.
      descendant: Accept compound selectors.
      output_path: Optional destination file.

  Returns:
      int: Exit code (0 for success, 1 if the input cannot be read).
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  try:
    data = json.loads(input_path.read_text(encoding="utf-8"))
  except json.JSONDecodeError as e:
    log_error(f"Invalid JSON in {input_path}: {e}")
    return 1

  sink = MessageSink()
  transformer = StyleTransformer(sink=sink)
  sheet: Dict[str, Any] = transformer.convert_stylesheet(
    load_rules(data), log=log, theme=theme, transform_descendant_combinator=descendant
  )
  rendered = json.dumps(sheet, indent=2, ensure_ascii=False)

  if output_path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(rendered, encoding="utf-8")
    log_success(f"Wrote {len(sheet)} style entries to [path]{output_path}[/path]")
  else:
    console.print_json(rendered)

  if sink.has_errors:
    table = Table(title="Stylesheet Messages")
    table.add_column("#", justify="right")
    table.add_column("Message")
    for idx, message in enumerate(sink.messages, start=1):
      table.add_row(str(idx), message)
    console.print(table)
    log_warning(f"{len(sink.messages)} advisory message(s) for {input_path.name}")

  return 0
