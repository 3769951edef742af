"""
Deps Command Handler.

Implements `jsx2mp deps`: classifies the imports of a saved compiler result
and prints the generated import statements, the same text the component loader
returns to the host bundler.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from jsx2mp.config import LoaderConfig
from jsx2mp.core.dependencies import collect_dependencies, generate_dependencies
from jsx2mp.core.result import TransformationResult
from jsx2mp.utils.console import console, log_error, log_info
from jsx2mp.utils.paths import classify_directory_membership, rewrite_using_components


def handle_deps(
  input_path: Path,
  resource_path: str,
  root: Path,
  platform: Optional[str] = None,
  constant_dir: Optional[List[str]] = None,
  overrides: Optional[Dict[str, Any]] = None,
) -> int:
  """
  Handles the 'deps' command.

  Args:
      input_path: JSON file holding the compiler result.
      resource_path: Component path the result was produced for.
      root: Project root; `[tool.jsx2mp]` is looked up from here.
      platform: Override for the platform key.
      constant_dir: Override for native component directories.
      overrides: Extra loader options.

  Returns:
      int: Exit code.
  """
  if not input_path.exists():
    log_error(f"Input not found: {input_path}")
    return 1

  try:
    config = LoaderConfig.load(
      platform=platform,
      constant_dir=constant_dir,
      overrides=overrides,
      search_path=root,
    )
    transformed = TransformationResult.model_validate(json.loads(input_path.read_text(encoding="utf-8")))
  except (ValueError, ValidationError) as e:
    log_error(str(e))
    return 1

  using_components = rewrite_using_components(transformed.declared_using_components, resource_path)
  is_from_constant_dir = classify_directory_membership(config.absolute_constant_dirs(str(root)))
  records = collect_dependencies(transformed, resource_path, using_components, config, is_from_constant_dir)

  log_info(f"{len(records)} import(s) for [path]{resource_path}[/path]")
  console.print(generate_dependencies(records, config.loaders), markup=False, highlight=False, soft_wrap=True)
  return 0
