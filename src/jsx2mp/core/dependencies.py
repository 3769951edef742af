"""
Dependency Classification and Import Generation.

Every module name imported by a compiled component is classified into a
`DependencyRecord` and re-emitted as an import statement. Records that need a
specific downstream processor are emitted with loader-chaining syntax:

    import '<loader path>?<json options>!<module>';

Classification of an imported name `N` (relative to the component directory):

1.  `N` resolves to a path that prefixes a `usingComponents` entry: it is a
    user-authored custom component. Components under a constant directory are
    native files routed to the script loader; all others are routed back to
    the component loader (and become work items for the host scheduler).
2.  Otherwise each usage is inspected. Usages from a component library are
    routed to the script loader with the local identifier as
    `importedComponent`; plain usages become a pass-through import. Each kind
    is emitted at most once per name, and `UsagePolicy` decides whether the two
    kinds may coexist.

Records keep discovery order so generated code is stable across rebuilds.
"""

import json
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from jsx2mp.config import LoaderConfig, LoaderPaths
from jsx2mp.core.result import TransformationResult
from jsx2mp.enums import LoaderKind, UsagePolicy
from jsx2mp.utils.paths import double_backslash

IMPORTED_COMPONENT_OPTION = "importedComponent"


@dataclass
class DependencyRecord:
  """
  A single import to emit.

  Attributes:
      name (str): Module specifier as imported by the component.
      loader (LoaderKind): Downstream processor, NONE for a plain import.
      options (Dict[str, Any]): Loader options serialized into the request.
  """

  name: str
  loader: LoaderKind = LoaderKind.NONE
  options: Dict[str, Any] = field(default_factory=dict)

  @property
  def is_component_task(self) -> bool:
    return self.loader == LoaderKind.COMPONENT


def _resolve_entry(value: str, base_dir: str) -> str:
  if value.startswith(".") and not os.path.isabs(value):
    return os.path.normpath(os.path.join(base_dir, value))
  return os.path.normpath(value)


def is_custom_component(name: str, resource_path: str, using_components: Dict[str, str]) -> bool:
  """
  Checks whether an imported name refers to a declared custom component.

  Args:
      name (str): Imported module specifier (e.g. "./components/Foo").
      resource_path (str): Absolute path of the importing component.
      using_components (Dict[str, str]): Declared components. Relative entries
          are resolved against the importing component's directory.

  Returns:
      bool: True if the resolved import path prefixes any declared path.
  """
  base_dir = os.path.dirname(resource_path)
  matching_path = os.path.normpath(os.path.join(base_dir, name))

  for value in using_components.values():
    if value and _resolve_entry(value, base_dir).startswith(matching_path):
      return True
  return False


def collect_dependencies(
  transformed: TransformationResult,
  resource_path: str,
  using_components: Dict[str, str],
  config: LoaderConfig,
  is_from_constant_dir: Callable[[str], bool],
) -> List[DependencyRecord]:
  """
  Classifies every imported name of a compiled component.

  Args:
      transformed (TransformationResult): Compiler output.
      resource_path (str): Absolute path of the component.
      using_components (Dict[str, str]): Rewritten `usingComponents` map.
      config (LoaderConfig): Options forwarded to downstream loaders.
      is_from_constant_dir (Callable[[str], bool]): Constant directory predicate.

  Returns:
      List[DependencyRecord]: Records in discovery order.
  """
  base_dir = os.path.dirname(resource_path)
  exclusive = config.usage_policy == UsagePolicy.EXCLUSIVE
  dependencies: List[DependencyRecord] = []

  for name, usages in transformed.imported.items():
    if is_custom_component(name, resource_path, using_components):
      component_path = os.path.abspath(os.path.join(base_dir, name))
      # Native mini-app components are already valid scripts
      loader = LoaderKind.SCRIPT if is_from_constant_dir(component_path) else LoaderKind.COMPONENT
      dependencies.append(DependencyRecord(name=name, loader=loader, options=config.to_options()))
      continue

    plain_emitted = False
    library_emitted = False
    for usage in usages:
      if usage.is_from_component_library:
        if library_emitted or (exclusive and plain_emitted):
          continue
        options = config.to_options(**{IMPORTED_COMPONENT_OPTION: usage.local})
        dependencies.append(DependencyRecord(name=name, loader=LoaderKind.SCRIPT, options=options))
        library_emitted = True
      else:
        if plain_emitted or (exclusive and library_emitted):
          continue
        dependencies.append(DependencyRecord(name=name))
        plain_emitted = True

  return dependencies


def create_import_statement(request: str) -> str:
  return f"import '{double_backslash(request)}';"


def build_request(record: DependencyRecord, loader_paths: LoaderPaths) -> str:
  """
  Builds the module request of a record, with loader chaining if it has a loader.
  """
  loader_path = loader_paths.path_for(record.loader)
  if not loader_path:
    return record.name
  options = json.dumps(record.options, separators=(",", ":"), ensure_ascii=False)
  return f"{loader_path}?{options}!{record.name}"


def generate_dependencies(records: List[DependencyRecord], loader_paths: LoaderPaths) -> str:
  """
  Renders records as import statements, one per line.

  Args:
      records (List[DependencyRecord]): Records in emission order.
      loader_paths (LoaderPaths): Request paths of the downstream loaders.

  Returns:
      str: Newline-joined import statements.
  """
  return "\n".join(create_import_statement(build_request(record, loader_paths)) for record in records)
