"""
Loader Configuration Store.

`LoaderConfig` holds the options of one loader run. The same object is
serialized (camelCase, JSON) into every loader-chained import the dependency
classifier emits, so downstream loaders receive identical settings.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from jsx2mp.enums import BuildMode, LoaderKind, UsagePolicy
from jsx2mp.platforms import PlatformDescriptor, get_platform

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

_PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_COMPONENT_LOADER = str(_PACKAGE_DIR / "core" / "loader.py")
DEFAULT_SCRIPT_LOADER = "jsx2mp-script-loader"


class LoaderPaths(BaseModel):
  """Request paths of the downstream processors used in loader-chained imports."""

  model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

  component: str = Field(DEFAULT_COMPONENT_LOADER, description="Path of the component loader (this loader).")
  script: str = Field(DEFAULT_SCRIPT_LOADER, description="Path of the native script loader.")

  def path_for(self, kind: LoaderKind) -> Optional[str]:
    """
    Resolves the request path for a loader kind.

    Args:
        kind (LoaderKind): The routing decision of a dependency record.

    Returns:
        Optional[str]: The loader path, or None for plain imports.
    """
    if kind == LoaderKind.COMPONENT:
      return self.component
    if kind == LoaderKind.SCRIPT:
      return self.script
    return None


class LoaderConfig(BaseModel):
  """
  Options of a component loader invocation.
  """

  model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

  platform: PlatformDescriptor = Field(
    default_factory=lambda: get_platform("ali"), description="Target mini-application platform."
  )
  entry_path: str = Field("src/app", description="Application entry, relative to the project root.")
  constant_dir: List[str] = Field(
    default_factory=list, description="Directories of native files that bypass recompilation."
  )
  mode: BuildMode = Field(BuildMode.BUILD, description="Build flavour forwarded to the writer.")
  disable_copy_npm: bool = Field(False, description="Do not copy npm packages into the output.")
  turn_off_source_map: bool = Field(False, description="Disable source map generation.")
  usage_policy: UsagePolicy = Field(
    UsagePolicy.ADDITIVE, description="Interaction of plain and component-library usages of one name."
  )
  loaders: LoaderPaths = Field(default_factory=LoaderPaths, description="Downstream loader request paths.")

  @field_validator("platform", mode="before")
  @classmethod
  def validate_platform(cls, v: Any) -> Any:
    """
    Accepts either a full descriptor or a registered platform key.

    Args:
        v: Raw value.

    Returns:
        Any: A descriptor (or mapping pydantic can validate into one).

    Raises:
        ValueError: If a string key is not a registered platform.
    """
    if isinstance(v, str):
      return get_platform(v)
    return v

  def absolute_constant_dirs(self, root_context: str) -> List[str]:
    """Resolves `constant_dir` entries against the project root."""
    return [os.path.join(root_context, d) for d in self.constant_dir]

  def source_path(self, root_context: str) -> str:
    """Directory containing the entry file: the root of the relative output layout."""
    return os.path.join(root_context, os.path.dirname(self.entry_path))

  def to_options(self, **extra: Any) -> Dict[str, Any]:
    """
    Serializes the config as JSON-compatible loader options.

    Args:
        **extra: Additional option keys (e.g. `importedComponent`).

    Returns:
        Dict[str, Any]: camelCase options dictionary.
    """
    options = self.model_dump(by_alias=True, mode="json")
    options.update(extra)
    return options

  @classmethod
  def from_options(cls, options: Dict[str, Any]) -> "LoaderConfig":
    """
    Validates a raw options dictionary (e.g. parsed from a loader query).

    Raises:
        ValueError: If validation fails.
    """
    try:
      return cls.model_validate(options)
    except ValidationError as e:
      raise ValueError(f"Loader configuration validation failed: {e}")

  @classmethod
  def load(
    cls,
    platform: Optional[str] = None,
    entry_path: Optional[str] = None,
    constant_dir: Optional[List[str]] = None,
    mode: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
    search_path: Optional[Path] = None,
  ) -> "LoaderConfig":
    """
    Loads configuration from pyproject.toml and overrides it with CLI arguments.

    The nearest `pyproject.toml` above `search_path` is read and its
    `[tool.jsx2mp]` table is used as the base layer.

    Args:
        platform (Optional[str]): Override for the platform key.
        entry_path (Optional[str]): Override for the entry path.
        constant_dir (Optional[List[str]]): Override for constant directories.
        mode (Optional[str]): Override for the build mode.
        overrides (Optional[Dict]): Any other option keys.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        LoaderConfig: The resolved configuration.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    data: Dict[str, Any] = dict(toml_config)
    if platform is not None:
      data["platform"] = platform
    if entry_path is not None:
      data["entry_path"] = entry_path
    if constant_dir is not None:
      data["constant_dir"] = constant_dir
    if mode is not None:
      data["mode"] = mode
    if overrides:
      data.update(overrides)

    return cls.from_options(data)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)
      return data.get("tool", {}).get("jsx2mp", {}), parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses a list of 'key=value' strings into a dictionary.

  Values are inferred as bool, int, float or left as strings.

  Args:
      items (Optional[List[str]]): Raw CLI strings.

  Returns:
      Dict[str, Any]: Parsed dictionary.
  """
  if not items:
    return {}

  config = {}
  for item in items:
    if "=" not in item:
      raise ValueError(f"Invalid option format: '{item}'. Expected 'key=value'.")

    key, val_str = item.split("=", 1)
    key = key.strip()
    val_str = val_str.strip()

    final_val: Any = val_str
    if val_str.lower() == "true":
      final_val = True
    elif val_str.lower() == "false":
      final_val = False
    else:
      try:
        if "." in val_str or "e" in val_str.lower():
          final_val = float(val_str)
        else:
          final_val = int(val_str)
      except ValueError:
        pass

    config[key] = final_val

  return config
