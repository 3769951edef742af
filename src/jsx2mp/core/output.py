"""
Output Staging.

Derives the destination paths of a component's artifacts and hands them to the
artifact writer. All artifacts of a component share one base path
(`dist_file_without_ext`) and differ only by extension:

- `<base>.js`        generated code
- `<base>.json`      component config
- `<base><css ext>`  platform stylesheet (e.g. `.acss`)
- `<base><xml ext>`  platform template (e.g. `.axml`)

Assets are copied under the output root. The generated import graph refers to
these exact paths, so the derivation must be stable.
"""

import json
import os
import shutil
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from jsx2mp.enums import BuildMode
from jsx2mp.platforms import PlatformDescriptor
from jsx2mp.utils.paths import remove_ext


@dataclass
class ArtifactBundle:
  """Contents of the artifacts of one component."""

  code: str = ""
  map: Optional[Any] = None
  css: str = ""
  json: Dict[str, Any] = field(default_factory=dict)
  template: str = ""
  assets: List[str] = field(default_factory=list)


@dataclass
class ArtifactPaths:
  code: str
  json: str
  css: str
  template: str
  assets: str


@dataclass
class OutputOption:
  """Destination descriptor handed to the writer alongside the bundle."""

  output_path: ArtifactPaths
  mode: BuildMode = BuildMode.BUILD
  source_path: str = ""
  is_typescript_file: bool = False


def compute_dist_file_without_ext(
  resource_path: str,
  source_path: str,
  output_path: str,
  platform_type: Optional[str] = None,
) -> str:
  """
  Computes the shared artifact base path of a source file.

  Args:
      resource_path (str): Absolute path of the component source.
      source_path (str): Directory of the application entry.
      output_path (str): Build output root.
      platform_type (Optional[str]): Platform infix stripped with the extension.

  Returns:
      str: `<output_path>/<path relative to source_path, without extension>`.
  """
  relative_source_path = os.path.relpath(resource_path, source_path)
  return remove_ext(os.path.join(output_path, relative_source_path), platform_type)


def build_artifact_paths(dist_file_without_ext: str, platform: PlatformDescriptor, output_path: str) -> ArtifactPaths:
  return ArtifactPaths(
    code=dist_file_without_ext + ".js",
    json=dist_file_without_ext + ".json",
    css=dist_file_without_ext + platform.extension.css,
    template=dist_file_without_ext + platform.extension.xml,
    assets=output_path,
  )


def ensure_dir(directory: str) -> None:
  """Creates `directory` and its parents. Existing directories are not an error."""
  os.makedirs(directory, exist_ok=True)


def is_typescript_file(path: str) -> bool:
  return path.endswith((".ts", ".tsx"))


def write_artifacts(bundle: ArtifactBundle, raw_content: str, option: OutputOption) -> None:
  """
  Default writer: persists a bundle to disk.

  The source map is written as a `.map` sidecar, except in build mode. Assets
  are resolved against `option.source_path` and copied under the assets root
  keeping their relative layout.

  Args:
      bundle (ArtifactBundle): The artifact contents.
      raw_content (str): Original component source (unused by this writer).
      option (OutputOption): Destination paths and mode.
  """
  paths = option.output_path

  with open(paths.code, "w", encoding="utf-8") as f:
    f.write(bundle.code)
  if bundle.map is not None and option.mode != BuildMode.BUILD:
    with open(paths.code + ".map", "w", encoding="utf-8") as f:
      f.write(bundle.map if isinstance(bundle.map, str) else json.dumps(bundle.map))

  with open(paths.json, "w", encoding="utf-8") as f:
    json.dump(bundle.json, f, indent=2, ensure_ascii=False)
  with open(paths.css, "w", encoding="utf-8") as f:
    f.write(bundle.css)
  with open(paths.template, "w", encoding="utf-8") as f:
    f.write(bundle.template)

  for asset in bundle.assets:
    src = os.path.join(option.source_path, asset)
    dest = os.path.join(paths.assets, asset)
    ensure_dir(os.path.dirname(dest))
    shutil.copyfile(src, dest)


def stage_output(
  bundle: ArtifactBundle,
  raw_content: str,
  option: OutputOption,
  writer: Callable[[ArtifactBundle, str, OutputOption], None] = write_artifacts,
) -> None:
  """
  Ensures the destination directory exists, then invokes the writer.

  Filesystem errors propagate to the caller.
  """
  ensure_dir(os.path.dirname(option.output_path.code))
  writer(bundle, raw_content, option)
