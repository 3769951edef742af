"""
Component Loader.

Drives the transformation of one component source file:

1.  **Compile**: the source (read in a worker thread) (after dead-code elimination) is handed to the
    external compiler. A failure is logged with the platform name and a rich
    traceback, then re-raised as `ComponentCompileError`; nothing is written.
2.  **Styles**: referenced stylesheets are combined by the style processor.
3.  **Config**: compiler-declared dependencies are reported to the host and
    the `usingComponents` map is rewritten relative to the component.
4.  **Output**: artifacts are staged under the output root, in a worker thread.
5.  **Imports**: imported names are classified and emitted as (possibly
    loader-chained) import statements.

Custom components routed back to this loader are returned as `tasks` for the
host scheduler instead of being compiled recursively here.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from jsx2mp.config import LoaderConfig
from jsx2mp.core.contracts import ArtifactWriter, Compiler, DeadCodeEliminator, StyleOutput, StyleProcessor
from jsx2mp.core.dependencies import DependencyRecord, collect_dependencies, generate_dependencies
from jsx2mp.core.output import (
  ArtifactBundle,
  OutputOption,
  build_artifact_paths,
  compute_dist_file_without_ext,
  is_typescript_file,
  stage_output,
  write_artifacts,
)
from jsx2mp.core.result import TransformationResult
from jsx2mp.core.styles import process_css
from jsx2mp.utils.console import console, log_error
from jsx2mp.utils.paths import classify_directory_membership, rewrite_using_components

COMPONENT_TYPE = "component"


class ComponentCompileError(RuntimeError):
  """Raised when the external compiler fails on a component."""

  def __init__(self, resource_path: str, platform_name: str, cause: BaseException):
    super().__init__(f"[{platform_name}] Failed to compile component {resource_path}: {cause}")
    self.resource_path = resource_path
    self.platform_name = platform_name


@dataclass
class LoaderContext:
  """
  Host-side information about the file being loaded.

  Attributes:
      resource_path (str): Absolute path of the component source.
      root_context (str): Project root.
      output_path (str): Build output root.
      add_dependency (Callable[[str], None]): Declares a file dependency to the host.
  """

  resource_path: str
  root_context: str
  output_path: str
  add_dependency: Callable[[str], None] = lambda path: None

  def read_source(self) -> str:
    with open(self.resource_path, "r", encoding="utf-8") as f:
      return f.read()


@dataclass
class LoaderResult:
  """
  Module text returned to the host, plus the classified imports.

  Attributes:
      code (str): Generated module (banner and import statements).
      dependencies (List[DependencyRecord]): All records, in emission order.
      config (Dict[str, Any]): The rewritten component config.
      dist_file_without_ext (str): Shared artifact base path.
  """

  code: str
  dependencies: List[DependencyRecord] = field(default_factory=list)
  config: Dict[str, Any] = field(default_factory=dict)
  dist_file_without_ext: str = ""

  @property
  def tasks(self) -> List[DependencyRecord]:
    """Imports that must be processed by this loader again."""
    return [d for d in self.dependencies if d.is_component_task]


def _identity(source: str) -> str:
  return source


class ComponentLoader:
  """
  Transforms component sources into mini-app artifacts.

  Args:
      config (LoaderConfig): Loader options.
      compiler (Compiler): External JSX compiler.
      style_processor (StyleProcessor): Combines referenced stylesheets.
      writer (ArtifactWriter): Persists staged artifacts.
      dead_code_eliminator (Optional[DeadCodeEliminator]): Source pre-pass.
  """

  def __init__(
    self,
    config: LoaderConfig,
    compiler: Compiler,
    style_processor: StyleProcessor = process_css,
    writer: ArtifactWriter = write_artifacts,
    dead_code_eliminator: Optional[DeadCodeEliminator] = None,
  ):
    self.config = config
    self.compiler = compiler
    self.style_processor = style_processor
    self.writer = writer
    self.dead_code_eliminator = dead_code_eliminator or _identity

  def compiler_options(self, context: LoaderContext, source_path: str) -> Dict[str, Any]:
    return {
      "resourcePath": context.resource_path,
      "outputPath": context.output_path,
      "sourcePath": source_path,
      "type": COMPONENT_TYPE,
      "platform": self.config.platform.model_dump(),
      "sourceFileName": context.resource_path,
      "disableCopyNpm": self.config.disable_copy_npm,
      "turnOffSourceMap": self.config.turn_off_source_map,
    }

  def compile(self, source: str, context: LoaderContext, source_path: str) -> TransformationResult:
    """
    Runs the external compiler.

    Raises:
        ComponentCompileError: If the compiler raises or returns a malformed result.
    """
    platform_name = self.config.platform.name
    try:
      raw = self.compiler(self.dead_code_eliminator(source), self.compiler_options(context, source_path))
      if isinstance(raw, TransformationResult):
        return raw
      return TransformationResult.model_validate(raw)
    except Exception as e:
      log_error(f"[{platform_name}] Error occured when handling Component {context.resource_path}")
      console.print_exception()
      raise ComponentCompileError(context.resource_path, platform_name, e) from e

  async def run(self, context: LoaderContext) -> LoaderResult:
    """
    Transforms one component.

    Args:
        context (LoaderContext): The file to process.

    Returns:
        LoaderResult: Generated module text and classified imports.

    Raises:
        ComponentCompileError: On compiler failure.
        OSError: On filesystem failure while staging output.
    """
    platform = self.config.platform
    resource_path = context.resource_path
    raw_content = await asyncio.to_thread(context.read_source)

    source_path = self.config.source_path(context.root_context)
    dist_file_without_ext = compute_dist_file_without_ext(
      resource_path, source_path, context.output_path, platform.type
    )
    is_from_constant_dir = classify_directory_membership(self.config.absolute_constant_dirs(context.root_context))

    transformed = self.compile(raw_content, context, source_path)

    styles = await self.style_processor(transformed.css_files, source_path)
    if isinstance(styles, dict):
      styles = StyleOutput.model_validate(styles)

    for dep in transformed.dependencies:
      context.add_dependency(dep)

    config = dict(transformed.config)
    using_components: Dict[str, str] = {}
    if transformed.declared_using_components:
      using_components = rewrite_using_components(transformed.declared_using_components, resource_path)
      config["usingComponents"] = using_components

    bundle = ArtifactBundle(
      code=transformed.code,
      map=transformed.map,
      css=styles.style or "",
      json=config,
      template=transformed.template,
      assets=styles.assets,
    )
    option = OutputOption(
      output_path=build_artifact_paths(dist_file_without_ext, platform, context.output_path),
      mode=self.config.mode,
      source_path=source_path,
      is_typescript_file=is_typescript_file(resource_path),
    )
    await asyncio.to_thread(stage_output, bundle, raw_content, option, self.writer)

    dependencies = collect_dependencies(transformed, resource_path, using_components, self.config, is_from_constant_dir)
    code = "\n".join(
      [
        f"/* Generated by JSX2MP ComponentLoader, sourceFile: {resource_path}. */",
        generate_dependencies(dependencies, self.config.loaders),
      ]
    )
    return LoaderResult(
      code=code,
      dependencies=dependencies,
      config=config,
      dist_file_without_ext=dist_file_without_ext,
    )


async def run_many(
  loader: ComponentLoader, contexts: Iterable[LoaderContext]
) -> List[Union[LoaderResult, BaseException]]:
  """
  Runs the loader over several files concurrently.

  A failing file does not affect the others: its slot in the returned list
  holds the exception instead of a result.

  Args:
      loader (ComponentLoader): Configured loader.
      contexts (Iterable[LoaderContext]): Files to process.

  Returns:
      List: Per-file results or exceptions, in input order.
  """
  return await asyncio.gather(*(loader.run(ctx) for ctx in contexts), return_exceptions=True)

