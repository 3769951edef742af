"""
Path and Config Rewriting Helpers.

Pure string/path functions used by the loader:

- extension stripping (optionally with a platform infix such as `index.ali.js`),
- relative-prefix handling and separator normalization for paths that end up
  as string literals in generated code,
- prefix membership tests against configured "constant" directories,
- rewriting of a component config's `usingComponents` map.
"""

import os
import posixpath
from typing import Callable, Dict, Iterable, List, Optional

CUSTOM_COMPONENT_PREFIX = "c-"


def remove_ext(path: str, platform_type: Optional[str] = None) -> str:
  """
  Removes the file extension from a path.

  If `platform_type` is given, a trailing platform infix is removed as well,
  so `pages/index.ali.js` becomes `pages/index` for the `ali` platform.

  Args:
      path (str): File path.
      platform_type (Optional[str]): Platform key used as file-name infix.

  Returns:
      str: The path without extension.
  """
  root, _ = os.path.splitext(path)
  if platform_type:
    infix = f".{platform_type}"
    if root.endswith(infix):
      root = root[: -len(infix)]
  return root


def add_relative_path_prefix(path: str) -> str:
  """Prefixes `./` to a relative path that does not already start with a dot."""
  if path.startswith(".") or os.path.isabs(path):
    return path
  return f"./{path}"


def double_backslash(text: str) -> str:
  """Escapes backslashes so the text survives as a JS string literal."""
  return text.replace("\\", "\\\\")


def normalize_output_path(path: str) -> str:
  """
  Canonicalizes a path that is written verbatim into generated output.

  Backslashes become forward slashes and redundant segments are collapsed.
  Paths that were explicitly relative (`./`, `../`) keep a leading `./` or
  `../`; bare module specifiers (`mini-ali-ui/es/button`) and URLs
  (`plugin://x/y`) are not given one.

  Args:
      path (str): The raw path.

  Returns:
      str: Forward-slash path.
  """
  slashed = path.replace("\\", "/")
  if "://" in slashed:
    return slashed

  explicitly_relative = slashed in (".", "..") or slashed.startswith("./") or slashed.startswith("../")
  normalized = posixpath.normpath(slashed)

  if explicitly_relative and not (normalized == ".." or normalized.startswith("../")):
    normalized = "./" if normalized == "." else f"./{normalized}"
  return normalized


def is_from_target_dirs(target_dirs: Iterable[str]) -> Callable[[str], bool]:
  """
  Builds a predicate testing whether a path lies under any of `target_dirs`.

  Args:
      target_dirs (Iterable[str]): Absolute directory paths.

  Returns:
      Callable[[str], bool]: Prefix-match predicate.
  """
  dirs: List[str] = [os.path.normpath(d) for d in target_dirs]

  def predicate(path: str) -> bool:
    candidate = os.path.normpath(path)
    for d in dirs:
      if candidate == d or candidate.startswith(d.rstrip(os.sep) + os.sep):
        return True
    return False

  return predicate


def cached(fn: Callable[[str], bool]) -> Callable[[str], bool]:
  """
  Memoizes a single-argument predicate by exact input string.

  Each call returns a wrapper with its own cache, so the cache lives exactly as
  long as the wrapper (one loader invocation).

  Args:
      fn: The predicate to wrap.

  Returns:
      Callable[[str], bool]: Memoizing predicate. The cache is exposed as
      `.cache` for inspection.
  """
  cache: Dict[str, bool] = {}

  def wrapper(path: str) -> bool:
    if path not in cache:
      cache[path] = fn(path)
    return cache[path]

  wrapper.cache = cache  # type: ignore[attr-defined]
  return wrapper


def classify_directory_membership(candidate_dirs: Iterable[str]) -> Callable[[str], bool]:
  """Memoized membership predicate for the configured constant directories."""
  return cached(is_from_target_dirs(candidate_dirs))


def is_custom_component_key(key: str) -> bool:
  return key.startswith(CUSTOM_COMPONENT_PREFIX)


def rewrite_using_components(using_components: Dict[str, str], resource_path: str) -> Dict[str, str]:
  """
  Rewrites a `usingComponents` map for the emitted JSON config.

  Custom components (`c-` keys) are expressed relative to the directory of
  `resource_path`, without extension. Library and native paths are only
  normalized.

  Args:
      using_components (Dict[str, str]): Tag name -> import path.
      resource_path (str): Absolute path of the component being compiled.

  Returns:
      Dict[str, str]: The rewritten map, in the original key order.
  """
  base_dir = os.path.dirname(resource_path)
  rewritten: Dict[str, str] = {}

  for key, value in using_components.items():
    if is_custom_component_key(key):
      target = value if os.path.isabs(value) else os.path.join(base_dir, value)
      relative = add_relative_path_prefix(os.path.relpath(target, base_dir))
      rewritten[key] = normalize_output_path(remove_ext(relative))
    else:
      rewritten[key] = normalize_output_path(value)

  return rewritten
