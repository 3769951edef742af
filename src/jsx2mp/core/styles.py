"""
Default Style Processor.

Reads the stylesheets a component references, concatenates them, and collects
the local files they point at through `url(...)` so they can be copied next to
the generated artifacts. File reads run in a worker thread.
"""

import asyncio
import os
import re
from typing import List

from jsx2mp.core.contracts import StyleOutput

_URL_RE = re.compile(r"url\(\s*(['\"]?)([^'\")]+)\1\s*\)")
_REMOTE_PREFIXES = ("http://", "https://", "//", "data:")


def extract_asset_urls(css: str) -> List[str]:
  """
  Lists the local `url(...)` references of a stylesheet, in order of appearance.

  Remote URLs and inline data URIs are ignored.
  """
  urls = []
  for match in _URL_RE.finditer(css):
    url = match.group(2).strip()
    if url.startswith(_REMOTE_PREFIXES):
      continue
    if url not in urls:
      urls.append(url)
  return urls


def _read_styles(css_files: List[str], source_path: str) -> StyleOutput:
  chunks: List[str] = []
  assets: List[str] = []

  for css_file in css_files:
    with open(css_file, "r", encoding="utf-8") as f:
      css = f.read()
    chunks.append(css)

    base_dir = os.path.dirname(css_file)
    for url in extract_asset_urls(css):
      asset = os.path.normpath(os.path.join(base_dir, url.split("?")[0].split("#")[0]))
      relative = os.path.relpath(asset, source_path)
      if relative not in assets:
        assets.append(relative)

  return StyleOutput(style="\n".join(chunks), assets=assets)


async def process_css(css_files: List[str], source_path: str) -> StyleOutput:
  """
  Combines the given stylesheets.

  Args:
      css_files (List[str]): Absolute stylesheet paths, in import order.
      source_path (str): Source root; asset paths are returned relative to it.

  Returns:
      StyleOutput: Combined style text and asset paths.
  """
  return await asyncio.to_thread(_read_styles, list(css_files), source_path)
