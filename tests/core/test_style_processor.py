"""
Tests for the default style processor.
"""

import pytest

from jsx2mp.core.styles import extract_asset_urls, process_css


def test_extract_asset_urls_skips_remote_and_data():
  css = """
  .a { background: url(./img/a.png); }
  .b { background: url('img/b.png?v=1'); }
  .c { background: url("https://cdn.example.com/c.png"); }
  .d { background: url(data:image/png;base64,AAAA); }
  .e { background: url(./img/a.png); }
  """
  assert extract_asset_urls(css) == ["./img/a.png", "img/b.png?v=1"]


@pytest.mark.asyncio
async def test_process_css_combines_files_and_collects_assets(tmp_path):
  src = tmp_path / "src"
  (src / "pages").mkdir(parents=True)
  first = src / "pages" / "index.css"
  second = src / "common.css"
  first.write_text(".a { background: url(../images/bg.png); }", encoding="utf-8")
  second.write_text(".b { color: red; }", encoding="utf-8")

  result = await process_css([str(first), str(second)], str(src))

  assert result.style == ".a { background: url(../images/bg.png); }\n.b { color: red; }"
  assert result.assets == ["images/bg.png"]


@pytest.mark.asyncio
async def test_process_css_no_files(tmp_path):
  result = await process_css([], str(tmp_path))
  assert result.style == ""
  assert result.assets == []
