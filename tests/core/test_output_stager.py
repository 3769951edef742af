"""
Tests for Output Staging and the default artifact writer.
"""

import json
import os
from unittest.mock import MagicMock

from jsx2mp.core.output import (
  ArtifactBundle,
  OutputOption,
  build_artifact_paths,
  compute_dist_file_without_ext,
  ensure_dir,
  is_typescript_file,
  stage_output,
  write_artifacts,
)
from jsx2mp.enums import BuildMode
from jsx2mp.platforms import get_platform


def test_compute_dist_file_without_ext():
  base = compute_dist_file_without_ext("/app/src/pages/home/index.jsx", "/app/src", "/app/dist")
  assert base == "/app/dist/pages/home/index"


def test_compute_dist_file_strips_platform_infix():
  base = compute_dist_file_without_ext("/app/src/pages/index.ali.jsx", "/app/src", "/app/dist", "ali")
  assert base == "/app/dist/pages/index"


def test_build_artifact_paths_share_base():
  paths = build_artifact_paths("/dist/pages/index", get_platform("wechat"), "/dist")

  assert paths.code == "/dist/pages/index.js"
  assert paths.json == "/dist/pages/index.json"
  assert paths.css == "/dist/pages/index.wxss"
  assert paths.template == "/dist/pages/index.wxml"
  assert paths.assets == "/dist"


def test_ensure_dir_is_idempotent(tmp_path):
  target = tmp_path / "a" / "b" / "c"
  ensure_dir(str(target))
  ensure_dir(str(target))
  assert target.is_dir()


def test_is_typescript_file():
  assert is_typescript_file("/a/b.tsx")
  assert is_typescript_file("/a/b.ts")
  assert not is_typescript_file("/a/b.jsx")


def test_stage_output_creates_directory_before_writing(tmp_path):
  base = str(tmp_path / "dist" / "pages" / "index")
  option = OutputOption(output_path=build_artifact_paths(base, get_platform("ali"), str(tmp_path / "dist")))
  dir_existed = []
  writer = MagicMock(
    side_effect=lambda bundle, raw, opt: dir_existed.append(os.path.isdir(os.path.dirname(opt.output_path.code)))
  )
  bundle = ArtifactBundle(code="x")

  stage_output(bundle, "raw source", option, writer)

  writer.assert_called_once_with(bundle, "raw source", option)
  assert dir_existed == [True]


def test_write_artifacts_persists_bundle(tmp_path):
  source = tmp_path / "src"
  (source / "images").mkdir(parents=True)
  (source / "images" / "logo.png").write_bytes(b"PNG")

  dist = tmp_path / "dist"
  base = str(dist / "pages" / "index")
  option = OutputOption(
    output_path=build_artifact_paths(base, get_platform("ali"), str(dist)),
    mode=BuildMode.WATCH,
    source_path=str(source),
  )
  bundle = ArtifactBundle(
    code="Component({});",
    map={"version": 3},
    css=".a{color:red}",
    json={"component": True},
    template="<view/>",
    assets=["images/logo.png"],
  )

  stage_output(bundle, "raw", option)

  assert (dist / "pages" / "index.js").read_text() == "Component({});"
  assert json.loads((dist / "pages" / "index.js.map").read_text()) == {"version": 3}
  assert json.loads((dist / "pages" / "index.json").read_text()) == {"component": True}
  assert (dist / "pages" / "index.acss").read_text() == ".a{color:red}"
  assert (dist / "pages" / "index.axml").read_text() == "<view/>"
  assert (dist / "images" / "logo.png").read_bytes() == b"PNG"


def test_write_artifacts_skips_source_map_in_build_mode(tmp_path):
  base = str(tmp_path / "index")
  option = OutputOption(output_path=build_artifact_paths(base, get_platform("ali"), str(tmp_path)))

  write_artifacts(ArtifactBundle(code="x", map="{}"), "raw", option)

  assert (tmp_path / "index.js").exists()
  assert not (tmp_path / "index.js.map").exists()
