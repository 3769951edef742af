"""
Tests for CLI argument parsing and dispatch.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from jsx2mp.cli.__main__ import main


@patch("jsx2mp.cli.commands.handle_style")
def test_style_dispatch(mock_handle):
  mock_handle.return_value = 0

  assert main(["style", "sheet.json", "--theme", "--log"]) == 0

  mock_handle.assert_called_once_with(Path("sheet.json"), True, True, False, None)


@patch("jsx2mp.cli.commands.handle_deps")
def test_deps_dispatch_parses_config(mock_handle):
  mock_handle.return_value = 0

  main(
    [
      "deps",
      "result.json",
      "--resource",
      "/app/src/pages/index.jsx",
      "--root",
      "/app",
      "--platform",
      "wechat",
      "--constant-dir",
      "src/native",
      "--config",
      "usage_policy=exclusive",
      "disable_copy_npm=true",
    ]
  )

  args = mock_handle.call_args[0]
  assert args[0] == Path("result.json")
  assert args[1] == "/app/src/pages/index.jsx"
  assert args[2] == Path("/app")
  assert args[3] == "wechat"
  assert args[4] == ["src/native"]
  assert args[5] == {"usage_policy": "exclusive", "disable_copy_npm": True}


@patch("jsx2mp.cli.commands.handle_deps")
def test_deps_bad_config_is_usage_error(mock_handle):
  with pytest.raises(SystemExit) as exc_info:
    main(["deps", "result.json", "--resource", "/a.jsx", "--config", "novalue"])

  assert exc_info.value.code == 2
  mock_handle.assert_not_called()


def test_unknown_platform_choice_rejected():
  with pytest.raises(SystemExit):
    main(["deps", "result.json", "--resource", "/a.jsx", "--platform", "nokia"])
