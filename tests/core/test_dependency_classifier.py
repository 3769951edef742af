"""
Tests for Dependency Classification and Import Generation.

Verifies:
1. Custom components route to the component loader, or to the script loader
   when they live in a constant directory.
2. Component-library usages route to the script loader with `importedComponent`.
3. Plain usages produce a single pass-through record per name.
4. Both `UsagePolicy` settings for mixed library/plain usages.
5. Loader-chained import rendering.
"""

import json

import pytest

from jsx2mp.config import LoaderConfig, LoaderPaths
from jsx2mp.core.dependencies import (
  DependencyRecord,
  build_request,
  collect_dependencies,
  create_import_statement,
  generate_dependencies,
  is_custom_component,
)
from jsx2mp.core.result import TransformationResult
from jsx2mp.enums import LoaderKind, UsagePolicy
from jsx2mp.utils.paths import classify_directory_membership

RESOURCE = "/app/src/pages/index.jsx"


def plain(local):
  return {"local": local}


def library(local):
  return {"local": local, "isFromComponentLibrary": True}


def make_result(imported):
  return TransformationResult.model_validate({"imported": imported})


@pytest.fixture
def config():
  return LoaderConfig(platform="ali", constant_dir=["src/native"])


@pytest.fixture
def no_constant_dir():
  return classify_directory_membership([])


def test_is_custom_component_matches_relative_entries():
  using = {"c-Foo": "./components/Foo"}
  assert is_custom_component("./components/Foo", RESOURCE, using) is True
  assert is_custom_component("./components/Bar", RESOURCE, using) is False


def test_is_custom_component_matches_absolute_entries():
  using = {"c-Foo": "/app/src/components/Foo/index"}
  assert is_custom_component("../components/Foo", RESOURCE, using) is True


def test_is_custom_component_ignores_empty_values():
  assert is_custom_component("./x", RESOURCE, {"c-X": ""}) is False


def test_custom_component_routes_to_component_loader(config, no_constant_dir):
  transformed = make_result({"./components/Foo": [plain("Foo")]})

  records = collect_dependencies(
    transformed, RESOURCE, {"c-Foo": "./components/Foo"}, config, no_constant_dir
  )

  assert len(records) == 1
  assert records[0].loader == LoaderKind.COMPONENT
  assert records[0].is_component_task
  assert records[0].options == config.to_options()


def test_custom_component_in_constant_dir_routes_to_script_loader(config):
  is_from_constant_dir = classify_directory_membership(config.absolute_constant_dirs("/app"))
  transformed = make_result({"../native/Card": [plain("Card")]})

  records = collect_dependencies(
    transformed, RESOURCE, {"c-Card": "../native/Card"}, config, is_from_constant_dir
  )

  assert records[0].loader == LoaderKind.SCRIPT
  assert "/app/src/native/Card" in is_from_constant_dir.cache


def test_library_usage_carries_imported_component(config, no_constant_dir):
  transformed = make_result({"mini-ali-ui": [library("Button")]})

  records = collect_dependencies(transformed, RESOURCE, {}, config, no_constant_dir)

  assert len(records) == 1
  assert records[0].loader == LoaderKind.SCRIPT
  assert records[0].options["importedComponent"] == "Button"
  assert records[0].options["platform"]["type"] == "ali"


def test_plain_usages_deduplicated(config, no_constant_dir):
  transformed = make_result({"lodash": [plain("a"), plain("b")], "rax": [plain("createElement")]})

  records = collect_dependencies(transformed, RESOURCE, {}, config, no_constant_dir)

  assert records == [DependencyRecord(name="lodash"), DependencyRecord(name="rax")]


def test_library_usages_deduplicated(config, no_constant_dir):
  transformed = make_result({"mini-ali-ui": [library("Button"), library("Icon")]})

  records = collect_dependencies(transformed, RESOURCE, {}, config, no_constant_dir)

  assert len(records) == 1
  assert records[0].options["importedComponent"] == "Button"


def test_mixed_usages_additive_policy(config, no_constant_dir):
  transformed = make_result({"ui": [plain("x"), library("Button"), plain("y")]})

  records = collect_dependencies(transformed, RESOURCE, {}, config, no_constant_dir)

  assert [r.loader for r in records] == [LoaderKind.NONE, LoaderKind.SCRIPT]


@pytest.mark.parametrize(
  "usages, expected",
  [
    ([plain("x"), library("Button")], [LoaderKind.NONE]),
    ([library("Button"), plain("x")], [LoaderKind.SCRIPT]),
  ],
)
def test_mixed_usages_exclusive_policy(usages, expected, no_constant_dir):
  config = LoaderConfig(usage_policy=UsagePolicy.EXCLUSIVE)
  transformed = make_result({"ui": usages})

  records = collect_dependencies(transformed, RESOURCE, {}, config, no_constant_dir)

  assert [r.loader for r in records] == expected


def test_records_preserve_discovery_order(config, no_constant_dir):
  transformed = make_result(
    {
      "rax": [plain("createElement")],
      "./components/Foo": [plain("Foo")],
      "mini-ali-ui": [library("Button")],
    }
  )

  records = collect_dependencies(
    transformed, RESOURCE, {"c-Foo": "./components/Foo"}, config, no_constant_dir
  )

  assert [r.name for r in records] == ["rax", "./components/Foo", "mini-ali-ui"]


def test_create_import_statement_doubles_backslashes():
  assert create_import_statement("rax") == "import 'rax';"
  assert create_import_statement("C:\\loader.js!./a") == "import 'C:\\\\loader.js!./a';"


def test_build_request_loader_chaining():
  paths = LoaderPaths(component="/loaders/component.py", script="/loaders/script.py")
  record = DependencyRecord(name="mini-ali-ui", loader=LoaderKind.SCRIPT, options={"importedComponent": "Button"})

  request = build_request(record, paths)

  loader, rest = request.split("?", 1)
  options, module = rest.rsplit("!", 1)
  assert loader == "/loaders/script.py"
  assert json.loads(options) == {"importedComponent": "Button"}
  assert module == "mini-ali-ui"


def test_generate_dependencies():
  paths = LoaderPaths(component="/loaders/component.py", script="/loaders/script.py")
  records = [
    DependencyRecord(name="rax"),
    DependencyRecord(name="./components/Foo", loader=LoaderKind.COMPONENT, options={"a": 1}),
  ]

  code = generate_dependencies(records, paths)

  assert code.split("\n") == [
    "import 'rax';",
    'import \'/loaders/component.py?{"a":1}!./components/Foo\';',
  ]
