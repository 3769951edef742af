"""
Enumerations for jsx2mp.

Standard enumerations shared by the loader, the dependency classifier and the
configuration layer.
"""

from enum import Enum


class LoaderKind(str, Enum):
  """
  Downstream processor a generated import is routed through.
  """

  NONE = "none"  # plain pass-through import
  COMPONENT = "component"  # re-entrant component compilation
  SCRIPT = "script"  # already-valid script (native or component library)


class UsagePolicy(str, Enum):
  """
  How plain and component-library usages of the same imported name interact.
  """

  ADDITIVE = "additive"  # one plain record and one library record may coexist
  EXCLUSIVE = "exclusive"  # first emitted kind suppresses the other


class BuildMode(str, Enum):
  """Build flavour forwarded to the artifact writer."""

  BUILD = "build"
  WATCH = "watch"
