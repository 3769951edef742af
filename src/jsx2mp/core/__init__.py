"""
Component loader core: compiler orchestration, dependency classification and
output staging.
"""

from jsx2mp.core.dependencies import DependencyRecord
from jsx2mp.core.loader import ComponentCompileError, ComponentLoader, LoaderContext, LoaderResult
from jsx2mp.core.result import ImportUsage, TransformationResult

__all__ = [
  "ComponentCompileError",
  "ComponentLoader",
  "DependencyRecord",
  "ImportUsage",
  "LoaderContext",
  "LoaderResult",
  "TransformationResult",
]
