"""
Collaborator contracts.

The loader drives three external collaborators. They are typed as protocols so
any callable with the right shape can be plugged in (tests use plain functions
and mocks).
"""

from typing import Any, Awaitable, Dict, List, Protocol, Union

from pydantic import BaseModel, Field

from jsx2mp.core.result import TransformationResult


class StyleOutput(BaseModel):
  """Combined style text and the local assets it references."""

  style: str = ""
  assets: List[str] = Field(default_factory=list)


class Compiler(Protocol):
  def __call__(self, source: str, options: Dict[str, Any]) -> Union[TransformationResult, Dict[str, Any]]: ...


class StyleProcessor(Protocol):
  def __call__(self, css_files: List[str], source_path: str) -> Awaitable[StyleOutput]: ...


class ArtifactWriter(Protocol):
  def __call__(self, bundle: Any, raw_content: str, option: Any) -> None: ...


class DeadCodeEliminator(Protocol):
  def __call__(self, source: str) -> str: ...
