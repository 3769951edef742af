"""
Compiler output model.

`TransformationResult` is what the external JSX compiler returns for one
component. Compilers are usually JavaScript tools, so the model accepts both
camelCase (`cssFiles`, `isFromComponentLibrary`) and snake_case keys.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ImportUsage(BaseModel):
  """
  One usage of an imported module name.
  """

  model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

  local: Optional[str] = Field(None, description="Identifier the import is bound to locally.")
  imported: Optional[str] = Field(None, description="Exported name being imported, if named.")
  is_from_component_library: bool = Field(
    False, description="True if the module is a pre-compiled component library package."
  )


class TransformationResult(BaseModel):
  """
  Output of the external compiler for one component source file.
  """

  model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

  code: str = Field("", description="Generated script code.")
  map: Optional[Any] = Field(None, description="Source map of the generated code.")
  css_files: List[str] = Field(default_factory=list, description="Style files referenced by the component.")
  config: Dict[str, Any] = Field(default_factory=dict, description="Component JSON config (may hold usingComponents).")
  template: str = Field("", description="Generated template markup.")
  dependencies: List[str] = Field(default_factory=list, description="Files to declare as build dependencies.")
  imported: Dict[str, List[ImportUsage]] = Field(
    default_factory=dict, description="Imported module name -> usages, in discovery order."
  )

  @property
  def declared_using_components(self) -> Dict[str, str]:
    return dict(self.config.get("usingComponents") or {})
