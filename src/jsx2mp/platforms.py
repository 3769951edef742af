"""
Target Platform Registry.

Each mini-application platform names its stylesheet and template files with
its own extensions. The `PlatformDescriptor` is also serialized into loader
options, so its field names follow the JSON form consumed by downstream loaders.
"""

from typing import Dict, List

from pydantic import BaseModel, Field


class PlatformExtension(BaseModel):
  """File extensions for the platform-specific artifacts."""

  css: str = Field(..., description="Stylesheet extension including the dot (e.g. '.acss').")
  xml: str = Field(..., description="Template extension including the dot (e.g. '.axml').")


class PlatformDescriptor(BaseModel):
  """
  Describes one target mini-application platform.

  Attributes:
      type (str): Short key, also used as a file-name infix (`index.ali.js`).
      name (str): Human readable name used in diagnostics.
      extension (PlatformExtension): Artifact extensions.
  """

  type: str
  name: str
  extension: PlatformExtension


_PLATFORMS: Dict[str, PlatformDescriptor] = {
  "ali": PlatformDescriptor(
    type="ali",
    name="Alibaba MiniProgram",
    extension=PlatformExtension(css=".acss", xml=".axml"),
  ),
  "wechat": PlatformDescriptor(
    type="wechat",
    name="WeChat MiniProgram",
    extension=PlatformExtension(css=".wxss", xml=".wxml"),
  ),
  "bytedance": PlatformDescriptor(
    type="bytedance",
    name="ByteDance MicroApp",
    extension=PlatformExtension(css=".ttss", xml=".ttml"),
  ),
  "baidu": PlatformDescriptor(
    type="baidu",
    name="Baidu SmartProgram",
    extension=PlatformExtension(css=".css", xml=".swan"),
  ),
}


def available_platforms() -> List[str]:
  return sorted(_PLATFORMS.keys())


def get_platform(platform_type: str) -> PlatformDescriptor:
  """
  Looks up a registered platform.

  Args:
      platform_type (str): Platform key (case-insensitive).

  Returns:
      PlatformDescriptor: The descriptor.

  Raises:
      ValueError: If the platform is not registered.
  """
  key = platform_type.lower().strip()
  if key not in _PLATFORMS:
    raise ValueError(f"Unknown platform: '{key}'. Supported platforms: {available_platforms()}")
  return _PLATFORMS[key]
