"""
jsx2mp Package.

Transformation core of the JSX to mini-application build pipeline. It turns a
compiled component into per-platform artifacts (code, JSON config, stylesheet,
template, assets) and a loader-annotated import graph the host bundler keeps
resolving, and converts parsed CSS rules into platform style objects.

Usage
-----

Style Conversion
^^^^^^^^^^^^^^^^

.. code-block:: python

    from jsx2mp import StyleTransformer
    from jsx2mp.stylesheet import Declaration, Rule

    rule = Rule(selectors=[".title"], declarations=[Declaration("font-size", "16")])
    StyleTransformer().convert(rule)
    # {'fontSize': 16}

Component Loading
^^^^^^^^^^^^^^^^^

.. code-block:: python

    import asyncio
    from jsx2mp import ComponentLoader, LoaderConfig, LoaderContext

    loader = ComponentLoader(LoaderConfig(platform="ali"), compiler=my_compiler)
    ctx = LoaderContext(resource_path="/app/src/pages/index.jsx", root_context="/app", output_path="/app/dist")
    result = asyncio.run(loader.run(ctx))
    print(result.code)
"""

from jsx2mp.config import LoaderConfig
from jsx2mp.core.loader import ComponentCompileError, ComponentLoader, LoaderContext, LoaderResult
from jsx2mp.stylesheet.transformer import StyleTransformer

__version__ = "0.1.0"

__all__ = [
  "ComponentCompileError",
  "ComponentLoader",
  "LoaderConfig",
  "LoaderContext",
  "LoaderResult",
  "StyleTransformer",
  "__version__",
]
