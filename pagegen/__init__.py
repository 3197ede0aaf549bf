"""
pagegen: schema-to-source generation pipeline for a visual page builder.

The page editor produces a declarative *schema*, a tree of typed nodes with
props, styles and children.  This package turns that schema into a complete
front-end project.  The work is organised as a small compiler:

* ``ir`` – dataclasses for the intermediate representation (nodes, pages,
  the project and the tagged prop-value union).
* ``metadata`` – the component registry mapping schema names to target
  components, their imports and per-component codegen hooks.
* ``parser`` – recursive-descent transform of the schema into IR.
* ``preprocessors`` – IR-to-IR rewrites such as state lifting.
* ``codegen`` – module/project builders, the JSX and CSS component plugins,
  the action handler registry and the project scaffolding plugins.
* ``postprocessors`` and ``publishers`` – text formatting and delivery
  (in memory, on disk, or as a zip archive).
* ``solutions`` – named plugin sets such as ``react-vite``.
* ``exporter`` – the ``export_source_code`` entry point tying it together.
"""

import re
from pathlib import Path
from importlib import metadata as _metadata


def _local_version() -> str | None:
    root = Path(__file__).resolve().parents[1]
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return None
    try:
        text = pyproject.read_text(encoding="utf-8")
    except OSError:  # pragma: no cover - IO errors should not break imports
        return None
    match = re.search(r"^version\s*=\s*\"([^\"]+)\"", text, flags=re.MULTILINE)
    if match:
        return match.group(1)
    return None


try:  # pragma: no cover - metadata fallback for editable installs
    __version__ = _metadata.version("pagegen")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
    __version__ = _local_version() or "0.1.0"

__all__ = ["__version__"]
