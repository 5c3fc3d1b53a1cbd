"""Version lookup for installed and source-checkout deregex."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
import tomllib

_DISTRIBUTION = "deregex"
_PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def _detect_version() -> str:
    try:
        return metadata.version(_DISTRIBUTION)
    except metadata.PackageNotFoundError:  # pragma: no cover - source checkout
        pass
    if not _PYPROJECT.is_file():
        return "0.0.0"
    with _PYPROJECT.open("rb") as fh:
        project = tomllib.load(fh).get("project", {})
    return project.get("version", "0.0.0")


__version__ = _detect_version()

__all__ = ["__version__"]
