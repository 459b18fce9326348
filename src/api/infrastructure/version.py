"""Version of the Podium API.

Installed distributions report their metadata version; a source checkout
reads it from the repository's pyproject.toml.
"""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION_NAME = "podium-api"

# src/api/infrastructure/version.py -> repository root
PYPROJECT_PATH = Path(__file__).parents[3] / "pyproject.toml"


def _read_pyproject_version(pyproject_path: Path) -> str:
    with open(pyproject_path, "rb") as f:
        return tomllib.load(f)["project"]["version"]


def get_version() -> str:
    """Get the application version (e.g. "0.1.0")."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return _read_pyproject_version(PYPROJECT_PATH)


__version__ = get_version()
