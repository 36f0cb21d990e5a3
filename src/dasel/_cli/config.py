"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from dasel._io import MAX_VERTEX_ID


class ConfigError(Exception):
    """Error in dasel configuration."""


DEFAULT_ROOT = 1
DEFAULT_DEPTH = 2


@dataclass(slots=True, frozen=True)
class DaselConfig:
    """Defaults for the graph commands, loaded from ``[tool.dasel]``.

    Command-line options take precedence over these values.
    """

    root: int = DEFAULT_ROOT
    depth: int = DEFAULT_DEPTH
    directed: bool = False
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def _read_int(
    section: dict[str, object],
    key: str,
    default: int,
    *,
    minimum: int,
    maximum: int | None = None,
) -> int:
    if key not in section:
        return default
    value = section[key]
    # bool is an int subclass; `depth = true` is a mistake, not 1
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Invalid [tool.dasel].{key}: expected integer"
        raise ConfigError(msg)
    if value < minimum:
        msg = f"Invalid [tool.dasel].{key}: must be >= {minimum}, got {value}"
        raise ConfigError(msg)
    if maximum is not None and value > maximum:
        msg = f"Invalid [tool.dasel].{key}: must be <= {maximum}, got {value}"
        raise ConfigError(msg)
    return value


def load_config(pyproject_path: Path) -> DaselConfig:
    """Load and validate [tool.dasel] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed DaselConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    tool_section = data.get("tool", {})
    if not isinstance(tool_section, dict):
        msg = "Invalid [tool]: expected a table"
        raise ConfigError(msg)

    dasel_section = tool_section.get("dasel", {})
    if not isinstance(dasel_section, dict):
        msg = "Invalid [tool.dasel]: expected a table"
        raise ConfigError(msg)

    if not dasel_section:
        return DaselConfig(project_root=project_root)

    root = _read_int(dasel_section, "root", DEFAULT_ROOT, minimum=0, maximum=MAX_VERTEX_ID)
    depth = _read_int(dasel_section, "depth", DEFAULT_DEPTH, minimum=0)

    directed = dasel_section.get("directed", False)
    if not isinstance(directed, bool):
        msg = "Invalid [tool.dasel].directed: expected boolean"
        raise ConfigError(msg)

    return DaselConfig(root=root, depth=depth, directed=directed, project_root=project_root)


def get_config() -> DaselConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        DaselConfig (defaults if no pyproject.toml or no [tool.dasel] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return DaselConfig()
    return load_config(pyproject_path)
