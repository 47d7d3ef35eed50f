"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from graphine._graph import CyclePolicy


class ConfigError(Exception):
    """Error in graphine configuration."""


@dataclass(slots=True, frozen=True)
class GraphineConfig:
    """Configuration loaded from the [tool.graphine] section of pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    graph: Path | None = None
    output: Path | None = None
    on_cycle: CyclePolicy = CyclePolicy.ERROR
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


def _parse_path(section: dict[str, object], key: str, project_root: Path) -> Path | None:
    if key not in section:
        return None
    value = section[key]
    if not isinstance(value, str):
        msg = f"Invalid [tool.graphine].{key}: expected string path"
        raise ConfigError(msg)
    path = Path(value)
    if not path.is_absolute():
        path = project_root / path
    return path


def _parse_cycle_policy(section: dict[str, object]) -> CyclePolicy:
    value = section.get("on-cycle", CyclePolicy.ERROR.value)
    try:
        return CyclePolicy(value)
    except ValueError as e:
        msg = f"Invalid [tool.graphine].on-cycle '{value}'. Expected one of: {', '.join(CyclePolicy)}"
        raise ConfigError(msg) from e


def load_config(pyproject_path: Path) -> GraphineConfig:
    """Load and validate [tool.graphine] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphineConfig

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

    section = data.get("tool", {}).get("graphine", {})
    if not section:
        # No [tool.graphine] section - return empty config
        return GraphineConfig(project_root=project_root)

    return GraphineConfig(
        graph=_parse_path(section, "graph", project_root),
        output=_parse_path(section, "output", project_root),
        on_cycle=_parse_cycle_policy(section),
        project_root=project_root,
    )


def get_config() -> GraphineConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GraphineConfig (may be empty if no pyproject.toml or no [tool.graphine] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphineConfig()
    return load_config(pyproject_path)
