"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path


class ConfigError(Exception):
    """Error in szyk configuration."""


@dataclass(slots=True, frozen=True)
class SzykConfig:
    """Configuration loaded from the `[tool.szyk]` table of pyproject.toml.

    A relative graph path is resolved from the project root (directory containing pyproject.toml).
    """

    graph: Path | None = None
    target: str | None = None
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


def load_config(pyproject_path: Path) -> SzykConfig:
    """Load and validate [tool.szyk] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed SzykConfig

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

    szyk_section = data.get("tool", {}).get("szyk", {})

    if not szyk_section:
        return SzykConfig(project_root=project_root)

    graph_path: Path | None = None
    if "graph" in szyk_section:
        graph_value = szyk_section["graph"]
        if not isinstance(graph_value, str):
            msg = "Invalid [tool.szyk].graph: expected string path"
            raise ConfigError(msg)
        graph_path = Path(graph_value)
        if not graph_path.is_absolute():
            graph_path = project_root / graph_path

    target = szyk_section.get("target")
    if target is not None and not isinstance(target, str):
        msg = "Invalid [tool.szyk].target: expected string"
        raise ConfigError(msg)

    return SzykConfig(graph=graph_path, target=target, project_root=project_root)


def get_config() -> SzykConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        SzykConfig (may be empty if no pyproject.toml or no [tool.szyk] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return SzykConfig()
    return load_config(pyproject_path)
