"""Environment files.

Environments live in ``<project>/.httx/envs/<name>.yaml`` as flat
YAML mappings. Values are read as strings, and ``${NAME}`` references
inside them are expanded from the process environment at load time.
"""

import logging
from pathlib import Path

import yaml

from httx.errors import EnvironmentFileError, EnvironmentNotFoundError
from httx.resolver import expand_process_env

logger = logging.getLogger(__name__)

ENVS_DIR = Path(".httx") / "envs"
ENV_SUFFIXES = (".yaml", ".yml")


def envs_dir(project: Path) -> Path:
    return project / ENVS_DIR


def list_envs(project: Path) -> list[str]:
    """List environment names in a project, sorted. Missing directory lists as empty."""
    directory = envs_dir(project)
    if not directory.is_dir():
        return []
    return sorted(
        path.stem for path in directory.iterdir()
        if path.is_file() and path.suffix in ENV_SUFFIXES
    )


def load_env(project: Path, name: str) -> dict[str, str]:
    """Load a named environment as a string mapping.

    Raises:
        EnvironmentNotFoundError: no ``.yaml``/``.yml`` file for the name.
        EnvironmentFileError: the file is not a YAML mapping.
    """
    path = _find_env_file(project, name)
    if path is None:
        raise EnvironmentNotFoundError(name)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise EnvironmentFileError(f"failed to parse env file {path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise EnvironmentFileError(f"env file {path} must contain a mapping")

    logger.debug("Loaded %d variables from %s", len(raw), path)
    return {str(key): expand_process_env(_stringify(value)) for key, value in raw.items()}


def save_env(project: Path, name: str, variables: dict[str, str]) -> Path:
    """Write an environment file and return its path."""
    directory = envs_dir(project)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.yaml"
    path.write_text(
        yaml.safe_dump(dict(variables), sort_keys=False, allow_unicode=True),
        encoding="utf-8",
    )
    return path


def _find_env_file(project: Path, name: str) -> Path | None:
    for suffix in ENV_SUFFIXES:
        path = envs_dir(project) / f"{name}{suffix}"
        if path.is_file():
            return path
    return None


def _stringify(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
