import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "endpoint-reaper.toml"
CONFIG_ENV_VAR = "ENDPOINT_REAPER_CONFIG"


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of `endpoint-reaper.toml`."""

    az_executable: str
    timeout_seconds: float | None
    strict_probes: bool

    @staticmethod
    def defaults() -> "LoadedConfig":
        return LoadedConfig(az_executable="az", timeout_seconds=None, strict_probes=False)


def resolve_config_path(cwd: Path) -> Path:
    """Return the config file path: $ENDPOINT_REAPER_CONFIG, else ./endpoint-reaper.toml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return cwd / CONFIG_FILENAME


def load_config(cfg_path: Path) -> LoadedConfig:
    """Load the config file if present; otherwise return defaults.

    Example config:
      [azure]
      executable = "/usr/bin/az"
      timeout_seconds = 600

      [probes]
      strict = true
    """
    if not cfg_path.exists():
        return LoadedConfig.defaults()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise click.ClickException(f"Invalid TOML in {cfg_path}: {e}") from e

    azure = _section(data, "azure", cfg_path)
    probes = _section(data, "probes", cfg_path)

    executable = _typed(azure, "executable", str, cfg_path, "azure") or "az"
    timeout = _typed(azure, "timeout_seconds", (int, float), cfg_path, "azure")
    strict = _typed(probes, "strict", bool, cfg_path, "probes")
    if timeout is not None and timeout <= 0:
        raise click.ClickException(
            f"Invalid value for 'azure.timeout_seconds' in {cfg_path}: must be positive"
        )

    return LoadedConfig(
        az_executable=executable,
        timeout_seconds=float(timeout) if timeout is not None else None,
        strict_probes=bool(strict),
    )


def _section(data: dict[str, Any], name: str, cfg_path: Path) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise click.ClickException(f"Invalid section '[{name}]' in {cfg_path}: expected a table")
    return section


def _typed(
    table: dict[str, Any],
    key: str,
    expected: type | tuple[type, ...],
    cfg_path: Path,
    section: str,
) -> Any:
    value = table.get(key)
    if value is None:
        return None
    # bool is an int subclass; don't accept it as a number
    if isinstance(value, bool) and expected is not bool:
        raise click.ClickException(f"Invalid value for '{section}.{key}' in {cfg_path}")
    if not isinstance(value, expected):
        raise click.ClickException(f"Invalid value for '{section}.{key}' in {cfg_path}")
    return value
