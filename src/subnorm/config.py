"""Load subnorm settings from a YAML file and SUBNORM_* environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .exchanges.protocol import Exchange
from .settings import Settings

DEFAULT_CONFIG_PATH = "subnorm.yml"

# Scalar environment overrides -> location in the settings document
ENV_FIELDS: dict[str, tuple[str, ...]] = {
    "SUBNORM_ENV": ("env",),
    "SUBNORM_ON_MALFORMED": ("normalization", "on_malformed"),
    "SUBNORM_OUTPUT_FORMAT": ("output", "format"),
}


def parse_exchange_list(raw: str) -> list[Exchange]:
    """Parse a comma-separated exchange list such as 'bitmex, Deribit'.

    Raises:
        ValueError: If a name is not a supported exchange
    """
    exchanges = []
    for name in raw.split(","):
        name = name.strip().lower()
        if not name:
            continue
        try:
            exchanges.append(Exchange(name))
        except ValueError:
            supported = ", ".join(e.value for e in Exchange)
            raise ValueError(
                f"Unknown exchange {name!r} in SUBNORM_EXCHANGES. Supported exchanges: {supported}"
            ) from None
    return exchanges


def _with_section(data: dict[str, Any], section: tuple[str, ...], value: Any) -> None:
    *parents, leaf = section
    for key in parents:
        child = data.get(key)
        if not isinstance(child, dict):
            child = {}
        else:
            child = dict(child)
        data[key] = child
        data = child
    data[leaf] = value


def _apply_env_overrides(data: Mapping[str, Any], environ: Mapping[str, str]) -> dict[str, Any]:
    merged = dict(data)

    exchanges = environ.get("SUBNORM_EXCHANGES")
    if exchanges is not None:
        merged["exchanges"] = [e.value for e in parse_exchange_list(exchanges)]

    for variable, section in ENV_FIELDS.items():
        value = environ.get(variable)
        if value is not None:
            _with_section(merged, section, value.strip())

    return merged


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}

    loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config root must be a mapping, got: {type(loaded)!r}")
    return loaded


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Build Settings from the config file, then environment overrides.

    The file defaults to SUBNORM_CONFIG or ./subnorm.yml; a missing file means
    defaults. SUBNORM_EXCHANGES takes a comma-separated list of exchanges to
    enable; SUBNORM_ENV, SUBNORM_ON_MALFORMED and SUBNORM_OUTPUT_FORMAT
    override the matching settings.

    Raises:
        ValueError: If the file or an override does not form valid settings
    """
    if config_path is None:
        config_path = os.environ.get("SUBNORM_CONFIG", DEFAULT_CONFIG_PATH)

    data = _apply_env_overrides(_read_config_file(Path(config_path)), os.environ)

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
