import logging
import os
import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_DESIGNATION_PATTERN = r".*\.feature:| #.*"

_ENV_KEYS = {
    "log_level": "GHERKIN_CONTEXT_LOG_LEVEL",
    "attribute_separator": "GHERKIN_CONTEXT_ATTRIBUTE_SEPARATOR",
    "designation_pattern": "GHERKIN_CONTEXT_DESIGNATION_PATTERN",
}


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    attribute_separator: str = ":"
    designation_pattern: str = DEFAULT_DESIGNATION_PATTERN


def _load_yaml(path: str) -> dict:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must hold a mapping: {p}")
    return data


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Defaults, then the YAML file (explicit path or GHERKIN_CONTEXT_CONFIG),
    then individual environment variables.
    """
    settings = Settings()

    path = path or os.getenv("GHERKIN_CONTEXT_CONFIG")
    if path:
        data = _load_yaml(path)
        known = {f.name for f in fields(Settings)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys in {path}: {unknown}")
        empty = sorted(k for k, v in data.items() if v is None or str(v) == "")
        if empty:
            raise ValueError(f"Config keys in {path} must not be empty: {empty}")
        settings = replace(settings, **{k: str(v) for k, v in data.items()})

    overrides = {}
    for name, env_key in _ENV_KEYS.items():
        value = os.getenv(env_key)
        if value:
            overrides[name] = value
    if overrides:
        settings = replace(settings, **overrides)

    try:
        re.compile(settings.designation_pattern)
    except re.error as e:
        raise ValueError(f"Invalid designation_pattern {settings.designation_pattern!r}: {e}") from e

    return settings


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
