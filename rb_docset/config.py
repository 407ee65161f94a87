"""Generator settings merged from a YAML file, RB_DOCSET_* variables and CLI options."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

TRUE_STRINGS = ("true", "1", "yes", "on")


@dataclass
class OutputConfig:
    scratch_dir: str = "/tmp/rb_docset"
    stub_prefix: str = "t"
    encoding_marker: str = "# -*- coding: utf-8 -*-"


@dataclass
class RendererConfig:
    enabled: bool = True
    command: str = "yard"
    args: list[str] = field(default_factory=lambda: ["doc"])
    output_dir: str = "doc"


@dataclass
class LoggingConfig:
    verbose: bool = False


@dataclass
class AppConfig:
    output: OutputConfig = field(default_factory=OutputConfig)
    renderer: RendererConfig = field(default_factory=RendererConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


ENV_KEYS: dict[str, str] = {
    "RB_DOCSET_SCRATCH_DIR": "output.scratch_dir",
    "RB_DOCSET_RENDERER": "renderer.command",
    "RB_DOCSET_RENDER": "renderer.enabled",
    "RB_DOCSET_VERBOSE": "logging.verbose",
}


def load_config(
    config_path: str | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Build the configuration; later sources win: YAML, then env vars, then CLI.

    ``cli_overrides`` uses dotted keys such as ``"renderer.command"``. A None
    value means the option was not given on the command line.
    """
    config = AppConfig()
    sources = (
        ("yaml", _read_yaml(config_path) if config_path else {}),
        ("env", {key: os.environ[name] for name, key in ENV_KEYS.items() if name in os.environ}),
        ("cli", cli_overrides or {}),
    )
    for source, values in sources:
        for key, value in values.items():
            if value is not None:
                _assign(config, key, value, source)
    return config


def _read_yaml(config_path: str) -> dict[str, Any]:
    """Flatten a YAML mapping of sections into dotted keys."""
    path = Path(config_path)
    if not path.is_file():
        logger.warning("Config file not found: %s, using defaults", config_path)
        return {}

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        logger.warning("Config file is not a valid YAML mapping: %s", config_path)
        return {}

    logger.info("Loaded config from %s", config_path)
    return {
        f"{section}.{name}": value
        for section, entries in data.items()
        if isinstance(entries, dict)
        for name, value in entries.items()
    }


def _assign(config: AppConfig, key: str, value: Any, source: str) -> None:
    section_name, _, field_name = key.partition(".")
    sections = {f.name for f in fields(config)}
    section = getattr(config, section_name) if field_name and section_name in sections else None
    if section is None:
        logger.debug("Ignoring unknown %s setting %s", source, key)
        return

    declared = {f.name: str(f.type) for f in fields(section)}
    if field_name not in declared:
        logger.debug("Ignoring unknown %s setting %s", source, key)
        return
    setattr(section, field_name, _convert(value, declared[field_name]))


def _convert(value: Any, declared_type: str) -> Any:
    if declared_type.startswith("bool"):
        if isinstance(value, str):
            return value.strip().lower() in TRUE_STRINGS
        return bool(value)
    if declared_type.startswith("list"):
        if isinstance(value, str):
            return value.split()
        return [str(item) for item in value]
    return value
