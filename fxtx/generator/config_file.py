"""Generator configuration file loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from fxtx.exceptions import ConfigLoadError
from fxtx.generator.models import GeneratorConfig, GeneratorSpec

logger = logging.getLogger(__name__)


def _accepted_keys(model: type[BaseModel]) -> set[str]:
    keys = set()
    for name, field_info in model.model_fields.items():
        keys.add(name)
        if field_info.alias:
            keys.add(field_info.alias)
    return keys


def _warn_unknown_keys(loaded: dict[str, Any], path: str | Path) -> None:
    """Log configuration keys that the schema ignores."""
    unknown = sorted(str(key) for key in loaded.keys() - _accepted_keys(GeneratorConfig))

    generators = loaded.get("generators")
    if isinstance(generators, list):
        generator_keys = _accepted_keys(GeneratorSpec)
        for position, entry in enumerate(generators):
            if isinstance(entry, dict):
                extra_keys = sorted(str(key) for key in entry.keys() - generator_keys)
                unknown.extend(f"generators[{position}].{key}" for key in extra_keys)

    for key in unknown:
        logger.warning("Ignoring unknown config key", extra={"config_file": str(path), "config_key": key})


def load_generator_config(path: str | Path) -> GeneratorConfig:
    """Load and validate a YAML generator configuration file.

    Args:
        path: Location of the YAML file.

    Returns:
        Validated generator configuration.

    Raises:
        ConfigLoadError: If the file is missing, is not valid YAML, or does
            not match the configuration schema.
    """
    logger.info("Loading configuration", extra={"config_file": str(path)})

    try:
        with open(path, encoding="utf-8") as config_file:
            loaded = yaml.safe_load(config_file)
    except OSError as error:
        raise ConfigLoadError(f"unable to read config file: {error}", path=str(path)) from error
    except yaml.YAMLError as error:
        raise ConfigLoadError(f"invalid YAML in config file: {error}", path=str(path)) from error

    if loaded is None:
        loaded = {}

    if not isinstance(loaded, dict):
        raise ConfigLoadError(
            f"config file must contain a mapping, got {type(loaded).__name__}",
            path=str(path),
        )

    _warn_unknown_keys(loaded, path)

    try:
        return GeneratorConfig.model_validate(loaded)
    except ValidationError as error:
        raise ConfigLoadError(
            f"config file does not match schema: {error}",
            path=str(path),
            context={"error_count": error.error_count()},
        ) from error
