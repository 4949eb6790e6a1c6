# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Typed configuration wrapper for services."""

import os
from typing import Any, Dict

from .base import ConfigProvider
from .schema_loader import ConfigSchema, SchemaConfigLoader


class TypedConfig:
    """Read-only, attribute-only view of a loaded configuration.

    Example:
        >>> config = load_typed_config("gateway")
        >>> config.listen_port
        8080
        >>> config["listen_port"]
        TypeError: TypedConfig does not support dict-style access
    """

    def __init__(self, config_dict: Dict[str, Any], schema_version: str | None = None):
        object.__setattr__(self, "_config", dict(config_dict))
        object.__setattr__(self, "_schema_version", schema_version)

    def get_schema_version(self) -> str | None:
        """Get the schema version the configuration was loaded with."""
        return object.__getattribute__(self, "_schema_version")

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

        config = object.__getattribute__(self, "_config")
        if name not in config:
            raise AttributeError(
                f"Configuration key '{name}' not found. "
                f"Available keys: {sorted(config.keys())}"
            )
        return config[name]

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(
            f"Cannot modify configuration. '{name}' is read-only. "
            "Configuration is immutable after loading."
        )

    def __getitem__(self, key: str) -> Any:
        raise TypeError(
            f"TypedConfig does not support dict-style access (config['{key}']). "
            f"Use attribute-style instead: config.{key}"
        )

    def __repr__(self) -> str:
        config = object.__getattribute__(self, "_config")
        return f"TypedConfig({config!r})"

    def __dir__(self) -> list:
        config = object.__getattribute__(self, "_config")
        return sorted(config.keys())


def _find_schema_dir() -> str:
    schema_dir = os.environ.get("SCHEMA_DIR")
    if schema_dir:
        return schema_dir

    possible_dirs = [
        os.path.join(os.getcwd(), "documents", "schemas", "configs"),
        os.path.join(os.getcwd(), "..", "documents", "schemas", "configs"),
    ]
    for d in possible_dirs:
        if os.path.exists(d):
            return d

    return possible_dirs[0]


def load_typed_config(
    service_name: str,
    schema_dir: str | None = None,
    provider: ConfigProvider | None = None,
) -> TypedConfig:
    """Load and validate configuration, returning a typed config object.

    The schema is read from ``<schema_dir>/<service_name>.json``. When
    ``schema_dir`` is not given it comes from ``SCHEMA_DIR``, or from
    ``documents/schemas/configs`` in the working directory or its parent.

    Args:
        service_name: Name of the service
        schema_dir: Directory containing schema files
        provider: Source of raw values (defaults to the process environment)

    Returns:
        TypedConfig instance with validated configuration

    Raises:
        ConfigSchemaError: If schema is missing or invalid
        ConfigValidationError: If configuration validation fails
    """
    schema_path = os.path.join(schema_dir or _find_schema_dir(), f"{service_name}.json")
    schema = ConfigSchema.from_json_file(schema_path)

    config_dict = SchemaConfigLoader(schema=schema, provider=provider).load()

    return TypedConfig(config_dict, schema_version=schema.schema_version)
