# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Schema-driven configuration loader with validation."""

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict

from .base import ConfigProvider
from .env_provider import EnvConfigProvider

FIELD_TYPES = ("string", "int", "float", "bool")


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


class ConfigSchemaError(Exception):
    """Exception raised when schema is invalid or missing."""
    pass


@dataclass
class FieldSpec:
    """Specification for a single configuration field."""
    name: str
    field_type: str = "string"
    required: bool = False
    default: Any = None
    env_var: str | None = None
    description: str | None = None

    @property
    def key(self) -> str:
        """Environment variable holding the field's value."""
        return self.env_var or self.name.upper()


@dataclass
class ConfigSchema:
    """Configuration schema for a service."""
    service_name: str
    fields: Dict[str, FieldSpec] = field(default_factory=dict)
    schema_version: str | None = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfigSchema":
        """Create ConfigSchema from dictionary.

        Args:
            data: Schema data as dictionary

        Returns:
            ConfigSchema instance

        Raises:
            ConfigSchemaError: If a field declares an unsupported type
        """
        fields = {}
        for field_name, field_data in data.get("fields", {}).items():
            field_type = field_data.get("type", "string")
            if field_type not in FIELD_TYPES:
                raise ConfigSchemaError(
                    f"Field '{field_name}' has unsupported type '{field_type}'. "
                    f"Must be one of: {', '.join(FIELD_TYPES)}"
                )
            fields[field_name] = FieldSpec(
                name=field_name,
                field_type=field_type,
                required=field_data.get("required", False),
                default=field_data.get("default"),
                env_var=field_data.get("env_var"),
                description=field_data.get("description"),
            )

        return cls(
            service_name=data.get("service_name", "unknown"),
            fields=fields,
            schema_version=data.get("schema_version"),
        )

    @classmethod
    def from_json_file(cls, filepath: str) -> "ConfigSchema":
        """Load schema from JSON file.

        Args:
            filepath: Path to JSON schema file

        Returns:
            ConfigSchema instance

        Raises:
            ConfigSchemaError: If schema file is invalid or missing
        """
        if not os.path.exists(filepath):
            raise ConfigSchemaError(f"Schema file not found: {filepath}")

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigSchemaError(f"Invalid JSON in schema file {filepath}: {e}") from e

        return cls.from_dict(data)


class SchemaConfigLoader:
    """Loads and validates configuration based on schema."""

    def __init__(self, schema: ConfigSchema, provider: ConfigProvider | None = None):
        """Initialize the schema config loader.

        Args:
            schema: Configuration schema
            provider: Source of raw values (defaults to the process environment)
        """
        self.schema = schema
        self.provider = provider or EnvConfigProvider()

    def load(self) -> Dict[str, Any]:
        """Load and validate configuration based on schema.

        Returns:
            Validated configuration dictionary

        Raises:
            ConfigValidationError: If required fields are missing
        """
        config = {}
        errors = []

        for field_name, field_spec in self.schema.fields.items():
            value = self._load_field(field_spec)
            if value is None and field_spec.required:
                errors.append(f"{field_name}: required field is missing (env: {field_spec.key})")
                continue
            config[field_name] = value

        if errors:
            raise ConfigValidationError(
                f"Configuration validation failed for {self.schema.service_name}:\n" +
                "\n".join(f"  - {err}" for err in errors)
            )

        return config

    def _load_field(self, field_spec: FieldSpec) -> Any:
        key = field_spec.key

        if field_spec.field_type == "bool":
            return self.provider.get_bool(key, field_spec.default if field_spec.default is not None else False)
        elif field_spec.field_type == "int":
            return self.provider.get_int(key, field_spec.default if field_spec.default is not None else 0)
        elif field_spec.field_type == "float":
            return self.provider.get_float(key, field_spec.default if field_spec.default is not None else 0.0)
        else:
            return self.provider.get(key, field_spec.default)
