# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Gateway service configuration.

Uses the steamgate_config adapter with the ``gateway`` schema
(documents/schemas/configs/gateway.json).
"""

from steamgate_config import ConfigProvider, TypedConfig, load_typed_config
from steamgate_logging import create_logger

logger = create_logger(logger_type="stdout", level="INFO", name="gateway.config")


def load_gateway_config(
    schema_dir: str | None = None,
    provider: ConfigProvider | None = None,
) -> TypedConfig:
    """Load gateway configuration from the environment.

    Args:
        schema_dir: Directory holding gateway.json (optional)
        provider: Source of raw values (defaults to the process environment)

    Returns:
        TypedConfig instance with validated configuration

    Example:
        >>> config = load_gateway_config()
        >>> config.public_base_url
        'http://localhost:8080'
    """
    config = load_typed_config("gateway", schema_dir=schema_dir, provider=provider)
    logger.info(
        "Gateway configuration loaded successfully",
        public_base_url=config.public_base_url,
        openid_endpoint=config.openid_endpoint,
    )
    return config
