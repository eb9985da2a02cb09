"""Configuration exceptions."""

from .base import LegalAssistantError


class ConfigurationError(LegalAssistantError):
    """Configuration or environment variable errors."""

    error_code = "LA_CFG_001"


class MissingAPIKeyError(ConfigurationError):
    """A required API key or endpoint URL is not configured."""

    error_code = "LA_CFG_002"


class InvalidConfigurationError(ConfigurationError):
    """A configuration value is invalid."""

    error_code = "LA_CFG_003"
