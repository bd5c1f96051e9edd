"""Custom exception hierarchy for the verification engine."""


class AgriVerifyError(Exception):
    """Base exception for all engine errors."""


class GatewayError(AgriVerifyError):
    """A reference record lookup failed."""


class ConfigurationError(AgriVerifyError):
    """Error in system configuration."""
