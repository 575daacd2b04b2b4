class ConfigurationError(Exception):
    """Raised when the verification code settings cannot be used as configured."""
