class ShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shortener_error'


class InvalidInputError(ShortenerError):
    """Raised when a request carries malformed data (empty domain, non-absolute URL, ...)."""

    error_code = 'app:invalid_input_error'


class GenerationExhaustedError(ShortenerError):
    """Raised when no unused shortcode could be acquired within the attempt bound.

    Transient: clients are expected to retry later.
    """

    error_code = 'app:generation_exhausted_error'


class ConfigurationError(ShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError, KeyError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
