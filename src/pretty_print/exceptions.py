class PrettyPrintError(Exception):
    """Base class for all errors raised by pretty_print."""


class ConfigurationError(PrettyPrintError, ValueError):
    """
    Exception raised when the requested options cannot be combined or are invalid.

    Configuration errors are detected while the immutable configuration is built, i.e.
    before any filesystem work begins. The CLI reports them together with the usage text
    and exits with status 1.

    Example:
        >>> error = ConfigurationError("Cannot specify both whitelist and blacklist")
        >>> str(error)
        'Cannot specify both whitelist and blacklist'
        >>> isinstance(error, ValueError)
        True
    """

    pass
