"""Custom exceptions for configuration resolution."""


class ConfigurationError(Exception):
    """Base exception for fatal configuration errors."""

    pass


class PropertiesLoadError(ConfigurationError):
    """Raised when a settings file is missing, unreadable or malformed."""

    pass


class BaseDirectoryError(ConfigurationError):
    """Raised when a module base directory does not exist."""

    pass


class ModuleConfigFileError(ConfigurationError):
    """Raised when an explicitly referenced module settings file is missing."""

    pass


class CyclicModuleError(ConfigurationError):
    """Raised when module expansion revisits one of its ancestors."""

    pass


class PlaceholderCycleError(ConfigurationError):
    """Raised when placeholder substitution refers back to itself."""

    pass
