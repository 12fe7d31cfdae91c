"""Custom exceptions for classweave."""


class ClassweaveError(Exception):
    """Base exception for all classweave errors."""

    pass


class RegistrationError(ClassweaveError):
    """Raised when a style operation cannot be registered."""

    pass


class UnknownConcernError(ClassweaveError, KeyError):
    """Raised when a concern name is not present in the registry."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class ScopeError(ClassweaveError):
    """Raised when the builder's modifier stack is misused."""

    pass


class ConfigError(ClassweaveError):
    """Raised when configuration is missing or invalid."""

    pass


class ParseError(ClassweaveError):
    """Raised when YAML parsing fails."""

    pass


class PageValidationError(ClassweaveError):
    """Raised when a page description does not validate."""

    pass
