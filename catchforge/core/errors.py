"""Exception hierarchy for catchforge.

Core operations raise these; only the CLI turns them into messages
and exit codes.
"""


class CatchForgeError(Exception):
    """Base class for all catchforge errors."""

    pass


class PreconditionError(CatchForgeError):
    """Raised when the target class is not an exception handler container."""

    pass


class InvalidIdentifierError(CatchForgeError, ValueError):
    """Raised when a class, method, package or type name is not valid Java."""

    pass


class PrecedenceError(CatchForgeError, ValueError):
    """Raised for a non-canonical precedence value under the strict policy."""

    pass


class ImportConflictError(CatchForgeError):
    """Raised when an import would shadow a different type with the same short name."""

    def __init__(self, name: str, existing: str, requested: str):
        self.name = name
        self.existing = existing
        self.requested = requested
        super().__init__(
            f"Import conflict for {name}: {existing} is already imported, "
            f"cannot also import {requested}"
        )


class NotAJavaClassError(CatchForgeError):
    """Raised when a Java source file does not declare a top-level class."""

    pass


class ConfigurationError(CatchForgeError):
    """Raised when configuration loading or validation fails."""

    pass
