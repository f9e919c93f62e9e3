"""Error hierarchy for the record vault.

Error layers:
- VaultError: Base class for all vault errors
- DomainError: Business rule violations, validation failures
- InfrastructureError: System-level failures like storage or backup issues

A missing record is not an error: repository and service lookups return None.
"""


class VaultError(Exception):
    """Base class for all vault errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (bad input - surfaced to the caller before any write)
# =============================================================================


class DomainError(VaultError):
    """Base class for domain/business errors."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


# =============================================================================
# Infrastructure Errors (system-level failures)
# =============================================================================


class InfrastructureError(VaultError):
    """Base class for infrastructure/system errors."""


class StorageUnavailableError(InfrastructureError):
    """Backing record store cannot be reached."""


class BackupWriteError(InfrastructureError):
    """A snapshot file could not be written."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message, code="BACKUP_WRITE_ERROR")
        self.path = path