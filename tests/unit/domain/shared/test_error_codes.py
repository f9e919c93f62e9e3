from vault.domain.shared.error import (
    BackupWriteError,
    DomainError,
    InfrastructureError,
    StorageUnavailableError,
    ValidationError,
    VaultError,
)


class TestErrorCodes:
    def test_default_code_is_class_name(self):
        assert StorageUnavailableError("down").code == "StorageUnavailableError"

    def test_validation_error_carries_field(self):
        error = ValidationError("bad", field="name")

        assert error.code == "VALIDATION_ERROR"
        assert error.field == "name"
        assert isinstance(error, DomainError)

    def test_backup_error_is_infrastructure(self):
        error = BackupWriteError("disk full", path="/tmp/x.json")

        assert isinstance(error, InfrastructureError)
        assert isinstance(error, VaultError)
        assert error.path == "/tmp/x.json"
        assert str(error) == "disk full"
