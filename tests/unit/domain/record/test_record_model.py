from datetime import UTC, datetime, timedelta

import pydantic
import pytest

from vault.domain.record.model.aggregate import Record
from vault.domain.record.model.value import RecordId

CREATED = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)


class TestRecord:
    def test_updated_at_defaults_to_none(self):
        record = Record(id=RecordId(1), name="wifi", value="secret", created_at=CREATED)

        assert record.updated_at is None
        assert record.last_modified == CREATED

    def test_updated_at_before_created_at_is_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Record(
                id=RecordId(1),
                name="wifi",
                value="secret",
                created_at=CREATED,
                updated_at=CREATED - timedelta(seconds=1),
            )

    def test_record_is_immutable(self):
        record = Record(id=RecordId(1), name="wifi", value="secret", created_at=CREATED)

        with pytest.raises(pydantic.ValidationError):
            record.name = "other"  # type: ignore[misc]

    def test_last_modified_prefers_update_time(self):
        updated = CREATED + timedelta(hours=1)
        record = Record(
            id=RecordId(1), name="wifi", value="x", created_at=CREATED, updated_at=updated
        )

        assert record.last_modified == updated

    def test_document_uses_camel_case_and_omits_missing_update(self):
        record = Record(id=RecordId(7), name="wifi", value="secret", created_at=CREATED)

        assert record.to_document() == {
            "id": 7,
            "name": "wifi",
            "value": "secret",
            "createdAt": "2024-01-02T03:04:05Z",
        }
