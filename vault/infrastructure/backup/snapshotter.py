"""JSON file snapshots of the full record listing."""

import json
import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Callable, Sequence

from vault.domain.record.model.aggregate import Record
from vault.domain.record.port.snapshotter import Snapshotter
from vault.domain.shared.error import BackupWriteError

logger = logging.getLogger(__name__)

FILENAME_FORMAT = "backup_%Y-%m-%d_%H-%M-%S.json"


def snapshot_filename(now: datetime) -> str:
    """Sortable, second-granularity file name for a snapshot taken at ``now``."""
    return now.strftime(FILENAME_FORMAT)


def serialize_records(records: Sequence[Record]) -> str:
    return json.dumps([r.to_document() for r in records], indent=2, ensure_ascii=False)


class JsonFileSnapshotter(Snapshotter):
    """Writes each snapshot as a new pretty-printed JSON file.

    Content goes to a temporary file in the target directory and is then
    renamed into place, so a snapshot is never visible half-written. Two
    snapshots within the same second share a name; the later one wins.
    One attempt per call, no retries.
    """

    def __init__(
        self,
        directory: Path,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.directory = Path(directory)
        self._clock = clock

    def snapshot(self, records: Sequence[Record]) -> Path:
        path = self.directory / snapshot_filename(self._clock())
        content = serialize_records(records)

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.directory, prefix=".backup_", suffix=".tmp"
            )
        except OSError as e:
            raise BackupWriteError(
                f"Cannot prepare backup directory {self.directory}: {e}",
                path=str(self.directory),
            ) from e

        try:
            with open(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise BackupWriteError(f"Cannot write backup {path}: {e}", path=str(path)) from e

        logger.info(f"Backup created successfully: {path}")
        return path


class DisabledSnapshotter(Snapshotter):
    """Used when backups are switched off in configuration."""

    def snapshot(self, records: Sequence[Record]) -> None:
        logger.debug(f"Backups disabled, skipped snapshot of {len(records)} records")
        return None
