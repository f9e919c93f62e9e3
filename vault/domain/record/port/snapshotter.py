"""Snapshotter port - writes point-in-time backups of a record listing."""

from abc import abstractmethod
from pathlib import Path
from typing import Protocol, Sequence

from vault.domain.record.model.aggregate import Record


class Snapshotter(Protocol):

    @abstractmethod
    def snapshot(self, records: Sequence[Record]) -> Path | None:
        """Write ``records`` to a new snapshot file and return its path.

        Raises:
            BackupWriteError: If the directory or file cannot be written.
        """
        ...
