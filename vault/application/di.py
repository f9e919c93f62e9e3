from dishka import AsyncContainer, make_async_container

from vault.config import Config
from vault.domain.record.util.di import RecordProvider
from vault.infrastructure.backup.di import BackupProvider
from vault.infrastructure.event.di import EventProvider
from vault.infrastructure.persistence.di import PersistenceProvider


def create_container(config: Config | None = None) -> AsyncContainer:
    return make_async_container(
        PersistenceProvider(),
        EventProvider(),
        BackupProvider(),
        RecordProvider(),
        context={Config: config or Config()},
    )
