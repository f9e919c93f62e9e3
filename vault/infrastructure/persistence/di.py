from typing import AsyncIterable

from dishka import Provider, Scope, from_context, provide
from sqlalchemy.ext.asyncio import AsyncEngine

from vault.config import Config
from vault.domain.record.port.collection import RecordCollection
from vault.domain.record.service.identity import IdentityGenerator
from vault.infrastructure.persistence.collection import SqlRecordCollection
from vault.infrastructure.persistence.database import create_db_engine, create_schema


class PersistenceProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)

    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config.database)
        if config.database.auto_migrate:
            await create_schema(engine)
        yield engine
        await engine.dispose()

    collection = provide(
        SqlRecordCollection, scope=Scope.APP, provides=RecordCollection
    )

    # One generator per process so the id counter is shared
    identity_generator = provide(IdentityGenerator, scope=Scope.APP)
