from dishka import Provider, Scope, provide

from vault.domain.record.service.repository import RecordRepository
from vault.domain.record.service.vault import VaultService


class RecordProvider(Provider):
    repository = provide(RecordRepository, scope=Scope.APP)
    vault_service = provide(VaultService, scope=Scope.APP)
