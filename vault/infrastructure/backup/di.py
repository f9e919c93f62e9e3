from dishka import Provider, Scope, provide

from vault.config import Config
from vault.domain.record.port.snapshotter import Snapshotter
from vault.infrastructure.backup.snapshotter import DisabledSnapshotter, JsonFileSnapshotter


class BackupProvider(Provider):
    @provide(scope=Scope.APP)
    def get_snapshotter(self, config: Config) -> Snapshotter:
        if not config.backup.enabled:
            return DisabledSnapshotter()
        return JsonFileSnapshotter(config.backup.directory)
