"""Runs a vault operation inside a freshly built container."""

import asyncio
import logging
import sys
from typing import Awaitable, Callable, TypeVar

from vault.application.di import create_container
from vault.cli.console import get_console
from vault.config import Config, configure_logging
from vault.domain.record.service.vault import VaultService
from vault.domain.shared.error import (
    InfrastructureError,
    StorageUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Operation = Callable[[VaultService, Config], Awaitable[T]]


async def _execute(operation: Operation[T], config: Config) -> T:
    container = create_container(config)
    try:
        service = await container.get(VaultService)
        return await operation(service, config)
    finally:
        await container.close()


def run(operation: Operation[T], config: Config | None = None) -> T:
    """Run ``operation`` against the vault, exiting 1 on vault errors."""
    config = config or Config()
    configure_logging(config.logging)
    console = get_console()

    try:
        return asyncio.run(_execute(operation, config))
    except ValidationError as e:
        console.error(e.message)
        sys.exit(1)
    except StorageUnavailableError as e:
        console.error(
            e.message,
            hint="Is the database reachable? Check VAULT_DATABASE__URL.",
        )
        sys.exit(1)
    except InfrastructureError as e:
        logger.debug(f"Infrastructure failure: {e.code}")
        console.error(e.message)
        sys.exit(1)
