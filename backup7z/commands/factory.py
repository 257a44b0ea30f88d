from __future__ import annotations

from collections.abc import Callable

from ..core.base_pointer import BaseArchivePointer
from ..core.clock import Clock
from ..core.config_loader import ConfigLoader
from ..core.job_config import JobConfig
from ..core.mode_resolver import ModeResolver
from ..core.password_resolver import PasswordResolver
from ..core.protocols import ClockProtocol, SevenZipClientProtocol
from ..core.run_options import RunOptions
from ..core.sevenzip_client import SevenZipClient
from .backup_command import BackupCommand
from .base import Command
from .plan_command import PlanCommand


class CommandFactory:
    def __init__(
        self,
        *,
        config_loader: ConfigLoader | None = None,
        clock: ClockProtocol | None = None,
        passwords: PasswordResolver | None = None,
        sevenzip_client_factory: Callable[[JobConfig], SevenZipClientProtocol] | None = None,
    ) -> None:
        self._clock = clock or Clock()
        self._config_loader = config_loader or ConfigLoader(clock=self._clock)
        self._passwords = passwords or PasswordResolver()
        self._sevenzip_client_factory = sevenzip_client_factory or SevenZipClient

    def create(self, options: RunOptions) -> Command:
        config = self._config_loader.load(
            options.config_path,
            password=options.explicit_password,
        )
        pointer = BaseArchivePointer(config.target_dir)
        resolver = ModeResolver(pointer, passwords=self._passwords)

        if options.dry_run:
            return PlanCommand(
                config,
                resolver,
                mode=options.mode,
                compression=options.compression,
            )
        return BackupCommand(
            config,
            resolver,
            pointer,
            self._sevenzip_client_factory(config),
            self._clock,
            mode=options.mode,
            compression=options.compression,
        )
