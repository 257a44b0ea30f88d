from __future__ import annotations

from pathlib import Path

from ..core.command_builder import CommandBuilder
from ..core.job_config import JobConfig
from ..core.mode_resolver import ModeResolver
from ..core.modes import Compression, RequestedMode
from .base import Command


class PlanCommand(Command):
    """Prints what a backup run would do without running 7z."""

    def __init__(
        self,
        config: JobConfig,
        resolver: ModeResolver,
        *,
        mode: RequestedMode = RequestedMode.AUTO,
        compression: Compression = Compression.FAST,
        builder: CommandBuilder | None = None,
    ) -> None:
        self._config = config
        self._resolver = resolver
        self._mode = mode
        self._compression = compression
        self._builder = builder or CommandBuilder()

    def run(self) -> int:
        plan = self._resolver.resolve(self._config, self._mode, self._compression)
        exclude_list = Path("<exclude.lst>") if self._config.exclude_patterns else None
        args = self._builder.build(plan, Path("<include.lst>"), exclude_list)

        print(f"Job: {self._config.job_name}")
        print(f"Mode: {plan.mode.value}")
        print(f"Archive: {plan.output_path}")
        print(f"Encryption: {'on' if plan.password else 'off'}")
        print("Include:")
        for path in self._config.include_paths:
            print(f"  {path}")
        if self._config.exclude_patterns:
            print("Exclude:")
            for pattern in self._config.exclude_patterns:
                print(f"  {pattern}")
        print("Command: " + " ".join(CommandBuilder.mask([self._config.archiver, *args])))
        return 0
