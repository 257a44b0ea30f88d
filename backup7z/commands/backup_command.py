from __future__ import annotations

import shutil
import sys
import tempfile
from pathlib import Path

from ..core.base_pointer import BaseArchivePointer
from ..core.command_builder import CommandBuilder
from ..core.errors import ExternalToolError
from ..core.job_config import JobConfig
from ..core.mode_resolver import ModeResolver
from ..core.modes import Compression, ExecutionMode, RequestedMode
from ..core.protocols import ClockProtocol, SevenZipClientProtocol
from .base import Command


class BackupCommand(Command):
    def __init__(
        self,
        config: JobConfig,
        resolver: ModeResolver,
        pointer: BaseArchivePointer,
        sevenzip: SevenZipClientProtocol,
        clock: ClockProtocol,
        *,
        mode: RequestedMode = RequestedMode.AUTO,
        compression: Compression = Compression.FAST,
        builder: CommandBuilder | None = None,
    ) -> None:
        self._config = config
        self._resolver = resolver
        self._pointer = pointer
        self._sevenzip = sevenzip
        self._clock = clock
        self._mode = mode
        self._compression = compression
        self._builder = builder or CommandBuilder()

    def run(self) -> int:
        plan = self._resolver.resolve(self._config, self._mode, self._compression)
        target_dir = self._config.target_dir
        target_dir.mkdir(parents=True, exist_ok=True)
        log_file = target_dir / f"{self._config.job_name}-{self._config.timestamp}.log"

        print(f"Starting {plan.mode.value} backup of {self._config.job_name} at {self._clock.now_iso()}")
        print(f"Archive: {plan.output_path}")

        temp_root = Path(tempfile.mkdtemp(prefix="backup7z-"))
        try:
            include_list = self._write_list(temp_root / "include.lst", self._config.include_paths)
            exclude_list = None
            if self._config.exclude_patterns:
                exclude_list = self._write_list(
                    temp_root / "exclude.lst", self._config.exclude_patterns
                )
            args = self._builder.build(plan, include_list, exclude_list)
            shown = " ".join(CommandBuilder.mask([self._config.archiver, *args]))

            with log_file.open("w", encoding="utf-8") as handle:
                handle.write(f"Starting {plan.mode.value} backup at {self._clock.now_iso()}\n")
                handle.write(f"Command: {shown}\n")
                try:
                    process = self._sevenzip.run(args, capture_output=True)
                except ExternalToolError as exc:
                    handle.write(f"{exc}\n")
                    raise
                if process.stdout:
                    print(process.stdout, end="")
                    handle.write(process.stdout)
                if process.stderr:
                    print(process.stderr, end="", file=sys.stderr)
                    handle.write(process.stderr)
                if process.returncode != 0:
                    handle.write(f"7z failed with status {process.returncode}\n")
                    raise ExternalToolError(process.returncode)
                handle.write(f"Backup completed at {self._clock.now_iso()}\n")
        finally:
            shutil.rmtree(temp_root, ignore_errors=True)

        if plan.mode is ExecutionMode.NEW_FULL:
            if plan.output_path.is_file():
                self._pointer.write(self._config.job_name, plan.output_path.absolute())
                print(f"Base archive recorded: {plan.output_path}")
            else:
                print(
                    f"Archive {plan.output_path} not found; base pointer left unchanged.",
                    file=sys.stderr,
                )

        print(f"Backup completed at {self._clock.now_iso()}")
        print(f"Log written: {log_file}")
        return 0

    def _write_list(self, path: Path, entries: tuple[str, ...]) -> Path:
        path.write_text("\n".join(entries) + "\n", encoding="utf-8")
        return path
