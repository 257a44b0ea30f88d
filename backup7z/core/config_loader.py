from __future__ import annotations

import os
from pathlib import Path

from .clock import Clock
from .config_store import ConfigStore
from .errors import ConfigValueError
from .job_config import JobConfig
from .protocols import ClockProtocol


DEFAULT_ARCHIVER = "7z"


class ConfigLoader:
    def __init__(
        self,
        *,
        store: ConfigStore | None = None,
        clock: ClockProtocol | None = None,
    ) -> None:
        self._store = store or ConfigStore()
        self._clock = clock or Clock()

    def load(self, config_path: str | Path, *, password: str | None = None) -> JobConfig:
        document = self._store.load(config_path)
        config_file = document.source.absolute()

        target_value = document.get("global", "BackupTargetDir")
        if not target_value:
            raise ConfigValueError(f"Missing [global] BackupTargetDir in {config_file}")

        include_paths = [
            str(self._resolve_path(value, config_file))
            for value in document.values("backupdirs")
        ]
        if not include_paths:
            raise ConfigValueError(f"No directories listed in [backupdirs] of {config_file}")

        if password is None:
            password = document.get("global", "Password")

        return JobConfig(
            job_name=config_file.stem,
            config_file=config_file,
            target_dir=self._resolve_path(target_value, config_file),
            include_paths=tuple(include_paths),
            exclude_patterns=tuple(document.values("exclude")),
            password=password,
            archiver=document.get("global", "SevenZip") or DEFAULT_ARCHIVER,
            timestamp=self._clock.timestamp(),
        )

    def _expand(self, value: str) -> str:
        return os.path.expanduser(os.path.expandvars(value))

    def _resolve_path(self, value: str, config_file: Path) -> Path:
        resolved = Path(self._expand(value))
        if not resolved.is_absolute():
            resolved = config_file.parent / resolved
        return resolved
