from __future__ import annotations

from dataclasses import dataclass

from .modes import Compression, RequestedMode


@dataclass(frozen=True)
class RunOptions:
    config_path: str
    mode: RequestedMode = RequestedMode.AUTO
    compression: Compression = Compression.FAST
    password: str | None = None
    no_encryption: bool = False
    dry_run: bool = False

    @property
    def explicit_password(self) -> str | None:
        return "" if self.no_encryption else self.password
