from __future__ import annotations

import subprocess
from typing import Iterable, Protocol


class SevenZipClientProtocol(Protocol):
    def run(
        self,
        args: Iterable[str],
        *,
        capture_output: bool = False,
    ) -> subprocess.CompletedProcess[str]:
        ...


class ClockProtocol(Protocol):
    def now_iso(self) -> str:
        ...

    def timestamp(self) -> str:
        ...


class EnvironmentProtocol(Protocol):
    def get(self, name: str) -> str | None:
        ...


class HostProtocol(Protocol):
    def hostname(self) -> str:
        ...
