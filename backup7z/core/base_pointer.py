from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


POINTER_SUFFIX = ".bakbase"


class PointerState(Enum):
    ABSENT = "absent"
    EMPTY = "empty"
    STALE = "stale"
    VALID = "valid"


@dataclass(frozen=True)
class PointerStatus:
    state: PointerState
    archive: Path | None = None

    @property
    def is_valid(self) -> bool:
        return self.state is PointerState.VALID


class BaseArchivePointer:
    """Records the last full archive of each job in ``<job>.bakbase``."""

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def path_for(self, job_name: str) -> Path:
        return self._directory / f"{job_name}{POINTER_SUFFIX}"

    def read(self, job_name: str) -> str | None:
        pointer_file = self.path_for(job_name)
        if not pointer_file.is_file():
            return None
        lines = pointer_file.read_text(encoding="utf-8").splitlines()
        return lines[0].strip() if lines else ""

    def write(self, job_name: str, archive_path: str | Path) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        self.path_for(job_name).write_text(f"{archive_path}\n", encoding="utf-8")

    def inspect(self, job_name: str) -> PointerStatus:
        value = self.read(job_name)
        if value is None:
            return PointerStatus(PointerState.ABSENT)
        if not value:
            return PointerStatus(PointerState.EMPTY)

        archive = Path(value).expanduser()
        if not archive.is_absolute():
            archive = self._directory / archive
        if not archive.is_file():
            return PointerStatus(PointerState.STALE, archive)
        return PointerStatus(PointerState.VALID, archive)
