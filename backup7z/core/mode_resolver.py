from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .archive_namer import ArchiveNamer
from .base_pointer import BaseArchivePointer, PointerState, PointerStatus
from .errors import MissingBaseArchiveError
from .job_config import JobConfig
from .modes import Compression, ExecutionMode, RequestedMode
from .password_resolver import PasswordResolver


CREATE = "a"
UPDATE = "u"

# p: entry not matched on disk, q: deleted on disk, r: new on disk,
# x/y: archive copy newer/older, z: same, w: cannot tell.
UPDATE_FULL_OPTIONS = ("-up0q0r2x2y2z1w2",)
DIFFERENTIAL_UPDATE_SWITCH = "-up0q3r2x2y2z0w2"


@dataclass(frozen=True)
class ExecutionPlan:
    mode: ExecutionMode
    subcommand: str
    archive_path: Path
    output_path: Path
    update_options: tuple[str, ...]
    password: str
    compression: Compression
    target_dir: Path


class ModeResolver:
    def __init__(
        self,
        pointer: BaseArchivePointer,
        *,
        namer: ArchiveNamer | None = None,
        passwords: PasswordResolver | None = None,
    ) -> None:
        self._pointer = pointer
        self._namer = namer or ArchiveNamer()
        self._passwords = passwords or PasswordResolver()

    def resolve_mode(
        self,
        requested: RequestedMode,
        status: PointerStatus,
        job_name: str = "",
    ) -> ExecutionMode:
        if requested is RequestedMode.FULL_NEW:
            return ExecutionMode.NEW_FULL
        if requested is RequestedMode.AUTO:
            return ExecutionMode.DIFFERENTIAL if status.is_valid else ExecutionMode.NEW_FULL
        if requested is RequestedMode.FULL_UPDATE:
            target = ExecutionMode.UPDATE_FULL
        elif requested is RequestedMode.DIFF:
            target = ExecutionMode.DIFFERENTIAL
        else:
            raise ValueError(f"Unsupported mode: {requested}")

        if not status.is_valid:
            raise MissingBaseArchiveError(self._missing_message(target, status, job_name))
        return target

    def resolve(
        self,
        job: JobConfig,
        requested: RequestedMode,
        compression: Compression,
    ) -> ExecutionPlan:
        status = self._pointer.inspect(job.job_name)
        mode = self.resolve_mode(requested, status, job.job_name)

        base = status.archive
        if mode is ExecutionMode.NEW_FULL:
            output = self._namer.full_archive(job)
            archive = output
            subcommand = CREATE
            options: tuple[str, ...] = ()
        elif base is None:
            raise MissingBaseArchiveError(self._missing_message(mode, status, job.job_name))
        elif mode is ExecutionMode.UPDATE_FULL:
            archive = output = base
            subcommand = UPDATE
            options = UPDATE_FULL_OPTIONS
        else:
            archive = base
            output = self._namer.diff_archive(job)
            subcommand = UPDATE
            options = ("-u-", f"{DIFFERENTIAL_UPDATE_SWITCH}!{output}")

        return ExecutionPlan(
            mode=mode,
            subcommand=subcommand,
            archive_path=archive,
            output_path=output,
            update_options=options,
            password=self._passwords.resolve(job.password, archive.name),
            compression=compression,
            target_dir=job.target_dir,
        )

    def _missing_message(
        self,
        mode: ExecutionMode,
        status: PointerStatus,
        job_name: str,
    ) -> str:
        pointer_file = self._pointer.path_for(job_name)
        if status.state is PointerState.ABSENT:
            detail = f"no base archive recorded ({pointer_file} does not exist)"
        elif status.state is PointerState.EMPTY:
            detail = f"base pointer {pointer_file} is empty"
        else:
            detail = f"base archive {status.archive} recorded in {pointer_file} does not exist"
        return f"{mode.value} backup needs a full archive: {detail}"
