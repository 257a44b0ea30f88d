from __future__ import annotations

import subprocess
from typing import Iterable

from .errors import ExternalToolError
from .job_config import JobConfig


# exit status a shell reports for a command it cannot run
NOT_RUNNABLE_STATUS = 127


class SevenZipClient:
    def __init__(self, config: JobConfig) -> None:
        self._config = config

    def run(
        self,
        args: Iterable[str],
        *,
        capture_output: bool = False,
    ) -> subprocess.CompletedProcess[str]:
        cmd = [self._config.archiver, *args]
        try:
            return subprocess.run(
                cmd,
                text=True,
                capture_output=capture_output,
                check=False,
            )
        except OSError as exc:
            raise ExternalToolError(
                NOT_RUNNABLE_STATUS,
                f"Cannot run archiver {self._config.archiver}: {exc.strerror or exc}",
            ) from exc
