from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class JobConfig:
    job_name: str
    config_file: Path
    target_dir: Path
    include_paths: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    # None: not configured, "": encryption explicitly disabled
    password: str | None
    archiver: str
    timestamp: str
