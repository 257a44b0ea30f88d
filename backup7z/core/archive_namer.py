from __future__ import annotations

from pathlib import Path

from .job_config import JobConfig


ARCHIVE_EXTENSION = "7z"
FULL_SUFFIX = "full"
DIFF_SUFFIX = "diff"


class ArchiveNamer:
    @staticmethod
    def name(job_name: str, timestamp: str, suffix: str) -> str:
        return f"{job_name}-{timestamp}.{suffix}.{ARCHIVE_EXTENSION}"

    def full_archive(self, job: JobConfig) -> Path:
        return job.target_dir / self.name(job.job_name, job.timestamp, FULL_SUFFIX)

    def diff_archive(self, job: JobConfig) -> Path:
        return job.target_dir / self.name(job.job_name, job.timestamp, DIFF_SUFFIX)
