from __future__ import annotations

from backup7z.core.archive_namer import ArchiveNamer
from backup7z.core.job_config import JobConfig


def test_name_embeds_job_timestamp_and_suffix() -> None:
    assert ArchiveNamer.name("myjob", "20240101_000000", "full") == "myjob-20240101_000000.full.7z"


def test_name_is_deterministic() -> None:
    first = ArchiveNamer.name("myjob", "20240101_000000", "diff")
    second = ArchiveNamer.name("myjob", "20240101_000000", "diff")

    assert first == second


def test_full_and_diff_share_captured_timestamp(sample_config: JobConfig) -> None:
    namer = ArchiveNamer()

    full = namer.full_archive(sample_config)
    diff = namer.diff_archive(sample_config)

    assert full == sample_config.target_dir / "myjob-20260216_010203.full.7z"
    assert diff == sample_config.target_dir / "myjob-20260216_010203.diff.7z"
