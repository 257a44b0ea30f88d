from __future__ import annotations

from pathlib import Path

import pytest

from backup7z.core.job_config import JobConfig


class FixedClock:
    def __init__(self) -> None:
        self._timestamp = "20260216_010203"
        self._iso = "2026-02-16T01:02:03Z"

    def now_iso(self) -> str:
        return self._iso

    def timestamp(self) -> str:
        return self._timestamp


class FakeEnvironment:
    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = values or {}

    def get(self, name: str) -> str | None:
        return self.values.get(name)


class FakeHost:
    def hostname(self) -> str:
        return "testhost"


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def sample_config(tmp_path: Path) -> JobConfig:
    source_a = tmp_path / "data" / "a"
    source_b = tmp_path / "data" / "b"
    source_a.mkdir(parents=True)
    source_b.mkdir(parents=True)
    target_dir = tmp_path / "archives"
    target_dir.mkdir()

    return JobConfig(
        job_name="myjob",
        config_file=tmp_path / "myjob.ini",
        target_dir=target_dir,
        include_paths=(str(source_a), str(source_b)),
        exclude_patterns=("*.tmp", "cache"),
        password=None,
        archiver="7z",
        timestamp="20260216_010203",
    )
