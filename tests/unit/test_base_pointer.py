from __future__ import annotations

from pathlib import Path

from backup7z.core.base_pointer import BaseArchivePointer, PointerState


def test_write_then_read_round_trips(tmp_path: Path) -> None:
    pointer = BaseArchivePointer(tmp_path)
    archive = tmp_path / "myjob-20240101_000000.full.7z"

    pointer.write("myjob", archive)

    assert pointer.read("myjob") == str(archive)
    assert pointer.path_for("myjob") == tmp_path / "myjob.bakbase"


def test_write_overwrites_previous_value(tmp_path: Path) -> None:
    pointer = BaseArchivePointer(tmp_path)

    pointer.write("myjob", "first.7z")
    pointer.write("myjob", "second.7z")

    assert (tmp_path / "myjob.bakbase").read_text(encoding="utf-8") == "second.7z\n"


def test_write_creates_missing_directory(tmp_path: Path) -> None:
    pointer = BaseArchivePointer(tmp_path / "nested" / "archives")

    pointer.write("myjob", "a.7z")

    assert pointer.read("myjob") == "a.7z"


def test_read_returns_first_line_trimmed(tmp_path: Path) -> None:
    (tmp_path / "myjob.bakbase").write_text("  /srv/a.7z  \n/srv/b.7z\n", encoding="utf-8")

    assert BaseArchivePointer(tmp_path).read("myjob") == "/srv/a.7z"


def test_read_returns_none_without_pointer_file(tmp_path: Path) -> None:
    assert BaseArchivePointer(tmp_path).read("myjob") is None


def test_inspect_reports_absent(tmp_path: Path) -> None:
    status = BaseArchivePointer(tmp_path).inspect("myjob")

    assert status.state is PointerState.ABSENT
    assert not status.is_valid


def test_inspect_reports_empty_pointer(tmp_path: Path) -> None:
    (tmp_path / "myjob.bakbase").write_text("\n", encoding="utf-8")

    status = BaseArchivePointer(tmp_path).inspect("myjob")

    assert status.state is PointerState.EMPTY
    assert status.archive is None


def test_inspect_reports_stale_pointer(tmp_path: Path) -> None:
    pointer = BaseArchivePointer(tmp_path)
    pointer.write("myjob", tmp_path / "gone.full.7z")

    status = pointer.inspect("myjob")

    assert status.state is PointerState.STALE
    assert status.archive == tmp_path / "gone.full.7z"


def test_inspect_resolves_relative_pointer_against_directory(tmp_path: Path) -> None:
    archive = tmp_path / "myjob-20240101_000000.full.7z"
    archive.write_bytes(b"7z")
    pointer = BaseArchivePointer(tmp_path)
    pointer.write("myjob", archive.name)

    status = pointer.inspect("myjob")

    assert status.is_valid
    assert status.archive == archive
