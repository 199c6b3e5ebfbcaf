"""Tests for probe discovery."""

import os

import pytest

from check_engine.probes.discovery import discover_probes


def test_missing_directory_returns_empty(tmp_path):
    assert discover_probes(tmp_path / "nope") == []


def test_empty_directory_returns_empty(probe_dir):
    assert discover_probes(probe_dir) == []


def test_file_instead_of_directory_returns_empty(tmp_path):
    f = tmp_path / "probe"
    f.write_text("x")
    assert discover_probes(f) == []


def test_recursive_walk_includes_hidden(make_probe, probe_dir):
    """Hidden files and hidden directories are probes too."""
    make_probe("a")
    make_probe(".hidden")
    make_probe(".dotdir/inner")
    make_probe("sub/deeper/c")

    found = discover_probes(probe_dir)

    assert {p.relative_to(probe_dir).as_posix() for p in found} == {
        "a",
        ".hidden",
        ".dotdir/inner",
        "sub/deeper/c",
    }


def test_order_is_deterministic(make_probe, probe_dir):
    """Files sorted per directory, then subdirectories in sorted order."""
    make_probe("z")
    make_probe("b/two")
    make_probe("b/one")
    make_probe("a/x")
    make_probe("m")

    found = [p.relative_to(probe_dir).as_posix() for p in discover_probes(probe_dir)]

    assert found == ["m", "z", "a/x", "b/one", "b/two"]


def test_directories_are_not_probes(make_probe, probe_dir):
    (probe_dir / "empty-subdir").mkdir()
    make_probe("only")

    found = discover_probes(probe_dir)

    assert found == [probe_dir / "only"]


def test_includes_non_executable_files(make_probe, probe_dir):
    """Execute permission is checked at run time, not at discovery."""
    make_probe("noexec", executable=False)
    assert discover_probes(probe_dir) == [probe_dir / "noexec"]


def test_symlink_to_file_is_kept(make_probe, probe_dir, tmp_path):
    target = tmp_path / "real-probe"
    target.write_text("#!/bin/sh\nexit 0\n")
    (probe_dir / "link").symlink_to(target)

    assert discover_probes(probe_dir) == [probe_dir / "link"]


def test_dangling_symlink_is_skipped(probe_dir, tmp_path):
    (probe_dir / "broken").symlink_to(tmp_path / "does-not-exist")
    assert discover_probes(probe_dir) == []


def test_symlinked_directory_not_descended(make_probe, probe_dir, tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "probe").write_text("#!/bin/sh\nexit 0\n")
    (probe_dir / "linked-dir").symlink_to(outside, target_is_directory=True)
    make_probe("inside")

    assert discover_probes(probe_dir) == [probe_dir / "inside"]


@pytest.mark.skipif(os.geteuid() == 0, reason="root can read any directory")
def test_unreadable_subdirectory_is_skipped(make_probe, probe_dir):
    make_probe("ok")
    make_probe("locked/hidden-probe")
    locked = probe_dir / "locked"
    locked.chmod(0o000)
    try:
        found = discover_probes(probe_dir)
    finally:
        locked.chmod(0o755)

    assert found == [probe_dir / "ok"]


def test_walk_errors_do_not_abort(make_probe, probe_dir, monkeypatch):
    """An error reported by os.walk is logged and the walk continues."""
    make_probe("a")
    real_walk = os.walk

    def flaky_walk(top, onerror=None, **kwargs):
        onerror(PermissionError(13, "Permission denied", str(probe_dir / "gone")))
        yield from real_walk(top, onerror=onerror, **kwargs)

    monkeypatch.setattr("check_engine.probes.discovery.os.walk", flaky_walk)

    assert discover_probes(probe_dir) == [probe_dir / "a"]
