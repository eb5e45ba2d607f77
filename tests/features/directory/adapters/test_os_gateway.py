"""Tests for the local OS gateway driving ``DirectoryChanger`` end to end."""

from __future__ import annotations

import errno
import os
import sys
from pathlib import Path

import pytest

from cwdswitch.features.directory import ChangeFailure, ChangeSuccess, DirectoryChanger, FailureStage
from cwdswitch.features.directory.adapters import LocalWorkingDirectoryGateway

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission semantics")


@pytest.fixture
def changer(restore_cwd: Path) -> DirectoryChanger:
    _ = restore_cwd
    return DirectoryChanger(LocalWorkingDirectoryGateway())


def test_gateway_reads_and_sets_process_directory(tmp_path: Path, restore_cwd: Path) -> None:
    gateway = LocalWorkingDirectoryGateway()

    assert gateway.get_current_directory() == str(restore_cwd)
    gateway.set_current_directory(str(tmp_path))

    assert Path(os.getcwd()).resolve() == tmp_path.resolve()


def test_change_into_existing_directory(tmp_path: Path, changer: DirectoryChanger) -> None:
    """The previous directory is returned and the process moves."""

    before = os.getcwd()

    result = changer.change(str(tmp_path))

    assert result == ChangeSuccess(previous=before)
    assert Path(os.getcwd()).resolve() == tmp_path.resolve()


def test_round_trip_through_two_directories(tmp_path: Path, changer: DirectoryChanger) -> None:
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()

    _ = changer.change(str(first))
    step_two = changer.change(str(second))
    assert isinstance(step_two, ChangeSuccess)
    _ = changer.change(step_two.previous)

    assert Path(os.getcwd()).resolve() == first.resolve()


def test_missing_directory_leaves_cwd_unchanged(tmp_path: Path, changer: DirectoryChanger) -> None:
    before = os.getcwd()

    result = changer.change(str(tmp_path / "path" / "does" / "not" / "exist"))

    assert isinstance(result, ChangeFailure)
    assert result.message
    assert result.code == errno.ENOENT
    assert result.stage is FailureStage.TRANSITION
    assert os.getcwd() == before


def test_file_target_reports_not_a_directory(tmp_path: Path, changer: DirectoryChanger) -> None:
    regular_file = tmp_path / "notes.txt"
    _ = regular_file.write_text("hello", encoding="utf-8")

    result = changer.change(str(regular_file))

    assert isinstance(result, ChangeFailure)
    expected = errno.EINVAL if sys.platform == "win32" else errno.ENOTDIR
    assert result.code == expected


def test_empty_path_surfaces_os_error(changer: DirectoryChanger) -> None:
    before = os.getcwd()

    result = changer.change("")

    assert isinstance(result, ChangeFailure)
    assert result.code != 0
    assert os.getcwd() == before


@posix_only
def test_overlong_name_is_rejected_by_os(tmp_path: Path, changer: DirectoryChanger) -> None:
    result = changer.change(str(tmp_path / ("x" * 4096)))

    assert isinstance(result, ChangeFailure)
    assert result.code == errno.ENAMETOOLONG


def test_change_to_current_directory_is_a_no_op(changer: DirectoryChanger) -> None:
    current = os.getcwd()

    result = changer.change(current)

    assert result == ChangeSuccess(previous=current)
    assert os.getcwd() == current


@posix_only
@pytest.mark.skipif(
    hasattr(os, "geteuid") and os.geteuid() == 0,
    reason="root bypasses directory search permission",
)
def test_directory_without_search_permission(tmp_path: Path, changer: DirectoryChanger) -> None:
    locked = tmp_path / "locked"
    locked.mkdir()
    locked.chmod(0o600)
    before = os.getcwd()

    try:
        result = changer.change(str(locked))
    finally:
        locked.chmod(0o700)

    assert isinstance(result, ChangeFailure)
    assert result.code == errno.EACCES
    assert os.getcwd() == before


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="getcwd on a removed directory fails on Linux")
def test_removed_current_directory_is_a_query_failure(
    tmp_path: Path, changer: DirectoryChanger
) -> None:
    """With the current directory gone, nothing is switched."""

    doomed = tmp_path / "doomed"
    doomed.mkdir()
    os.chdir(doomed)
    doomed.rmdir()

    result = changer.change(str(tmp_path))

    assert isinstance(result, ChangeFailure)
    assert result.stage is FailureStage.QUERY
    assert result.code == errno.ENOENT
    with pytest.raises(FileNotFoundError):
        _ = os.getcwd()
