"""Tests for the directory application service."""

from __future__ import annotations

import errno
import threading
from types import TracebackType

import pytest
from fakes import FakeWorkingDirectoryGateway

from cwdswitch.application.services import PROCESS_DIRECTORY_LOCK, DirectoryService
from cwdswitch.features.directory import ChangeFailure, ChangeSuccess, DirectoryChangeError
from cwdswitch.features.directory.adapters import LocalWorkingDirectoryGateway


class RecordingLock:
    """Context manager that records whether it was held during gateway calls."""

    def __init__(self) -> None:
        self.held: bool = False
        self.acquisitions: int = 0

    def __enter__(self) -> "RecordingLock":
        self.held = True
        self.acquisitions += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.held = False


class LockCheckingGateway(FakeWorkingDirectoryGateway):
    def __init__(self, lock: RecordingLock) -> None:
        super().__init__()
        self.lock: RecordingLock = lock
        self.held_during: list[bool] = []

    def get_current_directory(self) -> str:
        self.held_during.append(self.lock.held)
        return super().get_current_directory()

    def set_current_directory(self, path: str) -> None:
        self.held_during.append(self.lock.held)
        super().set_current_directory(path)


def test_default_service_uses_local_gateway() -> None:
    service = DirectoryService()

    assert isinstance(service.changer.gateway, LocalWorkingDirectoryGateway)


def test_change_without_lock(fake_gateway: FakeWorkingDirectoryGateway) -> None:
    service = DirectoryService(gateway=fake_gateway)

    assert service.change("/srv") == ChangeSuccess(previous="/home/build")


def test_lock_is_held_for_query_and_transition() -> None:
    lock = RecordingLock()
    gateway = LockCheckingGateway(lock)
    service = DirectoryService(gateway=gateway, lock=lock)

    result = service.change("/srv")

    assert result == ChangeSuccess(previous="/home/build")
    assert gateway.held_during == [True, True]
    assert lock.acquisitions == 1
    assert lock.held is False


def test_lock_is_released_on_failure() -> None:
    lock = RecordingLock()
    gateway = LockCheckingGateway(lock)
    gateway.refuse("/nope", errno.ENOTDIR)
    service = DirectoryService(gateway=gateway, lock=lock)

    result = service.change("/nope")

    assert isinstance(result, ChangeFailure)
    assert lock.held is False


def test_switched_holds_lock_for_whole_block() -> None:
    lock = RecordingLock()
    gateway = LockCheckingGateway(lock)
    service = DirectoryService(gateway=gateway, lock=lock)

    with service.switched("/srv") as previous:
        assert lock.held is True
        assert previous == "/home/build"

    assert gateway.cwd == "/home/build"
    assert all(gateway.held_during)
    assert lock.held is False


def test_switched_propagates_entry_failure(fake_gateway: FakeWorkingDirectoryGateway) -> None:
    fake_gateway.refuse("/missing")
    service = DirectoryService(gateway=fake_gateway)

    with pytest.raises(DirectoryChangeError):
        with service.switched("/missing"):
            pytest.fail("block must not run")


def test_run_in_returns_value(fake_gateway: FakeWorkingDirectoryGateway) -> None:
    service = DirectoryService(gateway=fake_gateway)

    assert service.run_in("/work", lambda: fake_gateway.cwd) == "/work"
    assert fake_gateway.cwd == "/home/build"


def test_serialized_shares_process_lock(fake_gateway: FakeWorkingDirectoryGateway) -> None:
    first = DirectoryService.serialized(gateway=fake_gateway)
    second = DirectoryService.serialized(gateway=fake_gateway)
    blocked = threading.Event()

    def try_acquire() -> None:
        if PROCESS_DIRECTORY_LOCK.acquire(timeout=0.05):
            PROCESS_DIRECTORY_LOCK.release()
        else:
            blocked.set()

    with first.switched("/srv"):
        # Re-entrant for this thread, exclusive against others.
        worker = threading.Thread(target=try_acquire)
        worker.start()
        worker.join()
        assert second.change("/srv/inner") == ChangeSuccess(previous="/srv")

    assert blocked.is_set()
    assert fake_gateway.cwd == "/home/build"
