"""Shared pytest fixtures for the cwdswitch test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from fakes import FakeWorkingDirectoryGateway


@pytest.fixture(autouse=True)
def isolated_runtime(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point config and log files at a scratch area and reset cached state."""

    scratch = tmp_path_factory.mktemp("runtime")
    monkeypatch.setenv("CWDSWITCH_CONFIG", str(scratch / "config.toml"))

    import cwdswitch.ui.cli.args.parser as parser_module
    from cwdswitch.config import Config

    monkeypatch.setattr(parser_module, "DEFAULT_LOG_FILE", scratch / "cwdswitch.log", raising=True)
    Config.reset()

    try:
        yield None
    finally:
        Config.reset()
        app_logger = logging.getLogger("cwdswitch")
        for handler in list(app_logger.handlers):
            handler.close()
        app_logger.handlers.clear()


@pytest.fixture
def restore_cwd(monkeypatch: pytest.MonkeyPatch) -> Path:
    """Record the working directory so tests that switch it are undone."""

    current = Path.cwd()
    monkeypatch.chdir(current)
    return current


@pytest.fixture
def fake_gateway() -> FakeWorkingDirectoryGateway:
    """Provide a fake gateway starting in ``/home/build``."""

    return FakeWorkingDirectoryGateway()
