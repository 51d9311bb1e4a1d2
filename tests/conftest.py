"""Shared pytest fixtures for pathutil tests."""

import io
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_loguru() -> Generator[None, None, None]:
    """Drop sinks a test installed so they never outlive its streams."""
    yield
    logger.remove()


@pytest.fixture
def log_capture() -> Generator[io.StringIO, None, None]:
    """Capture loguru output to a string buffer."""
    string_io = io.StringIO()
    handler_id = logger.add(string_io, format="{level} {message}", level="TRACE")
    yield string_io
    logger.remove(handler_id)


@pytest.fixture
def bin_tree(tmp_path: Path) -> Path:
    """Create two bin directories with a tool in each and a plain file."""
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()

    tool = second / "tool"
    tool.write_text("#!/bin/sh\n")
    tool.chmod(0o755)

    data = first / "data.txt"
    data.write_text("data")
    data.chmod(0o644)

    plain = first / "tool-plain"
    plain.write_text("not executable")
    plain.chmod(0o644)

    return tmp_path


@pytest.fixture
def is_root() -> bool:
    """Root bypasses permission bits, which changes access() answers."""
    return hasattr(os, "geteuid") and os.geteuid() == 0
