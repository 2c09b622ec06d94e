"""Test configuration and fixtures for file-mapper."""

import logging

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo logging configuration installed by CLI tests."""
    logger = logging.getLogger("file_mapper")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_tree(tmp_path):
    """Root with a.txt (10 bytes) and b/c.txt (20 bytes)."""
    (tmp_path / "a.txt").write_bytes(b"x" * 10)
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "c.txt").write_bytes(b"y" * 20)
    return tmp_path


DEEP_TREE_LEVELS = 600


@pytest.fixture
def deep_tree(tmp_path):
    """A chain of directories named "d" ending in leaf.txt (5 bytes), with its length."""
    current = tmp_path
    for _ in range(DEEP_TREE_LEVELS):
        current = current / "d"
        current.mkdir()
    (current / "leaf.txt").write_bytes(b"l" * 5)
    return tmp_path, DEEP_TREE_LEVELS
