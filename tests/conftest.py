"""Test configuration and fixtures for pretty_print."""

import logging

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging() so caplog sees records in every test."""
    yield
    logger = logging.getLogger("pretty_print")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def project(tmp_path, monkeypatch):
    """Create a small project tree and make it the current directory.

    Layout::

        README.md              (2 lines)
        Makefile               (no extension)
        setup.py
        .env
        docs/guide.md
        docs/logo.png
        build/out.js
        logs/server.log
        src/main.py
        src/util.js
        src/big.py             (1500 lines)
        src/__pycache__/main.cpython-312.pyc
        src/.cache/tmp.txt
        empty/
    """
    (tmp_path / "README.md").write_text("# Project\nDescription.\n")
    (tmp_path / "Makefile").write_text("all:\n\techo ok\n")
    (tmp_path / "setup.py").write_text("from setuptools import setup\nsetup()\n")
    (tmp_path / ".env").write_text("SECRET=1\n")

    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "guide.md").write_text("Guide\n")
    (tmp_path / "docs" / "logo.png").write_bytes(b"\x89PNG\r\n")

    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "out.js").write_text("console.log('built')\n")

    (tmp_path / "logs").mkdir()
    (tmp_path / "logs" / "server.log").write_text("started\n")

    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("def main():\n    print('hello')\n")
    (tmp_path / "src" / "util.js").write_text("export const x = 1;\n")
    (tmp_path / "src" / "big.py").write_text("x = 1\n" * 1500)
    (tmp_path / "src" / "__pycache__").mkdir()
    (tmp_path / "src" / "__pycache__" / "main.cpython-312.pyc").write_bytes(b"\x00\x01")
    (tmp_path / "src" / ".cache").mkdir()
    (tmp_path / "src" / ".cache" / "tmp.txt").write_text("cached\n")

    (tmp_path / "empty").mkdir()

    monkeypatch.chdir(tmp_path)
    return tmp_path
