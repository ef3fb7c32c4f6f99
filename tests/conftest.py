"""
Shared pytest fixtures for hashtool tests.

- Every test starts with a fresh service container and no HASHTOOL_*
  environment variables, inside an empty working directory.
- override_service: Swap a service in the container before the CLI resolves it
- hash_cli: Helper to run the CLI via subprocess (``python -m hashtool``)
"""

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest
from dependency_injector import providers

from hashtool.core import bootstrap as bootstrap_module
from hashtool.core.container import get_container


@pytest.fixture(autouse=True)
def clean_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Isolate each test from user config, env vars and global state."""
    for key in list(os.environ):
        if key.startswith("HASHTOOL_"):
            monkeypatch.delenv(key)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    bootstrap_module.reset()
    yield workdir
    bootstrap_module.reset()


def _run_hash_cmd(*args: str, cwd: Path, check: bool = True) -> subprocess.CompletedProcess:
    """Run the hash command using the current Python interpreter."""
    result = subprocess.run(
        [sys.executable, "-m", "hashtool", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
    )
    if check and result.returncode != 0:
        raise subprocess.CalledProcessError(
            result.returncode,
            [sys.executable, "-m", "hashtool", *args],
            result.stdout,
            result.stderr,
        )
    return result


@pytest.fixture
def hash_cli(clean_environment: Path) -> Callable[..., subprocess.CompletedProcess]:
    """
    Return a helper that runs ``python -m hashtool`` in the test workdir.

    Usage:
        result = hash_cli("-q", "--text", "abc")
        result = hash_cli("--file", "missing", check=False)
    """

    def _run(*args: str, check: bool = True) -> subprocess.CompletedProcess:
        return _run_hash_cmd(*args, cwd=clean_environment, check=check)

    return _run


@pytest.fixture
def override_service() -> Callable[[type, object], None]:
    """
    Return a helper that installs a fixed instance for a service interface.

    Bootstrap keeps services that are already registered, so an override
    made before invoking the CLI is what the run resolves.

    Usage:
        override_service(IByteSource, MemoryByteSource({"a.bin": b"abc"}))
    """

    def _override(interface: type, instance: object) -> None:
        get_container().override(interface, providers.Object(instance))

    return _override
