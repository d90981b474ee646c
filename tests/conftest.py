import errno
import ntpath
import posixpath
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest

from envkit.system import FsRuntime, SystemContext


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without real I/O")
    config.addinivalue_line("markers", "integration: tests using the real filesystem")
    config.addinivalue_line("markers", "unix_only: tests relying on POSIX permissions")


@dataclass
class FakeStat:
    st_mode: Optional[int]
    st_uid: Optional[int] = 1000
    st_gid: Optional[int] = 1000


@dataclass
class FakeDirEntry:
    name: str


class FakeScandir:
    def __init__(self, fs: "FakeFs", names: List[str]):
        self.fs = fs
        self.names = names

    def __enter__(self):
        self.fs.open_handles += 1
        return iter([FakeDirEntry(name) for name in self.names])

    def __exit__(self, *exc_info):
        self.fs.open_handles -= 1
        return False


class FakeFs(FsRuntime):
    """
    In-memory filesystem keyed by directory, for fabricated hosts.
    """

    def __init__(self, windows: bool = False, cwd: str = "/home/u/proj"):
        super().__init__()
        self.pathmod = ntpath if windows else posixpath
        self.directories: Dict[str, List[str]] = {}
        self.files: Dict[str, FakeStat] = {}
        self.errors: Dict[str, OSError] = {}
        self.current = cwd
        self.open_handles = 0
        self.stat_calls: List[str] = []

    def add_dir(self, directory: str, entries: Dict[str, FakeStat]) -> "FakeFs":
        self.directories[directory] = list(entries)
        for name, st in entries.items():
            self.files[self.pathmod.join(directory, name)] = st
        return self

    def fail(self, path: str, error: OSError) -> "FakeFs":
        self.errors[path] = error
        return self

    def cwd(self) -> str:
        return self.current

    def stat(self, path):
        self.stat_calls.append(path)
        if path in self.errors:
            raise self.errors[path]
        if path in self.files:
            return self.files[path]
        if path in self.directories:
            return FakeStat(stat.S_IFDIR | 0o755)
        raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)

    def scandir(self, path):
        if path in self.errors:
            raise self.errors[path]
        if path in self.files:
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", path)
        if path not in self.directories:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        return FakeScandir(self, self.directories[path])


@pytest.fixture
def make_stat() -> Callable[..., FakeStat]:
    """
    Build a regular file status; pass ``kind`` to build something else.
    """

    def _make(mode=0o755, uid=1000, gid=1000, kind=stat.S_IFREG) -> FakeStat:
        return FakeStat(kind | mode, st_uid=uid, st_gid=gid)

    return _make


@pytest.fixture
def fake_fs_factory() -> Callable[..., FakeFs]:
    return FakeFs


@pytest.fixture
def make_context() -> Callable[..., SystemContext]:
    """
    Build a fabricated host around a fake filesystem.
    """

    def _make(fs, environ=None, windows=False, uid=1000, gid=1000) -> SystemContext:
        return SystemContext(
            environ={} if environ is None else environ,
            fs=fs,
            windows=windows,
            get_uid=lambda: uid,
            get_gid=lambda: gid,
        )

    return _make


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Keep the user's config.ini and ENVKIT_* variables out of every test.
    """
    config_path = tmp_path / "envkit-config" / "config.ini"
    monkeypatch.setenv("ENVKIT_CONFIG_PATH", str(config_path))
    monkeypatch.delenv("ENVKIT_INCLUDE_CWD", raising=False)
    monkeypatch.delenv("ENVKIT_SUFFIXES", raising=False)
    return config_path
