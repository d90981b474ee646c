import errno
import itertools
import re

import pytest

from envkit.errors import (
    IdentityUnavailableError,
    InvalidFilterError,
    InvalidPathError,
)
from envkit.executable import ExecutableEntry, ExecutableFinder


@pytest.fixture
def fs(fake_fs_factory, make_stat):
    fs = fake_fs_factory(cwd="/home/u/proj")
    fs.add_dir(
        "/usr/local/bin",
        {
            "python3": make_stat(mode=0o755),
            "notes": make_stat(mode=0o644),
        },
    )
    fs.add_dir(
        "/usr/bin",
        {
            "git": make_stat(mode=0o755, uid=0, gid=0),
            "python3": make_stat(mode=0o755),
            "subdir": make_stat(mode=0o755, kind=0o040000),
        },
    )
    fs.add_dir("/home/u/proj", {"build.sh": make_stat(mode=0o700)})
    return fs


@pytest.fixture
def environ() -> dict:
    return {"PATH": "/usr/local/bin:/usr/bin"}


@pytest.fixture
def finder(fs, environ, make_context) -> ExecutableFinder:
    return ExecutableFinder(make_context(fs, environ=environ))


def paths(entries) -> list:
    return [entry.path for entry in entries]


@pytest.mark.unit
class TestIterExecutables:
    """Test synchronous enumeration on a fabricated host."""

    def test_all_executables_in_search_order(self, finder: ExecutableFinder):
        assert paths(finder.iter_executables()) == [
            "/usr/local/bin/python3",
            "/usr/bin/git",
            "/usr/bin/python3",
        ]

    def test_entry_fields(self, finder: ExecutableFinder):
        entry = next(iter(finder.iter_executables(filters=["git"])))

        assert entry == ExecutableEntry(basename="git", name="git", path="/usr/bin/git")

    def test_repeated_directory_yields_once(self, finder, fs, environ, make_stat):
        # "/usr/bin/" survives PATH de-duplication but joins to the same paths
        fs.add_dir("/usr/bin/", {"git": make_stat(), "python3": make_stat()})
        environ["PATH"] = "/usr/bin:/usr/local/bin:/usr/bin/"

        result = paths(finder.iter_executables())

        assert result == [
            "/usr/bin/git",
            "/usr/bin/python3",
            "/usr/local/bin/python3",
        ]

    def test_string_filter_matches_name(self, finder: ExecutableFinder):
        assert paths(finder.iter_executables(filters=["python3"])) == [
            "/usr/local/bin/python3",
            "/usr/bin/python3",
        ]

    def test_string_filter_matches_full_path(self, finder: ExecutableFinder):
        assert paths(finder.iter_executables(filters=["/usr/bin/python3"])) == [
            "/usr/bin/python3"
        ]

    def test_pattern_filter(self, finder: ExecutableFinder):
        assert paths(finder.iter_executables(filters=[re.compile(r"^/usr/bin/")])) == [
            "/usr/bin/git",
            "/usr/bin/python3",
        ]

    def test_filter_without_match(self, finder: ExecutableFinder):
        assert list(finder.iter_executables(filters=["nope"])) == []

    def test_non_executables_skipped(self, finder: ExecutableFinder):
        names = [entry.basename for entry in finder.iter_executables()]

        assert "notes" not in names
        assert "subdir" not in names

    def test_cwd_true_searched_first(self, finder: ExecutableFinder):
        result = paths(finder.iter_executables(cwd=True))

        assert result[0] == "/home/u/proj/build.sh"

    def test_cwd_string(self, finder: ExecutableFinder, fs, make_stat):
        fs.add_dir("/opt/tools", {"tool": make_stat(mode=0o755)})

        result = paths(finder.iter_executables(cwd="/opt/tools"))

        assert result[0] == "/opt/tools/tool"

    def test_cwd_false_excluded(self, finder: ExecutableFinder):
        assert "/home/u/proj/build.sh" not in paths(finder.iter_executables())

    def test_cwd_also_on_path_wins(self, finder: ExecutableFinder, environ):
        environ["PATH"] = "/usr/bin:/home/u/proj"

        result = paths(finder.iter_executables(cwd=True))

        assert result.count("/home/u/proj/build.sh") == 1
        assert result[0] == "/home/u/proj/build.sh"

    def test_relative_cwd_rejected_before_io(self, finder: ExecutableFinder, fs):
        with pytest.raises(InvalidPathError):
            finder.iter_executables(cwd="relative/dir")

        assert fs.stat_calls == []

    def test_bad_filter_rejected_at_call(self, finder: ExecutableFinder):
        with pytest.raises(InvalidFilterError):
            finder.iter_executables(filters=[123])

    def test_relative_path_entries_dropped(self, finder, environ):
        environ["PATH"] = "bin:/usr/bin"

        assert paths(finder.iter_executables()) == ["/usr/bin/git", "/usr/bin/python3"]

    @pytest.mark.parametrize(
        "error",
        [
            PermissionError(errno.EACCES, "Permission denied"),
            NotADirectoryError(errno.ENOTDIR, "Not a directory"),
            FileNotFoundError(errno.ENOENT, "No such file or directory"),
        ],
    )
    def test_unreadable_directory_skipped(self, finder, fs, error):
        fs.fail("/usr/local/bin", error)

        assert paths(finder.iter_executables()) == ["/usr/bin/git", "/usr/bin/python3"]

    def test_missing_directory_skipped(self, finder, environ):
        environ["PATH"] = "/does/not/exist:/usr/bin"

        assert paths(finder.iter_executables()) == ["/usr/bin/git", "/usr/bin/python3"]

    def test_file_on_path_skipped(self, finder, environ):
        environ["PATH"] = "/usr/bin/git:/usr/local/bin"

        assert paths(finder.iter_executables()) == ["/usr/local/bin/python3"]

    def test_other_directory_error_is_fatal(self, finder, fs):
        fs.fail("/usr/bin", OSError(errno.EIO, "Input/output error"))
        entries = finder.iter_executables()

        assert next(entries).path == "/usr/local/bin/python3"
        with pytest.raises(OSError) as exc_info:
            next(entries)
        assert exc_info.value.errno == errno.EIO

    def test_entry_stat_error_skipped(self, finder, fs):
        fs.fail("/usr/bin/git", PermissionError(errno.EACCES, "Permission denied"))

        assert "/usr/bin/git" not in paths(finder.iter_executables())

    def test_identity_error_is_fatal(self, fs, environ, make_context):
        finder = ExecutableFinder(make_context(fs, environ=environ, gid=None))

        with pytest.raises(IdentityUnavailableError):
            list(finder.iter_executables())

    def test_lazy_consumption(self, finder: ExecutableFinder, fs):
        entries = finder.iter_executables()
        assert fs.stat_calls == []

        next(entries)

        assert fs.stat_calls == ["/usr/local/bin/python3"]

    def test_early_close_releases_directory(self, finder: ExecutableFinder, fs):
        entries = finder.iter_executables()
        list(itertools.islice(entries, 1))
        assert fs.open_handles == 1

        entries.close()

        assert fs.open_handles == 0

    def test_error_thrown_at_yield_propagates(self, finder: ExecutableFinder, fs):
        entries = finder.iter_executables()
        next(entries)

        with pytest.raises(PermissionError):
            entries.throw(PermissionError(13, "Permission denied"))

        assert fs.open_handles == 0

    def test_rescans_every_call(self, finder, fs, make_stat):
        before = paths(finder.iter_executables())
        fs.add_dir("/usr/bin", {"git": make_stat(mode=0o755), "new": make_stat()})

        after = paths(finder.iter_executables())

        assert "/usr/bin/new" in after
        assert "/usr/bin/new" not in before

    def test_empty_path(self, fs, make_context):
        finder = ExecutableFinder(make_context(fs, environ={}))

        assert list(finder.iter_executables()) == []


@pytest.mark.unit
class TestGetExecutable:
    """Test single lookups."""

    def test_scenario_git(self, fs, make_context):
        finder = ExecutableFinder(make_context(fs, environ={"PATH": "/usr/bin"}))

        entry = finder.get_executable("git")

        assert entry.path == "/usr/bin/git"
        assert entry.basename == "git"
        assert entry.name == "git"

    @pytest.mark.parametrize(
        "specifier", ["git", "python3", "nope", "/usr/bin/python3"]
    )
    def test_equals_first_enumerated(self, finder: ExecutableFinder, specifier):
        first = next(iter(finder.iter_executables(filters=[specifier])), None)

        assert finder.get_executable(specifier) == first

    def test_not_found(self, finder: ExecutableFinder):
        assert finder.get_executable("nope") is None

    def test_stops_after_first_match(self, finder: ExecutableFinder, fs):
        finder.get_executable("python3")

        assert "/usr/bin/python3" not in fs.stat_calls
        assert fs.open_handles == 0

    def test_pattern_specifier(self, finder: ExecutableFinder):
        entry = finder.get_executable(re.compile(r"^gi"))

        assert entry.path == "/usr/bin/git"


@pytest.mark.unit
class TestWindowsEnumeration:
    """Test enumeration with suffix rules."""

    @pytest.fixture
    def finder(self, fake_fs_factory, make_stat, make_context) -> ExecutableFinder:
        fs = fake_fs_factory(windows=True, cwd="C:\\work")
        fs.add_dir(
            "C:\\tools",
            {
                "run.EXE": make_stat(mode=0o644),
                "readme.txt": make_stat(mode=0o755),
                "setup.cmd": make_stat(mode=0o644),
            },
        )
        fs.add_dir("C:\\work", {"local.bat": make_stat(mode=0o644)})
        environ = {"PATH": "C:\\tools;C:\\tools", "PATHEXT": ".COM;.EXE;.BAT;.CMD"}
        return ExecutableFinder(make_context(fs, environ=environ, windows=True))

    def test_scenario_run_exe(self, finder: ExecutableFinder):
        entries = list(finder.iter_executables())

        assert entries == [
            ExecutableEntry(basename="run.EXE", name="run", path="C:\\tools\\run.EXE"),
            ExecutableEntry(
                basename="setup.cmd", name="setup", path="C:\\tools\\setup.cmd"
            ),
        ]

    def test_lookup_by_stripped_name(self, finder: ExecutableFinder):
        assert finder.get_executable("run").basename == "run.EXE"

    def test_cwd(self, finder: ExecutableFinder):
        first = next(iter(finder.iter_executables(cwd=True)))

        assert first.path == "C:\\work\\local.bat"

    def test_suffix_override(self, fake_fs_factory, make_stat, make_context):
        fs = fake_fs_factory(windows=True).add_dir(
            "C:\\tools", {"run.EXE": make_stat(), "tool.py": make_stat()}
        )
        context = make_context(fs, environ={"PATH": "C:\\tools"}, windows=True)
        finder = ExecutableFinder(context, suffixes=[".PY"])

        assert [entry.name for entry in finder.iter_executables()] == ["tool"]
