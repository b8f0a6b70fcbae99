import errno
import os

import pytest

from posixem.dirent import opendir
from posixem.globbing import glob
from posixem.globtypes import (
    GlobFlag,
    GlobNoMatchError,
    GlobNoSpaceError,
)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    for name in ("dir0", "dir1", "dir2"):
        (tmp_path / name).mkdir()
    (tmp_path / "file0").write_bytes(b"")
    (tmp_path / "file1").write_bytes(b"x" * 1024)
    (tmp_path / "file2").write_bytes(b"x" * 10240)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _listing(path, only_dirs=False, include_dots=True):
    with opendir(path) as d:
        names = [
            e.name
            for e in d
            if (include_dots or e.name not in (".", ".."))
            and (not only_dirs or e.is_dir)
        ]
    return sorted(names)


def test_literal_file(workdir):
    r = glob("file0")
    assert r.matchc == 1
    assert len(r) == 1
    assert r.pathv[0] == "file0"


def test_question_mark(workdir):
    r = glob("file?")
    assert r.matchc == 3
    assert list(r) == ["file0", "file1", "file2"]
    assert r.magic


def test_offsets_ignored_without_dooffs(workdir):
    r = glob("file0", offsets=10)
    assert r.pathv[0] == "file0"
    assert len(r) == 1


def test_offsets_with_dooffs(workdir):
    r = glob("file0", GlobFlag.DOOFFS, offsets=10)
    assert len(r) == 1
    assert r.pathv[10] == "file0"
    assert r.pathv[:10] == (None,) * 10


def test_no_match(workdir):
    with pytest.raises(GlobNoMatchError):
        glob("xxx")


def test_nocheck_literal(workdir):
    r = glob("xxx", GlobFlag.NOCHECK)
    assert r.matchc == 1
    assert r.pathv[0] == "xxx"


def test_nocheck_magic(workdir):
    r = glob("x*y", GlobFlag.NOCHECK)
    assert list(r) == ["x*y"]
    assert r.magic


def test_limit(workdir):
    with pytest.raises(GlobNoSpaceError) as info:
        glob("file?", GlobFlag.LIMIT, limit=2)
    r = info.value.result
    assert r.matchc == 2
    assert r.pathv[0] == "file0"
    assert r.pathv[1] == "file1"


def test_limit_with_offsets(workdir):
    with pytest.raises(GlobNoSpaceError) as info:
        glob("file?", GlobFlag.LIMIT | GlobFlag.DOOFFS, offsets=10, limit=2)
    r = info.value.result
    assert r.matchc == 2
    assert r.pathv[10] == "file0"
    assert r.pathv[11] == "file1"


def test_limit_requires_value(workdir):
    with pytest.raises(ValueError):
        glob("file?", GlobFlag.LIMIT)


def test_dot(workdir):
    assert list(glob(".")) == ["."]


def test_dotdot(workdir):
    assert list(glob("..")) == [".."]


def test_cwd_directories_files_and_dots(workdir):
    (workdir / ".hidden").write_text("h")
    r = glob("*.*", GlobFlag.NOSORT | GlobFlag.PERIOD)
    assert sorted(r) == _listing(".")


def test_cwd_directories_and_dots(workdir):
    r = glob("*.*", GlobFlag.ONLYDIR | GlobFlag.PERIOD)
    assert sorted(r) == _listing(".", only_dirs=True)
    assert sorted(r) == [".", "..", "dir0", "dir1", "dir2"]


def test_homedir_directories_files_and_dots(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    (home / "notes.txt").write_text("n")
    (home / "plain").write_text("p")
    (home / "sub").mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))

    r = glob("~/*.*", GlobFlag.NOSORT | GlobFlag.PERIOD | GlobFlag.TILDE)
    prefix = str(home)
    assert all(p.startswith(prefix) for p in r)
    entries = sorted(p[len(prefix) + 1 :] for p in r)
    assert entries == _listing(str(home))


def test_default_skips_leading_period(workdir):
    (workdir / ".hidden").write_text("h")
    r = glob("*")
    assert list(r) == ["dir0", "dir1", "dir2", "file0", "file1", "file2"]


def test_nodotsdirs(workdir):
    (workdir / ".hidden").write_text("h")
    r = glob("*", GlobFlag.PERIOD | GlobFlag.NODOTSDIRS)
    assert "." not in r.paths
    assert ".." not in r.paths
    assert ".hidden" in r.paths


def test_onlyreg(workdir):
    r = glob("*", GlobFlag.ONLYREG)
    assert list(r) == ["file0", "file1", "file2"]


def test_mark(workdir):
    r = glob("dir?", GlobFlag.MARK)
    assert list(r) == ["dir0/", "dir1/", "dir2/"]


def test_subdirectory(workdir):
    (workdir / "dir0" / "a.txt").write_text("a")
    assert list(glob("dir0/a*")) == ["dir0/a.txt"]


def test_missing_directory_with_magic_is_empty(workdir):
    r = glob("nowhere/*")
    assert len(r) == 0
    assert r.paths == ()


def test_errfunc_called_on_no_match(workdir):
    calls = []
    with pytest.raises(GlobNoMatchError):
        glob("xxx", errfunc=lambda path, code: calls.append((path, code)))
    assert calls == [("xxx", errno.ENOENT)]


def test_nomagic(workdir):
    assert list(glob("xxx", GlobFlag.NOMAGIC)) == ["xxx"]
    with pytest.raises(GlobNoMatchError):
        glob("x*y", GlobFlag.NOMAGIC)


def test_tilde_check(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    r = glob("~/nothing", GlobFlag.TILDE | GlobFlag.NOCHECK)
    assert list(r) == [str(tmp_path) + "/nothing"]
    with pytest.raises(GlobNoMatchError):
        glob("~/nothing", GlobFlag.TILDE | GlobFlag.TILDE_CHECK | GlobFlag.NOCHECK)


def test_nosort_returns_same_set(workdir):
    r = glob("file?", GlobFlag.NOSORT)
    assert sorted(r) == ["file0", "file1", "file2"]


def test_literal_has_no_magchar(workdir):
    r = glob("file1")
    assert not r.magic
    assert os.path.getsize(r.paths[0]) == 1024