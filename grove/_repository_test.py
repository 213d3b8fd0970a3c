import os

import pytest
import py.path

from . import objects
from ._repository import (
    Repository,
    create_repository,
    find_repository,
    NotARepositoryError,
    UnsupportedRepositoryError,
    WorktreeNotEmptyError,
)


def test_create_repository(tmpdir: py.path.local) -> None:

    root = tmpdir.join("repo")
    repo = create_repository(root.strpath)

    gitdir = root.join(".git")
    assert repo.worktree == root.strpath
    assert repo.gitdir == gitdir.strpath
    for dirname in ("branches", "objects", "refs/tags", "refs/heads"):
        assert gitdir.join(dirname).isdir(), dirname
    assert gitdir.join("HEAD").read() == "ref: refs/heads/master\n"
    assert gitdir.join("description").read().startswith("Unnamed repository")

    config = gitdir.join("config").read()
    assert "[core]" in config
    assert "repositoryformatversion = 0" in config
    assert "filemode = false" in config
    assert "bare = false" in config


def test_create_repository_in_empty_dir(tmpdir: py.path.local) -> None:

    root = tmpdir.join("repo").ensure(dir=True)
    repo = create_repository(root.strpath)
    assert repo.config.repository_format_version == 0


def test_create_repository_not_empty(tmpdir: py.path.local) -> None:

    root = tmpdir.join("repo")
    root.join("file.txt").write("data", ensure=True)
    with pytest.raises(WorktreeNotEmptyError):
        create_repository(root.strpath)
    assert not root.join(".git").exists()


def test_open_missing_repository(tmpdir: py.path.local) -> None:

    with pytest.raises(NotARepositoryError):
        Repository(tmpdir.strpath)


def test_open_missing_config(tmprepo: Repository) -> None:

    py.path.local(tmprepo.repo_path("config")).remove()
    with pytest.raises(NotARepositoryError):
        Repository(tmprepo.worktree)


def test_open_unsupported_version(tmprepo: Repository) -> None:

    config = py.path.local(tmprepo.repo_path("config"))
    config.write("[core]\nrepositoryformatversion = 1\n")
    with pytest.raises(UnsupportedRepositoryError):
        Repository(tmprepo.worktree)


def test_repository_config_compression(tmprepo: Repository) -> None:

    config = py.path.local(tmprepo.repo_path("config"))
    config.write("[core]\nrepositoryformatversion = 0\ncompression = 9\n")
    repo = Repository(tmprepo.worktree)
    assert repo.config.compression_level == 9
    assert repo.objects.compression_level == 9


def test_repository_objects(tmprepo: Repository) -> None:

    digest = tmprepo.objects.write_object(objects.Blob(b"hello\n"))
    path = py.path.local(tmprepo.repo_path("objects", "ce"))
    assert path.join(digest.str()[2:]).exists()


def test_repo_dir(tmprepo: Repository) -> None:

    with pytest.raises(FileNotFoundError):
        tmprepo.repo_dir("refs", "remotes")

    path = tmprepo.repo_dir("refs", "remotes", mkdir=True)
    assert py.path.local(path).isdir()
    assert tmprepo.repo_dir("refs", "remotes") == path

    with pytest.raises(NotADirectoryError):
        tmprepo.repo_dir("HEAD")


def test_repo_file(tmprepo: Repository) -> None:

    path = tmprepo.repo_file("refs", "remotes", "origin", "HEAD", mkdir=True)
    assert path == tmprepo.repo_path("refs", "remotes", "origin", "HEAD")
    assert py.path.local(path).dirpath().isdir()
    assert not py.path.local(path).exists()


def test_find_repository(tmprepo: Repository) -> None:

    nested = py.path.local(tmprepo.worktree).join("a", "b").ensure(dir=True)
    repo = find_repository(nested.strpath)
    assert repo is not None
    assert os.path.realpath(repo.gitdir) == os.path.realpath(tmprepo.gitdir)


def test_find_repository_missing(tmpdir: py.path.local) -> None:

    path = tmpdir.join("nowhere").ensure(dir=True)
    assert find_repository(path.strpath, required=False) is None
    with pytest.raises(NotARepositoryError):
        find_repository(path.strpath)
