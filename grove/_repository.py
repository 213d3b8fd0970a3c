from typing import Optional
import os

import structlog

from . import storage
from ._config import Config, load_config, default_repository_config

GIT_DIRNAME = ".git"
_LOGGER = structlog.get_logger("grove.repository")


class NotARepositoryError(ValueError):
    """Denotes a directory that does not hold a repository."""

    def __init__(self, path: str, reason: str = "not a repository") -> None:
        super(NotARepositoryError, self).__init__(f"{reason}: {path}")
        self.path = path


class UnsupportedRepositoryError(ValueError):
    """Denotes a repository created with an unknown format version."""

    def __init__(self, version: int) -> None:
        super(UnsupportedRepositoryError, self).__init__(
            f"Unsupported repository format version: {version}"
        )


class WorktreeNotEmptyError(ValueError):
    """Denotes an attempt to create a repository over existing files."""

    def __init__(self, path: str) -> None:
        super(WorktreeNotEmptyError, self).__init__(
            f"Cannot create repository, directory is not empty: {path}"
        )


class Repository:
    """A working tree with its git directory of objects, refs and config.

    Repositories are explicit handles, and the object storage is
    always reached through one rather than through any global state.
    """

    SUPPORTED_FORMAT_VERSION = 0

    def __init__(self, worktree: str, force: bool = False) -> None:

        self.worktree = os.path.abspath(worktree)
        self.gitdir = os.path.join(self.worktree, GIT_DIRNAME)

        config_file = self.repo_path("config")
        if not force:
            if not os.path.isdir(self.gitdir):
                raise NotARepositoryError(self.worktree)
            if not os.path.isfile(config_file):
                raise NotARepositoryError(self.worktree, "configuration file missing")

        self.config: Config = load_config(config_file)

        if not force:
            version = self.config.repository_format_version
            if version != self.SUPPORTED_FORMAT_VERSION:
                raise UnsupportedRepositoryError(version)

    def __repr__(self) -> str:
        return f"Repository({self.worktree!r})"

    @property
    def objects(self) -> storage.fs.FSDatabase:
        """Return the object database of this repository."""

        return storage.fs.FSDatabase(
            self.repo_path("objects"),
            compression_level=self.config.compression_level,
        )

    def repo_path(self, *parts: str) -> str:
        """Return the absolute path of a location inside the git directory."""

        return os.path.join(self.gitdir, *parts)

    def repo_dir(self, *parts: str, mkdir: bool = False) -> str:
        """Return the path to a directory inside the git directory.

        Raises:
            NotADirectoryError: if the path exists but is not a directory
            FileNotFoundError: if the path does not exist and mkdir is not set
        """

        path = self.repo_path(*parts)
        if os.path.exists(path):
            if not os.path.isdir(path):
                raise NotADirectoryError(path)
            return path

        if not mkdir:
            raise FileNotFoundError(path)
        _LOGGER.debug("creating directory", path=path)
        os.makedirs(path)
        return path

    def repo_file(self, *parts: str, mkdir: bool = False) -> str:
        """Return the path to a file inside the git directory.

        The parent directory must exist, or will be created if mkdir is set.
        """

        if len(parts) > 1:
            self.repo_dir(*parts[:-1], mkdir=mkdir)
        return self.repo_path(*parts)


def create_repository(path: str) -> Repository:
    """Create a new, empty repository at the given path.

    Raises:
        WorktreeNotEmptyError: if the path is an existing, non-empty directory
    """

    repo = Repository(path, force=True)
    if os.path.exists(repo.worktree):
        if not os.path.isdir(repo.worktree):
            raise NotADirectoryError(repo.worktree)
        if os.listdir(repo.worktree):
            raise WorktreeNotEmptyError(repo.worktree)
    else:
        os.makedirs(repo.worktree)

    repo.repo_dir("branches", mkdir=True)
    repo.repo_dir("objects", mkdir=True)
    repo.repo_dir("refs", "tags", mkdir=True)
    repo.repo_dir("refs", "heads", mkdir=True)

    with open(repo.repo_file("description"), "w", encoding="utf-8") as f:
        f.write(
            "Unnamed repository; edit this file 'description' to name the repository.\n"
        )
    with open(repo.repo_file("HEAD"), "w", encoding="utf-8") as f:
        f.write("ref: refs/heads/master\n")
    with open(repo.repo_file("config"), "w", encoding="utf-8") as f:
        default_repository_config().write(f)

    _LOGGER.info("initialized empty repository", path=repo.gitdir)
    return Repository(repo.worktree)


def find_repository(path: str = ".", required: bool = True) -> Optional[Repository]:
    """Find the repository that contains the given path.

    Each parent directory is checked in turn for a git directory.

    Raises:
        NotARepositoryError: if no repository is found and one is required
    """

    current = os.path.realpath(path)
    while True:
        if os.path.isdir(os.path.join(current, GIT_DIRNAME)):
            return Repository(current)

        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent

    if required:
        raise NotARepositoryError(os.path.realpath(path), "no repository found in")
    return None
