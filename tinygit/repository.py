"""Repository layout, staging area and working-tree status."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

META_DIR = ".mygit"
HEAD_REF = "ref: refs/heads/main\n"
_SUBDIRS = ("objects", "refs", "refs/heads", "refs/tags")


class RepositoryError(Exception):
    """Raised when a repository operation cannot be carried out."""


@dataclass(frozen=True)
class Status:
    """Snapshot of the working tree relative to the staging area."""

    tracked: tuple[str, ...] = ()
    untracked: tuple[str, ...] = ()
    modified: tuple[str, ...] = ()

    def is_clean(self) -> bool:
        """True when there is nothing tracked, modified or untracked."""
        return not (self.tracked or self.untracked or self.modified)


class Repository:
    """A repository rooted at a working directory."""

    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root)
        self.path = self.root / META_DIR

    @property
    def index_path(self) -> Path:
        return self.path / "index"

    @property
    def head_path(self) -> Path:
        return self.path / "HEAD"

    @property
    def commits_dir(self) -> Path:
        return self.path / "commits"

    @property
    def branches_dir(self) -> Path:
        return self.path / "branches"

    def exists(self) -> bool:
        """True if the repository directory is present."""
        return self.path.exists()

    def init(self) -> bool:
        """Create an empty repository; return False if one already exists."""
        if self.exists():
            return False
        self.path.mkdir()
        for sub in _SUBDIRS:
            (self.path / sub).mkdir()
        try:
            self.head_path.write_text(HEAD_REF, encoding="utf-8")
        except OSError as exc:
            raise RepositoryError("Error creating HEAD file") from exc
        try:
            self.index_path.touch()
        except OSError as exc:
            raise RepositoryError("Error creating index file") from exc
        return True

    def _require(self) -> None:
        if not self.exists():
            raise RepositoryError("Repository not initialized. Run 'mygit init' first.")

    def add(self, filename: str) -> None:
        """Append *filename* to the staging area."""
        self._require()
        if not (self.root / filename).exists():
            raise RepositoryError(f"File '{filename}' does not exist!")
        try:
            with self.index_path.open("a", encoding="utf-8") as index:
                index.write(f"{filename}\n")
        except OSError as exc:
            raise RepositoryError("Could not update index.") from exc

    def tracked_files(self) -> frozenset[str]:
        """Names listed in the staging area."""
        try:
            text = self.index_path.read_text(encoding="utf-8")
        except OSError:
            return frozenset()
        return frozenset(text.splitlines())

    def status(self) -> Status:
        """Classify the regular files at the top of the working tree."""
        self._require()
        tracked = self.tracked_files()
        untracked: set[str] = set()
        modified: set[str] = set()
        for entry in self.root.iterdir():
            if entry.is_dir():
                continue
            name = entry.name
            if name in tracked:
                try:
                    entry.open("rb").close()
                except OSError:
                    continue
                modified.add(name)
            else:
                untracked.add(name)
        return Status(
            tracked=tuple(sorted(tracked)),
            untracked=tuple(sorted(untracked)),
            modified=tuple(sorted(modified)),
        )