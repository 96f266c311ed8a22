"""Recording commits, reading the commit log and restoring files."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from itertools import takewhile
from pathlib import Path

from tinygit.repository import Repository
from tinygit.timestamps import current_timestamp

FILE_MARKER = "📑 File: "
SEPARATOR = "-" * 25
UNREADABLE = "❌ Error: Could not read file at commit time."


class CommitError(Exception):
    """Raised when a commit cannot be written, read or checked out."""


@dataclass(frozen=True)
class LogEntry:
    """One commit record as it appears in the log."""

    path: Path
    lines: tuple[str, ...]


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _read_lines(path: Path) -> list[str]:
    with path.open(encoding="utf-8", errors="surrogateescape", newline="") as handle:
        return _split_lines(handle.read())


def create_commit(repo: Repository, message: str, now: datetime | None = None) -> Path:
    """Record the staged files with *message*; return the commit file's path."""
    if not repo.exists():
        raise CommitError("No repository found! Run 'mygit init' first.")
    if now is None:
        now = datetime.now()
    repo.commits_dir.mkdir(parents=True, exist_ok=True)
    commit_path = repo.commits_dir / f"commit_{int(now.timestamp())}.txt"

    record = [
        f"Commit Timestamp: {current_timestamp(now)}",
        f"Message: {message}",
        "Files and Contents:",
    ]
    try:
        staged = _read_lines(repo.index_path)
    except OSError:
        staged = []
    for name in staged:
        record.append(FILE_MARKER + name)
        try:
            content = _read_lines(repo.root / name)
        except OSError:
            record.append(UNREADABLE)
            continue
        record.append(SEPARATOR)
        record.extend(content)
        record.append(SEPARATOR)

    try:
        with commit_path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as out:
            out.writelines(f"{line}\n" for line in record)
    except OSError as exc:
        raise CommitError("Failed to create commit file!") from exc
    return commit_path


def commit_files(repo: Repository) -> list[Path]:
    """Commit record files, newest first."""
    if not repo.commits_dir.exists():
        return []
    files = (entry for entry in repo.commits_dir.iterdir() if entry.is_file())
    return sorted(files, key=str, reverse=True)


def commit_log(repo: Repository) -> list[LogEntry]:
    """Every commit record with its lines, newest first."""
    entries = []
    for path in commit_files(repo):
        try:
            lines = _read_lines(path)
        except OSError as exc:
            raise CommitError(f"Error reading {path}") from exc
        entries.append(LogEntry(path, tuple(lines)))
    return entries


def checkout_file(repo: Repository, commit_file: str | Path, file_name: str) -> Path:
    """Restore *file_name* in the working tree from *commit_file*."""
    path = Path(commit_file)
    if not path.is_absolute():
        path = repo.root / path
    if not path.exists():
        raise CommitError("Commit file not found!")
    try:
        lines = iter(_read_lines(path))
    except OSError as exc:
        raise CommitError("Unable to open commit file!") from exc

    marker = FILE_MARKER + file_name
    if not any(line == marker for line in lines):
        raise CommitError("File not found in the specified commit!")
    if next(lines, None) != SEPARATOR:
        raise CommitError(f"File '{file_name}' could not be read when it was committed.")
    content = list(takewhile(lambda line: line != SEPARATOR, lines))

    target = repo.root / file_name
    try:
        with target.open("w", encoding="utf-8", errors="surrogateescape", newline="") as out:
            out.writelines(f"{line}\n" for line in content)
    except OSError as exc:
        raise CommitError("Unable to restore file!") from exc
    return target