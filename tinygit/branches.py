"""Branches: named pointers to the commit recorded in HEAD."""

from __future__ import annotations

from pathlib import Path

from tinygit.repository import Repository


class BranchError(Exception):
    """Raised when a branch cannot be created or switched to."""


def _first_line(path: Path) -> str:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        return ""
    return text.partition("\n")[0]


def create_branch(repo: Repository, name: str) -> Path:
    """Create branch *name* pointing at HEAD; return the branch file's path."""
    if not repo.exists():
        raise BranchError("Failed to create the branch!")
    branch_path = repo.branches_dir / name
    if branch_path.exists():
        raise BranchError(f"Branch '{name}' already exists!")
    head = _first_line(repo.head_path)
    try:
        repo.branches_dir.mkdir(exist_ok=True)
        branch_path.write_text(head, encoding="utf-8")
    except OSError as exc:
        raise BranchError("Failed to create the branch!") from exc
    return branch_path


def switch_branch(repo: Repository, name: str) -> str:
    """Point HEAD at branch *name*'s commit and return that commit."""
    branch_path = repo.branches_dir / name
    if not branch_path.is_file():
        raise BranchError(f"Branch '{name}' does not exist!")
    commit = _first_line(branch_path)
    try:
        repo.head_path.write_text(commit, encoding="utf-8")
    except OSError as exc:
        raise BranchError("Failed to update HEAD!") from exc
    return commit


def current_branch(repo: Repository) -> str | None:
    """Name of the branch whose commit matches HEAD, or None if detached."""
    if not repo.branches_dir.is_dir():
        return None
    head = _first_line(repo.head_path)
    for entry in sorted(repo.branches_dir.iterdir()):
        if _first_line(entry) == head:
            return entry.name
    return None