"""Command-line entry point: ``mygit <command> [arguments]``."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from tinygit.branches import BranchError, create_branch, switch_branch
from tinygit.commits import CommitError, checkout_file, commit_log, create_commit
from tinygit.repository import Repository, RepositoryError
from tinygit.timestamps import current_timestamp

GREEN = "\033[1;32m"
YELLOW = "\033[1;33m"
RED = "\033[1;31m"
BLUE = "\033[1;34m"
CYAN = "\033[1;36m"
RESET = "\033[0m"

BRANCH_USAGE = "Usage: mygit branch <create|switch> <branch_name>"
LOG_SEPARATOR = "-" * 24


def _say(text: str, color: str | None = None) -> None:
    print(f"{color}{text}{RESET}" if color else text)


def _init(repo: Repository, args: Sequence[str]) -> int:
    print(f"{current_timestamp()} Initializing repository...")
    try:
        created = repo.init()
    except RepositoryError as exc:
        _say(f"[{current_timestamp()}] ❌ {exc}!", RED)
        return 0
    if not created:
        _say(f"[{current_timestamp()}] ⚠️  Repository already initialized!", YELLOW)
        return 0
    location = repo.path.absolute()
    print(
        f"{GREEN}[{current_timestamp()}] ✅ Initialized empty MyGit repository in "
        f'{BLUE}"{location}"{RESET}'
    )
    return 0


def _add(repo: Repository, args: Sequence[str]) -> int:
    if not args:
        print("❌ Error: No file specified for adding!")
        return 1
    filename = args[0]
    try:
        repo.add(filename)
    except RepositoryError as exc:
        _say(f"❌ Error: {exc}", RED)
        return 0
    _say(f"✅ File '{filename}' added to staging area.", GREEN)
    return 0


def _status(repo: Repository, args: Sequence[str]) -> int:
    try:
        status = repo.status()
    except RepositoryError:
        _say("🚨 No repository found! Run 'mygit init' first.", RED)
        return 0
    _say("🤩 MyGit Status  🌟", CYAN)
    print()
    if status.tracked:
        _say("✅ Tracked Files: ", GREEN)
        for name in status.tracked:
            print(f"  📃 {GREEN}{name}{RESET}\n")
    if status.untracked:
        _say("😵 Untracked Files: ", YELLOW)
        for name in status.untracked:
            print(f"  ⛔️ {RED}{name}{RESET}\n")
    if status.is_clean():
        _say("🤗 Everything is up to date!", GREEN)
    return 0


def _commit(repo: Repository, args: Sequence[str]) -> int:
    if not args:
        print("❌ Error: No commit message provided!")
        return 1
    if not repo.exists():
        _say("🚨 No repository found! Run 'mygit init' first.", RED)
        return 0
    try:
        path = create_commit(repo, args[0])
    except CommitError as exc:
        _say(f"❌ Error: {exc}", RED)
        return 0
    _say(f" ✅ Commit Successful! Saved as {path}", GREEN)
    return 0


def _log(repo: Repository, args: Sequence[str]) -> int:
    _say("🌟 MyGit Log 🌟", YELLOW)
    try:
        entries = commit_log(repo)
    except CommitError as exc:
        _say(f"❌ {exc}", RED)
        return 0
    if not entries:
        print("❌ No commits found!")
        return 0
    for entry in entries:
        _say(f"📜 Commit: {entry.path}", GREEN)
        for line in entry.lines:
            print(f"   {line}")
        print(LOG_SEPARATOR)
    return 0


def _checkout(repo: Repository, args: Sequence[str]) -> int:
    commit_file, file_name = args
    try:
        checkout_file(repo, commit_file, file_name)
    except CommitError as exc:
        _say(f"❌ Error: {exc}", RED)
        return 0
    _say(f"✅ File '{file_name}' has been restored from commit {commit_file}", GREEN)
    return 0


def _branch(repo: Repository, args: Sequence[str]) -> int:
    if not args:
        print("❌ Error: Invalid branch command usage!")
        print(BRANCH_USAGE)
        return 1
    sub, rest = args[0], args[1:]
    if len(rest) != 1 or sub not in ("create", "switch"):
        print("❌ Invalid branch command usage!")
        print(BRANCH_USAGE)
        return 0
    name = rest[0]
    try:
        if sub == "create":
            create_branch(repo, name)
            print(f"🌱 Branch '{name}' created successfully!")
        else:
            switch_branch(repo, name)
            print(f"🔄 Switched to branch '{name}'.")
    except BranchError as exc:
        print(f"❌ Error: {exc}")
    return 0


_COMMANDS: dict[str, Callable[[Repository, Sequence[str]], int]] = {
    "init": _init,
    "add": _add,
    "status": _status,
    "commit": _commit,
    "log": _log,
    "checkout": _checkout,
    "branch": _branch,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command against the repository in the current directory."""
    args = list(sys.argv[1:] if argv is None else argv)
    _say("🌟 Welcome to MyGit!", YELLOW)
    if not args:
        print("❌ Error: No command provided!")
        return 1
    command, rest = args[0], args[1:]
    handler = _COMMANDS.get(command)
    if handler is None or (command == "checkout" and len(rest) != 2):
        _say(f"❌ Error: Unknown command '{command}'!", RED)
        return 0
    return handler(Repository("."), rest)


if __name__ == "__main__":
    sys.exit(main())