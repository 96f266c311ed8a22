# tinygit

tinygit is a small version control tool. It keeps its data in a `.mygit`
directory beside your files. Each commit is one plain text file under
`.mygit/commits/` that holds a timestamp, the commit message and the full
text of every staged file.

## Installation

```
pip install .
```

This installs the `tinygit` command. The same entry point can be run as
`python -m tinygit.cli`.

## Command line

Every command works on the repository in the current directory.

```
tinygit init                          # create .mygit
tinygit add notes.txt                 # stage a file
tinygit status                        # show tracked and untracked files
tinygit commit "First draft"          # store the staged files' contents
tinygit log                           # print every commit, newest first
tinygit checkout .mygit/commits/commit_1700000000.txt notes.txt
                                      # restore one file from a commit
tinygit branch create feature         # make a branch at the current HEAD
tinygit branch switch feature         # set HEAD to that branch's commit
```

- `init` creates `.mygit` with `objects`, `refs/heads`, `refs/tags`, an
  empty `index` and a `HEAD` file reading `ref: refs/heads/main`. Running it
  again only warns that the repository already exists.
- `add` appends the file name to `.mygit/index`. A file stays staged once
  added, and every later commit includes it.
- `status` lists the staged files and the files at the top of the working
  directory that are not staged. Subdirectories are not looked into.
- `commit` writes `.mygit/commits/commit_<seconds since the epoch>.txt`.
  A staged file that cannot be read is recorded as unreadable.
- `log` prints every commit file with its contents, newest first.
- `checkout` takes the path of a commit file, as `commit` and `log` print
  it, and the name of a file in that commit, and overwrites the file in the
  working directory with the committed text.
- `branch create` stores the first line of `HEAD` in
  `.mygit/branches/<name>`; `branch switch` writes the branch's stored line
  back into `HEAD`.

Messages are printed with ANSI colours. The exit status is 1 when a command
is missing or an argument it needs is missing, and 0 otherwise, including
when the command reports an error.

## Library use

```python
from pathlib import Path

from tinygit.repository import Repository
from tinygit.commits import create_commit, commit_log, checkout_file
from tinygit.branches import create_branch, switch_branch, current_branch

repo = Repository(Path("."))
repo.init()                      # False if a repository already exists
repo.add("notes.txt")

status = repo.status()           # Status(tracked=..., untracked=..., modified=...)
print(status.is_clean())

commit_path = create_commit(repo, "First draft")
for entry in commit_log(repo):   # LogEntry(path, lines), newest first
    print(entry.path, entry.lines[1])

checkout_file(repo, commit_path, "notes.txt")

create_branch(repo, "feature")
switch_branch(repo, "feature")   # returns the line written to HEAD
print(current_branch(repo))      # None when no branch matches HEAD
```

`create_commit` also takes a `now` datetime, and
`tinygit.timestamps.current_timestamp(now)` formats a time as
`[YYYY-mm-dd HH:MM:SS]`.

On failure the library raises instead of printing: `RepositoryError` from
`add` and `status`, `CommitError` from `create_commit`, `commit_log` and
`checkout_file`, and `BranchError` from `create_branch` and
`switch_branch`. The command line prints the message.

## What it does not do

- `status` does not compare contents: every staged file present in the
  working directory is reported in `Status.modified`, changed or not, and
  the command line does not print that list.
- Files cannot be removed from the staging area.
- Commits are not linked to one another and do not move `HEAD` or any
  branch, so branches only record whatever line `HEAD` held when they were
  created. There is no merging, no diff and no way to delete a branch.
- Commit files are named by the second they were made; a second commit in
  the same second replaces the first.
- `checkout` restores a single file; there is no checkout of a whole commit.