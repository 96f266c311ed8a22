import pytest

from tinygit.repository import HEAD_REF, Repository, RepositoryError, Status


@pytest.fixture
def repo(tmp_path):
    r = Repository(tmp_path)
    r.init()
    return r


def test_init_creates_layout(tmp_path):
    r = Repository(tmp_path)
    assert r.exists() is False
    assert r.init() is True
    assert r.exists() is True
    for sub in ("objects", "refs", "refs/heads", "refs/tags"):
        assert (tmp_path / ".mygit" / sub).is_dir()
    assert (tmp_path / ".mygit" / "HEAD").read_text(encoding="utf-8") == "ref: refs/heads/main\n"
    assert HEAD_REF == "ref: refs/heads/main\n"
    assert (tmp_path / ".mygit" / "index").read_text(encoding="utf-8") == ""


def test_init_twice_keeps_existing_repository(repo, tmp_path):
    (tmp_path / "a.txt").write_text("x")
    repo.add("a.txt")
    assert repo.init() is False
    assert repo.tracked_files() == frozenset({"a.txt"})


def test_add_without_repository_raises(tmp_path):
    (tmp_path / "a.txt").write_text("x")
    with pytest.raises(RepositoryError, match="not initialized"):
        Repository(tmp_path).add("a.txt")


def test_add_missing_file_raises(repo):
    with pytest.raises(RepositoryError, match="does not exist"):
        repo.add("missing.txt")


def test_add_appends_to_index(repo, tmp_path):
    (tmp_path / "a.txt").write_text("x")
    (tmp_path / "b.txt").write_text("y")
    repo.add("a.txt")
    repo.add("b.txt")
    repo.add("a.txt")
    assert repo.index_path.read_text(encoding="utf-8") == "a.txt\nb.txt\na.txt\n"
    assert repo.tracked_files() == frozenset({"a.txt", "b.txt"})


def test_tracked_files_empty_without_index(tmp_path):
    assert Repository(tmp_path).tracked_files() == frozenset()


def test_status_without_repository_raises(tmp_path):
    with pytest.raises(RepositoryError):
        Repository(tmp_path).status()


def test_status_classifies_files(repo, tmp_path):
    (tmp_path / "a.txt").write_text("x")
    (tmp_path / "b.txt").write_text("y")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "c.txt").write_text("z")
    repo.add("a.txt")
    status = repo.status()
    assert status.tracked == ("a.txt",)
    assert status.modified == ("a.txt",)
    assert status.untracked == ("b.txt",)
    assert status.is_clean() is False


def test_status_tracked_file_deleted_is_not_modified(repo, tmp_path):
    (tmp_path / "a.txt").write_text("x")
    repo.add("a.txt")
    (tmp_path / "a.txt").unlink()
    status = repo.status()
    assert status.tracked == ("a.txt",)
    assert status.modified == ()
    assert status.untracked == ()


def test_empty_repository_is_clean(repo):
    assert repo.status().is_clean() is True


def test_status_is_clean_flags():
    assert Status().is_clean() is True
    assert Status(untracked=("x",)).is_clean() is False
    assert Status(modified=("x",)).is_clean() is False