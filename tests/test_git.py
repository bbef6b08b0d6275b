import shutil
import subprocess

import pytest

from git_suggest_commit.git import GitError, GitRepo


class FakeRun:
    def __init__(self, returncode=0, stdout="", stderr=""):
        self.calls = []
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        if kwargs.get("check") and self.returncode != 0:
            raise subprocess.CalledProcessError(
                self.returncode, cmd, output=self.stdout, stderr=self.stderr
            )
        return subprocess.CompletedProcess(cmd, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def fake_run(monkeypatch):
    run = FakeRun()
    monkeypatch.setattr("git_suggest_commit.git.subprocess.run", run)
    return run


def test_staged_diff_command(fake_run, tmp_path):
    fake_run.stdout = "diff --git a/x b/x\n"
    repo = GitRepo(tmp_path)

    assert repo.get_staged_diff() == "diff --git a/x b/x\n"
    cmd, kwargs = fake_run.calls[0]
    assert cmd == ["git", "--no-pager", "diff", "--staged"]
    assert kwargs["cwd"] == tmp_path
    assert kwargs["capture_output"] is True


def test_staged_files(fake_run, tmp_path):
    fake_run.stdout = "a.py\nsrc/b.py\n"
    assert GitRepo(tmp_path).get_staged_files() == ["a.py", "src/b.py"]


def test_failure_includes_stderr(fake_run, tmp_path):
    fake_run.returncode = 128
    fake_run.stderr = "fatal: not a git repository"

    with pytest.raises(GitError) as exc_info:
        GitRepo(tmp_path).get_staged_diff()

    message = str(exc_info.value)
    assert "git --no-pager diff --staged" in message
    assert "128" in message
    assert "fatal: not a git repository" in message


def test_check_repository(fake_run, tmp_path):
    fake_run.returncode = 128
    with pytest.raises(GitError, match="Not a git repository"):
        GitRepo(tmp_path).check_repository()


def test_commit_with_message_is_not_captured(fake_run, tmp_path):
    assert GitRepo(tmp_path).commit("fix bug") == 0

    cmd, kwargs = fake_run.calls[0]
    assert cmd == ["git", "commit", "-m", "fix bug"]
    assert "capture_output" not in kwargs
    assert kwargs["check"] is False


def test_commit_without_message_opens_editor(fake_run, tmp_path):
    GitRepo(tmp_path).commit(None)
    assert fake_run.calls[0][0] == ["git", "commit"]


def test_commit_returns_git_status(fake_run, tmp_path):
    fake_run.returncode = 1
    assert GitRepo(tmp_path).commit("fix bug") == 1


def test_amend(fake_run, tmp_path):
    assert GitRepo(tmp_path).amend() == 0
    assert fake_run.calls[0][0] == ["git", "commit", "--amend"]


def test_missing_git_executable(monkeypatch, tmp_path):
    def no_git(cmd, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr("git_suggest_commit.git.subprocess.run", no_git)
    repo = GitRepo(tmp_path)

    with pytest.raises(GitError, match="not found"):
        repo.get_staged_diff()
    with pytest.raises(GitError, match="not found"):
        repo.commit("fix bug")


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def git(path, *args):
    subprocess.run(["git", *args], cwd=path, check=True, capture_output=True)


@requires_git
def test_real_repository_roundtrip(tmp_path):
    git(tmp_path, "init", "-q")
    git(tmp_path, "config", "user.name", "Test")
    git(tmp_path, "config", "user.email", "test@example.com")
    git(tmp_path, "config", "commit.gpgsign", "false")
    repo = GitRepo(tmp_path)

    repo.check_repository()
    assert repo.get_staged_diff() == ""

    (tmp_path / "hello.txt").write_text("hello\n", encoding="utf-8")
    assert repo.get_staged_diff() == ""

    git(tmp_path, "add", "hello.txt")
    assert "+hello" in repo.get_staged_diff()
    assert repo.get_staged_files() == ["hello.txt"]

    assert repo.commit("add greeting") == 0
    assert repo.get_staged_diff() == ""
    log = subprocess.run(
        ["git", "log", "-1", "--format=%s"],
        cwd=tmp_path,
        check=True,
        capture_output=True,
        text=True,
    )
    assert log.stdout.strip() == "add greeting"


@requires_git
def test_real_directory_outside_repository(tmp_path):
    with pytest.raises(GitError):
        GitRepo(tmp_path).check_repository()
