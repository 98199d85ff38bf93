"""
Tests for git operations: repository check, staged diff, commit.

Run with:
    pytest tests/test_git.py -v
"""

import subprocess

import pytest

from aicommit.git import repo
from aicommit.git.repo import GitError, GitResult, run_git, is_git_repository, get_staged_diff, commit_changes


@pytest.fixture
def fake_run(monkeypatch):
    """Replace subprocess.run; returns the list of recorded calls.

    Set ``fake_run.result`` to the CompletedProcess the next call should return.
    """
    calls = []

    def _run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        if isinstance(_run.result, Exception):
            raise _run.result
        return _run.result

    _run.result = subprocess.CompletedProcess([], 0, stdout="", stderr="")
    _run.calls = calls
    monkeypatch.setattr(repo.subprocess, "run", _run)
    return _run


# ---------------------------------------------------------------------------
# Repository check
# ---------------------------------------------------------------------------

class TestIsGitRepository:
    """is_git_repository() .git marker check."""

    def test_directory_with_git_dir(self, tmp_path):
        (tmp_path / ".git").mkdir()
        assert is_git_repository(tmp_path) is True

    def test_git_file_counts(self, tmp_path):
        (tmp_path / ".git").write_text("gitdir: ../.git/worktrees/x\n")
        assert is_git_repository(tmp_path) is True

    def test_plain_directory(self, tmp_path):
        assert is_git_repository(tmp_path) is False

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert is_git_repository() is False
        (tmp_path / ".git").mkdir()
        assert is_git_repository() is True


# ---------------------------------------------------------------------------
# run_git
# ---------------------------------------------------------------------------

class TestRunGit:
    """run_git() subprocess invocation."""

    def test_arguments_passed_as_list(self, fake_run):
        run_git('commit', '-m', 'it\'s "quoted"; rm -rf /')
        cmd, kwargs = fake_run.calls[0]
        assert cmd == ['git', 'commit', '-m', 'it\'s "quoted"; rm -rf /']
        assert not kwargs.get('shell')

    def test_captures_with_lossy_utf8(self, fake_run):
        run_git('diff', '--cached')
        _, kwargs = fake_run.calls[0]
        assert kwargs['capture_output'] is True
        assert kwargs['encoding'] == 'utf-8'
        assert kwargs['errors'] == 'replace'

    def test_runs_in_working_directory(self, fake_run):
        run_git('diff', '--cached')
        _, kwargs = fake_run.calls[0]
        assert 'cwd' not in kwargs

    def test_no_capture_leaves_output_to_terminal(self, fake_run):
        fake_run.result = subprocess.CompletedProcess([], 0, stdout=None, stderr=None)
        result = run_git('status', capture=False)
        _, kwargs = fake_run.calls[0]
        assert 'capture_output' not in kwargs
        assert result == GitResult(ok=True, returncode=0, stdout="", stderr="")

    def test_missing_git(self, fake_run):
        fake_run.result = FileNotFoundError("git")
        with pytest.raises(GitError, match="not installed"):
            run_git('diff', '--cached')

    def test_nonzero_exit_is_not_raised(self, fake_run):
        fake_run.result = subprocess.CompletedProcess([], 128, stdout="", stderr="fatal: bad\n")
        result = run_git('diff', '--cached')
        assert result.ok is False
        assert result.returncode == 128
        assert result.stderr == "fatal: bad\n"


# ---------------------------------------------------------------------------
# Staged diff
# ---------------------------------------------------------------------------

class TestGetStagedDiff:
    """get_staged_diff() over git diff --cached."""

    def test_runs_diff_cached(self, fake_run):
        get_staged_diff()
        assert fake_run.calls[0][0] == ['git', 'diff', '--cached']

    def test_returns_stdout_unchanged(self, fake_run):
        fake_run.result = subprocess.CompletedProcess([], 0, stdout="+foo\n-bar\n", stderr="")
        assert get_staged_diff() == "+foo\n-bar\n"

    def test_empty_diff_is_not_an_error(self, fake_run):
        assert get_staged_diff() == ""

    def test_failure_carries_stderr(self, fake_run):
        fake_run.result = subprocess.CompletedProcess(
            [], 128, stdout="", stderr="fatal: not a git repository\n"
        )
        with pytest.raises(GitError, match="fatal: not a git repository"):
            get_staged_diff()


# ---------------------------------------------------------------------------
# Commit
# ---------------------------------------------------------------------------

class TestCommitChanges:
    """commit_changes() over git commit -m."""

    def test_message_is_single_argument(self, fake_run):
        commit_changes("Add foo, remove bar")
        assert fake_run.calls[0][0] == ['git', 'commit', '-m', 'Add foo, remove bar']

    def test_multiline_message_verbatim(self, fake_run):
        message = "feat: add foo\n\n- remove bar\n"
        commit_changes(message)
        assert fake_run.calls[0][0][-1] == message

    def test_failure_is_generic(self, fake_run):
        fake_run.result = subprocess.CompletedProcess([], 1, stdout=None, stderr=None)
        with pytest.raises(GitError, match="^Failed to commit changes$"):
            commit_changes("msg")
