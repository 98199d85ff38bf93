"""Git Repo - Staged diff and commit through the git CLI."""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

GIT_DIR = '.git'


@dataclass
class GitResult:
    """Outcome of a single git invocation."""
    ok: bool
    returncode: int
    stdout: str = ""
    stderr: str = ""


class GitError(Exception):
    """Raised when git operations fail."""
    pass


def run_git(*args: str, capture: bool = True) -> GitResult:
    """Run git with discrete arguments and return the result.

    With capture=False git writes straight to the terminal and the result
    carries no output.
    """
    try:
        if capture:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace',
            )
        else:
            result = subprocess.run(['git', *args])
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH")
    except OSError as e:
        raise GitError(f"Could not run git: {e}")

    return GitResult(
        ok=result.returncode == 0,
        returncode=result.returncode,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
    )


def is_git_repository(path: Optional[Path] = None) -> bool:
    """True if the directory has a .git entry (a file for worktrees)."""
    root = path or Path.cwd()
    return (root / GIT_DIR).exists()


def get_staged_diff() -> str:
    """Diff of the index against HEAD. Empty when nothing is staged."""
    result = run_git('diff', '--cached')
    if not result.ok:
        raise GitError(result.stderr.strip() or f"git diff exited with status {result.returncode}")
    return result.stdout


def commit_changes(message: str) -> None:
    """Commit the index with the given message."""
    result = run_git('commit', '-m', message, capture=False)
    if not result.ok:
        raise GitError("Failed to commit changes")
