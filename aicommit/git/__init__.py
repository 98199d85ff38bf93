"""Git Operations Package"""

from aicommit.git.repo import (
    GitError,
    GitResult,
    run_git,
    is_git_repository,
    get_staged_diff,
    commit_changes,
)

__all__ = [
    "GitError",
    "GitResult",
    "run_git",
    "is_git_repository",
    "get_staged_diff",
    "commit_changes",
]
