"""Git Operations Package"""

from gitcc.git.analyzer import GitAnalyzer, GitError, NotARepositoryError, RepoStatus

__all__ = [
    "GitAnalyzer",
    "GitError",
    "NotARepositoryError",
    "RepoStatus",
]
