"""Git Analyzer - Repository checks and the final commit."""

import os
import subprocess
import tempfile
from enum import Enum
from pathlib import Path
from typing import Optional

from gitcc.output import print_debug


class RepoStatus(Enum):
    """Whether the index holds anything to commit."""
    READY = "ready"
    NOTHING_STAGED = "nothing_staged"
    UNTRACKED_ONLY = "untracked_only"

    @property
    def can_commit(self) -> bool:
        return self is RepoStatus.READY


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class NotARepositoryError(GitError):
    """Raised when the working directory is not inside a git repository."""
    pass


class GitAnalyzer:
    """Runs git in (or above) a working directory."""

    def __init__(self, cwd: Optional[Path] = None):
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self._root: Optional[Path] = None

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    @property
    def root(self) -> Path:
        """Top-level directory of the repository."""
        if self._root is None:
            self._run_git('--version')
            try:
                output = self._run_git('rev-parse', '--show-toplevel')
            except GitError:
                raise NotARepositoryError("not a git repository (or any of the parent directories): .git")
            self._root = Path(output.strip())
            print_debug(f"Root directory of Git repository: {self._root}")
        return self._root

    def status(self) -> RepoStatus:
        """Parse 'git status --porcelain' into a RepoStatus."""
        output = self._run_git('-C', str(self.root), 'status', '--porcelain')

        has_untracked = False
        for line in output.splitlines():
            if len(line) < 2:
                continue
            index_state = line[0]
            if line.startswith('??'):
                has_untracked = True
            elif index_state not in (' ', '!'):
                return RepoStatus.READY

        if has_untracked:
            return RepoStatus.UNTRACKED_ONLY
        return RepoStatus.NOTHING_STAGED

    def commit(self, message: str) -> int:
        """
        Run 'git commit -F <file>' with the message.

        Going through git itself keeps commit hooks working. Output is not
        captured so git's own messages reach the user unchanged.

        Returns:
            git's exit status
        """
        tmp = tempfile.NamedTemporaryFile(
            mode='w', prefix='commitMessage', suffix='.txt', delete=False, encoding='utf-8'
        )
        try:
            tmp.write(message)
            tmp.close()
            print_debug(f"temp file: {tmp.name}")
            try:
                result = subprocess.run(['git', 'commit', '-F', tmp.name], cwd=self.root)
            except FileNotFoundError:
                raise GitError("Git is not installed or not in PATH")
            return result.returncode
        finally:
            try:
                os.unlink(tmp.name)
            except OSError as e:
                print_debug(f"Could not delete temp file {tmp.name}: {e}")
