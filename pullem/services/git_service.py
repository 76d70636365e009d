"""Git operations service"""
import git
from typing import List, Optional, Union, TYPE_CHECKING

from pullem.constants import DEFAULT_REMOTE, HEADS_PREFIX
from pullem.exceptions import GitOperationError, describe_error
from pullem.logging_config import get_logger
from pullem.models.repository import LocalBranch

if TYPE_CHECKING:
    from pullem.config import Config

logger = get_logger(__name__)

# Format used to list local branches with their upstreams
BRANCH_LISTING_FORMAT = "%(refname) %(upstream)"


class GitService:
    """Service for Git operations on a single repository.

    Every method shells out to the git executable through GitPython's command
    wrapper and only looks at the exit status and the trimmed output.
    """

    def __init__(self, repo_path: str, config: Union['Config', dict]):
        """Initialize the service.

        Args:
            repo_path: Path to the repository working tree
            config: Configuration dictionary or Config object
        """
        self.repo_path = repo_path
        self.config = config
        self.remote_name = config.get('remote_name', DEFAULT_REMOTE)
        logger.debug(f"Git service initialized for {repo_path}")

    def _get_repo(self):
        """Open the repository.

        GitPython repos are lightweight - they don't clone, just open the existing repo.

        Returns:
            git.Repo: A fresh repository instance
        """
        return git.Repo(self.repo_path)

    def _run(self, operation: str, *args, branch: Optional[str] = None) -> str:
        """Run a git command in the repository and return its output.

        Raises:
            GitOperationError: If the repository cannot be opened or git exits non-zero
        """
        try:
            repo = self._get_repo()
            logger.debug(f"[{self.repo_path}] git {operation} {' '.join(args)}")
            output = getattr(repo.git, operation)(*args)
        except git.exc.GitError as e:
            raise GitOperationError(operation.replace('_', '-'), branch, describe_error(e)) from e
        return output.strip()

    def default_branch(self) -> str:
        """Get the short name of the branch HEAD points to."""
        return self._run('symbolic_ref', '--short', 'HEAD')

    def current_ref(self) -> Optional[str]:
        """Get the full ref HEAD points to, or None when HEAD is detached."""
        try:
            repo = self._get_repo()
            return repo.git.symbolic_ref('--quiet', 'HEAD').strip()
        except git.exc.GitCommandError as e:
            # --quiet exits 1 without output when HEAD is not a symbolic ref
            if e.status == 1:
                logger.debug(f"[{self.repo_path}] HEAD is detached")
                return None
            raise GitOperationError('symbolic-ref', message=describe_error(e)) from e
        except git.exc.GitError as e:
            raise GitOperationError('symbolic-ref', message=describe_error(e)) from e

    def is_clean(self) -> bool:
        """Check that there are no staged, unstaged or untracked changes."""
        status = self._run('status', '--porcelain')
        return status == ""

    def pull(self, branch: str) -> bool:
        """Fast-forward the branch from the remote.

        Returns:
            True if git pulled successfully, False for any failure
        """
        try:
            self._run('pull', self.remote_name, branch, '--ff-only', branch=branch)
            return True
        except GitOperationError as e:
            logger.debug(f"Error updating {branch}: {e}")
            return False

    def list_branches(self) -> List[LocalBranch]:
        """List local branches with their configured upstream."""
        output = self._run('for_each_ref', '--format', BRANCH_LISTING_FORMAT, 'refs/heads')

        branches = []
        for line in output.splitlines():
            line = line.strip()
            if not line:
                continue

            parts = line.split()
            if not parts[0].startswith(HEADS_PREFIX):
                continue

            name = parts[0][len(HEADS_PREFIX):]
            # A line only tracks something when it splits into exactly refname and upstream
            upstream = parts[1] if len(parts) == 2 else ""
            branches.append(LocalBranch(name=name, upstream=upstream))

        logger.debug(f"[{self.repo_path}] Found {len(branches)} local branches")
        return branches

    def delete_branch(self, branch_name: str) -> None:
        """Force-delete a local branch, discarding unmerged commits."""
        self._run('branch', '-D', branch_name, branch=branch_name)
        logger.info(f"Deleted branch {branch_name} in {self.repo_path}")
