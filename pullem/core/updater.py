"""Per-repository update logic for pullem"""

import os
from typing import Callable, List, Optional, Union

from pullem.config import Config
from pullem.constants import GIT_MARKER, HEADS_PREFIX, PRUNE_LINE_INDENT
from pullem.core.walker import TreeWalker
from pullem.exceptions import GitOperationError, describe_error
from pullem.logging_config import get_logger
from pullem.models.repository import (
    LocalBranch,
    RepositoryContext,
    RepositoryResult,
    RepositoryStatus,
)
from pullem.services.display_service import DisplayService
from pullem.services.git_service import GitService

logger = get_logger(__name__)


class RepositoryUpdater:
    """Fast-forwards every repository found under a root directory."""

    def __init__(
        self,
        root: str,
        config: Union[Config, dict],
        git_service_factory: Optional[Callable[[str], GitService]] = None,
        display_service: Optional[DisplayService] = None,
    ):
        """Initialize the updater.

        Args:
            root: Absolute path the walk starts from; output paths are relative to it
            config: Configuration dict or Config object
            git_service_factory: Builds the git backend for a repository path
            display_service: Where status lines and prompts go
        """
        self.root = root
        if isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.git_service_factory = git_service_factory or self._default_git_service
        self.display_service = display_service or DisplayService()
        self.results: List[RepositoryResult] = []

    def _default_git_service(self, path: str) -> GitService:
        return GitService(path, self.config)

    def run(self, walker: Optional[TreeWalker] = None) -> List[RepositoryResult]:
        """Walk the tree under root and process every repository found."""
        walker = walker or TreeWalker()
        logger.info(f"Scanning {self.root}")
        walker.walk(self.root, self.visit)
        logger.info(f"Processed {len(self.results)} repositories")
        return self.results

    def _relative(self, path: str) -> str:
        try:
            return os.path.relpath(path, self.root)
        except ValueError:
            return path

    def _report(self, relative_path: str, status: RepositoryStatus, detail: Optional[str] = None) -> RepositoryResult:
        result = RepositoryResult(relative_path, status, detail)
        self.results.append(result)
        self.display_service.show_result(result)
        return result

    @staticmethod
    def is_repository(path: str) -> bool:
        """Check whether a .git entry sits directly inside path.

        A dangling .git symlink counts as present.

        Raises:
            OSError: For stat failures other than the entry not existing
        """
        try:
            os.lstat(os.path.join(path, GIT_MARKER))
        except (FileNotFoundError, NotADirectoryError):
            return False
        return True

    def visit(self, path: str, is_dir: bool, error: Optional[OSError] = None) -> bool:
        """Tree walker callback. Returns whether to descend into path."""
        relative_path = self._relative(path)

        if error is not None:
            self._report(relative_path, RepositoryStatus.FAILED, describe_error(error))
            return False

        if not is_dir:
            return True

        try:
            if not self.is_repository(path):
                return True
        except OSError as e:
            self._report(relative_path, RepositoryStatus.FAILED, describe_error(e))
            return False

        self.process_repository(path, relative_path)
        # Nested repositories such as submodules belong to this one
        return False

    def process_repository(self, path: str, relative_path: Optional[str] = None) -> RepositoryResult:
        """Run the safety checks on a repository and fast-forward it."""
        if relative_path is None:
            relative_path = self._relative(path)
        git_service = self.git_service_factory(path)

        try:
            context = RepositoryContext(
                path=path,
                relative_path=relative_path,
                default_branch=git_service.default_branch(),
            )
            context.current_ref = git_service.current_ref()
            if context.current_ref != f"{HEADS_PREFIX}{context.default_branch}":
                return self._report(relative_path, RepositoryStatus.NOT_ON_DEFAULT)

            if not git_service.is_clean():
                return self._report(relative_path, RepositoryStatus.NOT_CLEAN)
        except GitOperationError as e:
            return self._report(relative_path, RepositoryStatus.FAILED, describe_error(e))

        if not git_service.pull(context.default_branch):
            return self._report(relative_path, RepositoryStatus.FAST_FORWARD_FAILED)

        result = self._report(relative_path, RepositoryStatus.UPDATED)

        if self.config.prune:
            self.prune_orphaned_branches(git_service, context)

        return result

    def orphaned_branches(self, branches: List[LocalBranch], default_branch: str) -> List[LocalBranch]:
        """Branches without an upstream, excluding protected and default branches."""
        protected = self.config.protected_branches
        return [
            branch for branch in branches
            if branch.name not in protected
            and branch.name != default_branch
            and not branch.has_upstream
        ]

    def prune_orphaned_branches(self, git_service: GitService, context: RepositoryContext) -> List[str]:
        """Offer to delete each orphaned branch. Returns the names deleted."""
        try:
            branches = git_service.list_branches()
        except GitOperationError as e:
            self.display_service.show_prune_listing_failed(e)
            return []

        pruned = []
        for branch in self.orphaned_branches(branches, context.default_branch):
            question = f"{PRUNE_LINE_INDENT}Do you really want to delete branch {branch.name}"
            if not self.display_service.confirm(question):
                logger.debug(f"Keeping {branch.name} in {context.relative_path}")
                continue

            try:
                git_service.delete_branch(branch.name)
            except GitOperationError as e:
                self.display_service.show_prune_failed(branch.name, e)
                continue

            self.display_service.show_pruned(branch.name)
            pruned.append(branch.name)

        return pruned
