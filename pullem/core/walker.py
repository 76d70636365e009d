"""Directory tree traversal"""

import os
import stat
from typing import Callable, List, Optional, Tuple

from pullem.exceptions import WalkError, describe_error
from pullem.logging_config import get_logger

logger = get_logger(__name__)

# visitor(path, is_dir, error) -> whether to descend into path
Visitor = Callable[[str, bool, Optional[OSError]], bool]


class TreeWalker:
    """Depth-first, pre-order walk in lexical order.

    Symlinks are reported as plain entries and never followed. A directory
    that cannot be listed is handed to the visitor a second time with the
    error, and the walk moves on to its next sibling.
    """

    def walk(self, root: str, visitor: Visitor) -> None:
        """Walk the tree rooted at root.

        Raises:
            WalkError: If root itself cannot be stat'ed
        """
        try:
            root_is_dir = stat.S_ISDIR(os.lstat(root).st_mode)
        except OSError as e:
            raise WalkError(root, describe_error(e)) from e

        stack: List[Tuple[str, bool]] = [(root, root_is_dir)]
        while stack:
            path, is_dir = stack.pop()

            descend = visitor(path, is_dir, None)
            if not is_dir:
                continue
            if not descend:
                logger.debug(f"Skipping subtree {path}")
                continue

            try:
                entries = self._list_entries(path)
            except OSError as e:
                logger.debug(f"Cannot list {path}: {e}")
                visitor(path, True, e)
                continue

            # Reversed so the lexically first entry is popped first
            stack.extend(reversed(entries))

    @staticmethod
    def _list_entries(path: str) -> List[Tuple[str, bool]]:
        """List a directory's entries sorted by name as (path, is_dir) pairs."""
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                entries.append((entry.path, is_dir))
        entries.sort()
        return entries
