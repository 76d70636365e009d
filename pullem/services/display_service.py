"""Display service for repository status lines and prompts"""
from typing import Optional

from rich.console import Console
from rich.text import Text

from pullem.constants import (
    CONFIRM_NO,
    CONFIRM_YES,
    PRUNE_LINE_INDENT,
    REPOSITORY_LINE_SEPARATOR,
    SYMBOL_FAILURE,
    SYMBOL_SUCCESS,
)
from pullem.logging_config import get_logger
from pullem.models.repository import RepositoryResult

logger = get_logger(__name__)


class DisplayService:
    """Prints one line per repository and asks for prune confirmations.

    Paths, branch names and error text are printed as plain ``Text`` so rich
    never interprets them as markup.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def _print(self, text: Text) -> None:
        self.console.print(text, soft_wrap=True)

    def show_result(self, result: RepositoryResult) -> None:
        """Print the status line for a processed repository."""
        if result.status.succeeded:
            marker, style = SYMBOL_SUCCESS, "green"
        else:
            marker, style = SYMBOL_FAILURE, "red"

        line = Text.assemble(
            marker,
            REPOSITORY_LINE_SEPARATOR,
            result.relative_path,
            " ",
            (result.status.value, style),
        )
        if result.detail:
            line.append(f" {result.detail}")
        self._print(line)

    def show_prune_listing_failed(self, error: Exception) -> None:
        self._print(Text.assemble(
            PRUNE_LINE_INDENT, SYMBOL_FAILURE, " ",
            ("failed pruning orphaned branches", "red"), f" {error}",
        ))

    def show_prune_failed(self, branch_name: str, error: Exception) -> None:
        self._print(Text.assemble(
            PRUNE_LINE_INDENT, SYMBOL_FAILURE, " ",
            ("failed pruning orphaned branch", "red"), f" {branch_name} {error}",
        ))

    def show_pruned(self, branch_name: str) -> None:
        self._print(Text.assemble(
            PRUNE_LINE_INDENT, SYMBOL_SUCCESS, " ",
            ("pruned orphaned branch", "green"), f" {branch_name}",
        ))

    def confirm(self, question: str) -> bool:
        """Ask a yes/no question until one of the accepted answers is given.

        There is no default answer. EOFError from a closed stdin propagates.
        """
        prompt = f"{question} [y/n]: "
        while True:
            response = self.console.input(prompt, markup=False, emoji=False).strip().lower()
            if response in CONFIRM_YES:
                return True
            if response in CONFIRM_NO:
                return False
            logger.debug(f"Unrecognised answer {response!r}, asking again")
