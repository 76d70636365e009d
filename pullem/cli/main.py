"""Command-line entry point for pullem"""

import os
import sys
from rich.console import Console
from rich.markup import escape

from pullem.cli.args import parse_args
from pullem.config import Config
from pullem.constants import USAGE_TEXT
from pullem.core.updater import RepositoryUpdater
from pullem.logging_config import setup_logging

console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)


def resolve_root(paths) -> str:
    """Resolve the optional positional path to an absolute root."""
    return os.path.abspath(paths[0] if paths else ".")


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        # More than one root is a usage error, but not a failing one
        if len(parsed_args.paths) > 1:
            console.print(USAGE_TEXT, markup=False)
            return 0

        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config(
            prune=parsed_args.prune,
            protected_branches=parsed_args.protected,
            remote_name=parsed_args.remote,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {escape(str(value))}")

        try:
            root = resolve_root(parsed_args.paths)
        except OSError as e:
            error_console.print(f"[red]Error: cannot resolve root path: {escape(str(e))}[/red]")
            return 1

        RepositoryUpdater(root, config).run()
        return 0
    except (KeyboardInterrupt, EOFError):
        error_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args is not None and parsed_args.debug:
            error_console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
