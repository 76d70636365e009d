"""Command-line argument parsing for pullem."""

import argparse
from pullem.__version__ import __version__
from pullem.constants import DEFAULT_PROTECTED_BRANCHES, DEFAULT_REMOTE


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="pullem",
        description="Recursively fast-forward every clean git checkout on its default branch",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="path",
        help="Directory to scan (default: current working directory)",
    )
    parser.add_argument(
        "--prune",
        action="store_true",
        help="After updating, offer to delete local branches with no upstream",
    )
    parser.add_argument(
        "--protected",
        action="append",
        metavar="NAME",
        help="Branch never offered for pruning, repeat for more (replaces the default: master)",
    )
    parser.add_argument(
        "--remote", default=DEFAULT_REMOTE, help="Remote to pull from (default: origin)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"pullem {__version__}")

    # Paths may come before, between or after flags
    args = parser.parse_intermixed_args(argv)
    if args.protected is None:
        args.protected = list(DEFAULT_PROTECTED_BRANCHES)
    return args
