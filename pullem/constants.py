"""Shared constants for pullem."""

# Output markers
SYMBOL_SUCCESS = "✅"
SYMBOL_FAILURE = "❌"

# Marker is followed by two spaces on repository lines, one on prune lines
REPOSITORY_LINE_SEPARATOR = "  "
PRUNE_LINE_INDENT = "\t"

# Git layout
GIT_MARKER = ".git"
HEADS_PREFIX = "refs/heads/"
DEFAULT_REMOTE = "origin"
DEFAULT_PROTECTED_BRANCHES = ["master"]

# Confirmation answers (compared after lower-casing and trimming)
CONFIRM_YES = ("y", "yes")
CONFIRM_NO = ("n", "no")

USAGE_TEXT = """
Usage:
    pullem
         recursively updates git repos starting from current working dir
    pullem some_path
         recursively updates git repos starting from specified path"""
