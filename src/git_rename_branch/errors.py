"""Exit codes and exception types for git-rename-branch.

Each failure class in the CLI maps to one exit code so callers (shell
scripts, git aliases) can tell them apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes.

    A failed git step is not listed here: the CLI exits with that step's
    own return code.
    """

    SUCCESS = 0
    USAGE = 1
    PARSE_ERROR = 2
    PRECONDITION = 128
    INTERRUPTED = 130


class RenameBranchError(Exception):
    """Base class for git-rename-branch errors."""


class PreconditionError(RenameBranchError):
    """Raised when git is unavailable or no repository/HEAD can be resolved."""
