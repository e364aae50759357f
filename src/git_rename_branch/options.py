"""Argument parsing for git-rename-branch.

The parser scans the raw tokens itself instead of relying on click, because
errors are collected and reported together rather than stopping at the
first one. Nothing here runs git; the list of known remotes is passed in.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Sequence


HELP_ALIASES = ('help', '-h', '--help')

DRY_RUN_FLAGS = ('-d', '--dry-run')
UPDATE_REMOTE_FLAGS = ('-u', '--update-remote')


class ParseErrorKind(Enum):
    """Kinds of argument errors."""

    UNKNOWN_OPTION = "UNKNOWN_OPTION"
    MISSING_REMOTE_NAME = "MISSING_REMOTE_NAME"
    INVALID_REMOTE = "INVALID_REMOTE"
    TOO_MANY_ARGUMENTS = "TOO_MANY_ARGUMENTS"
    MISSING_TARGET_NAME = "MISSING_TARGET_NAME"


@dataclass(frozen=True)
class ParseError:
    """A single problem found in the argument list."""
    kind: ParseErrorKind
    message: str


@dataclass(frozen=True)
class ParsedOptions:
    """Validated intent of one invocation."""
    target_name: str
    dry_run: bool = False
    update_remote: bool = False
    remote_name: Optional[str] = None


@dataclass
class ParseResult:
    """Outcome of parse_options: options when valid, errors otherwise."""
    options: Optional[ParsedOptions] = None
    errors: list[ParseError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def is_help_request(argv: Sequence[str]) -> bool:
    """True for an empty argument list or when the first token asks for help."""
    return len(argv) == 0 or argv[0] in HELP_ALIASES


def parse_options(argv: Sequence[str], remotes: Iterable[str]) -> ParseResult:
    """
    Parse raw arguments into ParsedOptions.

    Args:
        argv: Arguments after the program name
        remotes: Names of the remotes configured in the repository

    Returns:
        ParseResult with options set only when no error was found.
        Errors accumulate, except that a second positional argument stops
        the scan immediately.
    """
    known_remotes = set(remotes)
    errors: list[ParseError] = []
    positionals: list[str] = []
    dry_run = False
    update_remote = False
    remote_name: Optional[str] = None

    i = 0
    while i < len(argv):
        token = argv[i]
        i += 1

        if token in DRY_RUN_FLAGS:
            dry_run = True
        elif token in UPDATE_REMOTE_FLAGS:
            update_remote = True
            # A flag-looking value is left in place to be scanned on its own
            if i >= len(argv) or argv[i].startswith('-'):
                errors.append(ParseError(
                    ParseErrorKind.MISSING_REMOTE_NAME,
                    f"{token} requires a remote name",
                ))
                continue
            remote_name = argv[i]
            i += 1
            if remote_name not in known_remotes:
                errors.append(ParseError(
                    ParseErrorKind.INVALID_REMOTE,
                    f"'{remote_name}' is not a valid remote",
                ))
        elif token.startswith('-'):
            errors.append(ParseError(
                ParseErrorKind.UNKNOWN_OPTION,
                f"unknown option: {token}",
            ))
        else:
            positionals.append(token)
            if len(positionals) > 1:
                errors.append(ParseError(
                    ParseErrorKind.TOO_MANY_ARGUMENTS,
                    f"too many arguments: expected one branch name, got "
                    f"'{positionals[0]}' and '{token}'",
                ))
                return ParseResult(errors=errors)

    if not positionals:
        errors.append(ParseError(
            ParseErrorKind.MISSING_TARGET_NAME,
            "missing new branch name",
        ))

    if errors:
        return ParseResult(errors=errors)

    return ParseResult(options=ParsedOptions(
        target_name=positionals[0],
        dry_run=dry_run,
        update_remote=update_remote,
        remote_name=remote_name,
    ))
