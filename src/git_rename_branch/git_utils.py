"""
Git utilities for git-rename-branch.

Every git invocation goes through this module. Commands are always passed
to subprocess as argument lists, so branch and remote names reach git
exactly as typed.
"""

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from git_rename_branch.errors import PreconditionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitCommand:
    """A git subcommand and its arguments."""
    verb: str
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        """Full argument vector, starting with 'git'."""
        return ['git', self.verb, *self.args]


def get_git_root(start_path: Optional[str] = None) -> Optional[str]:
    """Find git repository root from start_path (or cwd).

    Args:
        start_path: Directory to start search from (default: cwd)

    Returns:
        Git root path as string, or None if git is not installed or
        start_path is not inside a git repository
    """
    if start_path is None:
        start_path = os.getcwd()

    try:
        result = subprocess.run(
            ['git', 'rev-parse', '--show-toplevel'],
            cwd=start_path,
            capture_output=True,
            text=True,
            check=True
        )
        return result.stdout.strip()
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None


def get_current_ref(repo_root: Path) -> str:
    """
    Resolve the name of the current branch.

    Falls back to the short commit hash when HEAD is detached.

    Args:
        repo_root: Path to git repository

    Returns:
        Branch name, or short commit hash for a detached HEAD

    Raises:
        PreconditionError: If HEAD cannot be resolved at all
    """
    try:
        result = subprocess.run(
            ['git', 'symbolic-ref', '--quiet', '--short', 'HEAD'],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=True
        )
        return result.stdout.strip()
    except FileNotFoundError as e:
        raise PreconditionError(f"git is not available: {e}") from e
    except subprocess.CalledProcessError:
        # Detached HEAD has no symbolic name
        logger.debug("HEAD is detached in %s, using short hash", repo_root)

    try:
        result = subprocess.run(
            ['git', 'rev-parse', '--short', 'HEAD'],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=True
        )
    except (subprocess.CalledProcessError, FileNotFoundError) as e:
        raise PreconditionError(f"Cannot resolve HEAD in {repo_root}") from e

    return result.stdout.strip()


def list_remotes(repo_root: Path) -> list[str]:
    """
    List the remotes configured for a repository.

    Args:
        repo_root: Path to git repository

    Returns:
        Remote names, empty if none are configured or git fails
    """
    try:
        result = subprocess.run(
            ['git', 'remote'],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=True
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return []

    return [line.strip() for line in result.stdout.splitlines() if line.strip()]


def run_git_command(command: GitCommand, repo_root: Path) -> int:
    """
    Run a mutating git command, letting its output reach the terminal.

    Args:
        command: Structured git command
        repo_root: Path to git repository (used as cwd)

    Returns:
        git's exit code
    """
    logger.debug("Running git command: %s", command.argv)
    result = subprocess.run(command.argv, cwd=repo_root, check=False)
    if result.returncode != 0:
        logger.debug("git %s exited with %d", command.verb, result.returncode)
    return result.returncode
