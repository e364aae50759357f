"""
Shared pytest fixtures for git-rename-branch tests.

Fixtures are automatically discovered by pytest when placed in conftest.py.
"""

import subprocess

import pytest
from unittest.mock import Mock
from click.testing import CliRunner


def git(*args, cwd):
    """Run a git command for test setup, failing the test on error."""
    return subprocess.run(
        ['git', *args],
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True
    )


# =============================================================================
# SUBPROCESS MOCK HELPERS
# =============================================================================

def create_subprocess_mock(branch="old-name", remotes=("origin",), failing=()):
    """
    Create a mock for subprocess.run that answers the git queries we make.

    Args:
        branch: Name returned for the current branch
        remotes: Names returned by 'git remote'
        failing: git verbs (e.g. 'push') whose mutating calls exit non-zero

    Returns:
        A side_effect function that returns mock results based on the command.
        Every call is recorded on side_effect.calls.
    """
    calls = []

    def side_effect(args, **kwargs):
        cmd = list(args)
        calls.append(cmd)

        if cmd[:2] == ['git', 'symbolic-ref']:
            return Mock(returncode=0, stdout=f"{branch}\n", stderr="")

        if cmd == ['git', 'remote']:
            return Mock(returncode=0, stdout="".join(f"{r}\n" for r in remotes), stderr="")

        if len(cmd) >= 2 and cmd[1] in failing:
            return Mock(returncode=1, stdout="", stderr="error: failed\n")

        return Mock(returncode=0, stdout="", stderr="")

    side_effect.calls = calls
    return side_effect


# =============================================================================
# CLI FIXTURES
# =============================================================================

@pytest.fixture
def cli_runner():
    """
    Provide Click CLI test runner.

    Usage:
        def test_my_command(cli_runner):
            from git_rename_branch.cli import cli
            result = cli_runner.invoke(cli, ['-d', 'new-name'])
    """
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """
    Point HOME at a temporary directory and clear the config cache.

    Keeps the user's ~/.git-rename-branch/config.yaml out of every test.
    """
    from git_rename_branch import config

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    config._CONFIG_CACHE = None
    yield home
    config._CONFIG_CACHE = None


# =============================================================================
# GIT REPOSITORY FIXTURES
# =============================================================================

@pytest.fixture
def git_repo(tmp_path):
    """
    Create a git repository on branch 'old-name' with one commit.

    Usage:
        def test_git_ops(git_repo):
            # git commands will work in this directory
    """
    repo = tmp_path / "repo"
    repo.mkdir()

    git('init', cwd=repo)
    git('config', 'user.email', 'test@example.com', cwd=repo)
    git('config', 'user.name', 'Test User', cwd=repo)
    git('config', 'commit.gpgsign', 'false', cwd=repo)

    (repo / "README.md").write_text("# Test Project\n")
    git('add', 'README.md', cwd=repo)
    git('commit', '-m', 'Initial commit', cwd=repo)
    git('checkout', '-b', 'old-name', cwd=repo)

    return repo


@pytest.fixture
def git_repo_with_remote(tmp_path, git_repo):
    """
    Repository whose 'old-name' branch is pushed to a bare remote 'origin'.

    Returns:
        Tuple of (repo path, bare remote path)
    """
    remote = tmp_path / "remote.git"
    git('init', '--bare', str(remote), cwd=tmp_path)
    git('remote', 'add', 'origin', str(remote), cwd=git_repo)
    git('push', 'origin', 'old-name', cwd=git_repo)
    return git_repo, remote


def remote_branches(remote):
    """Branch names present in a bare repository."""
    result = git('for-each-ref', '--format=%(refname:short)', 'refs/heads', cwd=remote)
    return set(result.stdout.split())


@pytest.fixture
def list_remote_branches():
    """Provide remote_branches() to tests."""
    return remote_branches


@pytest.fixture
def subprocess_mock():
    """Provide the create_subprocess_mock factory to tests."""
    return create_subprocess_mock
