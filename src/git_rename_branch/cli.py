import click
import sys
from pathlib import Path

from git_rename_branch import __version__
from git_rename_branch.config import get_log_dir, resolve_color
from git_rename_branch.errors import ExitCode, PreconditionError
from git_rename_branch.git_utils import get_git_root
from git_rename_branch.help import PROG_NAME, show_usage
from git_rename_branch.logging import RunLogger
from git_rename_branch.options import is_help_request
from git_rename_branch.rename import rename_branch


class RawArgsCommand(click.Command):
    """Command that skips click's option parsing.

    Every token, including '--' and '--version', lands in ctx.args in the
    order given, for parse_options to judge.
    """

    def parse_args(self, ctx, args):
        ctx.args = list(args)
        return ctx.args


@click.command(cls=RawArgsCommand, add_help_option=False)
@click.pass_context
def cli(ctx):
    """Rename the current branch and optionally update a remote."""
    args = ctx.args
    color = resolve_color(sys.stdout.isatty())

    if is_help_request(args):
        show_usage(color=color)
        sys.exit(ExitCode.USAGE)

    if args == ['--version']:
        click.echo(f"{PROG_NAME}, version {__version__}")
        sys.exit(ExitCode.SUCCESS)

    git_root = get_git_root()
    if git_root is None:
        click.echo("fatal: not a git repository (or git is not installed)", err=True)
        sys.exit(ExitCode.PRECONDITION)

    log_dir = get_log_dir()
    run_logger = RunLogger(log_dir) if log_dir else None

    try:
        exit_code = rename_branch(args, Path(git_root), color=color, run_logger=run_logger)
    except PreconditionError as e:
        click.echo(f"fatal: {e}", err=True)
        sys.exit(ExitCode.PRECONDITION)
    except KeyboardInterrupt:
        sys.exit(ExitCode.INTERRUPTED)

    sys.exit(exit_code)


if __name__ == '__main__':  # pragma: no cover
    cli()
