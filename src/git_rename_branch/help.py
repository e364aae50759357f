"""Usage text for git-rename-branch."""
import click


PROG_NAME = 'git-rename-branch'

USAGE_TEXT = f"""\
Usage: {PROG_NAME} [options] <name>

Rename the current branch to <name>.

Options:
  -d, --dry-run                  Print the git commands without running them
  -u, --update-remote <remote>   Push <name> to <remote> with upstream set,
                                 then delete the old branch from <remote>
  --version                      Show the version and exit (as the only argument)

Examples:
  {PROG_NAME} feature-login
  {PROG_NAME} -u origin feature-login
  {PROG_NAME} --dry-run --update-remote origin feature-login
"""

HELP_HINT = f"Run '{PROG_NAME} --help' for usage."


def show_usage(color: bool = False):
    """Display the usage text, with the heading in bold when color is on."""
    heading, _, rest = USAGE_TEXT.partition('\n')
    if color:
        heading = click.style(heading, bold=True)
    click.echo(heading, color=color)
    click.echo(rest, nl=False, color=color)


def show_parse_errors(errors, color: bool = False):
    """Print each parse error on stderr, followed by the help hint.

    Args:
        errors: ParseError instances from parse_options
        color: Bold the 'error:' prefix
    """
    prefix = click.style('error:', bold=True) if color else 'error:'
    for error in errors:
        click.echo(f"{prefix} {error.message}", err=True, color=color)
    click.echo(HELP_HINT, err=True, color=color)
