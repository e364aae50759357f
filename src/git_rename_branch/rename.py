"""
Rename orchestration: parse, plan, then print or execute.

The repository root and color flag are passed in by the CLI; nothing here
reads the working directory or the terminal on its own.
"""

from functools import partial
from pathlib import Path
from typing import Callable, Optional, Sequence

import click

from git_rename_branch.errors import ExitCode
from git_rename_branch.git_utils import GitCommand, get_current_ref, list_remotes, run_git_command
from git_rename_branch.help import show_parse_errors
from git_rename_branch.logging import RunLogger
from git_rename_branch.options import parse_options
from git_rename_branch.plan import (
    StepOutcome,
    build_plan,
    execute_plan,
    exit_code_for,
    render_dry_run,
)


def _log_outcome(run_logger: RunLogger, outcome: StepOutcome) -> None:
    run_logger.log_step(outcome.step.name, outcome.step.command.argv, outcome.returncode)


def rename_branch(
    argv: Sequence[str],
    repo_root: Path,
    color: bool = False,
    run_logger: Optional[RunLogger] = None,
    runner: Optional[Callable[[GitCommand], int]] = None,
) -> int:
    """
    Rename the current branch according to argv.

    Args:
        argv: Arguments after the program name (help already handled)
        repo_root: Repository root, used as cwd for every git call
        color: Emit bold styling
        run_logger: Optional run log
        runner: Runs one GitCommand; defaults to git in repo_root

    Returns:
        Process exit code

    Raises:
        PreconditionError: If HEAD cannot be resolved
    """
    current_ref = get_current_ref(repo_root)
    result = parse_options(argv, list_remotes(repo_root))

    if not result.ok:
        show_parse_errors(result.errors, color=color)
        if run_logger:
            run_logger.log_error("run", "Invalid arguments", {
                "reason": "; ".join(e.message for e in result.errors),
                "argv": list(argv),
                "errors": [e.kind.value for e in result.errors],
            })
        return ExitCode.PARSE_ERROR

    options = result.options
    plan = build_plan(options, current_ref)

    if options.dry_run:
        for line in render_dry_run(plan, color=color):
            click.echo(line, color=color)
        return ExitCode.SUCCESS

    if runner is None:
        runner = partial(run_git_command, repo_root=repo_root)

    on_step = None
    if run_logger:
        run_logger.log_run_start({
            "target_name": options.target_name,
            "current_ref": current_ref,
            "update_remote": options.update_remote,
            "remote_name": options.remote_name,
            "steps": plan.step_names,
        })
        on_step = partial(_log_outcome, run_logger)

    outcomes = execute_plan(plan, runner, on_step=on_step)
    return exit_code_for(outcomes)
