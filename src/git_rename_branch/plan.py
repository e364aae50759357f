"""
Command plan for a branch rename.

A plan is an ordered sequence of steps. Execution stops at the first step
that fails, so a later step only runs once everything before it succeeded
(the remote delete never runs unless the push landed).
"""

import shlex
from dataclasses import dataclass
from typing import Callable, Optional

import click

from git_rename_branch.git_utils import GitCommand
from git_rename_branch.options import ParsedOptions

DRY_RUN_TAG = "git-rename-branch (dry-run):"


@dataclass(frozen=True)
class Step:
    """One git operation in a plan."""
    name: str
    command: GitCommand


@dataclass(frozen=True)
class CommandPlan:
    """Steps derived from parsed options and the current ref."""
    options: ParsedOptions
    current_ref: str
    steps: tuple[Step, ...]

    @property
    def step_names(self) -> list[str]:
        return [step.name for step in self.steps]


@dataclass(frozen=True)
class StepOutcome:
    """Result of running one step."""
    step: Step
    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


def build_plan(options: ParsedOptions, current_ref: str) -> CommandPlan:
    """
    Build the ordered steps for a rename.

    Args:
        options: Validated options
        current_ref: Current branch name (or short hash if detached)

    Returns:
        CommandPlan with a rename step, plus push and delete steps when
        updating a remote. The delete step is left out when the name does
        not change, since it would remove the branch just pushed.
    """
    target = options.target_name
    steps = [Step('rename', GitCommand('branch', ('-m', target)))]

    if options.update_remote and options.remote_name:
        remote = options.remote_name
        steps.append(Step('push', GitCommand('push', ('--set-upstream', remote, target))))
        if target != current_ref:
            steps.append(Step('delete', GitCommand('push', (remote, '--delete', current_ref))))

    return CommandPlan(options=options, current_ref=current_ref, steps=tuple(steps))


def execute_plan(
    plan: CommandPlan,
    runner: Callable[[GitCommand], int],
    on_step: Optional[Callable[[StepOutcome], None]] = None,
) -> list[StepOutcome]:
    """
    Run plan steps in order, stopping at the first failure.

    Args:
        plan: Plan to execute
        runner: Runs one GitCommand and returns its exit code
        on_step: Optional callback invoked after each step

    Returns:
        Outcomes of the steps that ran; the last one is the failure, if any
    """
    outcomes: list[StepOutcome] = []
    for step in plan.steps:
        if outcomes and not outcomes[-1].succeeded:
            break
        outcome = StepOutcome(step=step, returncode=runner(step.command))
        outcomes.append(outcome)
        if on_step is not None:
            on_step(outcome)
    return outcomes


def exit_code_for(outcomes: list[StepOutcome]) -> int:
    """Exit code of the first failed step, or 0 when all succeeded.

    A step killed by signal N (negative returncode) maps to 128 + N, as shells report it.
    """
    for outcome in outcomes:
        if not outcome.succeeded:
            if outcome.returncode < 0:
                return 128 + abs(outcome.returncode)
            return outcome.returncode
    return 0


def render_dry_run(plan: CommandPlan, color: bool = False) -> list[str]:
    """
    Render the dry-run report for a plan.

    Args:
        plan: Plan to describe
        color: Emit bold styling for the tag and values

    Returns:
        Lines to print: a preamble with the resolved values, then one line
        per planned command
    """
    def bold(text: str) -> str:
        return click.style(text, bold=True) if color else text

    tag = bold(DRY_RUN_TAG)
    options = plan.options
    values = [
        ('dry_run', options.dry_run),
        ('update_remote', options.update_remote),
        ('remote_name', options.remote_name or ''),
        ('target_name', options.target_name),
        ('current_ref', plan.current_ref),
    ]

    lines = [f"{tag} {name}={bold(str(value))}" for name, value in values]
    lines.append(tag)
    lines.extend(f"{tag} {shlex.join(step.command.argv)}" for step in plan.steps)
    return lines
