"""Runs the install sequence against a project."""

import logging

from ..models import SetupStep, StepResult, StepStatus
from .context import InstallContext
from .steps import INSTALL_STEPS

logger = logging.getLogger(__name__)


def run_step(ctx: InstallContext, step: SetupStep) -> StepStatus:
    """Run a single step, honoring its skip flag, gate and idempotency check.

    Errors raised by the action propagate unchanged.
    """
    if step.skip_option and getattr(ctx.options, step.skip_option):
        logger.debug(f"Step '{step.name}' skipped by --{step.skip_option.replace('_', '-')}")
        return StepStatus.SKIPPED

    if step.enabled is not None and not step.enabled(ctx):
        logger.debug(f"Step '{step.name}' not enabled")
        return StepStatus.SKIPPED

    if step.is_applied is not None and step.is_applied(ctx):
        logger.debug(f"Step '{step.name}' already applied")
        return StepStatus.ALREADY_APPLIED

    ctx.output.info(step.description)
    step.action(ctx)
    return StepStatus.APPLIED


def run_install(
    ctx: InstallContext,
    steps: tuple[SetupStep, ...] = INSTALL_STEPS,
) -> list[StepResult]:
    """Run every step in order, stopping at the first error.

    There is no rollback: every step checks the project state first, so
    re-running after fixing the cause is safe.

    Returns:
        One result per step, in sequence order
    """
    results = []
    for step in steps:
        status = run_step(ctx, step)
        results.append(StepResult(name=step.name, status=status))
    return results
