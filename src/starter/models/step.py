"""Setup step descriptors and their results.

A SetupStep is one entry in the fixed install sequence. Steps are plain
data so the sequence can be inspected and each step exercised on its own.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from ..core.context import InstallContext


class StepStatus(str, Enum):
    """Outcome of a single setup step."""

    APPLIED = "applied"
    ALREADY_APPLIED = "already_applied"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class SetupStep:
    """One named unit of work in the install sequence.

    Steps are evaluated in this order: skip_option, enabled, is_applied, action.

    Attributes:
        name: Stable identifier, used in logs and results.
        description: Progress message printed before the action runs.
        action: Side-effecting callable receiving the install context.
        is_applied: Optional predicate; when it returns True the action is not run.
            Steps without one are idempotent item by item inside the action.
        enabled: Optional gate (integration present, user confirmed, ...). A step
            whose gate returns False is skipped.
        skip_option: Name of the InstallOptions flag that disables this step.
    """

    name: str
    description: str
    action: "Callable[[InstallContext], None]"
    is_applied: "Callable[[InstallContext], bool] | None" = None
    enabled: "Callable[[InstallContext], bool] | None" = None
    skip_option: str | None = None


class StepResult(BaseModel):
    """Result of running one setup step."""

    name: str = Field(description="Step name")
    status: StepStatus = Field(description="What happened to the step")
