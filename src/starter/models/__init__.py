"""Data models for the installer.

- InstallOptions: flags of the install command
- SetupStep: one step of the install sequence
- StepResult / StepStatus: outcome of running a step
"""

from .options import InstallOptions
from .step import SetupStep, StepResult, StepStatus

__all__ = [
    "InstallOptions",
    "SetupStep",
    "StepResult",
    "StepStatus",
]
