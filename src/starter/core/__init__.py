"""Core install logic.

- context: InstallContext shared by all steps
- steps: the fixed, ordered install sequence
- orchestrator: step runner
- doc_patcher: idempotent merge of blocks into the agent guidelines file
"""

from .context import STUBS_ROOT, InstallContext
from .doc_patcher import (
    GUIDELINE_PATCHES,
    BlockPatch,
    apply_patches,
    patch_document,
    read_document,
)
from .orchestrator import run_install, run_step
from .steps import INSTALL_STEPS, PUBLISHERS

__all__ = [
    "GUIDELINE_PATCHES",
    "INSTALL_STEPS",
    "PUBLISHERS",
    "STUBS_ROOT",
    "BlockPatch",
    "InstallContext",
    "apply_patches",
    "patch_document",
    "read_document",
    "run_install",
    "run_step",
]
