"""Idempotent patching of the agent guidelines document (CLAUDE.md).

Laravel Boost writes its guidelines between `<laravel-boost-guidelines>`
tags. Three blocks are merged into that file:

- A: a "Project Documentation" section, placed before the opening tag
- B: one rule line, placed after the "## Do Things the Laravel Way" line
  of the core rules section
- C: the starter pack rules section, placed before the closing tag

Markers are plain substrings; the document is never parsed. Every guard is
evaluated against the text as loaded, so the order of insertion does not
change which blocks are applied.

Known limitation: when the core rules section marker is present but the
anchor line is not, block B is not inserted and no message is produced.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..errors import DocumentError

logger = logging.getLogger(__name__)

OPENING_TAG = "<laravel-boost-guidelines>"
CLOSING_TAG = "</laravel-boost-guidelines>"
CORE_RULES_MARKER = "=== laravel/core rules ==="
LARAVEL_WAY_LINE = "## Do Things the Laravel Way"

DOCS_HEADING = "# Project Documentation"
ACTIONS_RULE_MARKER = "invokable classes under `app/Actions`"
STARTER_RULES_MARKER = "=== starter pack rules ==="

DOCS_SECTION = f"""{DOCS_HEADING}

This project keeps its developer documentation in `docs-site/` (VitePress).

- Read the matching page in `docs-site/` before changing an area of the codebase.
- Update `docs-site/` in the same change when setup steps, behavior or patterns change.
- Preview the site locally with `npm run docs:dev`.

"""

ACTIONS_RULE = (
    "- Put single-purpose business logic in invokable classes under `app/Actions`, "
    "not in controllers or models."
)

STARTER_RULES_SECTION = f"""{STARTER_RULES_MARKER}

## Starter Pack Conventions

- Actions live in `app/Actions` and expose a single public `handle()` method.
- Typed input and output use `spatie/laravel-data` objects in `app/DataObjects`.
- Backed enums live in `app/Enums`.
- Wrappers around external APIs live in `app/Services`.
- Framework-agnostic helpers live in `app/Support`.
- Run `composer analyse` and `php artisan test` before considering a change complete.

"""


class Placement(str, Enum):
    """Where a block goes relative to its anchor."""

    BEFORE = "before"
    AFTER_LINE = "after_line"


@dataclass(frozen=True)
class BlockPatch:
    """A block inserted once into the document.

    Attributes:
        name: Identifier used in logs.
        content: Text to insert.
        sentinel: Substring whose presence means the block is already there.
        requires: Substring that must be present for the block to apply.
        anchor: Insertion point. For BEFORE a substring, for AFTER_LINE a whole line.
        placement: How content is positioned against the anchor.
    """

    name: str
    content: str
    sentinel: str
    requires: str
    anchor: str
    placement: Placement = Placement.BEFORE

    def is_due(self, text: str) -> bool:
        """Return True if the guard conditions hold for text."""
        return self.requires in text and self.sentinel not in text

    def insert(self, text: str, newline: str = "\n") -> str:
        """Return text with the block inserted, or text unchanged if the anchor is missing.

        Line breaks in the block are written as newline.
        """
        content = self.content.replace("\n", newline)
        if self.placement is Placement.BEFORE:
            index = text.find(self.anchor)
            if index == -1:
                return text
            return text[:index] + content + text[index:]

        match = re.search(rf"^{re.escape(self.anchor)}[ \t]*(?=\r?$)", text, re.MULTILINE)
        if match is None:
            return text
        return text[: match.end()] + newline * 2 + content + text[match.end() :]


GUIDELINE_PATCHES: tuple[BlockPatch, ...] = (
    BlockPatch(
        name="documentation",
        content=DOCS_SECTION,
        sentinel=DOCS_HEADING,
        requires=OPENING_TAG,
        anchor=OPENING_TAG,
    ),
    BlockPatch(
        name="actions-rule",
        content=ACTIONS_RULE,
        sentinel=ACTIONS_RULE_MARKER,
        requires=CORE_RULES_MARKER,
        anchor=LARAVEL_WAY_LINE,
        placement=Placement.AFTER_LINE,
    ),
    BlockPatch(
        name="starter-rules",
        content=STARTER_RULES_SECTION,
        sentinel=STARTER_RULES_MARKER,
        requires=CLOSING_TAG,
        anchor=CLOSING_TAG,
    ),
)


def apply_patches(
    text: str,
    patches: tuple[BlockPatch, ...] = GUIDELINE_PATCHES,
) -> tuple[str, list[str]]:
    """Insert every due block into text.

    Args:
        text: Document content
        patches: Blocks to merge, in insertion order

    Returns:
        Tuple of (patched text, names of blocks actually inserted)
    """
    newline = "\r\n" if "\r\n" in text else "\n"
    due = [patch for patch in patches if patch.is_due(text)]
    applied: list[str] = []
    for patch in due:
        patched = patch.insert(text, newline)
        if patched == text:
            logger.debug(f"Anchor for block '{patch.name}' not found")
            continue
        text = patched
        applied.append(patch.name)
    return text, applied


def patch_document(
    path: Path,
    patches: tuple[BlockPatch, ...] = GUIDELINE_PATCHES,
) -> list[str]:
    """Patch the document at path in place.

    The file is written once, and only when at least one block was inserted.

    Returns:
        Names of blocks inserted (empty if the file is missing or up to date)
    """
    if not path.exists():
        logger.debug(f"No guidelines document at {path}")
        return []

    patched, applied = apply_patches(read_document(path), patches)
    if applied:
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(patched)
        logger.debug(f"Inserted {applied} into {path}")
    return applied


def read_document(path: Path) -> str:
    """Read the document with its line endings untouched.

    Raises:
        DocumentError: If the file is not valid UTF-8
    """
    try:
        with path.open(encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise DocumentError(f"Cannot read {path}: not valid UTF-8 ({e.reason})") from e
