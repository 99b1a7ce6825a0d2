"""Managed block parsing, upsert and removal.

A managed block is the text between a start marker line and an end marker
line, markers included. Everything here is pure string work so the
upsert/removal rules can be exercised without touching the filesystem.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import NamedTuple

from accent_sync import END_MARKER, START_MARKER
from accent_sync.errors import CorruptBlockError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManagedBlock:
    """A marker-delimited block and its inner content."""

    body: str
    start_marker: str = START_MARKER
    end_marker: str = END_MARKER

    def render(self) -> str:
        """Serialize as ``start\\nbody\\nend`` (no trailing newline)."""
        body = self.body.strip("\n")
        if not body:
            return f"{self.start_marker}\n{self.end_marker}"
        return f"{self.start_marker}\n{body}\n{self.end_marker}"


class BlockMatch(NamedTuple):
    start: int
    end: int
    block: ManagedBlock


def _block_pattern(start_marker: str, end_marker: str, edge: str = "") -> re.Pattern:
    return re.compile(
        edge + re.escape(start_marker) + r"(.*?)" + re.escape(end_marker) + edge,
        re.DOTALL,
    )


def _check_dangling(text: str, pattern: re.Pattern, start_marker: str, end_marker: str) -> None:
    """Raise if a marker survives once every complete block is cut out."""
    rest = pattern.sub("", text)
    if start_marker in rest:
        raise CorruptBlockError(f"Start marker without matching end marker: {start_marker}")
    if end_marker in rest:
        raise CorruptBlockError(f"End marker without matching start marker: {end_marker}")


def find_block(
    text: str,
    start_marker: str = START_MARKER,
    end_marker: str = END_MARKER,
) -> BlockMatch | None:
    """Locate the first managed block in ``text``.

    Returns:
        BlockMatch with the span of the markers and the parsed block, or
        None when the text holds no block.

    Raises:
        CorruptBlockError: If only one of the two markers is present.
    """
    pattern = _block_pattern(start_marker, end_marker)
    _check_dangling(text, pattern, start_marker, end_marker)
    match = pattern.search(text)
    if match is None:
        return None
    block = ManagedBlock(match.group(1).strip("\n"), start_marker, end_marker)
    return BlockMatch(match.start(), match.end(), block)


def upsert_block(
    content: str,
    start_marker: str,
    end_marker: str,
    new_block: str,
) -> str:
    """Replace the managed block in ``content`` or append ``new_block``.

    An existing block is replaced in place, keeping the newline before and
    after it. Extra blocks left over from earlier runs are dropped, so the
    result always holds exactly one. Without a block, ``new_block`` is
    appended after a blank line (or becomes the whole text when ``content``
    is blank). Non-text input or a regex failure returns ``content``
    unchanged.

    Raises:
        CorruptBlockError: If only one of the two markers is present. This
            is the one error that crosses the otherwise no-throw upsert
            boundary, so a truncated block fails loudly instead of gaining a
            second block; sync_accent() catches and logs it.
    """
    if not isinstance(content, str) or not isinstance(new_block, str):
        logger.error("Block upsert: expected text, got %s", type(content).__name__)
        return content

    try:
        pattern = _block_pattern(start_marker, end_marker, edge=r"(\n?)")
        matches = list(pattern.finditer(content))
    except (re.error, TypeError) as e:
        logger.error("Error during block upsert regex: %s", e, exc_info=True)
        return content

    _check_dangling(content, pattern, start_marker, end_marker)

    if not matches:
        base = content.rstrip()
        if base == "":
            return new_block + "\n"
        return base + "\n\n" + new_block + "\n"

    first = matches[0]
    out = [content[:first.start()], first.group(1), new_block, first.group(3)]
    pos = first.end()
    for extra in matches[1:]:
        out.append(content[pos:extra.start()])
        if extra.group(1) or extra.group(3):
            out.append("\n")
        pos = extra.end()
    out.append(content[pos:])
    return "".join(out)


def strip_block(
    content: str,
    start_marker: str = START_MARKER,
    end_marker: str = END_MARKER,
) -> str | None:
    """Remove every managed block from ``content``.

    Surrounding whitespace goes with the block; the text before and after
    is rejoined with a blank line and trimmed.

    Returns:
        The remaining text (possibly empty), or None when no block exists.

    Raises:
        CorruptBlockError: If only one of the two markers is present.
    """
    pattern = _block_pattern(start_marker, end_marker, edge=r"\s*")
    _check_dangling(content, pattern, start_marker, end_marker)
    if pattern.search(content) is None:
        return None
    # split() also yields the captured inner content; keep only the outside
    pieces = pattern.split(content)[::2]
    return "\n\n".join(p for p in pieces if p.strip()).strip()
