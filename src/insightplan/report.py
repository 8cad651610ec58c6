"""Turn free-form advisory text into typed display blocks.

The model answers in loose markdown. Each line is classified on its own, first
match wins:

1. heading   - optional ``1.`` / ``-`` / ``•`` marker, optional ``**`` emphasis,
               then one of the heading keywords as a whole word
2. bullet    - trimmed line starts with ``-`` or ``•``
3. numbered  - trimmed line starts with digits and a dot
4. plain     - anything else, kept verbatim (blank lines included)
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Pattern, Sequence

DEFAULT_HEADING_KEYWORDS = (
    "Subject",
    "General",
    "Tip",
    "Tips",
    "Math",
    "Science",
    "English",
    "Hindi",
    "Computer",
)

BULLET_RE = re.compile(r"^[-•]\s*")
NUMBERED_RE = re.compile(r"^\d+\.")


class BlockKind(Enum):
    HEADING = "heading"
    BULLET = "bullet"
    NUMBERED_ITEM = "numbered_item"
    PLAIN = "plain"


@dataclass(frozen=True)
class ReportBlock:
    kind: BlockKind
    text: str


def heading_keywords(columns: Iterable[str] = (), base: Sequence[str] = DEFAULT_HEADING_KEYWORDS) -> List[str]:
    """Defaults plus the dataset's subject names, without duplicates."""
    merged: List[str] = []
    for word in list(base) + [str(col).strip() for col in columns]:
        if word and word not in merged:
            merged.append(word)
    return merged


def heading_pattern(keywords: Iterable[str], ignore_case: bool = False) -> Optional[Pattern[str]]:
    words = sorted({word for word in keywords if word}, key=len, reverse=True)
    if not words:
        return None
    alternatives = "|".join(re.escape(word) for word in words)
    flags = re.IGNORECASE if ignore_case else 0
    return re.compile(rf"^\s*(?:\d+\.\s|[-•])?\s*(?:\*\*|__)?\s*(?:{alternatives})(?!\w)", flags)


def classify_line(line: str, pattern: Optional[Pattern[str]]) -> ReportBlock:
    stripped = line.strip()
    if pattern is not None and pattern.match(line):
        return ReportBlock(BlockKind.HEADING, stripped)
    if stripped.startswith(("-", "•")):
        return ReportBlock(BlockKind.BULLET, BULLET_RE.sub("", stripped))
    if NUMBERED_RE.match(stripped):
        return ReportBlock(BlockKind.NUMBERED_ITEM, stripped)
    return ReportBlock(BlockKind.PLAIN, line)


def format_report(
    text: Optional[str],
    keywords: Iterable[str] = DEFAULT_HEADING_KEYWORDS,
    ignore_case: bool = False,
) -> List[ReportBlock]:
    if not text or not isinstance(text, str):
        return []
    pattern = heading_pattern(keywords, ignore_case=ignore_case)
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    return [classify_line(line, pattern) for line in lines]


def blocks_to_text(blocks: Iterable[ReportBlock]) -> str:
    lines = []
    for block in blocks:
        if block.kind is BlockKind.BULLET:
            lines.append(f"- {block.text}")
        else:
            lines.append(block.text)
    return "\n".join(lines)


def _is_divider(text: str) -> bool:
    return len(text) >= 2 and set(text) == {"-"}


def to_markdown(blocks: Iterable[ReportBlock]) -> str:
    """Markdown for display; bullets that are really ``---`` rules become rules."""
    out = []
    for block in blocks:
        if block.kind is BlockKind.HEADING:
            out.append(f"#### {block.text.replace('**', '')}")
        elif block.kind is BlockKind.BULLET:
            out.append("---" if _is_divider(block.text) else f"- 🔹 {block.text}")
        elif block.kind is BlockKind.NUMBERED_ITEM:
            out.append(f"**{block.text}**")
        else:
            out.append(block.text)
    return "\n\n".join(out)
