"""
Block segmentation for pasted resume text.

A *line* is a trimmed, non-empty line of text. A *block* is a run of lines
separated from the next run by one or more blank lines; each block holds one
resume entry (one job, one degree, one reference).

Also holds the key-generation and keyword helpers shared by the section parsers.
"""

import re
from re import Match, Pattern
from typing import Dict, List, Optional, Sequence, TypeVar

T = TypeVar("T")

BLANK_LINE_RE = re.compile(r"\n\s*\n")
SLUG_RE = re.compile(r"[^a-z0-9]+")


def to_lines(text: str) -> List[str]:
    """Split on newlines, trim each line, drop empty ones."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def to_blocks(text: str) -> List[str]:
    """
    Split on one or more blank lines.

    Examples:
      'A\\nB\\n\\nC' -> ['A\\nB', 'C']
      'A\\n   \\n\\n  C' -> ['A', 'C']
    """
    if not text:
        return []
    return [block.strip() for block in BLANK_LINE_RE.split(text) if block.strip()]


def slugify(text: str, limit: int = 30) -> str:
    """
    Lowercase, replace runs of non-alphanumerics with '_', truncate.

    Examples:
      'E-Commerce Platform' -> 'e_commerce_platform'
      'Dr. Jane Smith' -> 'dr_jane_smith'
      '!!!' -> ''
    """
    slug = SLUG_RE.sub("_", (text or "").lower())
    return slug[:limit].strip("_")


def keyed_entries(
    entries: Sequence[T],
    prefix: str,
    titles: Optional[Sequence[str]] = None,
) -> Dict[str, T]:
    """
    Build the key -> record mapping for a multi-entry section.

    Without titles: a single entry is keyed "current", several entries are
    keyed "<prefix>_1", "<prefix>_2", ...
    With titles: each entry is keyed by the slug of its title, falling back to
    "<prefix>_N" when the slug is empty. Repeated keys get a numeric suffix so
    every key in the mapping is unique.
    """
    if titles is None:
        if len(entries) == 1:
            return {"current": entries[0]}
        return {f"{prefix}_{i}": entry for i, entry in enumerate(entries, start=1)}

    keyed: Dict[str, T] = {}
    for i, (entry, title) in enumerate(zip(entries, titles), start=1):
        base = slugify(title) or f"{prefix}_{i}"
        key = base
        n = 2
        while key in keyed:
            key = f"{base}_{n}"
            n += 1
        keyed[key] = entry
    return keyed


def keyword_regex(keywords: Sequence[str], anchored: bool = False) -> Optional[Pattern]:
    """
    Case-insensitive whole-word alternation of keywords, longest first.

    Multi-word keywords match across any run of spaces; a trailing plural "s"
    is tolerated. With anchored=True the keyword must start the text.

    Examples:
      keyword_regex(["start date"]).search("Start  Date: June") -> match
      keyword_regex(["tech"]).search("Technical debt") -> None
    """
    if not keywords:
        return None
    alternatives = sorted(
        (re.escape(keyword.lower()).replace(r"\ ", r"\s+") for keyword in keywords),
        key=len,
        reverse=True,
    )
    prefix = "^" if anchored else r"\b"
    return re.compile(prefix + "(?:" + "|".join(alternatives) + r")s?\b", re.IGNORECASE)


def captured(match: Match) -> str:
    """The first capture group when the pattern has one, else the whole match."""
    value = match.group(1) if match.re.groups else match.group(0)
    return (value or "").strip()
