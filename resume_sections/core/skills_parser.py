"""
Skills extraction.

Two input shapes are recognised:

- Categorized ("Languages: Python, Java" / "Frameworks: React"): each category
  line is split after its colon on a fixed delimiter set; other lines use the
  first configured delimiter that actually splits them.
- Flat: best-yield. Every configured delimiter is tried on the whole text and
  the one producing the most tokens wins (ties go to the earlier delimiter).

Delimiters inside parentheses never split, so "Python (NumPy, Pandas)" stays
one token before cleanup reduces it to "Python".
"""

import logging
import re
from re import Pattern
from typing import List, Optional, Sequence, Set

from resume_sections.core.parser_config import SkillsConfig
from resume_sections.core.segmenter import keyword_regex, to_lines

logger = logging.getLogger(__name__)

TOKEN_TRIM = " \t,;:."


def _singular(word: str) -> str:
    """
    Examples:
      "technologies" -> "technology"
      "tools" -> "tool"
      "other" -> "other"
    """
    if word.endswith("ies"):
        return word[:-3] + "y"
    if word.endswith("s"):
        return word[:-1]
    return word


def _category_forms(keywords: Sequence[str]) -> Set[str]:
    forms = set()
    for keyword in keywords:
        keyword = keyword.lower()
        forms.update((keyword, keyword + "s", _singular(keyword)))
    return forms


def split_outside_parens(text: str, separator: Pattern) -> List[str]:
    """
    Split on separator matches that are not inside parentheses.

    Examples:
      "Python (NumPy, Pandas), SQL" on "," -> ["Python (NumPy, Pandas)", "SQL"]
    """
    parts: List[str] = []
    start = 0
    for m in separator.finditer(text):
        if not m.group(0):
            continue
        if text.count("(", 0, m.start()) > text.count(")", 0, m.start()):
            continue
        parts.append(text[start:m.start()])
        start = m.end()
    parts.append(text[start:])
    return [p.strip() for p in parts if p.strip()]


def _split_on(text: str, delimiter: str) -> List[str]:
    return split_outside_parens(text, re.compile(re.escape(delimiter)))


def best_yield_split(text: str, delimiters: Sequence[str]) -> List[str]:
    """
    Try every delimiter on the whole text and keep the split with the most tokens.

    Examples:
      "Python, SQL\\nGit" -> ["Python", "SQL\\nGit"] ("," and "\\n" tie at 2, "," is earlier)
    """
    best: List[str] = []
    chosen = None
    for delimiter in delimiters:
        if not delimiter:
            continue
        parts = _split_on(text, delimiter)
        if len(parts) > len(best):
            best, chosen = parts, delimiter
    logger.debug(f"Best-yield delimiter {chosen!r} produced {len(best)} token(s)")
    return best


def _split_categorized(lines: List[str], category_re: Pattern, config: SkillsConfig) -> List[str]:
    fixed_split = config.patterns.get("category_split")
    prefix = config.patterns.get("prefix")
    tokens: List[str] = []
    for line in lines:
        bare = prefix.sub("", line) if prefix is not None else line
        if category_re.match(bare):
            # Category heading without a colon contributes no skills
            if ":" in bare:
                listed = bare.split(":", 1)[1]
                if fixed_split is not None:
                    tokens.extend(split_outside_parens(listed, fixed_split))
                else:
                    tokens.append(listed)
            continue

        for delimiter in config.delimiters:
            if delimiter and delimiter in line:
                parts = _split_on(line, delimiter)
                if len(parts) > 1:
                    tokens.extend(parts)
                    break
        else:
            tokens.append(line)
    return tokens


def clean_skill(token: str, config: SkillsConfig) -> str:
    """
    Examples:
      "• Skills: Python (Expert)" -> "Python"
      "Python (NumPy, Pandas)" -> "Python"
    """
    for name in ("prefix", "proficiency"):
        pattern = config.patterns.get(name)
        if pattern is not None:
            token = pattern.sub("", token.strip())
    token = token.split("(", 1)[0]
    return " ".join(token.split()).strip(TOKEN_TRIM)


def parse_skills(text: str, config: Optional[SkillsConfig] = None) -> List[str]:
    config = config or SkillsConfig()
    lines = to_lines(text)
    if not lines:
        return []

    category_re = keyword_regex(sorted(_category_forms(config.category_keywords)), anchored=True)
    prefix = config.patterns.get("prefix")
    categorized = category_re is not None and any(
        category_re.match(prefix.sub("", line) if prefix is not None else line) for line in lines
    )

    if categorized:
        logger.debug("Skills input is categorized")
        tokens = _split_categorized(lines, category_re, config)
    else:
        tokens = best_yield_split(text.strip(), config.delimiters)

    category_forms = _category_forms(config.category_keywords)
    skills: List[str] = []
    seen: Set[str] = set()
    for token in tokens:
        skill = clean_skill(token, config)
        key = skill.lower()
        if not skill or key in seen or key in category_forms:
            continue
        seen.add(key)
        skills.append(skill)
    return skills
