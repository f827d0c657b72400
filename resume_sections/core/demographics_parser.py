"""
Demographics (personal/contact details) parsing.

Phase-ordered extraction over the whole pasted text plus its line list:

  0. re-segmentation   collapse "everything on one line" input into more lines
  1. structured        email, phone, LinkedIn, GitHub, website (whole text)
  1b. labels           "Phone: ...", "Portfolio: ..." for fields still empty
  2. name              process of elimination over lines, then positional fallback
  3. address           "City, State [ZIP]" / "City ST [ZIP]", skipping objective lines
  4/5. soft keywords   objective, availability

Every accepted value is claimed in a SpanTracker so later phases never reuse
the same text for another field. The phase order matters: later phases read the
tracker state left by earlier ones.
"""

import logging
import re
from re import Match
from typing import Dict, List, Optional, Sequence, Set

from resume_sections.core.parser_config import DemographicsConfig
from resume_sections.core.schemas import DemographicsRecord
from resume_sections.core.segmenter import captured, keyword_regex, to_lines
from resume_sections.core.span_tracker import SpanTracker

logger = logging.getLogger(__name__)

STRUCTURED_FIELDS = ("email", "phone", "linkedin", "github")

# Label keys whose value lands in a differently named field
LABEL_TARGETS = {"portfolio": "website", "location": "address"}

SCHEME_RE = re.compile(r"^(?:https?://|www\.)", re.IGNORECASE)
VALUE_TRIM = " \t,;:|/-–—"


# ===== PHASE 0: RE-SEGMENTATION =====

def _resegment(lines: List[str], delimiters: Sequence[str]) -> List[str]:
    """
    Re-split 1-3 line input on strong delimiters.

    Examples:
      ['Jane Smith | Austin, TX / jane@email.com'] -> ['Jane Smith', 'Austin, TX', 'jane@email.com']
    """
    if not 1 <= len(lines) <= 3:
        return lines
    present = [d for d in delimiters if d and any(d in line for line in lines)]
    if not present:
        return lines

    splitter = re.compile("|".join(re.escape(d) for d in sorted(present, key=len, reverse=True)))
    out: List[str] = []
    for line in lines:
        out.extend(part.strip() for part in splitter.split(line) if part.strip())
    logger.debug(f"Re-segmented {len(lines)} line(s) into {len(out)} on delimiters {present}")
    return out


# ===== PHASE 1: STRUCTURED PATTERNS =====

def _has_known_tld(candidate: str, tlds: Sequence[str]) -> bool:
    """A scheme or "www." is enough; a bare "name.tld" needs a recognised TLD."""
    if SCHEME_RE.match(candidate):
        return True
    host = candidate.split("/", 1)[0]
    tld = host.rsplit(".", 1)[-1].lower()
    return tld in {t.lower() for t in tlds}


def _match_structured(text: str, fields: Dict[str, str], claims: SpanTracker, config: DemographicsConfig) -> None:
    for field in STRUCTURED_FIELDS:
        pattern = config.patterns.get(field)
        if pattern is None:
            continue
        m = pattern.search(text)
        if m and m.group(0).strip():
            fields[field] = m.group(0).strip()
            claims.claim(fields[field])
            logger.debug(f"Phase 1: {field}='{fields[field]}'")

    website = config.patterns.get("website")
    if website is None:
        return
    for m in website.finditer(text):
        candidate = m.group(0).strip().rstrip(".")
        # Inside an email/profile URL already claimed, or wrapping one
        if claims.covers(candidate) or claims.is_claimed(candidate):
            continue
        if not _has_known_tld(candidate, config.website_tlds):
            logger.debug(f"Phase 1: rejected website candidate '{candidate}' (unknown TLD)")
            continue
        fields["website"] = candidate
        claims.claim(candidate)
        logger.debug(f"Phase 1: website='{candidate}'")
        break


# ===== PHASE 1b: LABEL FALLBACK =====

def _match_labels(text: str, fields: Dict[str, str], claims: SpanTracker, config: DemographicsConfig) -> None:
    for label, pattern in config.label_patterns.items():
        target = LABEL_TARGETS.get(label, label)
        if target not in fields or fields[target]:
            continue
        m = pattern.search(text)
        if not m:
            continue
        value = captured(m)
        if value:
            fields[target] = value
            claims.claim(value)
            logger.debug(f"Phase 1b: {target}='{value}' (label '{label}')")


# ===== PHASE 2: NAME BY ELIMINATION =====

def _is_name_candidate(line: str, claims: SpanTracker, config: DemographicsConfig) -> bool:
    shortest, longest = config.name_length
    label_re = keyword_regex(config.keywords.get("labels", ()), anchored=True)
    title_re = keyword_regex(config.keywords.get("job_titles", ()))

    if claims.is_claimed(line):
        return False
    if label_re and label_re.match(line):
        return False
    if title_re and title_re.search(line):
        return False
    if not shortest <= len(line) <= longest:
        return False
    if any(ch.isdigit() for ch in line):
        return False
    # Bare URL/domain: a dotted token with no embedded space
    if "." in line and " " not in line:
        return False
    # A line holding "City, ST" is (or carries) an address, not a name
    address = config.patterns.get("address")
    if address is not None and address.search(line):
        return False
    return True


def _positional_name(lines: List[str], claims: SpanTracker, config: DemographicsConfig) -> str:
    """
    Fallback for single-line input without delimiters. The name is the text
    before the first claimed value or "City, ST" on the line.

    Examples:
      'Mike Wilson mike@email.com 555-9876 Seattle, WA' -> 'Mike Wilson'
      'Jane Smith Seattle, WA jane@x.com' -> 'Jane Smith'
    """
    address = config.patterns.get("address")
    for line in lines:
        cuts = [claims.first_index(line)]
        m = address.search(line) if address is not None else None
        if m:
            cuts.append(m.start())
        cuts = [c for c in cuts if c is not None]
        if not cuts:
            continue
        cut = min(cuts)
        prefix = " ".join(line[:cut].split()).strip(VALUE_TRIM)
        if not prefix:
            continue
        return prefix if _is_name_candidate(prefix, claims, config) else ""
    return ""


def _match_name(lines: List[str], fields: Dict[str, str], claims: SpanTracker, config: DemographicsConfig) -> None:
    if fields["name"]:
        return
    for line in lines:
        collapsed = " ".join(line.split())
        if _is_name_candidate(collapsed, claims, config):
            fields["name"] = collapsed
            break
    else:
        fields["name"] = _positional_name(lines, claims, config)
        if fields["name"]:
            logger.debug(f"Phase 2: name='{fields['name']}' (positional fallback)")

    if fields["name"]:
        claims.claim(fields["name"])
        logger.debug(f"Phase 2: name='{fields['name']}'")


# ===== PHASE 3: ADDRESS =====

def _match_address(
    lines: List[str],
    fields: Dict[str, str],
    claims: SpanTracker,
    config: DemographicsConfig,
) -> None:
    pattern = config.patterns.get("address")
    if fields["address"] or pattern is None:
        return
    prose = _soft_keyword_lines(lines, config)
    for idx, line in enumerate(lines):
        # "Seeking a role in Austin, TX" belongs to the objective
        if idx in prose:
            continue
        for m in pattern.finditer(line):
            candidate = m.group(0).strip()
            # Part of a name/URL claimed earlier
            if claims.covers(candidate):
                logger.debug(f"Phase 3: skipped '{candidate}' (already claimed)")
                continue
            fields["address"] = candidate
            claims.claim(candidate)
            logger.debug(f"Phase 3: address='{candidate}'")
            return


# ===== PHASE 4/5: SOFT KEYWORDS =====

SOFT_FIELDS = ("objective", "available")


def _is_heading(line: str, m: Match) -> bool:
    """A keyword line with no value of its own ("Summary")."""
    return ":" not in line and not line[m.end():].strip(VALUE_TRIM)


def _soft_keyword_lines(lines: List[str], config: DemographicsConfig) -> Set[int]:
    """Indices of objective/availability lines, including the line under a heading."""
    indices: Set[int] = set()
    for field in SOFT_FIELDS:
        keyword_re = keyword_regex(config.keywords.get(field, ()))
        if keyword_re is None:
            continue
        for idx, line in enumerate(lines):
            m = keyword_re.search(line)
            if not m:
                continue
            indices.add(idx)
            if _is_heading(line, m):
                indices.add(idx + 1)
    return indices


def _match_soft_keyword(
    lines: List[str],
    field: str,
    fields: Dict[str, str],
    claims: SpanTracker,
    config: DemographicsConfig,
) -> None:
    keyword_re = keyword_regex(config.keywords.get(field, ()))
    if fields[field] or keyword_re is None:
        return

    for idx, line in enumerate(lines):
        if claims.is_claimed(line):
            continue
        m = keyword_re.search(line)
        if not m:
            continue

        if ":" in line:
            value = line.split(":", 1)[1].strip()
        elif _is_heading(line, m):
            # Heading line ("Objective") followed by its content
            following = lines[idx + 1] if idx + 1 < len(lines) else ""
            value = "" if claims.is_claimed(following) else following
        else:
            value = line[m.end():].strip(VALUE_TRIM)

        if value:
            fields[field] = value
            claims.claim(value)
            logger.debug(f"Phase 4/5: {field}='{value}'")
            return


def parse_demographics(text: str, config: Optional[DemographicsConfig] = None) -> DemographicsRecord:
    config = config or DemographicsConfig()
    text = text or ""
    fields: Dict[str, str] = {name: "" for name in DemographicsRecord.model_fields}
    claims = SpanTracker()

    lines = _resegment(to_lines(text), config.delimiters)

    _match_structured(text, fields, claims, config)
    _match_labels(text, fields, claims, config)
    _match_name(lines, fields, claims, config)
    _match_address(lines, fields, claims, config)
    for field in SOFT_FIELDS:
        _match_soft_keyword(lines, field, fields, claims, config)

    return DemographicsRecord(**fields)
