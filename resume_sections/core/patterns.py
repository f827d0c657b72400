"""
Pattern library for resume section parsing.

Regular expressions, label phrases, keyword lists and delimiter preferences for
each of the six resume sections. Everything in this module is plain data:
parser_config.py wraps these values into per-section configuration models that
callers can override without touching parser code.

Patterns are kept as strings with inline flags (e.g. "(?i)") so that they
survive a JSON round trip through the configuration endpoint unchanged.
"""

from typing import Dict, Tuple


# ===== SHARED BUILDING BLOCKS =====

# US State abbreviations (2-letter codes)
US_STATES = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA", "HI", "ID", "IL", "IN",
    "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV",
    "NH", "NJ", "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC", "SD", "TN",
    "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY", "DC",
)
STATE_CODE = "(?:" + "|".join(US_STATES) + ")"

US_STATE_NAMES = (
    "Alabama", "Alaska", "Arizona", "Arkansas", "California", "Colorado", "Connecticut",
    "Delaware", "Florida", "Georgia", "Hawaii", "Idaho", "Illinois", "Indiana", "Iowa",
    "Kansas", "Kentucky", "Louisiana", "Maine", "Maryland", "Massachusetts", "Michigan",
    "Minnesota", "Mississippi", "Missouri", "Montana", "Nebraska", "Nevada",
    "New Hampshire", "New Jersey", "New Mexico", "New York", "North Carolina",
    "North Dakota", "Ohio", "Oklahoma", "Oregon", "Pennsylvania", "Rhode Island",
    "South Carolina", "South Dakota", "Tennessee", "Texas", "Utah", "Vermont", "Virginia",
    "Washington", "West Virginia", "Wisconsin", "Wyoming",
)
# Longest first so "West Virginia" wins over "Virginia"
STATE_NAME = "(?:" + "|".join(
    name.replace(" ", r"[ \t]+") for name in sorted(US_STATE_NAMES, key=len, reverse=True)
) + ")"

# Words that open a multi-word city name ("San Francisco", "Salt Lake City")
CITY_LEAD_WORDS = (
    "San", "Santa", "Los", "Las", "El", "New", "York", "Fort", "Saint", "St", "Salt", "Lake",
    "Mountain", "Palo", "Menlo", "Redwood", "Culver", "Beverly", "Long", "Palm", "Boca",
    "Baton", "Corpus", "Des", "Ann", "Kansas", "Oklahoma", "Jersey", "Virginia", "Colorado",
    "Little", "Grand", "Cedar", "Sioux", "Silver", "Round", "Cape", "Coral", "Newport",
    "North", "South", "East", "West", "Port", "Rio", "Half", "Moon",
)

# One to three Title-cased words: "Rochester", "San Francisco", "Salt Lake City".
# Only lead words may precede the last word, so "Acme Corp Austin, TX" yields "Austin, TX".
CITY = r"(?:(?:" + "|".join(CITY_LEAD_WORDS) + r")[ \t]+){0,2}[A-Z][a-z]+"

# "City, State [ZIP]" or "City ST [ZIP]"
CITY_STATE = (
    rf"\b{CITY}(?:,[ \t]*(?:{STATE_NAME}|{STATE_CODE})|[ \t]+{STATE_CODE})\b"
    r"(?:[ \t]+\d{5}(?:-\d{4})?\b)?"
)

MONTH = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\.?"
YEAR = r"(?:19|20)\d{2}"

# "Jan 2020", "Apr '20", "2020"
DATE_TOKEN = rf"(?:{MONTH}[ \t]*'?\d{{2,4}}|{YEAR})"

# "Jan 2020 - Present", "Apr '20 - May '20", "2016-2020", "2019 to 2021"
DATE_RANGE = (
    rf"(?i)\b{DATE_TOKEN}[ \t]*(?:[-–—]|\bto\b)[ \t]*"
    rf"(?:{DATE_TOKEN}|Present\b|Current\b|Now\b)"
)

EMAIL = r"[\w.+-]+@[\w-]+(?:\.[\w-]+)*\.[A-Za-z]{2,}"

# Handles: (555) 123-4567, (845)-645-8158, 555-123-4567, +1 555 123 4567, 555-1234
PHONE = (
    r"(?<![\d+])"  # Never start inside a longer digit run
    r"(?:\+\d{1,2}[-.\s]?)?"  # Optional country code
    r"(?:(?:\(\d{3}\)|\d{3})[-.\s]?)?"  # Optional area code
    r"\d{3}[-.\s]?\d{4}"
    r"(?!\d)"
)

BULLET = r"^[•·▪○●►*>+\-][ \t]*"


# ===== DEMOGRAPHICS =====

# Phase 0 re-segmentation delimiters (strong delimiters only: no comma or hyphen)
DEMOGRAPHICS_DELIMITERS: Tuple[str, ...] = ("|", "–", "—", " / ", ";", "\t")

DEMOGRAPHICS_PATTERNS: Dict[str, str] = {
    "email": EMAIL,
    "phone": PHONE,
    "linkedin": r"(?i)(?:https?://)?(?:www\.)?linkedin\.com/in/[\w-]+",
    "github": r"(?i)(?:https?://)?(?:www\.)?github\.com/[\w-]+",
    "website": r"(?i)(?:https?://)?(?:www\.)?[\w.-]+\.[a-z]{2,}(?:/[\w./%-]*)?",
    "address": CITY_STATE,
}

# Label fallback: text after "<label>:" up to the end of the line
DEMOGRAPHICS_LABEL_PATTERNS: Dict[str, str] = {
    "name": r"(?im)^[ \t]*(?:full[ \t]+)?name[ \t]*:[ \t]*(.+)$",
    "phone": r"(?i)\b(?:phone|tel|mobile|cell)\b[ \t]*:[ \t]*(.+)",
    "email": r"(?i)\be-?mail\b[ \t]*:[ \t]*(.+)",
    "address": r"(?i)\b(?:address|location)\b[ \t]*:[ \t]*(.+)",
    "linkedin": r"(?i)\blinkedin\b[ \t]*:[ \t]*(.+)",
    "github": r"(?i)\bgithub\b[ \t]*:[ \t]*(.+)",
    "portfolio": r"(?i)\b(?:portfolio|website|site)\b[ \t]*:[ \t]*(.+)",
}

DEMOGRAPHICS_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "objective": ("objective", "summary", "about", "goal"),
    "available": ("available", "availability", "start date", "can start"),
    # A line starting with one of these is a labeled field, never a name
    "labels": (
        "name", "phone", "tel", "mobile", "cell", "email", "e-mail", "address",
        "location", "linkedin", "github", "portfolio", "website", "objective",
        "summary", "available", "availability",
    ),
    # A line containing one of these is a headline, never a name
    "job_titles": (
        "engineer", "developer", "designer", "manager", "analyst", "scientist",
        "architect", "consultant", "intern", "director", "specialist",
        "coordinator", "administrator", "programmer", "technician", "student",
    ),
}

# Bare "name.tld" website candidates need one of these top-level domains
WEBSITE_TLDS: Tuple[str, ...] = (
    "com", "org", "net", "io", "dev", "me", "edu", "co", "ai", "app", "info",
    "tech", "us", "uk", "ca", "xyz", "site", "page", "blog", "design", "gov",
    "portfolio",
)

NAME_LENGTH: Tuple[int, int] = (3, 50)


# ===== EDUCATION =====

# Institution line segments (the first segment holds the institution)
EDUCATION_DELIMITERS: Tuple[str, ...] = ("|", "•", "–", "—", " - ")

EDUCATION_PATTERNS: Dict[str, str] = {
    "year_range": rf"(?i)\b{YEAR}[ \t]*[-–—][ \t]*(?:{YEAR}|Present|Current)\b",
    "year": rf"\b{YEAR}\b",
    "gpa_labeled": (
        r"(?i)(?:cumulative[ \t]+)?(?:gpa|grade point average)[:\s\-–—]*"
        r"(\d\.\d{1,3}(?:[ \t]*/[ \t]*\d(?:\.\d{1,2})?)?)"
    ),
    "gpa_bare": r"(?<![\d.])(\d\.\d{1,3}(?:[ \t]*/[ \t]*\d\.\d{1,2})?)(?![\d.])",
    "degree": (
        r"\b(?:Ph\.?D\.?|M\.?B\.?A\.?|B\.?Sc\.?|M\.?Sc\.?|B\.?Eng\.?|M\.?Eng\.?"
        r"|[BM]\.[AS]\.?|[BM][AS](?=[ \t]+(?:in\b|of\b|[A-Z][a-z]))"
        r"|Bachelor(?:'?s)?|Master(?:'?s)?|Associate(?:'?s)?"
        r"|Doctor(?:ate)?)(?![A-Za-z])[\w \t'&]*"
    ),
    "honors_stop": r"[|•;,()\n]",
    # Leftover institution fragments such as "Class of" or "May" once the year is removed
    "filler": (
        r"(?i)^(?:(?:class[ \t]+of|graduat\w*|expected|anticipated)\b.*"
        r"|(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
        r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?)$"
    ),
}

EDUCATION_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "honors": (
        "honors", "honor", "magna cum laude", "summa cum laude", "cum laude",
        "dean's list", "valedictorian", "salutatorian",
    ),
    "concentration": ("concentration", "specialization", "focus", "minor", "emphasis"),
    "coursework": ("coursework", "relevant courses", "courses"),
}

HONORS_WINDOW = 50


# ===== EMPLOYMENT =====

EMPLOYMENT_PATTERNS: Dict[str, str] = {
    "dates": DATE_RANGE,
    # Title/company/location separators: 2+ spaces, pipes, long dashes, spaced hyphen
    "split": r"[ \t]{2,}|[ \t]*[|–—][ \t]*|[ \t]+-[ \t]+",
    "location": CITY_STATE,
    "remote": r"(?i)\((remote|hybrid|on-?site)\)",
}


# ===== PROJECTS =====

PROJECTS_PATTERNS: Dict[str, str] = {
    "date_range": DATE_RANGE,
    "timeframe": rf"\b{MONTH}[ \t]*'?\d{{2,4}}\b|\b{YEAR}\b",
    "bullet": BULLET,
    # "Weather App - React Native mobile app"
    "title_split": r"[ \t]+[-–—][ \t]+|[ \t]*\|[ \t]*",
}

PROJECTS_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "technologies": ("tech stack", "technologies", "technology", "tech", "stack", "built with", "tools"),
}


# ===== SKILLS =====

SKILLS_DELIMITERS: Tuple[str, ...] = (",", "|", "\n", "\t", "•", "·", "▪", "○", "-")

SKILLS_CATEGORY_KEYWORDS: Tuple[str, ...] = (
    "languages", "frameworks", "libraries", "tools", "databases", "platforms",
    "technologies", "technical", "soft skills", "other",
)

SKILLS_PATTERNS: Dict[str, str] = {
    # Fixed delimiter set for the text after a "Category:" label
    "category_split": r"[,|•·▪○;]|[ \t]+[-–—][ \t]+",
    "proficiency": (
        r"(?i)\(\s*(?:expert|advanced|intermediate|proficient|familiar|basic|beginner"
        r"|native|fluent)\s*\)"
    ),
    "prefix": r"(?i)^(?:[-•·*▪○●►]+[ \t]*|skills?[ \t]*:[ \t]*|technical[ \t]*:[ \t]*)+",
}


# ===== REFERENCES =====

REFERENCES_PATTERNS: Dict[str, str] = {
    "email": EMAIL,
    "phone": PHONE,
    # Re-split a one-line reference: "Robert Chen - CTO at TechCorp - robert@techcorp.com"
    "separators": r"[ \t]+[-–—][ \t]+|[ \t]*[|–—][ \t]*",
    "title_company": r"[ \t]*,[ \t]*|[ \t]+at[ \t]+|[ \t]+-[ \t]+",
}
