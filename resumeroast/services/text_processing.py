"""Text normalization, section segmentation and bullet extraction."""

import re

# Section heading keywords and their canonical labels. Checked in order;
# the first label whose pattern occurs in a short line wins.
SECTION_PATTERNS: dict[str, str] = {
    "experience": r"experience|employment|work history|professional experience|career",
    "projects": r"projects|personal projects|side projects|portfolio",
    "skills": r"skills|technical skills|technologies|competencies|proficiencies|tech stack",
    "education": r"education|academic|degree|university|college|school",
    "summary": r"summary|objective|profile|about|about me|professional summary|career objective",
    "certifications": r"certifications?|licenses?|credentials|accreditations?",
}

_COMPILED: dict[str, re.Pattern] = {
    section: re.compile(rf"\b(?:{pattern})\b", re.IGNORECASE)
    for section, pattern in SECTION_PATTERNS.items()
}

# Headings longer than this are treated as prose that happens to mention a keyword
MAX_HEADING_LENGTH = 60

PREAMBLE = "preamble"

_BULLET_RE = re.compile(r"^(?:[-•*►▪▸◦‣]|\d+[.)])\s+")
MIN_BULLET_LENGTH = 6

_CRLF_RE = re.compile(r"\r\n")
_SPACE_RUN_RE = re.compile(r" {3,}")
_NEWLINE_RUN_RE = re.compile(r"\n{4,}")


def normalize_text(text: str) -> str:
    """Canonicalize line endings, tabs and runs of blank space."""
    text = _CRLF_RE.sub("\n", text)
    text = text.replace("\t", "  ")
    text = _SPACE_RUN_RE.sub("  ", text)
    text = _NEWLINE_RUN_RE.sub("\n\n\n", text)
    return text.strip()


def match_heading(line: str) -> str | None:
    """Return the section label for a heading line, or None for ordinary content."""
    trimmed = line.strip()
    if len(trimmed) >= MAX_HEADING_LENGTH:
        return None
    for section, pattern in _COMPILED.items():
        if pattern.search(trimmed):
            return section
    return None


def extract_sections(text: str) -> dict[str, str]:
    """Split normalized resume text into labeled sections.

    Lines before the first heading go to 'preamble'. A repeated heading
    replaces the earlier section of the same label instead of appending to it.
    Labels that never received any lines are left out of the result.
    """
    sections: dict[str, str] = {}
    current = PREAMBLE
    content: list[str] = []

    for line in text.split("\n"):
        section = match_heading(line)
        if section is None:
            content.append(line)
            continue
        if content:
            sections[current] = "\n".join(content).strip()
        current = section
        content = []

    if content:
        sections[current] = "\n".join(content).strip()

    return sections


def extract_bullets(text: str) -> list[str]:
    """Extract list-item lines with their marker stripped.

    Duplicates are kept so repeated bullets count every time they appear.
    """
    bullets = []
    for line in text.split("\n"):
        stripped = line.strip()
        match = _BULLET_RE.match(stripped)
        if not match:
            continue
        cleaned = stripped[match.end():].strip()
        if len(cleaned) >= MIN_BULLET_LENGTH:
            bullets.append(cleaned)
    return bullets
