"""Best-effort cleanup of companion replies before insertion.

These are string heuristics tied to the wording the companion is asked to
produce. An imperfect strip can leave stray characters (a dangling quote or
asterisk); callers should treat the result as editable text, not as parsed
structure.
"""

import re

INSTRUCTION_PATTERN = re.compile(
    r"click\s+(?:on\s+)?(?:the\s+)?[\"'*]*apply content\b[^\n]*", re.IGNORECASE
)
BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*|__(.+?)__")
HEADING_PATTERN = re.compile(r"^\s*#{1,6}\s*")
# Title-cased label of the canned header, e.g. "Generated Problem Statement for "Intro":"
_LABEL = r"Generated\s+[A-Z][\w&/-]*(?:\s+[A-Z][\w&/-]*){0,4}"
GENERATED_LINE_PATTERN = re.compile(rf"^\s*{_LABEL}\s+for\s+\"[^\"\n]*\":\s*$")
GENERATED_PREFIX_PATTERN = re.compile(rf"^\s*{_LABEL}(?:\s+for\s+\"[^\"\n]*\")?:\s*")
EXCESS_BLANK_LINES = re.compile(r"\n{3,}")

# Left behind when the instruction was quoted or bolded
_TRAILING_JUNK = " \t\n\"'*"


def has_apply_instruction(text: str) -> bool:
    """Whether the reply offers content for insertion."""
    return INSTRUCTION_PATTERN.search(text) is not None


def strip_instruction(text: str) -> str:
    """Truncate the reply before its last apply instruction."""
    matches = list(INSTRUCTION_PATTERN.finditer(text))
    if not matches:
        return text.strip()
    return text[: matches[-1].start()].rstrip(_TRAILING_JUNK)


def _plain_line(line: str) -> str:
    line = BOLD_PATTERN.sub(lambda m: m.group(1) or m.group(2), line)
    line = HEADING_PATTERN.sub("", line)
    if GENERATED_LINE_PATTERN.match(line):
        return ""
    return GENERATED_PREFIX_PATTERN.sub("", line)


def to_plain_content(text: str) -> str:
    """Strip bold markup, headings and "Generated X:" prefixes line by line."""
    lines = [_plain_line(line) for line in text.splitlines()]
    return EXCESS_BLANK_LINES.sub("\n\n", "\n".join(lines)).strip()


def extract_insertable_content(text: str) -> str:
    """Plain document text from a companion reply."""
    return to_plain_content(strip_instruction(text))
