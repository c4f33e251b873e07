"""
Literal and wildcard term matching against a single field's text.

Wildcard patterns are deliberately loose: the pattern is cut on '*' into
literal fragments and every non-empty fragment must occur somewhere in the
text, in any order. Within a fragment '?' stands for exactly one character.
"""
import re
from typing import List


def _fragment_present(text: str, fragment: str) -> bool:
    if "?" not in fragment:
        return fragment in text
    rx = re.escape(fragment).replace(r"\?", ".")
    return re.search(rx, text, re.DOTALL) is not None


def matches_wildcard(text: str, pattern: str) -> bool:
    if pattern == "*":
        return True
    for fragment in pattern.split("*"):
        if fragment and not _fragment_present(text, fragment):
            return False
    return True


def matches_text(text: str, term: str, wildcards: bool = False) -> bool:
    """Case-insensitive substring (or wildcard) match of term in text."""
    text_lower = text.lower()
    term_lower = term.lower()

    if wildcards:
        return matches_wildcard(text_lower, term_lower)

    return term_lower in text_lower


def search_in_text(text: str, terms: List[str], wildcards: bool = False) -> List[str]:
    """Return the terms that match text, in query order."""
    return [t for t in terms if matches_text(text, t, wildcards)]
