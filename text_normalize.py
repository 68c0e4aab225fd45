"""
text_normalize.py  ––  plain-text clean-up for terminal output
---------------------------------------------------------------
Stateless helpers used by render_html.py.  Every function is total over
arbitrary strings (the empty string included) and the patterns are
compiled once at import time.

    collapse_whitespace   any run of ASCII whitespace -> one space
    wrap_text             greedy word wrap, never splits a word
    collapse_blank_lines  "\\n\\n\\n" -> "\\n\\n" (non-overlapping, left to right)
    replace_bullets       "•" -> "-"
    strip_trailing_spaces " +\\n" -> "\\n"
    normalize_text        trim, wrap, collapse, bullets, trailing spaces
"""

from __future__ import annotations

import re
import textwrap

# ---------- constants --------------------------------------------------------
WRAP_WIDTH = 80

# ASCII whitespace only: a non-breaking space is part of a word
_SPACE_RE       = re.compile(r"[ \t\n\f\r]+")
_BLANK_LINES_RE = re.compile(r"\n\n\n")
_TRAILING_RE    = re.compile(r" +\n")
_BULLET_RE      = re.compile(r"•")


# ---------- helpers ----------------------------------------------------------
def collapse_whitespace(text: str) -> str:
    return _SPACE_RE.sub(" ", text)


def collapse_blank_lines(text: str) -> str:
    """Squeeze three newlines into two.

    Runs are consumed three at a time, so four newlines become three and
    six become four.
    """
    return _BLANK_LINES_RE.sub("\n\n", text)


def replace_bullets(text: str) -> str:
    return _BULLET_RE.sub("-", text)


def strip_trailing_spaces(text: str) -> str:
    return _TRAILING_RE.sub("\n", text)


def wrap_text(text: str, width: int = WRAP_WIDTH) -> str:
    """Greedy word wrap that keeps the existing line breaks.

    Lines are only broken at spaces.  A word wider than *width* is written
    unbroken on a line of its own.
    """
    wrapper = textwrap.TextWrapper(
        width=width,
        break_long_words=False,
        break_on_hyphens=False,
        replace_whitespace=False,
    )
    return "\n".join(
        line if len(line) <= width else wrapper.fill(line)
        for line in text.split("\n")
    )


def normalize_text(text: str, width: int = WRAP_WIDTH) -> str:
    text = wrap_text(text.strip(), width)
    text = collapse_blank_lines(text)
    text = replace_bullets(text)
    return strip_trailing_spaces(text)
