"""
Shared statutory-code vocabulary.

The code reference extractor and the complexity classifier must agree on
what a code name looks like, otherwise the classifier's affected-code list
could miss a code the extractor reports. Both build their patterns from the
pieces below.

Code name shape: one or more words ending in "Code"
    "Education Code", "Health and Safety Code", "Civil Practice and Remedies Code"

The word sequence is matched lazily, each word must be preceded by
whitespace, and a name is at most MAX_CODE_NAME_WORDS words before "Code".
Each match attempt therefore looks at a bounded number of words, which keeps
scans linear on long runs of capitalized prose that never reach "Code".

All patterns are compiled once at import. re.Pattern objects hold no match
position, and every caller uses finditer/search, so sharing them across calls
and threads is safe.
"""
import re

# Longest real name: "Special District Local Laws Code" (4 words)
MAX_CODE_NAME_WORDS = 8
_EXTRA_WORDS = "{0,%d}?" % (MAX_CODE_NAME_WORDS - 1)

# Letters-only words ending in the word "Code" (case follows the enclosing pattern flags)
CODE_NAME = r'[A-Za-z]+(?:\s+[A-Za-z]+)' + _EXTRA_WORDS + r'\s+Code\b'

# Capitalized words joined by optional lowercase "and" ("Health and Safety Code")
PROPER_CODE_NAME = r'[A-Z][A-Za-z]*(?:\s+(?:and\s+)?[A-Z][A-Za-z]*)' + _EXTRA_WORDS + r'\s+Code\b'

# Parenthetical qualifier body: a, b-1, 2
QUALIFIER = r'[a-z0-9-]+'

# Family 1: "Section 29.914(a) or (b), Education Code"
SECTION_CODE_PATTERN = re.compile(
    r'\bSection\s+'
    r'([\dA-Z.]+(?:\(' + QUALIFIER + r'\))?(?:\s+or\s+\(' + QUALIFIER + r'\))*)'
    r',\s+(' + CODE_NAME + r')',
    re.IGNORECASE
)

# Family 2: "Subchapter Z, Chapter 29, Education Code" / "Chapter 48, Education Code"
CHAPTER_SUBCHAPTER_PATTERN = re.compile(
    r'\b(Subchapter|Chapter)\s+([\dA-Z]+),\s+(?:Chapter\s+(\d+),\s+)?(' + CODE_NAME + r')',
    re.IGNORECASE
)

# Family 3: "Title 2, Education Code" / "Subtitle F, Education Code"
TITLE_SUBTITLE_PATTERN = re.compile(
    r'\b(Title|Subtitle)\s+([\dA-Z]+),\s+(' + CODE_NAME + r')',
    re.IGNORECASE
)

# Affected-code scan over the whole bill. Accepts every prefix the three
# families above accept (plus hyphenated ids and repeated qualifiers), so any code
# the extractor reports is also found here.
AFFECTED_CODE_PATTERN = re.compile(
    r'\b(?:Section|Chapter|Subchapter|Title|Subtitle)\s+[\d.A-Z-]+'
    r'(?:\(' + QUALIFIER + r'\))*(?:\s+or\s+\(' + QUALIFIER + r'\))*'
    r',\s+(' + CODE_NAME + r')',
    re.IGNORECASE
)

# Bare mentions: "Throughout the Health and Safety Code, ..."
STANDALONE_CODE_PATTERN = re.compile(
    r'\b[Tt]he\s+(' + PROPER_CODE_NAME + r')'
)


def normalize_code_name(code: str) -> str:
    """
    Normalize a code name to title case, keeping "and" lowercase.

    "EDUCATION CODE" -> "Education Code"
    "health AND safety code" -> "Health and Safety Code"
    """
    words = []
    for word in code.split():
        if word.lower() == "and":
            words.append("and")
        else:
            words.append(word[:1].upper() + word[1:].lower())
    return " ".join(words)
