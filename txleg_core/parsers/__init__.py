"""
Bill Structure Parsers.

Derives three structural views from the full text of a Texas bill:

Components:
- parse_articles: ARTICLE blocks with line ranges and their sections
- parse_code_references: Citations of Texas codes with add/amend/repeal action
- detect_complexity: Simple/moderate/complex/omnibus tier and bill pattern
- parse_bill: All three views from a single tokenization

Shared pieces:
- tokenizer: The only place ARTICLE/SECTION declarations are recognized
- patterns: The code-name vocabulary used by the extractor and classifier
- roman: Roman numeral conversion for article numbers

All functions are pure: no I/O, no shared mutable state, safe to call from
multiple threads. Empty or invalid input returns an empty/default result
instead of raising.
"""
from txleg_core.parsers.articles import (
    parse_articles,
    has_article_structure,
    count_articles,
    find_article_for_section,
)
from txleg_core.parsers.code_references import (
    CodeReferenceExtractor,
    parse_code_references,
)
from txleg_core.parsers.complexity import detect_complexity
from txleg_core.parsers.bill import parse_bill, compute_text_hash
from txleg_core.parsers.config import ParserConfig, DEFAULT_PARSER_CONFIG
from txleg_core.parsers.roman import normalize_article_number, roman_to_arabic

__all__ = [
    "parse_articles",
    "has_article_structure",
    "count_articles",
    "find_article_for_section",
    "CodeReferenceExtractor",
    "parse_code_references",
    "detect_complexity",
    "parse_bill",
    "compute_text_hash",
    "ParserConfig",
    "DEFAULT_PARSER_CONFIG",
    "normalize_article_number",
    "roman_to_arabic",
]
