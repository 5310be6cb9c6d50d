"""
Bill Complexity Classifier.

Classifies a bill as simple / moderate / complex / omnibus and tags special
bill patterns (terminology replacement, omnibus, single code).

Complexity rules (ordered, first match wins):
- omnibus:  has ARTICLE structure or more than 50 sections
- complex:  11+ sections or 3+ affected codes
- moderate: 4-10 sections and at most 2 codes
- simple:   1-3 sections and at most 1 code
- fallback: up to 10 sections -> moderate, otherwise complex

Pattern priority: terminology_replacement > omnibus > single_code > None

Why a terminology replacement needs 3+ "striking ... substituting" edits:
a single substitution is an ordinary targeted amendment; a global rename of
an agency or term repeats the same substitution across many sections.
"""
import logging
import re
from collections import Counter
from typing import List, Optional

from txleg_core.models import (
    BillComplexity,
    BillPattern,
    ComplexityResult,
    TerminologyReplacement,
)
from txleg_core.parsers.config import DEFAULT_PARSER_CONFIG, ParserConfig
from txleg_core.parsers.patterns import (
    AFFECTED_CODE_PATTERN,
    STANDALONE_CODE_PATTERN,
    normalize_code_name,
)
from txleg_core.parsers.tokenizer import BillStructure, tokenize

logger = logging.getLogger(__name__)

# each reference to "X" means "Y"
REFERENCE_MEANS_PATTERN = re.compile(
    r'(?:each|every|all)\s+(?:reference|occurrence)s?\s+(?:to|of)\s+'
    r'["\']([^"\']+)["\']\s+(?:mean|means|is|are|shall\s+be)\s+'
    r'(?:a\s+reference\s+to\s+)?["\']([^"\']+)["\']',
    re.IGNORECASE
)

# striking "X" and substituting "Y"
STRIKE_SUBSTITUTE_PATTERN = re.compile(
    r'striking\s+["\']([^"\']+)["\']\s+(?:and\s+)?substituting\s+["\']([^"\']+)["\']',
    re.IGNORECASE
)


def extract_affected_codes(bill_text: str) -> List[str]:
    """
    Collect the unique code names cited anywhere in the bill.

    Combines structured citations ("Section 29.001, Education Code") with
    bare mentions ("throughout the Health and Safety Code").

    Returns:
        Sorted list of normalized code names
    """
    codes = set()

    for match in AFFECTED_CODE_PATTERN.finditer(bill_text):
        codes.add(normalize_code_name(match.group(1)))

    for match in STANDALONE_CODE_PATTERN.finditer(bill_text):
        codes.add(normalize_code_name(match.group(1)))

    return sorted(codes)


def count_term_occurrences(bill_text: str, term: str) -> int:
    pattern = re.compile(re.escape(term), re.IGNORECASE)
    return sum(1 for _ in pattern.finditer(bill_text))


def detect_terminology_replacement(
    bill_text: str,
    config: ParserConfig = DEFAULT_PARSER_CONFIG
) -> Optional[TerminologyReplacement]:
    """
    Detect a bill-wide terminology substitution.

    Tries, in order:
    1. An explicit 'each reference to "X" means "Y"' declaration (one is enough)
    2. The most frequent 'striking "X" and substituting "Y"' pair, if it
       repeats at least STRIKE_SUBSTITUTE_MIN_OCCURRENCES times

    Returns:
        TerminologyReplacement with the count of "X" in the whole bill, or None
    """
    match = REFERENCE_MEANS_PATTERN.search(bill_text)
    if match:
        from_term, to_term = match.group(1), match.group(2)
        return TerminologyReplacement(
            from_term=from_term,
            to_term=to_term,
            occurrence_count=count_term_occurrences(bill_text, from_term),
        )

    pairs = Counter()
    first_seen = {}
    for match in STRIKE_SUBSTITUTE_PATTERN.finditer(bill_text):
        key = (match.group(1).lower(), match.group(2).lower())
        pairs[key] += 1
        first_seen.setdefault(key, (match.group(1), match.group(2)))

    if not pairs:
        return None

    # Most frequent pair, not the first one: a single incidental edit early in
    # the bill must not hide a repeated rename. most_common keeps insertion
    # order among equal counts.
    key, occurrences = pairs.most_common(1)[0]
    if occurrences < config.STRIKE_SUBSTITUTE_MIN_OCCURRENCES:
        return None

    from_term, to_term = first_seen[key]
    return TerminologyReplacement(
        from_term=from_term,
        to_term=to_term,
        occurrence_count=count_term_occurrences(bill_text, from_term),
    )


def determine_complexity(
    section_count: int,
    article_count: int,
    code_count: int,
    config: ParserConfig = DEFAULT_PARSER_CONFIG
) -> BillComplexity:
    """
    Map counts to a complexity tier.

    Rules are evaluated in order; later rules are fallbacks for what the
    earlier ones did not claim.
    """
    if article_count > 0 or section_count > config.OMNIBUS_SECTION_THRESHOLD:
        return "omnibus"

    if section_count >= config.COMPLEX_MIN_SECTIONS or code_count >= config.COMPLEX_MIN_CODES:
        return "complex"

    if (config.MODERATE_MIN_SECTIONS <= section_count <= config.MODERATE_MAX_SECTIONS
            and code_count <= config.MODERATE_MAX_CODES):
        return "moderate"

    if section_count <= config.SIMPLE_MAX_SECTIONS and code_count <= config.SIMPLE_MAX_CODES:
        return "simple"

    # e.g. 2 sections touching 2 codes
    if section_count <= config.MODERATE_MAX_SECTIONS:
        return "moderate"

    return "complex"


def determine_pattern(
    article_count: int,
    section_count: int,
    code_count: int,
    has_terminology_replacement: bool,
    config: ParserConfig = DEFAULT_PARSER_CONFIG
) -> Optional[BillPattern]:
    if has_terminology_replacement:
        return "terminology_replacement"

    if article_count > 0 or section_count > config.OMNIBUS_SECTION_THRESHOLD:
        return "omnibus"

    if code_count == 1:
        return "single_code"

    return None


def complexity_from_structure(
    bill_text: str,
    structure: BillStructure,
    config: ParserConfig = DEFAULT_PARSER_CONFIG
) -> ComplexityResult:
    """Classify a bill whose text has already been tokenized."""
    if not bill_text or not isinstance(bill_text, str):
        return ComplexityResult()

    section_count = len(structure.sections)
    article_count = len(structure.articles)
    affected_codes = extract_affected_codes(bill_text)
    terminology = detect_terminology_replacement(bill_text, config)

    result = ComplexityResult(
        complexity=determine_complexity(section_count, article_count, len(affected_codes), config),
        pattern=determine_pattern(
            article_count,
            section_count,
            len(affected_codes),
            terminology is not None,
            config
        ),
        article_count=article_count,
        section_count=section_count,
        affected_codes=affected_codes,
        terminology_replacement=terminology,
    )
    logger.debug(
        "Complexity %s (pattern=%s, sections=%d, articles=%d, codes=%d)",
        result.complexity, result.pattern, section_count, article_count, len(affected_codes)
    )
    return result


def detect_complexity(bill_text, config: ParserConfig = DEFAULT_PARSER_CONFIG) -> ComplexityResult:
    """
    Analyze bill text and return complexity metrics.

    Args:
        bill_text: Full bill text (None/non-string/empty allowed)
        config: Tier thresholds

    Returns:
        ComplexityResult; "simple" with zero counts for empty input
    """
    return complexity_from_structure(bill_text, tokenize(bill_text), config)
