"""
Code Reference Extractor.

Extracts references to Texas statutory codes from bill text and classifies
the edit made to each (add, amend, repeal).

Design rationale:
- Regex-based detection is fast and deterministic
- Texas drafting conventions are rigid ("Section 29.001, Education Code, is
  amended to read as follows:"), so a closed pattern set has high precision
- Bill section tracking ties every reference to the SECTION that makes it
- Deduplication on (bill section, section, code) keeps stored rows unique

Patterns detected:
1. Section + code:     "Section 48.101(b) or (c), Education Code"
2. Chapter/subchapter: "Subchapter Z, Chapter 29, Education Code"
3. Title/subtitle:     "Title 2, Education Code"

Action detection looks at a window around each match (20 chars before,
100 after). "is amended by adding" is the standard idiom for new material,
so add phrases are checked before the generic "is amended".

Usage:
    refs = parse_code_references(bill_text)
    for ref in refs:
        print(f"{ref.code} {ref.section} ({ref.action}) in {ref.bill_section}")
"""
import logging
import re
from typing import Dict, List, Optional

from txleg_core.models import CodeAction, CodeReference
from txleg_core.parsers.config import DEFAULT_PARSER_CONFIG, ParserConfig
from txleg_core.parsers.patterns import (
    CHAPTER_SUBCHAPTER_PATTERN,
    SECTION_CODE_PATTERN,
    TITLE_SUBTITLE_PATTERN,
    normalize_code_name,
)
from txleg_core.parsers.tokenizer import BillStructure, tokenize

logger = logging.getLogger(__name__)

# Checked in this order; first family with a hit wins
ACTION_PATTERNS: Dict[str, List[re.Pattern]] = {
    "add": [
        re.compile(r'is\s+amended\s+by\s+adding\s+(?:Section|Sections|Chapter|Subchapter)', re.IGNORECASE),
        re.compile(r'is\s+added\s+to\s+read\s+as\s+follows', re.IGNORECASE),
        re.compile(r'is\s+amended\s+by\s+adding\s+(?:Subsection|Subsections)', re.IGNORECASE),
        re.compile(r'is\s+amended\s+by\s+adding\s+(?:Subdivision|Subdivisions)', re.IGNORECASE),
    ],
    "repeal": [
        re.compile(r'is\s+repealed', re.IGNORECASE),
        re.compile(r'are\s+repealed', re.IGNORECASE),
    ],
    "amend": [
        re.compile(r'is\s+amended\s+to\s+read\s+as\s+follows', re.IGNORECASE),
        re.compile(r'are\s+amended\s+to\s+read\s+as\s+follows', re.IGNORECASE),
        re.compile(r'is\s+amended\s+by\s+amending', re.IGNORECASE),
        re.compile(r'is\s+amended\s+by\s+adding\s+and\s+amending', re.IGNORECASE),
        re.compile(r'is\s+amended', re.IGNORECASE),
    ],
}

# (a), (b-1)
SUBSECTION_PATTERN = re.compile(r'\(([a-z](?:-\d+)?)\)', re.IGNORECASE)

# "48.101(b) or (c)" continuation
OR_SUBSECTION_PATTERN = re.compile(r'\s+or\s+\(([a-z](?:-\d+)?)\)', re.IGNORECASE)

# "amending Subsections (a) and (b)" up to the next comma or line break
AMENDING_SUBSECTIONS_PATTERN = re.compile(r'amending\s+Subsections?\s+([^,\n]+)', re.IGNORECASE)

OR_SPLIT_PATTERN = re.compile(r'\s+or\s+', re.IGNORECASE)

CHAPTER_PREFIX_PATTERN = re.compile(r'^(\d+)\.')

IMPLICIT_BILL_SECTION = "1"


def detect_action(context: str) -> CodeAction:
    """
    Classify the edit described around a code reference.

    Args:
        context: Text window surrounding the citation

    Returns:
        "add", "repeal" or "amend" (amend when nothing matches)
    """
    for action in ("add", "repeal", "amend"):
        for pattern in ACTION_PATTERNS[action]:
            if pattern.search(context):
                return action
    return "amend"


def _add_unique(items: List[str], value: str) -> None:
    if value not in items:
        items.append(value)


def extract_subsections(raw_text: str) -> List[str]:
    """Qualifiers written in the citation itself: "(a)", plus "or (c)" continuations."""
    subsections: List[str] = []
    for match in SUBSECTION_PATTERN.finditer(raw_text):
        _add_unique(subsections, f"({match.group(1)})")
    for match in OR_SUBSECTION_PATTERN.finditer(raw_text):
        _add_unique(subsections, f"({match.group(1)})")
    return subsections


def extract_amending_subsections(context: str) -> List[str]:
    """Qualifiers from "is amended by amending Subsections (a) and (b)" clauses."""
    subsections: List[str] = []
    for clause in AMENDING_SUBSECTIONS_PATTERN.finditer(context):
        for match in SUBSECTION_PATTERN.finditer(clause.group(1)):
            _add_unique(subsections, f"({match.group(1)})")
    return subsections


def extract_base_section(section: str) -> str:
    """'48.101(b) or (c)' -> '48.101(b)'"""
    return OR_SPLIT_PATTERN.split(section, maxsplit=1)[0].strip()


class CodeReferenceExtractor:
    """
    Extract statutory code references from bill text.

    Extraction strategy:
    1. Tokenize the bill and walk its SECTION spans
    2. Apply each pattern family to each span
    3. Classify the action from a window around each match
    4. Deduplicate by (bill_section, section, code)

    A bill with no SECTION lines is treated as one implicit SECTION 1.
    The extractor holds only configuration, so one instance can be shared
    between threads.
    """

    def __init__(self, config: ParserConfig = DEFAULT_PARSER_CONFIG):
        self.config = config

    def extract(self, bill_text) -> List[CodeReference]:
        """
        Extract all code references in bill text.

        Args:
            bill_text: Full bill text (None/non-string/empty allowed)

        Returns:
            Deduplicated references in document order
        """
        return self.extract_from_structure(tokenize(bill_text))

    def extract_from_structure(self, structure: BillStructure) -> List[CodeReference]:
        references: List[CodeReference] = []

        if structure.sections:
            for span in structure.section_spans():
                span_text = structure.join_lines(span.start_index, span.end_index)
                references.extend(self.parse_section(span_text, span.number))
        elif structure.lines:
            whole_text = "\n".join(structure.lines)
            references.extend(self.parse_section(whole_text, IMPLICIT_BILL_SECTION))

        unique = self._deduplicate(references)
        logger.debug("Extracted %d code references (%d before dedup)", len(unique), len(references))
        return unique

    def parse_section(self, section_text: str, bill_section: str) -> List[CodeReference]:
        """
        Extract references from the text of a single bill section.

        Args:
            section_text: Text of one SECTION span
            bill_section: Bill section number ("1" or "1.01")

        Returns:
            References in family order (section, chapter/subchapter, title/subtitle)
        """
        label = f"SECTION {bill_section}"
        references: List[CodeReference] = []

        for match in SECTION_CODE_PATTERN.finditer(section_text):
            references.append(self._section_reference(match, section_text, label))

        for match in CHAPTER_SUBCHAPTER_PATTERN.finditer(section_text):
            references.append(self._chapter_reference(match, section_text, label))

        for match in TITLE_SUBTITLE_PATTERN.finditer(section_text):
            references.append(self._title_reference(match, section_text, label))

        return references

    def _extract_context(self, text: str, start: int, end: int) -> str:
        context_start = max(0, start - self.config.ACTION_WINDOW_BEFORE)
        context_end = min(len(text), end + self.config.ACTION_WINDOW_AFTER)
        return text[context_start:context_end]

    def _section_reference(self, match: re.Match, text: str, label: str) -> CodeReference:
        raw_text = match.group(0)
        context = self._extract_context(text, match.start(), match.end())

        subsections = extract_subsections(raw_text)
        for subsection in extract_amending_subsections(context):
            _add_unique(subsections, subsection)

        section = extract_base_section(match.group(1))
        chapter_match = CHAPTER_PREFIX_PATTERN.match(section)

        return CodeReference(
            code=normalize_code_name(match.group(2)),
            chapter=f"Chapter {chapter_match.group(1)}" if chapter_match else None,
            section=section,
            subsections=subsections or None,
            action=detect_action(context),
            bill_section=label,
            raw_text=raw_text,
        )

    def _chapter_reference(self, match: re.Match, text: str, label: str) -> CodeReference:
        kind, number, chapter_number, code = match.group(1, 2, 3, 4)
        context = self._extract_context(text, match.start(), match.end())

        if kind.lower() == "subchapter":
            subchapter: Optional[str] = f"Subchapter {number}"
            chapter = f"Chapter {chapter_number}" if chapter_number else None
        else:
            subchapter = None
            chapter = f"Chapter {number}"

        return CodeReference(
            code=normalize_code_name(code),
            chapter=chapter,
            subchapter=subchapter,
            section=f"{kind} {number}",
            action=detect_action(context),
            bill_section=label,
            raw_text=match.group(0),
        )

    def _title_reference(self, match: re.Match, text: str, label: str) -> CodeReference:
        kind, number, code = match.group(1, 2, 3)
        context = self._extract_context(text, match.start(), match.end())
        is_title = kind.lower() == "title"

        return CodeReference(
            code=normalize_code_name(code),
            title=f"Title {number}" if is_title else None,
            subtitle=None if is_title else f"Subtitle {number}",
            section=f"{kind} {number}",
            action=detect_action(context),
            bill_section=label,
            raw_text=match.group(0),
        )

    def _deduplicate(self, references: List[CodeReference]) -> List[CodeReference]:
        """
        Remove duplicate references by (bill_section, section, code).

        Keeps first occurrence.
        """
        seen = set()
        unique = []

        for ref in references:
            key = (ref.bill_section, ref.section, ref.code)
            if key not in seen:
                seen.add(key)
                unique.append(ref)

        return unique


def parse_code_references(bill_text, config: ParserConfig = DEFAULT_PARSER_CONFIG) -> List[CodeReference]:
    """
    Extract every statutory code reference in a bill.

    Args:
        bill_text: Full bill text (None/non-string/empty allowed)
        config: Window sizes for action detection

    Returns:
        List of CodeReference, or [] when nothing is found
    """
    return CodeReferenceExtractor(config).extract(bill_text)
