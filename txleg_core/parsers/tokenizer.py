"""
Structural tokenizer for Texas bill text.

Single source of truth for what counts as an ARTICLE or bill SECTION
declaration. The article segmenter, code reference extractor and complexity
classifier all consume the same BillStructure, so they can never disagree on
how many articles or sections a bill has.

Declaration shapes:
- ARTICLE:  "ARTICLE 1.  TITLE", "ARTICLE IV.", "Article 2. Title"
            (case-insensitive, leading/trailing whitespace ignored)
- SECTION:  "SECTION 1.", "SECTION 1.01."
            (upper-case keyword only; "Section 29.001, Education Code" is a
            citation, not a declaration)

Usage:
    structure = tokenize(bill_text)
    for span in structure.section_spans():
        print(span.number, structure.join_lines(span.start_index, span.end_index))
"""
import re
from dataclasses import dataclass, field
from typing import Iterator, List

ARTICLE_PATTERN = re.compile(
    r'^ARTICLE\s+(\d+|[IVXLCDM]+)\.\s*(.*)$',
    re.IGNORECASE
)

BILL_SECTION_PATTERN = re.compile(r'^SECTION\s+(\d+(?:\.\d+)?)\.')


@dataclass
class ArticleDeclaration:
    """ARTICLE line: raw numeral, cleaned inline title, 0-indexed line."""
    number: str
    title: str
    line_index: int


@dataclass
class SectionDeclaration:
    """SECTION line: section number ("1" or "1.01"), 0-indexed line."""
    number: str
    line_index: int


@dataclass
class SectionSpan:
    """Lines owned by one bill section, 0-indexed and inclusive."""
    number: str
    start_index: int
    end_index: int


@dataclass
class BillStructure:
    """Token stream for one bill: raw lines plus declaration tokens in document order."""
    lines: List[str] = field(default_factory=list)
    articles: List[ArticleDeclaration] = field(default_factory=list)
    sections: List[SectionDeclaration] = field(default_factory=list)

    @property
    def last_line_index(self) -> int:
        return len(self.lines) - 1

    def join_lines(self, start_index: int, end_index: int) -> str:
        return "\n".join(self.lines[start_index:end_index + 1])

    def section_spans(self) -> Iterator[SectionSpan]:
        """
        Yield one span per SECTION declaration.

        A span runs from its declaration line to the line before the next
        declaration, or to the end of the document.
        """
        for i, declaration in enumerate(self.sections):
            if i + 1 < len(self.sections):
                end_index = self.sections[i + 1].line_index - 1
            else:
                end_index = self.last_line_index
            yield SectionSpan(
                number=declaration.number,
                start_index=declaration.line_index,
                end_index=end_index
            )


def clean_title(title: str) -> str:
    """Strip whitespace and a single trailing period."""
    title = title.strip()
    if title.endswith("."):
        title = title[:-1]
    return title.strip()


def match_article(line: str):
    return ARTICLE_PATTERN.match(line.strip())


def match_section(line: str):
    return BILL_SECTION_PATTERN.match(line.lstrip())


def is_section_declaration(line: str) -> bool:
    return match_section(line) is not None


def tokenize(bill_text) -> BillStructure:
    """
    Split bill text into lines and record every ARTICLE/SECTION declaration.

    Args:
        bill_text: Full bill text; None, non-string or empty input is allowed

    Returns:
        BillStructure (empty for invalid input)
    """
    if not bill_text or not isinstance(bill_text, str):
        return BillStructure()

    structure = BillStructure(lines=bill_text.split("\n"))

    for index, line in enumerate(structure.lines):
        article_match = match_article(line)
        if article_match:
            structure.articles.append(ArticleDeclaration(
                number=article_match.group(1),
                title=clean_title(article_match.group(2)),
                line_index=index
            ))
            continue

        section_match = match_section(line)
        if section_match:
            structure.sections.append(SectionDeclaration(
                number=section_match.group(1),
                line_index=index
            ))

    return structure
