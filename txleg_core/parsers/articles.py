"""
Article Segmenter.

Splits omnibus bills into ARTICLE blocks and assigns bill sections to them.

Texas omnibus bills look like:

    ARTICLE 1.  FOUNDATION SCHOOL PROGRAM
    SECTION 1.01.  Section 48.001, Education Code, is amended ...
    SECTION 1.02.  ...
    ARTICLE 2.
    SPECIAL PROGRAMS
    SECTION 2.01.  ...

Rules:
- An article runs from its ARTICLE line to the line before the next ARTICLE
  line, or to the end of the document.
- "1.01"-style sections belong to the article whose number matches the
  prefix (Roman article numbers are normalized for the comparison).
- Plain "1"-style sections belong to the article that encloses them.
- When the ARTICLE line has no title, an all-caps next line is the title
  unless it starts with "SECTION".

Usage:
    articles = parse_articles(bill_text)
    article = find_article_for_section(articles, "2.01")
"""
import logging
import re
from typing import List, Optional

from txleg_core.models import BillArticle
from txleg_core.parsers.roman import normalize_article_number
from txleg_core.parsers.tokenizer import (
    BillStructure,
    clean_title,
    tokenize,
)

logger = logging.getLogger(__name__)

# Title-on-next-line convention: upper-case letters and spaces only
NEXT_LINE_TITLE_PATTERN = re.compile(r'[A-Z\s]+')


def _section_belongs_to_article(section_number: str, article_number: int) -> bool:
    if "." not in section_number:
        return True
    prefix = section_number.split(".", 1)[0]
    return int(prefix) == article_number


def _title_from_next_line(structure: BillStructure, line_index: int) -> str:
    if line_index + 1 >= len(structure.lines):
        return ""
    next_line = structure.lines[line_index + 1].strip()
    if not next_line or next_line.startswith("SECTION"):
        return ""
    if NEXT_LINE_TITLE_PATTERN.fullmatch(next_line):
        return clean_title(next_line)
    return ""


def articles_from_structure(structure: BillStructure) -> List[BillArticle]:
    """
    Build BillArticle records from an already tokenized bill.

    Sections are walked once with a cursor, so the cost is linear in the
    number of declarations rather than articles x sections.
    """
    articles: List[BillArticle] = []
    declarations = structure.articles
    section_cursor = 0

    for i, declaration in enumerate(declarations):
        start_index = declaration.line_index
        if i + 1 < len(declarations):
            end_index = declarations[i + 1].line_index - 1
        else:
            end_index = structure.last_line_index

        # Skip sections that appear before this article (preamble)
        while (section_cursor < len(structure.sections)
               and structure.sections[section_cursor].line_index < start_index):
            section_cursor += 1

        normalized_number = normalize_article_number(declaration.number)
        sections: List[str] = []
        while (section_cursor < len(structure.sections)
               and structure.sections[section_cursor].line_index <= end_index):
            number = structure.sections[section_cursor].number
            if _section_belongs_to_article(number, normalized_number):
                sections.append(number)
            section_cursor += 1

        title = declaration.title or _title_from_next_line(structure, start_index)

        articles.append(BillArticle(
            article_number=declaration.number,
            title=title or f"ARTICLE {declaration.number}",
            start_line=start_index + 1,
            end_line=end_index + 1,
            sections=sections,
        ))

    logger.debug("Parsed %d articles", len(articles))
    return articles


def parse_articles(bill_text) -> List[BillArticle]:
    """
    Parse bill text into its ARTICLE blocks.

    Args:
        bill_text: Full bill text (None/non-string/empty allowed)

    Returns:
        Articles in document order, or [] when the bill has no ARTICLE lines
    """
    return articles_from_structure(tokenize(bill_text))


def has_article_structure(bill_text) -> bool:
    """True if the bill contains at least one ARTICLE declaration."""
    return len(tokenize(bill_text).articles) > 0


def count_articles(bill_text) -> int:
    return len(parse_articles(bill_text))


def find_article_for_section(
    articles: List[BillArticle],
    section_number: str
) -> Optional[BillArticle]:
    """
    Find the first article whose sections include section_number.

    Args:
        articles: Output of parse_articles
        section_number: Bill section number, e.g. "1.05"

    Returns:
        Matching BillArticle, or None
    """
    for article in articles:
        if section_number in article.sections:
            return article
    return None
