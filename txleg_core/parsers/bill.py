"""
Single entry point for all structural views of a bill.

parse_bill tokenizes the text once and hands the same BillStructure to the
article segmenter, code reference extractor and complexity classifier. The
three results are independent; none reads another's output.
"""
import hashlib
import logging

from txleg_core.models import BillParseResult
from txleg_core.parsers.articles import articles_from_structure
from txleg_core.parsers.code_references import CodeReferenceExtractor
from txleg_core.parsers.complexity import complexity_from_structure
from txleg_core.parsers.config import DEFAULT_PARSER_CONFIG, ParserConfig
from txleg_core.parsers.tokenizer import tokenize

logger = logging.getLogger(__name__)


def compute_text_hash(bill_text) -> str:
    if not bill_text or not isinstance(bill_text, str):
        return ""
    return hashlib.sha256(bill_text.encode('utf-8')).hexdigest()


def parse_bill(bill_text, config: ParserConfig = DEFAULT_PARSER_CONFIG) -> BillParseResult:
    """
    Parse articles, code references and complexity for one bill text.

    Args:
        bill_text: Full bill text (None/non-string/empty allowed)
        config: Parser thresholds

    Returns:
        BillParseResult with all three views and the text hash
    """
    structure = tokenize(bill_text)

    result = BillParseResult(
        text_hash=compute_text_hash(bill_text),
        articles=articles_from_structure(structure),
        code_references=CodeReferenceExtractor(config).extract_from_structure(structure),
        complexity=complexity_from_structure(bill_text, structure, config),
    )

    logger.debug(
        "Parsed bill: %d lines, %d articles, %d code references, complexity=%s",
        len(structure.lines),
        len(result.articles),
        len(result.code_references),
        result.complexity.complexity
    )
    return result
