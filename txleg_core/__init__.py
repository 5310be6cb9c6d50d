# Texas Bill Structure Core Library
# Main entry point: from txleg_core.parsers import parse_bill

from .config import load_config, parser_config_from_dict, get_db_path

from .parsers import (
    parse_bill,
    parse_articles,
    parse_code_references,
    detect_complexity,
    has_article_structure,
    count_articles,
    find_article_for_section,
    ParserConfig,
    DEFAULT_PARSER_CONFIG,
)

from .models import (
    BillArticle,
    CodeReference,
    TerminologyReplacement,
    ComplexityResult,
    BillParseResult,
)

from .log_store import RingBufferLogHandler

__all__ = [
    # Main entry point
    "parse_bill",
    "load_config",
    "parser_config_from_dict",
    "get_db_path",
    # Parsers
    "parse_articles",
    "parse_code_references",
    "detect_complexity",
    "has_article_structure",
    "count_articles",
    "find_article_for_section",
    "ParserConfig",
    "DEFAULT_PARSER_CONFIG",
    # Models
    "BillArticle",
    "CodeReference",
    "TerminologyReplacement",
    "ComplexityResult",
    "BillParseResult",
    # Logging
    "RingBufferLogHandler",
]
