from .cache import (
    init_database,
    save_parse_result,
    get_parse_result,
    needs_reparse,
    get_code_reference_stats,
)

__all__ = [
    "init_database",
    "save_parse_result",
    "get_parse_result",
    "needs_reparse",
    "get_code_reference_stats",
]
