from .markdown import generate_markdown_report, write_bill_section
from .display import display_parse_result

__all__ = [
    "generate_markdown_report",
    "write_bill_section",
    "display_parse_result",
]
