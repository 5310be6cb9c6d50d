import os
from datetime import datetime
from typing import Any, Optional, TextIO

from txleg_core.models import BillParseResult, CodeReference
from txleg_core.parsers.texas_codes import get_chapter_url, get_code_abbreviation


def _chapter_link(ref: CodeReference) -> Optional[str]:
    abbr = get_code_abbreviation(ref.code)
    if not abbr or not ref.chapter:
        return None
    chapter_number = ref.chapter.replace("Chapter", "").strip()
    return get_chapter_url(abbr, chapter_number)


def write_bill_section(f: TextIO, bill_id: str, result: BillParseResult) -> None:
    """
    Write one bill's structure summary to a markdown file.

    Args:
        f: File handle to write to
        bill_id: Bill identifier used in the heading
        result: Output of parse_bill
    """
    complexity = result.complexity

    f.write(f"## {bill_id}\n\n")
    f.write("**Structure:**\n\n")
    f.write(f"- **Complexity:** {complexity.complexity.title()}\n")
    f.write(f"- **Pattern:** {(complexity.pattern or 'none').replace('_', ' ')}\n")
    f.write(f"- **Sections:** {complexity.section_count}\n")
    f.write(f"- **Articles:** {complexity.article_count}\n")
    if complexity.terminology_replacement:
        replacement = complexity.terminology_replacement
        f.write(
            f"- **Terminology Replacement:** \"{replacement.from_term}\" → "
            f"\"{replacement.to_term}\" ({replacement.occurrence_count} occurrences)\n"
        )
    f.write("\n")

    if complexity.affected_codes:
        f.write("**Affected Codes:**\n\n")
        for code in complexity.affected_codes:
            abbr = get_code_abbreviation(code)
            f.write(f"- {code}{f' ({abbr})' if abbr else ''}\n")
        f.write("\n")

    # Table of contents
    if result.articles:
        f.write("**Articles:**\n\n")
        f.write("| Article | Title | Lines | Sections |\n")
        f.write("|---------|-------|-------|----------|\n")
        for article in result.articles:
            sections = ", ".join(article.sections) if article.sections else "-"
            f.write(
                f"| {article.article_number} | {article.title} | "
                f"{article.start_line}-{article.end_line} | {sections} |\n"
            )
        f.write("\n")

    if result.code_references:
        f.write("**Code Changes:**\n\n")
        f.write("| Bill Section | Action | Code | Section | Subsections |\n")
        f.write("|--------------|--------|------|---------|-------------|\n")
        for ref in result.code_references:
            link = _chapter_link(ref)
            section = f"[{ref.section}]({link})" if link else ref.section
            subsections = ", ".join(ref.subsections) if ref.subsections else "-"
            f.write(
                f"| {ref.bill_section} | {ref.action.upper()} | {ref.code} | "
                f"{section} | {subsections} |\n"
            )
        f.write("\n")
    else:
        f.write("*No code references found.*\n\n")

    f.write("---\n\n")


def generate_markdown_report(
    results: list[dict[str, Any]],
    timestamp: str,
    output_dir: str = None
) -> str:
    """
    Generate a Markdown structure report for parsed bills.

    Args:
        results: List of {"bill_id": str, "result": BillParseResult}
        timestamp: Timestamp for filename (YYYYMMDD_HHMMSS format)
        output_dir: Optional output directory

    Returns:
        str: Path to generated markdown file
    """
    by_tier: dict[str, int] = {"simple": 0, "moderate": 0, "complex": 0, "omnibus": 0}
    for entry in results:
        by_tier[entry["result"].complexity.complexity] += 1

    if output_dir:
        md_file = os.path.join(output_dir, f"bill_structure_{timestamp}.md")
    else:
        md_file = f"bill_structure_{timestamp}.md"

    with open(md_file, "w", encoding="utf-8") as f:
        f.write("# Texas Bill Structure Report\n\n")
        f.write(f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
        f.write("---\n\n")

        f.write("## Summary\n\n")
        f.write(f"- **Total Bills Parsed:** {len(results)}\n")
        for tier, count in by_tier.items():
            f.write(f"- **{tier.title()}:** {count}\n")
        f.write("\n---\n\n")

        for entry in results:
            write_bill_section(f, entry["bill_id"], entry["result"])

    return md_file
