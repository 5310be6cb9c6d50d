from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from txleg_core.models import BillParseResult
from txleg_core.parsers.texas_codes import get_code_abbreviation

console = Console()

COMPLEXITY_COLORS = {
    "simple": "green",
    "moderate": "yellow",
    "complex": "red",
    "omnibus": "magenta",
}

ACTION_STYLES = {
    "add": "[green]ADD[/green]",
    "amend": "[yellow]AMEND[/yellow]",
    "repeal": "[red]REPEAL[/red]",
}


def display_parse_result(bill_id: str, result: BillParseResult, max_references: int = 50) -> None:
    """
    Display the structure of one bill in the console.

    Shows a complexity panel (border colored by tier), an article table of
    contents when the bill has ARTICLE structure, and the code references.

    Args:
        bill_id: Bill identifier shown in the panel title
        result: Output of parse_bill
        max_references: Reference rows to show before truncating
    """
    complexity = result.complexity
    color = COMPLEXITY_COLORS.get(complexity.complexity, "white")

    codes = []
    for code in complexity.affected_codes:
        abbr = get_code_abbreviation(code)
        codes.append(f"{code} ({abbr})" if abbr else code)

    content = f"""[cyan]Complexity:[/cyan] [bold {color}]{complexity.complexity.upper()}[/bold {color}]
[cyan]Pattern:[/cyan] {complexity.pattern or 'none'}
[cyan]Sections:[/cyan] {complexity.section_count}
[cyan]Articles:[/cyan] {complexity.article_count}
[cyan]Affected Codes:[/cyan] {', '.join(codes) if codes else 'None identified'}"""

    replacement = complexity.terminology_replacement
    if replacement:
        content += (
            f"\n[cyan]Terminology:[/cyan] \"{replacement.from_term}\" -> "
            f"\"{replacement.to_term}\" ({replacement.occurrence_count} occurrences)"
        )

    console.print(Panel(content, title=f"[{color}]{bill_id}[/{color}]", border_style=color))

    if result.articles:
        article_table = Table(title="Articles")
        article_table.add_column("#", style="cyan", width=5)
        article_table.add_column("Title", style="white", max_width=50)
        article_table.add_column("Lines", justify="center", width=12)
        article_table.add_column("Sections", justify="center", width=8)

        for article in result.articles:
            article_table.add_row(
                article.article_number,
                article.title,
                f"{article.start_line}-{article.end_line}",
                str(len(article.sections))
            )

        console.print(article_table)

    if not result.code_references:
        console.print("[yellow]No code references found in bill.[/yellow]")
        return

    ref_table = Table(title="Code References", show_lines=False)
    ref_table.add_column("Bill Section", style="cyan", width=14)
    ref_table.add_column("Action", justify="center", width=8)
    ref_table.add_column("Code", style="white", max_width=30)
    ref_table.add_column("Section", style="white", max_width=20)
    ref_table.add_column("Subsections", style="dim", max_width=20)

    for ref in result.code_references[:max_references]:
        ref_table.add_row(
            ref.bill_section,
            ACTION_STYLES.get(ref.action, ref.action),
            ref.code,
            ref.section,
            ", ".join(ref.subsections) if ref.subsections else ""
        )

    console.print(ref_table)

    remaining = len(result.code_references) - max_references
    if remaining > 0:
        console.print(f"[dim]... {remaining} more references[/dim]")
