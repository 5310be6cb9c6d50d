"""Markdown report and console display tests."""
import io

from txleg_core.parsers import parse_bill
from txleg_core.reports import display_parse_result, generate_markdown_report, write_bill_section


class TestWriteBillSection:

    def test_code_changes_table_links_chapters(self, government_code_bill):
        f = io.StringIO()
        write_bill_section(f, "HB175", parse_bill(government_code_bill))
        text = f.getvalue()

        assert text.startswith("## HB175\n")
        assert "- **Complexity:** Simple" in text
        assert "- **Pattern:** single code" in text
        assert "- Government Code (GV)" in text
        assert (
            "| SECTION 1 | AMEND | Government Code | "
            "[124.002(a)](https://statutes.capitol.texas.gov/Docs/GV/htm/GV.124.htm) | (a) |"
        ) in text
        assert text.endswith("---\n\n")

    def test_articles_table(self, omnibus_bill):
        f = io.StringIO()
        write_bill_section(f, "HB2", parse_bill(omnibus_bill))
        text = f.getvalue()

        assert "**Articles:**" in text
        assert "| 1 | FOUNDATION SCHOOL PROGRAM |" in text
        assert "1.01, 1.02, 1.03, 1.04" in text

    def test_terminology_line(self, terminology_bill):
        f = io.StringIO()
        write_bill_section(f, "SB100", parse_bill(terminology_bill))

        assert "**Terminology Replacement:**" in f.getvalue()

    def test_no_references(self, partial_structure_bill):
        f = io.StringIO()
        write_bill_section(f, "HB1", parse_bill(partial_structure_bill))
        text = f.getvalue()

        assert "*No code references found.*" in text
        assert "- **Articles:** 0" in text
        assert "| Article | Title |" not in text


def test_generate_markdown_report(tmp_path, simple_bill, omnibus_bill):
    results = [
        {"bill_id": "HB175", "result": parse_bill(simple_bill)},
        {"bill_id": "HB2", "result": parse_bill(omnibus_bill)},
    ]

    md_file = generate_markdown_report(results, "20250101_120000", output_dir=str(tmp_path))

    assert md_file == str(tmp_path / "bill_structure_20250101_120000.md")
    text = (tmp_path / "bill_structure_20250101_120000.md").read_text(encoding="utf-8")
    assert text.startswith("# Texas Bill Structure Report")
    assert "- **Total Bills Parsed:** 2" in text
    assert "- **Simple:** 1" in text
    assert "- **Omnibus:** 1" in text
    assert text.index("## HB175") < text.index("## HB2")


def test_display_parse_result_runs(all_bills, capsys):
    for index, bill in enumerate(all_bills):
        display_parse_result(f"HB{index}", parse_bill(bill), max_references=2)

    assert "more references" in capsys.readouterr().out
