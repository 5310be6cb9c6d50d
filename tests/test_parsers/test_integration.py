"""
Cross-parser consistency and performance.

The three parsers run independently over the same text; these tests check
that their answers agree with each other and stay fast on very large bills.
"""
import time

from txleg_core.parsers import (
    count_articles,
    detect_complexity,
    find_article_for_section,
    has_article_structure,
    parse_articles,
    parse_bill,
    parse_code_references,
)


class TestConsistency:
    """Article, reference and complexity views of the same bill agree."""

    def test_reference_codes_are_affected_codes(self, all_bills):
        for bill in all_bills:
            reference_codes = {r.code for r in parse_code_references(bill)}
            assert reference_codes <= set(detect_complexity(bill).affected_codes)

    def test_reference_codes_equal_affected_codes_for_plain_bills(self, simple_bill, moderate_bill):
        for bill in (simple_bill, moderate_bill):
            reference_codes = sorted({r.code for r in parse_code_references(bill)})
            assert reference_codes == detect_complexity(bill).affected_codes

    def test_article_counts_agree(self, all_bills):
        for bill in all_bills:
            articles = parse_articles(bill)
            assert count_articles(bill) == len(articles)
            assert detect_complexity(bill).article_count == len(articles)
            assert has_article_structure(bill) == bool(articles)

    def test_each_section_maps_back_to_its_article(self, omnibus_bill):
        articles = parse_articles(omnibus_bill)

        for article in articles:
            for section in article.sections:
                assert section.split(".")[0] == article.article_number
                assert find_article_for_section(articles, section).article_number == article.article_number

    def test_multi_code_omnibus(self, multi_code_omnibus_bill):
        result = parse_bill(multi_code_omnibus_bill)

        assert result.complexity.complexity == "omnibus"
        assert result.complexity.affected_codes == [
            "Education Code",
            "Government Code",
            "Health and Safety Code",
            "Human Resources Code",
        ]
        assert [len(a.sections) for a in result.articles] == [2, 3, 2, 1]
        assert find_article_for_section(result.articles, "2.03").title == "HEALTH SERVICES"

    def test_reference_bill_sections_fall_inside_articles(self, omnibus_bill):
        result = parse_bill(omnibus_bill)
        all_sections = {s for a in result.articles for s in a.sections}

        for ref in result.code_references:
            assert ref.bill_section.replace("SECTION ", "") in all_sections


class TestLargeBill:
    """1000 sections across 40 articles plus the effective-date article."""

    def test_completes_quickly(self, large_bill):
        text = large_bill(1000)

        start = time.perf_counter()
        articles = parse_articles(text)
        references = parse_code_references(text)
        complexity = detect_complexity(text)
        elapsed = time.perf_counter() - start

        assert elapsed < 5.0
        assert len(articles) == 41
        assert len(references) == 1000
        assert complexity.complexity == "omnibus"
        assert complexity.article_count == 41
        assert complexity.section_count == 1001

    def test_parse_bill_matches_individual_parsers(self, large_bill):
        text = large_bill(200)
        result = parse_bill(text)

        assert result.articles == parse_articles(text)
        assert result.code_references == parse_code_references(text)
        assert result.complexity == detect_complexity(text)

    def test_article_partition(self, large_bill):
        articles = parse_articles(large_bill(100))

        assert [len(a.sections) for a in articles] == [25, 25, 25, 25, 1]
        assert articles[-1].title == "EFFECTIVE DATE"
