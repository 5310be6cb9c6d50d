# txleg_core/models.py
"""
Data models for parsed bill structure.

Design Decisions:
- Pydantic BaseModel for runtime validation and JSON serialization
- snake_case attributes in Python, camelCase on the wire (by_alias=True) so
  stored rows and API payloads keep the field names the web app expects
- Optional granularity fields (title/chapter/...) stay None unless the
  matched citation actually named that level
- Models carry data only; all parsing lives in txleg_core.parsers

Why These Models:
- BillArticle: Drives the article table of contents (line ranges + sections)
- CodeReference: One statutory edit, keyed by (bill_section, section, code)
- ComplexityResult: Routing tag for omnibus / terminology-replacement bills
- BillParseResult: All three views for one bill text, for storage/transport
"""
from typing import List, Optional, Literal
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CodeAction = Literal["add", "amend", "repeal"]
BillComplexity = Literal["simple", "moderate", "complex", "omnibus"]
BillPattern = Literal["terminology_replacement", "omnibus", "single_code"]


class WireModel(BaseModel):
    """Base model: camelCase aliases, construction by field name allowed."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class BillArticle(WireModel):
    """
    One ARTICLE block of an omnibus bill.

    article_number keeps the numeral system used in the bill ("1" or "IV").
    Line numbers are 1-indexed and inclusive.
    """
    article_number: str = Field(..., description="Article numeral as written")
    title: str = Field(..., description="Cleaned heading, or 'ARTICLE {n}'")
    start_line: int = Field(..., ge=1, description="Line of the ARTICLE declaration")
    end_line: int = Field(..., ge=1, description="Last line before the next ARTICLE")
    sections: List[str] = Field(default_factory=list, description="Bill section numbers, e.g. '1.01'")


class CodeReference(WireModel):
    """
    Reference to a Texas code provision and the edit made to it.

    Design: section keeps a leading subsection qualifier ("124.002(a)") while
    subsections lists every qualifier found, so consumers can show either the
    citation as written or the individual subsections.
    """
    code: str = Field(..., description="Normalized code name, e.g. 'Education Code'")
    title: Optional[str] = Field(None, description="'Title N' when cited")
    subtitle: Optional[str] = Field(None, description="'Subtitle X' when cited")
    chapter: Optional[str] = Field(None, description="'Chapter N' cited or inferred")
    subchapter: Optional[str] = Field(None, description="'Subchapter X' when cited")
    section: str = Field(..., description="Section number or 'Chapter 29' style id")
    subsections: Optional[List[str]] = Field(None, description="Qualifiers like '(a)', '(b-1)'")
    action: CodeAction
    bill_section: str = Field(..., description="'SECTION 1' or 'SECTION 1.01'")
    raw_text: str = Field(..., description="Matched citation text")


class TerminologyReplacement(WireModel):
    """Global term substitution detected in a bill."""
    from_term: str
    to_term: str
    occurrence_count: int = Field(..., ge=0, description="Times from_term appears in the bill")


class ComplexityResult(WireModel):
    """
    Whole-bill complexity classification.

    pattern is None when no special bill pattern applies.
    """
    complexity: BillComplexity = "simple"
    pattern: Optional[BillPattern] = None
    article_count: int = Field(default=0, ge=0)
    section_count: int = Field(default=0, ge=0)
    affected_codes: List[str] = Field(default_factory=list, description="Sorted, unique code names")
    terminology_replacement: Optional[TerminologyReplacement] = None

    def to_dict(self) -> dict:
        # pattern is part of the contract even when None
        data = self.model_dump(by_alias=True, exclude_none=True)
        data.setdefault("pattern", None)
        return data


class BillParseResult(WireModel):
    """
    All structural views of one bill text.

    text_hash identifies the exact text that was parsed, so stored results can
    be invalidated when the bill text changes.
    """
    text_hash: str = ""
    articles: List[BillArticle] = Field(default_factory=list)
    code_references: List[CodeReference] = Field(default_factory=list)
    complexity: ComplexityResult = Field(default_factory=ComplexityResult)

    def to_dict(self) -> dict:
        return {
            "textHash": self.text_hash,
            "articles": [a.to_dict() for a in self.articles],
            "codeReferences": [r.to_dict() for r in self.code_references],
            "complexity": self.complexity.to_dict(),
        }
