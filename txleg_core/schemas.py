"""
JSON schemas for the parse result transport form (BillParseResult.to_dict()).

Consumers that receive parse results over JSON (web app, stored rows) can
validate against these before use. The CLI validates every result before
writing its output file.
"""
from jsonschema import validate

BILL_ARTICLE_SCHEMA = {
    "type": "object",
    "properties": {
        "articleNumber": {"type": "string", "minLength": 1},
        "title": {"type": "string", "minLength": 1},
        "startLine": {"type": "integer", "minimum": 1},
        "endLine": {"type": "integer", "minimum": 1},
        "sections": {"type": "array", "items": {"type": "string", "pattern": r"^\d+(\.\d+)?$"}},
    },
    "required": ["articleNumber", "title", "startLine", "endLine", "sections"],
    "additionalProperties": False,
}

CODE_REFERENCE_SCHEMA = {
    "type": "object",
    "properties": {
        "code": {"type": "string", "pattern": r"Code$"},
        "title": {"type": "string"},
        "subtitle": {"type": "string"},
        "chapter": {"type": "string", "pattern": r"^Chapter "},
        "subchapter": {"type": "string", "pattern": r"^Subchapter "},
        "section": {"type": "string", "minLength": 1},
        "subsections": {"type": "array", "items": {"type": "string", "pattern": r"^\(.+\)$"}},
        "action": {"type": "string", "enum": ["add", "amend", "repeal"]},
        "billSection": {"type": "string", "pattern": r"^SECTION \d+(\.\d+)?$"},
        "rawText": {"type": "string"},
    },
    "required": ["code", "section", "action", "billSection", "rawText"],
    "additionalProperties": False,
}

COMPLEXITY_SCHEMA = {
    "type": "object",
    "properties": {
        "complexity": {"type": "string", "enum": ["simple", "moderate", "complex", "omnibus"]},
        "pattern": {
            "type": ["string", "null"],
            "enum": ["terminology_replacement", "omnibus", "single_code", None],
        },
        "articleCount": {"type": "integer", "minimum": 0},
        "sectionCount": {"type": "integer", "minimum": 0},
        "affectedCodes": {"type": "array", "items": {"type": "string"}, "uniqueItems": True},
        "terminologyReplacement": {
            "type": "object",
            "properties": {
                "fromTerm": {"type": "string"},
                "toTerm": {"type": "string"},
                "occurrenceCount": {"type": "integer", "minimum": 0},
            },
            "required": ["fromTerm", "toTerm", "occurrenceCount"],
        },
    },
    "required": ["complexity", "pattern", "articleCount", "sectionCount", "affectedCodes"],
    "additionalProperties": False,
}

BILL_PARSE_RESULT_SCHEMA = {
    "type": "object",
    "properties": {
        "textHash": {"type": "string", "pattern": r"^([0-9a-f]{64})?$"},
        "articles": {"type": "array", "items": BILL_ARTICLE_SCHEMA},
        "codeReferences": {"type": "array", "items": CODE_REFERENCE_SCHEMA},
        "complexity": COMPLEXITY_SCHEMA,
    },
    "required": ["textHash", "articles", "codeReferences", "complexity"],
}


def validate_parse_result(data: dict) -> None:
    """
    Check a BillParseResult.to_dict() payload against BILL_PARSE_RESULT_SCHEMA.

    Raises:
        jsonschema.ValidationError: Payload does not match the transport form
    """
    validate(instance=data, schema=BILL_PARSE_RESULT_SCHEMA)
