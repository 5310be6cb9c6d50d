"""
Texas statutory codes with their two-letter abbreviations.

Abbreviations match the ones used by statutes.capitol.texas.gov, e.g.
https://statutes.capitol.texas.gov/Docs/ED/htm/ED.29.htm for Education Code
chapter 29.
"""
from typing import Optional

STATUTES_BASE_URL = "https://statutes.capitol.texas.gov/Docs"

TEXAS_CODES: list[dict[str, str]] = [
    {"abbreviation": "AG", "name": "Agriculture Code"},
    {"abbreviation": "AL", "name": "Alcoholic Beverage Code"},
    {"abbreviation": "BC", "name": "Business and Commerce Code"},
    {"abbreviation": "BO", "name": "Business Organizations Code"},
    {"abbreviation": "CP", "name": "Civil Practice and Remedies Code"},
    {"abbreviation": "CR", "name": "Code of Criminal Procedure"},
    {"abbreviation": "ED", "name": "Education Code"},
    {"abbreviation": "EL", "name": "Election Code"},
    {"abbreviation": "ES", "name": "Estates Code"},
    {"abbreviation": "FA", "name": "Family Code"},
    {"abbreviation": "FI", "name": "Finance Code"},
    {"abbreviation": "GV", "name": "Government Code"},
    {"abbreviation": "HS", "name": "Health and Safety Code"},
    {"abbreviation": "HR", "name": "Human Resources Code"},
    {"abbreviation": "IN", "name": "Insurance Code"},
    {"abbreviation": "LA", "name": "Labor Code"},
    {"abbreviation": "LG", "name": "Local Government Code"},
    {"abbreviation": "NR", "name": "Natural Resources Code"},
    {"abbreviation": "OC", "name": "Occupations Code"},
    {"abbreviation": "PE", "name": "Penal Code"},
    {"abbreviation": "PW", "name": "Parks and Wildlife Code"},
    {"abbreviation": "PR", "name": "Property Code"},
    {"abbreviation": "SD", "name": "Special District Local Laws Code"},
    {"abbreviation": "TX", "name": "Tax Code"},
    {"abbreviation": "TN", "name": "Transportation Code"},
    {"abbreviation": "UT", "name": "Utilities Code"},
    {"abbreviation": "WA", "name": "Water Code"},
]


def _strip_code_suffix(name: str) -> str:
    name = name.strip().lower()
    if name.endswith(" code"):
        name = name[:-len(" code")]
    return name


def get_code_name(abbreviation: str) -> Optional[str]:
    """'ed' -> 'Education Code'"""
    for code in TEXAS_CODES:
        if code["abbreviation"] == abbreviation.upper():
            return code["name"]
    return None


def get_code_abbreviation(name: str) -> Optional[str]:
    """
    Look up the abbreviation for a code name.

    Case-insensitive, and the trailing "Code" is optional:
    "Health and Safety Code", "health and safety" -> "HS"
    """
    wanted = _strip_code_suffix(name)
    for code in TEXAS_CODES:
        if _strip_code_suffix(code["name"]) == wanted:
            return code["abbreviation"]
    return None


def is_valid_code_abbreviation(abbreviation: str) -> bool:
    return get_code_name(abbreviation) is not None


def get_chapter_url(abbreviation: str, chapter_number: str) -> str:
    abbr = abbreviation.upper()
    return f"{STATUTES_BASE_URL}/{abbr}/htm/{abbr}.{chapter_number}.htm"


def get_code_toc_url(abbreviation: str) -> str:
    abbr = abbreviation.upper()
    return f"{STATUTES_BASE_URL}/{abbr}/htm/{abbr}.htm"
