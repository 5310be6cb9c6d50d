"""
Pytest fixtures and configuration.

Following TDD principles:
- Fixtures are realistic Texas bill texts (HB 175 / HB 201 / SB 2 / HB 2 shapes)
- No mocks: parsers are pure, storage uses an in-memory SQLite database
- Each test should be independent and fast
"""
import sqlite3

import pytest
from dotenv import load_dotenv

from txleg_core.db import init_database

load_dotenv()


# =============================================================================
# SAMPLE BILL TEXT FIXTURES
# =============================================================================

SIMPLE_BILL = """
AN ACT relating to public education.
BE IT ENACTED BY THE LEGISLATURE OF THE STATE OF TEXAS:
SECTION 1.  Section 29.001, Education Code, is amended to read as follows:
Sec. 29.001.  DEFINITIONS. In this chapter:
(1) "Department" means the Texas Department of Family and Protective Services.
(2) "Program" means the Texas Rising Star Program.
SECTION 2.  This Act takes effect September 1, 2025.
"""

GOVERNMENT_CODE_BILL = """
AN ACT
relating to the Texas Rising Star Program administered by the Texas
Workforce Commission.
BE IT ENACTED BY THE LEGISLATURE OF THE STATE OF TEXAS:
SECTION 1.  Section 124.002(a), Government Code, is amended to read as follows:
(a)  The commission shall administer the Texas Rising Star Program to rate the
quality of participating child-care providers.
SECTION 2.  This Act takes effect September 1, 2025.
"""

MODERATE_BILL = """
AN ACT relating to offenses involving financial crimes and fraud.
BE IT ENACTED BY THE LEGISLATURE OF THE STATE OF TEXAS:
SECTION 1.  Section 32.21(d), Penal Code, is amended to read as follows:
(d)  An offense under this section is a Class C misdemeanor unless it is shown on the
trial of the offense that the value of the property is:
SECTION 2.  Section 32.31(b), Penal Code, is amended to read as follows:
(b)  A person commits an offense if the person uses or possesses a fraudulent
access card with intent to obtain property or services.
SECTION 3.  Section 32.32(a), Penal Code, is amended to read as follows:
(a)  A person commits an offense if the person knowingly makes or causes to be
made a false claim for payment.
SECTION 4.  Section 32.33, Penal Code, is amended to read as follows:
Sec. 32.33.  HINDERING SECURED CREDITORS.  (a)  A person commits an offense
if the person with intent to hinder enforcement of a security interest.
SECTION 5.  Section 32.34(a), Penal Code, is amended by amending Subsections (a)
and (b) to read as follows:
(a)  A person commits an offense if the person fraudulently transfers property.
SECTION 6.  This Act takes effect September 1, 2025.
"""

COMPLEX_BILL = """
AN ACT relating to the establishment of education savings accounts for students.
BE IT ENACTED BY THE LEGISLATURE OF THE STATE OF TEXAS:
SECTION 1.  Chapter 29, Education Code, is amended by adding Subchapter Z to read as follows:
SUBCHAPTER Z. EDUCATION SAVINGS ACCOUNTS
Sec. 29.901.  DEFINITIONS.  In this subchapter:
(1) "Account" means an education savings account established under this subchapter.
SECTION 2.  Section 29.902, Education Code, is added to read as follows:
Sec. 29.902.  ESTABLISHMENT OF PROGRAM.  The comptroller shall establish and
administer the education savings account program.
SECTION 3.  Section 29.903, Education Code, is added to read as follows:
Sec. 29.903.  ELIGIBILITY.  A student is eligible for an account if the student is
a Texas resident.
SECTION 4.  Section 29.904, Education Code, is added to read as follows:
Sec. 29.904.  ACCOUNT ADMINISTRATION.  The comptroller shall administer accounts.
SECTION 5.  Section 29.905, Education Code, is added to read as follows:
Sec. 29.905.  QUALIFIED EXPENSES.  Account funds may be used for tuition.
SECTION 6.  Section 29.906, Education Code, is added to read as follows:
Sec. 29.906.  ACCOUNT BALANCE.  Funds remaining in an account remain available.
SECTION 7.  Section 29.907, Education Code, is added to read as follows:
Sec. 29.907.  PARTICIPATING SCHOOLS.  A school may participate in the program.
SECTION 8.  Section 48.101, Education Code, is amended to read as follows:
Sec. 48.101.  BASIC ALLOTMENT.  The basic allotment is $6,160 per student.
SECTION 9.  Section 48.102(a), Education Code, is amended to read as follows:
(a)  The commissioner shall adjust the basic allotment.
SECTION 10.  Section 7.102(a), Government Code, is amended to read as follows:
(a)  The agency shall coordinate education programs with other agencies.
SECTION 11.  Section 403.001, Government Code, is amended by adding Subsection (d) to read as follows:
(d)  The comptroller shall establish procedures for education savings accounts.
SECTION 12.  This Act takes effect September 1, 2025.
"""

OMNIBUS_BILL = """
AN ACT relating to public school finance, educator compensation, and student outcomes.
BE IT ENACTED BY THE LEGISLATURE OF THE STATE OF TEXAS:
ARTICLE 1.  FOUNDATION SCHOOL PROGRAM
SECTION 1.01.  Section 48.001, Education Code, is amended to read as follows:
Sec. 48.001.  DEFINITIONS.  In this chapter:
(1) "Allotment" means a dollar amount per student in average daily attendance.
SECTION 1.02.  Section 48.002, Education Code, is amended to read as follows:
Sec. 48.002.  PURPOSE.  The purpose of the foundation school program is to
guarantee each student access to programs.
SECTION 1.03.  Section 48.051, Education Code, is amended to read as follows:
Sec. 48.051.  BASIC ALLOTMENT.  (a)  The basic allotment for each student is $6,160.
SECTION 1.04.  Section 48.052, Education Code, is amended by amending Subsections (a) and (b) to read as follows:
(a)  The adjusted allotment is calculated by multiplying the basic allotment.
ARTICLE 2.  SPECIAL PROGRAMS
SECTION 2.01.  Section 29.001, Education Code, is amended by adding Subsection (d) to read as follows:
(d)  "Eligible student" means a student with special needs.
SECTION 2.02.  Section 29.003(a), Education Code, is amended to read as follows:
(a)  The agency shall establish procedures for special programs.
SECTION 2.03.  Section 29.014, Education Code, is amended to read as follows:
Sec. 29.014.  COMPENSATORY EDUCATION.  Each district shall provide
compensatory education services to students.
ARTICLE 3.  EDUCATOR COMPENSATION
SECTION 3.01.  Section 21.001, Education Code, is amended to read as follows:
Sec. 21.001.  DEFINITIONS.  In this chapter:
(1) "Educator" means a superintendent, principal, or teacher.
SECTION 3.02.  Section 21.402(a), Education Code, is amended to read as follows:
(a)  The minimum monthly salary for a classroom teacher is based on years of experience.
SECTION 3.03.  Subchapter Z, Chapter 21, Education Code, is amended by adding Section 21.920 to read as follows:
Sec. 21.920.  TEACHER INCENTIVE ALLOTMENT.  (a)  A district may designate
a teacher as a master, exemplary, recognized, or acknowledged teacher.
ARTICLE 4.  GOVERNANCE AND ADMINISTRATION
SECTION 4.01.  Section 7.055(b), Education Code, is amended to read as follows:
(b)  The commissioner shall adopt rules necessary to implement this chapter.
SECTION 4.02.  Section 7.102(c), Government Code, is amended to read as follows:
(c)  The agency shall coordinate with the Texas Higher Education Coordinating Board.
ARTICLE 5.  EFFECTIVE DATE AND TRANSITION
SECTION 5.01.  Except as otherwise provided by this Act, this Act takes effect September 1, 2025.
SECTION 5.02.  The changes in law made by this Act apply beginning with the 2025-2026 school year.
"""

MULTI_CODE_OMNIBUS_BILL = """
AN ACT relating to interagency coordination for children's services.
BE IT ENACTED BY THE LEGISLATURE OF THE STATE OF TEXAS:
ARTICLE 1.  EDUCATION
SECTION 1.01.  Section 29.001, Education Code, is amended to read as follows:
Sec. 29.001.  DEFINITIONS.
SECTION 1.02.  Section 29.002, Education Code, is amended to read as follows:
Sec. 29.002.  ESTABLISHMENT.
ARTICLE 2.  HEALTH SERVICES
SECTION 2.01.  Section 32.001, Human Resources Code, is amended to read as follows:
Sec. 32.001.  DEFINITIONS.
SECTION 2.02.  Section 32.002, Human Resources Code, is amended to read as follows:
Sec. 32.002.  ELIGIBILITY.
SECTION 2.03.  Section 533.001, Health and Safety Code, is amended to read as follows:
Sec. 533.001.  COMMUNITY HEALTH SERVICES.
ARTICLE 3.  GOVERNMENT COORDINATION
SECTION 3.01.  Section 531.001, Government Code, is amended to read as follows:
Sec. 531.001.  DEFINITIONS.
SECTION 3.02.  Section 531.002, Government Code, is amended to read as follows:
Sec. 531.002.  INTERAGENCY COUNCIL.
ARTICLE 4.  EFFECTIVE DATE
SECTION 4.01.  This Act takes effect September 1, 2025.
"""

TERMINOLOGY_BILL = """
AN ACT relating to the renaming of the Texas Department of Mental Health and Mental Retardation.
BE IT ENACTED BY THE LEGISLATURE OF THE STATE OF TEXAS:
SECTION 1.  Throughout the Health and Safety Code, each reference to "Texas Department of Mental Health and Mental Retardation" means "Department of State Health Services".
SECTION 2.  Section 531.001, Health and Safety Code, is amended by striking "Texas Department of Mental Health and Mental Retardation" and substituting "Department of State Health Services".
SECTION 3.  Section 531.002, Health and Safety Code, is amended by striking "Texas Department of Mental Health and Mental Retardation" and substituting "Department of State Health Services".
SECTION 4.  Section 531.003, Health and Safety Code, is amended by striking "Texas Department of Mental Health and Mental Retardation" and substituting "Department of State Health Services".
SECTION 5.  This Act takes effect September 1, 2025.
"""

PARTIAL_STRUCTURE_BILL = """
AN ACT relating to something.
BE IT ENACTED BY THE LEGISLATURE OF THE STATE OF TEXAS:
SECTION 1. Some content without proper code references.
SECTION 2. This takes effect September 1, 2025.
"""


def generate_large_bill_text(section_count: int) -> str:
    """
    Omnibus bill with 25 sections per article plus an effective-date article.

    Every section amends a distinct Education Code section.
    """
    articles_count = -(-section_count // 25)
    lines = [
        "",
        "AN ACT relating to comprehensive legislative reform.",
        "BE IT ENACTED BY THE LEGISLATURE OF THE STATE OF TEXAS:",
    ]

    section_num = 0
    for a in range(1, articles_count + 1):
        lines.append(f"ARTICLE {a}.  PART {a} PROVISIONS")
        for s in range(1, min(25, section_count - section_num) + 1):
            section_num += 1
            section_id = f"{a}.{s:02d}"
            lines.append(
                f"SECTION {section_id}.  Section {28 + section_num}.00{s}, Education Code, "
                f"is amended to read as follows:"
            )
            lines.append(
                f"Sec. {28 + section_num}.00{s}.  PROVISION {section_num}.  "
                f"This section provides for certain requirements."
            )

    lines.append(f"ARTICLE {articles_count + 1}.  EFFECTIVE DATE")
    lines.append(f"SECTION {articles_count + 1}.01.  This Act takes effect September 1, 2025.")
    return "\n".join(lines) + "\n"


@pytest.fixture
def simple_bill() -> str:
    """Two sections, one Education Code amendment (HB 175 shape)."""
    return SIMPLE_BILL


@pytest.fixture
def government_code_bill() -> str:
    """Two sections amending Section 124.002(a), Government Code."""
    return GOVERNMENT_CODE_BILL


@pytest.fixture
def moderate_bill() -> str:
    """Six sections, all Penal Code amendments (HB 201 shape)."""
    return MODERATE_BILL


@pytest.fixture
def complex_bill() -> str:
    """Twelve sections across Education and Government Code (SB 2 shape)."""
    return COMPLEX_BILL


@pytest.fixture
def omnibus_bill() -> str:
    """Five ARTICLEs with 1.01-style sections (HB 2 shape)."""
    return OMNIBUS_BILL


@pytest.fixture
def multi_code_omnibus_bill() -> str:
    """Four ARTICLEs touching four different codes."""
    return MULTI_CODE_OMNIBUS_BILL


@pytest.fixture
def terminology_bill() -> str:
    """Agency renaming bill: one 'each reference to' plus three strike/substitute edits."""
    return TERMINOLOGY_BILL


@pytest.fixture
def partial_structure_bill() -> str:
    """SECTION declarations but no code citations."""
    return PARTIAL_STRUCTURE_BILL


@pytest.fixture
def large_bill():
    """Factory: large_bill(1000) -> 1000-section, 40-article omnibus text."""
    return generate_large_bill_text


@pytest.fixture
def all_bills() -> list[str]:
    return [
        SIMPLE_BILL,
        GOVERNMENT_CODE_BILL,
        MODERATE_BILL,
        COMPLEX_BILL,
        OMNIBUS_BILL,
        MULTI_CODE_OMNIBUS_BILL,
        TERMINOLOGY_BILL,
        PARTIAL_STRUCTURE_BILL,
    ]


# =============================================================================
# STORAGE FIXTURES
# =============================================================================

@pytest.fixture
def db_conn() -> sqlite3.Connection:
    """Fresh in-memory parse store per test."""
    conn = init_database(":memory:")
    yield conn
    conn.close()
