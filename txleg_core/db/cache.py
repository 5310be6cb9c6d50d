import sqlite3
import json
import logging
from datetime import datetime
from typing import Any, Optional

from txleg_core.exceptions import ParseStoreError
from txleg_core.models import (
    BillArticle,
    BillParseResult,
    CodeReference,
    ComplexityResult,
)
from txleg_core.parsers.bill import compute_text_hash

logger = logging.getLogger(__name__)


def init_database(db_path: str) -> sqlite3.Connection:
    try:
        conn = sqlite3.connect(db_path)
        cursor = conn.cursor()

        cursor.execute('''
            CREATE TABLE IF NOT EXISTS parsed_bills (
                bill_id TEXT PRIMARY KEY,
                text_hash TEXT,
                complexity TEXT,
                pattern TEXT,
                complexity_json TEXT,
                parsed_at TIMESTAMP
            )
        ''')

        cursor.execute('''
            CREATE TABLE IF NOT EXISTS bill_articles (
                article_row_id INTEGER PRIMARY KEY AUTOINCREMENT,
                bill_id TEXT NOT NULL,
                position INTEGER NOT NULL,
                article_number TEXT,
                title TEXT,
                start_line INTEGER,
                end_line INTEGER,
                sections_json TEXT,
                FOREIGN KEY (bill_id) REFERENCES parsed_bills(bill_id)
            )
        ''')

        cursor.execute('''
            CREATE TABLE IF NOT EXISTS bill_code_references (
                reference_id INTEGER PRIMARY KEY AUTOINCREMENT,
                bill_id TEXT NOT NULL,
                position INTEGER NOT NULL,
                code TEXT NOT NULL,
                title TEXT,
                subtitle TEXT,
                chapter TEXT,
                subchapter TEXT,
                section TEXT NOT NULL,
                subsections_json TEXT,
                action TEXT NOT NULL,
                bill_section TEXT NOT NULL,
                raw_text TEXT,
                FOREIGN KEY (bill_id) REFERENCES parsed_bills(bill_id)
            )
        ''')

        # Indexes
        cursor.execute('CREATE INDEX IF NOT EXISTS idx_articles_bill ON bill_articles(bill_id)')
        cursor.execute('CREATE INDEX IF NOT EXISTS idx_refs_bill ON bill_code_references(bill_id)')
        cursor.execute('CREATE INDEX IF NOT EXISTS idx_refs_code ON bill_code_references(code)')

        conn.commit()
        return conn
    except sqlite3.Error as e:
        raise ParseStoreError(f"Could not initialize database {db_path}: {e}") from e


def save_parse_result(bill_id: str, result: BillParseResult, conn: sqlite3.Connection) -> None:
    """
    Store a parse result, replacing everything previously stored for the bill.

    Delete and insert run in one transaction, so readers never see a mix of
    old and new references for the same bill.

    Raises:
        ParseStoreError: Any sqlite failure (the transaction is rolled back)
    """
    try:
        with conn:
            cursor = conn.cursor()
            cursor.execute('DELETE FROM bill_code_references WHERE bill_id = ?', (bill_id,))
            cursor.execute('DELETE FROM bill_articles WHERE bill_id = ?', (bill_id,))

            cursor.execute('''
                INSERT OR REPLACE INTO parsed_bills
                (bill_id, text_hash, complexity, pattern, complexity_json, parsed_at)
                VALUES (?, ?, ?, ?, ?, ?)
            ''', (
                bill_id,
                result.text_hash,
                result.complexity.complexity,
                result.complexity.pattern,
                json.dumps(result.complexity.to_dict()),
                datetime.now().isoformat()
            ))

            cursor.executemany('''
                INSERT INTO bill_articles
                (bill_id, position, article_number, title, start_line, end_line, sections_json)
                VALUES (?, ?, ?, ?, ?, ?, ?)
            ''', [
                (
                    bill_id,
                    position,
                    article.article_number,
                    article.title,
                    article.start_line,
                    article.end_line,
                    json.dumps(article.sections)
                )
                for position, article in enumerate(result.articles)
            ])

            cursor.executemany('''
                INSERT INTO bill_code_references
                (bill_id, position, code, title, subtitle, chapter, subchapter, section,
                 subsections_json, action, bill_section, raw_text)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ''', [
                (
                    bill_id,
                    position,
                    ref.code,
                    ref.title,
                    ref.subtitle,
                    ref.chapter,
                    ref.subchapter,
                    ref.section,
                    json.dumps(ref.subsections) if ref.subsections is not None else None,
                    ref.action,
                    ref.bill_section,
                    ref.raw_text
                )
                for position, ref in enumerate(result.code_references)
            ])
    except sqlite3.Error as e:
        raise ParseStoreError(f"Could not save parse result for {bill_id}: {e}") from e

    logger.info(
        "Stored parse result for %s: %d articles, %d code references",
        bill_id, len(result.articles), len(result.code_references)
    )


def get_parse_result(bill_id: str, conn: sqlite3.Connection) -> Optional[BillParseResult]:
    try:
        cursor = conn.cursor()
        cursor.execute(
            'SELECT text_hash, complexity_json FROM parsed_bills WHERE bill_id = ?',
            (bill_id,)
        )
        row = cursor.fetchone()
        if not row:
            return None
        text_hash, complexity_json = row

        cursor.execute('''
            SELECT article_number, title, start_line, end_line, sections_json
            FROM bill_articles
            WHERE bill_id = ?
            ORDER BY position
        ''', (bill_id,))
        articles = [
            BillArticle(
                article_number=r[0],
                title=r[1],
                start_line=r[2],
                end_line=r[3],
                sections=json.loads(r[4]) if r[4] else []
            )
            for r in cursor.fetchall()
        ]

        cursor.execute('''
            SELECT code, title, subtitle, chapter, subchapter, section,
                   subsections_json, action, bill_section, raw_text
            FROM bill_code_references
            WHERE bill_id = ?
            ORDER BY position
        ''', (bill_id,))
        references = [
            CodeReference(
                code=r[0],
                title=r[1],
                subtitle=r[2],
                chapter=r[3],
                subchapter=r[4],
                section=r[5],
                subsections=json.loads(r[6]) if r[6] else None,
                action=r[7],
                bill_section=r[8],
                raw_text=r[9] or ""
            )
            for r in cursor.fetchall()
        ]
    except sqlite3.Error as e:
        raise ParseStoreError(f"Could not load parse result for {bill_id}: {e}") from e

    complexity = (
        ComplexityResult.model_validate(json.loads(complexity_json))
        if complexity_json else ComplexityResult()
    )
    return BillParseResult(
        text_hash=text_hash or "",
        articles=articles,
        code_references=references,
        complexity=complexity,
    )


def needs_reparse(bill_id: str, bill_text: str, conn: sqlite3.Connection) -> bool:
    """
    Check whether the stored result is stale for this text.

    Returns:
        True if nothing is stored for the bill or the stored hash differs
    """
    try:
        cursor = conn.cursor()
        cursor.execute('SELECT text_hash FROM parsed_bills WHERE bill_id = ?', (bill_id,))
        row = cursor.fetchone()
    except sqlite3.Error as e:
        raise ParseStoreError(f"Could not check parse state for {bill_id}: {e}") from e

    if not row:
        return True
    return row[0] != compute_text_hash(bill_text)


def get_code_reference_stats(conn: sqlite3.Connection, top_n: int = 10) -> dict[str, Any]:
    """
    Summary across all stored bills: most referenced codes and action counts.
    """
    try:
        cursor = conn.cursor()
        cursor.execute('SELECT COUNT(*) FROM parsed_bills')
        bill_count = cursor.fetchone()[0]

        cursor.execute('SELECT COUNT(*) FROM bill_code_references')
        reference_count = cursor.fetchone()[0]

        cursor.execute('''
            SELECT code, COUNT(*) AS n
            FROM bill_code_references
            GROUP BY code
            ORDER BY n DESC, code
            LIMIT ?
        ''', (top_n,))
        top_codes = [{"code": row[0], "count": row[1]} for row in cursor.fetchall()]

        cursor.execute('''
            SELECT action, COUNT(*)
            FROM bill_code_references
            GROUP BY action
        ''')
        by_action = {"add": 0, "amend": 0, "repeal": 0}
        for action, count in cursor.fetchall():
            by_action[action] = count
    except sqlite3.Error as e:
        raise ParseStoreError(f"Could not compute code reference stats: {e}") from e

    return {
        "bills": bill_count,
        "references": reference_count,
        "top_codes": top_codes,
        "by_action": by_action,
    }
