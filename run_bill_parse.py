#!/usr/bin/env python3
# run_bill_parse.py
"""
CLI for Texas bill structure parsing.

Usage:
    python run_bill_parse.py --bill-id HB123 --bill-text-file path/to/bill.txt

Output:
    - Console panel with complexity, tables of articles and code references
    - JSON file with the full parse result (camelCase keys)
    - Optional SQLite rows (--db) and Markdown report (--markdown)

Design:
    - Parsing is pure and never fails on odd input; only file, config and
      database errors stop the run
    - With --db, bills whose text hash is unchanged are not re-parsed
"""
import os
import sys
import argparse
import json
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from jsonschema import ValidationError
from rich.console import Console

from txleg_core.config import load_config, parser_config_from_dict, get_db_path
from txleg_core.db import (
    init_database,
    save_parse_result,
    get_parse_result,
    needs_reparse,
    get_code_reference_stats,
)
from txleg_core.exceptions import BillTextError, TxLegError
from txleg_core.log_store import RingBufferLogHandler
from txleg_core.parsers import parse_bill
from txleg_core.reports import display_parse_result, generate_markdown_report
from txleg_core.schemas import validate_parse_result

load_dotenv()
console = Console()
logger = logging.getLogger("txleg_core")


def read_bill_text(path: str) -> str:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise BillTextError(f"Could not read bill text file {path}: {e}") from e


def collect_bills(args) -> list[tuple[str, str]]:
    """Return (bill_id, path) pairs from --bill-text-file or --input-dir."""
    if args.bill_text_file:
        if not os.path.exists(args.bill_text_file):
            raise BillTextError(f"Bill text file not found: {args.bill_text_file}")
        bill_id = args.bill_id or Path(args.bill_text_file).stem
        return [(bill_id, args.bill_text_file)]

    if not os.path.isdir(args.input_dir):
        raise BillTextError(f"Input directory not found: {args.input_dir}")
    return [
        (path.stem, str(path))
        for path in sorted(Path(args.input_dir).glob("*.txt"))
    ]


def main():
    """Main CLI entry point for bill structure parsing."""
    parser = argparse.ArgumentParser(
        description="Parse Texas bill text into articles, code references and complexity",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python run_bill_parse.py --bill-id HB123 --bill-text-file bill.txt
    python run_bill_parse.py --input-dir bills/ --db txleg_parse.db --markdown
        """
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--bill-text-file", help="Path to a single bill text file")
    source.add_argument("--input-dir", help="Directory of *.txt bill files (file stem is the bill id)")
    parser.add_argument("--bill-id", help="Bill identifier (default: file name)")
    parser.add_argument("--output", default="bill_parse.json",
                        help="Output JSON file (default: bill_parse.json)")
    parser.add_argument("--db", nargs="?", const="", default=None,
                        help="Store results in SQLite (default path: TXLEG_DB_PATH or config)")
    parser.add_argument("--markdown", action="store_true", help="Also write a Markdown report")
    parser.add_argument("--config", default="config.yaml", help="Config file (default: config.yaml)")
    parser.add_argument("--verbose", action="store_true", help="Show debug log lines captured during the run")

    args = parser.parse_args()

    log_handler = None
    conn = None
    try:
        config = load_config(args.config)
        logging_config = config.get("logging") or {}
        log_handler = RingBufferLogHandler(capacity=int(logging_config.get("buffer_capacity", 1000)))
        log_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        log_handler.setLevel("DEBUG" if args.verbose else str(logging_config.get("level", "WARNING")).upper())
        logger.addHandler(log_handler)
        logger.setLevel(logging.DEBUG)

        parser_config = parser_config_from_dict(config.get("parser"))
        bills = collect_bills(args)

        storage_enabled = bool((config.get("storage") or {}).get("enabled"))
        if args.db is not None or storage_enabled:
            db_path = args.db or get_db_path(config)
            conn = init_database(db_path)
            console.print(f"[cyan]Using database {db_path}[/cyan]")

        results = []
        for bill_id, path in bills:
            bill_text = read_bill_text(path)

            if conn is not None and not needs_reparse(bill_id, bill_text, conn):
                console.print(f"[dim]{bill_id}: text unchanged, using stored result[/dim]")
                result = get_parse_result(bill_id, conn)
            else:
                result = parse_bill(bill_text, parser_config)
                if conn is not None:
                    save_parse_result(bill_id, result, conn)

            display_parse_result(bill_id, result)
            results.append({"bill_id": bill_id, "result": result})

        if conn is not None:
            stats = get_code_reference_stats(conn)
            console.print(
                f"[cyan]Database:[/cyan] {stats['bills']} bills, "
                f"{stats['references']} code references"
            )
    except TxLegError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
    finally:
        if conn is not None:
            conn.close()
        if log_handler is not None:
            logger.removeHandler(log_handler)

    if not results:
        console.print("[yellow]No bill text files found.[/yellow]")
        sys.exit(1)

    bills_data = []
    for entry in results:
        data = entry["result"].to_dict()
        try:
            validate_parse_result(data)
        except ValidationError as e:
            console.print(f"[red]Error: parse result for {entry['bill_id']} failed schema validation: {e.message}[/red]")
            sys.exit(1)
        bills_data.append({"billId": entry["bill_id"], **data})

    output_data = {
        "generatedAt": datetime.now().isoformat(),
        "bills": bills_data
    }

    with open(args.output, 'w', encoding='utf-8') as f:
        json.dump(output_data, f, indent=2)

    console.print(f"\n[green]✓ Results saved to {args.output}[/green]")

    if args.markdown:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        md_file = generate_markdown_report(results, timestamp)
        console.print(f"[green]✓ Markdown report saved to {md_file}[/green]")

    if args.verbose and log_handler is not None:
        for entry in reversed(log_handler.get_logs(limit=50)):
            console.print(f"[dim]{entry.timestamp} {entry.level} {entry.message}[/dim]")


if __name__ == "__main__":
    main()
