"""Entrypoint: verify a response from the command line and print the report.

Usage:
    agri-verify --category crop --crop Rice "Rice yields about 4000 kg per hectare."
    echo "PM-KISAN pays 6000 rupees a year." | agri-verify --category finance -
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from agri_verify.config.settings import Settings
from agri_verify.models.schemas import Location, VerificationContext
from agri_verify.observability.logger import setup_logging
from agri_verify.pipeline.verification_pipeline import create_pipeline
from agri_verify.storage.sqlite_record_store import SQLiteRecordStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agri-verify",
        description="Check an assistant response against trusted agricultural reference data.",
    )
    parser.add_argument("text", help="Response text to verify, or '-' to read stdin")
    parser.add_argument(
        "--category",
        default="general",
        choices=["crop", "weather", "finance", "general"],
    )
    parser.add_argument("--crop", help="Crop name or alias (crop category)")
    parser.add_argument("--state", help="State (weather category)")
    parser.add_argument("--district", help="District (weather category)")
    parser.add_argument("--db", help="Reference records SQLite path (default from settings)")
    parser.add_argument(
        "--corrected",
        action="store_true",
        help="Also print the response with correction notes appended",
    )
    return parser


def build_context(args: argparse.Namespace) -> VerificationContext:
    location = None
    if args.state and args.district:
        location = Location(state=args.state, district=args.district)
    return VerificationContext(crop_name=args.crop, location=location)


async def run(args: argparse.Namespace) -> int:
    settings = Settings()
    setup_logging(settings.log_level, settings.log_json)

    text = sys.stdin.read() if args.text == "-" else args.text
    db_path = args.db or settings.sqlite_records_db_path
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    store = SQLiteRecordStore(db_path)
    await store.initialize()
    pipeline = create_pipeline(store, settings)

    report = await pipeline.verify_response(text, args.category, build_context(args))
    print(report.model_dump_json(by_alias=True, indent=2))
    if args.corrected:
        print()
        print(pipeline.correct_response(text, report))
    return 0 if report.overall_verification else 1


def main() -> None:
    args = build_parser().parse_args()
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
