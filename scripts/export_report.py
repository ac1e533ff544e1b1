#!/usr/bin/env python3
"""Export a Daily Logger report from the command line."""

from __future__ import annotations

import argparse
import logging
import sys

from daily_logger.core.config import get_log_level
from daily_logger.core.db import create_session
from daily_logger.rendering import OUTPUT_FORMATS
from daily_logger.schemas import ExportOptions
from daily_logger.services.date_format_service import normalize_date
from daily_logger.services.export_service import generate_report
from daily_logger.services.seed_service import seed_demo_log, seed_demo_user


def main() -> int:
    parser = argparse.ArgumentParser(description="Export a work report for a date range")
    parser.add_argument("--user-id", type=int, help="User to report on (defaults to the demo user with --seed-demo)")
    parser.add_argument("--start", required=True, help="First date of the reporting period")
    parser.add_argument("--end", required=True, help="Last date of the reporting period")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default="pdf", help="Output file format")
    parser.add_argument("--style", default="professional", help="Document style")
    parser.add_argument("--output-dir", default=None, help="Directory for the exported file")
    parser.add_argument("--conclusions", default=None, help="Closing remarks for the report")
    parser.add_argument(
        "--seed-demo",
        action="store_true",
        help="Load the bundled demo user and work log before exporting",
    )

    args = parser.parse_args()
    logging.basicConfig(level=get_log_level())

    start = normalize_date(args.start)
    end = normalize_date(args.end)
    if start is None or end is None:
        print("Start and end must be valid dates.", file=sys.stderr)
        return 1

    with create_session() as db:
        user_id = args.user_id
        if args.seed_demo:
            for message in seed_demo_log(db):
                print(message)
            demo_user_id = seed_demo_user(db)
            if user_id is None:
                user_id = demo_user_id

        if user_id is None:
            print("--user-id is required unless --seed-demo is given.", file=sys.stderr)
            return 1

        result = generate_report(
            db,
            user_id,
            start,
            end,
            ExportOptions(output_format=args.format, document_format=args.style),
            conclusions=args.conclusions,
            export_dir=args.output_dir,
        )

    if not result.success:
        print(result.error, file=sys.stderr)
        return 1

    print(f"Report written to {result.file_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
