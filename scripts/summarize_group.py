#!/usr/bin/env python3
"""Load a JSON batch of people and print group tables."""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from lifelanguages.config import AppConfig, load_config
from lifelanguages.data.batch import build_people
from lifelanguages.data.records import coerce_record, load_records
from lifelanguages.errors import InsufficientDataError
from lifelanguages.evaluation.group import summarize_group, summarize_indicators
from lifelanguages.evaluation.tables import (
    format_group_table,
    format_indicator_table,
    format_people_table,
)
from lifelanguages.models.factory import PersonFactory
from lifelanguages.utils import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Summarize a group of Life Language profiles")
    parser.add_argument("--data", type=str, required=True, help="JSON file of person records")
    parser.add_argument("--config", type=str, default=None)
    parser.add_argument("--coerce", action="store_true", help="Records hold text values (CSV export)")
    args = parser.parse_args()

    cfg = load_config(args.config) if args.config else AppConfig()
    log = setup_logging(cfg.log_level)

    records = load_records(args.data)
    if args.coerce:
        records = [coerce_record(r) for r in records]
    log.info(f"Read {len(records)} records from {args.data}")

    try:
        batch = build_people(records, PersonFactory(locale=cfg.locale))
    except InsufficientDataError as e:
        log.error(str(e))
        for rejected in e.rejected:
            log.error(f"  record {rejected.index}: {rejected.reason}")
        sys.exit(1)

    for rejected in batch.rejected:
        log.warning(f"Rejected record {rejected.index}: {rejected.reason}")

    print(format_people_table(batch.people, cfg.locale))
    print()
    print(format_group_table(summarize_group(batch.people), cfg.locale))

    indicators = summarize_indicators(batch.people)
    if indicators.member_count:
        print()
        print(format_indicator_table(indicators, cfg.locale))


if __name__ == "__main__":
    main()
