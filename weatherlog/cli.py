#!/usr/bin/env python3
"""
weatherlog CLI entry point
Dispatches init / add / list / summary against the flat store.
"""
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from weatherlog.codec import encode_record, parse_items
from weatherlog.config import Config
from weatherlog.errors import UnknownCommand, WeatherlogError
from weatherlog.models import Command
from weatherlog.storage.journal import append_record, init_store, read_all_records
from weatherlog.summary import summarize_records

USAGE = "Usage: weatherlog [--verbose] init | add key=value... | list | summary"

logger = logging.getLogger(__name__)

# ---------------- Helper functions -----------------

def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def parse_command(args: List[str]) -> Command:
    try:
        return Command(action=args[0], items=args[1:])
    except ValidationError as e:
        raise UnknownCommand(f"Unknown command: {args[0]}") from e


def run(cmd: Command, config: Config) -> None:
    if cmd.action == 'init':
        init_store(config.store_path)
        return

    if cmd.action == 'add':
        record = parse_items(cmd.items)
        append_record(record, config.store_path)
        return

    # Reads: nothing is printed unless the whole store decodes
    records = read_all_records(config.store_path)
    if cmd.action == 'list':
        for r in records:
            print(encode_record(r))
        return

    if cmd.action == 'summary':
        print(summarize_records(records, config.numeric_field))
        return

# ---------------- Main -----------------

def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    verbose = '--verbose' in args
    args = [a for a in args if a != '--verbose']
    setup_logging(verbose)

    if not args:
        print(USAGE)
        return 0

    try:
        cmd = parse_command(args)
        config = Config.from_env()
        logger.debug("running %s with store %s", cmd.action, config.store_path)
        run(cmd, config)
    except WeatherlogError as ex:
        sys.stderr.write(f"{ex}\n")
        return 2
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
