#!/usr/bin/env python3
"""
urlloader - fetch a URL through the Loader and write the payload

Writes the raw payload to stdout (or --output). Progress and errors go to
the log on stderr.
"""

import argparse
import logging
import os
import sys
import threading
from pathlib import Path

from urlloader import Data, Loader, RequestsFetchEngine, Result, shared_engine
from urlloader.exceptions import ConfigurationError
from urlloader.logging_config import get_module_logger, setup_logging

logger = get_module_logger("main")


def write_payload(payload: bytes, output: Path | None) -> None:
    """
    Write the payload to a file, or to stdout if no file is given

    Args:
        payload: Raw bytes received from the engine
        output: Destination file (optional)
    """
    if output is None:
        sys.stdout.buffer.write(payload)
        sys.stdout.buffer.flush()
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(payload)
    logger.info(f"Wrote {len(payload)} bytes to {output}")


def main():
    parser = argparse.ArgumentParser(
        description="Fetch a URL and write its payload",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py https://example.com
  python main.py my/API --base-url https://api.example.com/ --output api.bin
        """,
    )

    parser.add_argument("url", help="URL (or identifier relative to --base-url) to fetch")
    parser.add_argument("--output", type=Path, help="Write the payload to this file")
    parser.add_argument(
        "--base-url",
        help="Prefix for relative identifiers (overrides fetch.base_url from config)",
    )
    parser.add_argument(
        "--wait",
        type=float,
        default=60.0,
        help="Seconds to wait for the result before giving up (default: 60)",
    )
    parser.add_argument("--log-file", type=Path, help="Also write a debug log to this file")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")

    args = parser.parse_args()

    setup_logging(log_file=args.log_file, verbose=not args.quiet)

    try:
        engine = RequestsFetchEngine(base_url=args.base_url) if args.base_url else shared_engine()
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)

    loader = Loader(engine=engine)
    done = threading.Event()
    outcome: list[Result] = []

    def on_result(result: Result) -> None:
        outcome.append(result)
        done.set()

    logger.info(f"Loading {args.url}")
    loader.load(args.url, on_result)

    if not done.wait(args.wait):
        logger.error(f"No result for {args.url} after {args.wait} seconds")
        logging.shutdown()
        # In-flight workers would otherwise be joined at interpreter exit
        os._exit(2)

    result = outcome[0]
    if isinstance(result, Data):
        write_payload(result.payload, args.output)
        sys.exit(0)
    else:
        logger.error(f"Failed to load {args.url}: {result.failure}")
        sys.exit(1)


if __name__ == "__main__":
    main()
