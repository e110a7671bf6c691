from __future__ import annotations

import argparse
import logging
import os
from typing import Sequence

from dotenv import load_dotenv

from .playlist import filter_playlist, parse, read_playlist
from .prober import DEFAULT_TIMEOUT, StreamProber, log_progress
from .report import write_report
from .utils.file_utils import default_clean_path, write_lines

load_dotenv()

DEFAULT_INPUT = "index.m3u"
DEFAULT_REPORT = "iptv-test-results.txt"


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def _env_bool(name: str) -> bool:
    value = _env_str(name)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must be zero or a positive integer")
    return number


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return number


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check which streams in an M3U playlist are reachable.")
    parser.add_argument("-i", "--input", default=_env_str("INPUT_FILE") or DEFAULT_INPUT, help="Playlist file to test")
    parser.add_argument("-o", "--output", default=_env_str("REPORT_FILE") or DEFAULT_REPORT, help="Where to write the text report")
    parser.add_argument(
        "-t",
        "--timeout",
        type=_positive_float,
        default=_env_str("PROBE_TIMEOUT") or str(DEFAULT_TIMEOUT),
        help="Seconds to wait for each stream to answer",
    )
    parser.add_argument(
        "-m",
        "--max-streams",
        type=_non_negative_int,
        default=_env_str("MAX_STREAMS"),
        help="Only test the first N streams of the playlist",
    )
    parser.add_argument(
        "--clean",
        action="store_true",
        default=_env_bool("WRITE_CLEAN"),
        help="Also write a playlist with the unavailable streams removed",
    )
    parser.add_argument(
        "--clean-output",
        default=_env_str("CLEAN_OUTPUT"),
        help="Path of the cleaned playlist (implies --clean; default: <input>-clean.m3u)",
    )
    parser.add_argument("--user-agent", default=_env_str("USER_AGENT"), help="User-Agent header sent with each probe")
    parser.add_argument("-q", "--quiet", action="store_true", default=_env_bool("QUIET"), help="Do not log per-stream progress")
    parser.add_argument("-v", "--verbose", action="store_true", default=_env_bool("VERBOSE"), help="Enable debug logging")
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    if not os.path.isfile(args.input):
        logging.error("Input playlist %s does not exist", args.input)
        return 1

    raw_lines = read_playlist(args.input)
    entries = parse(raw_lines)
    logging.info("Found %s streams in %s", len(entries), args.input)

    progress = None if args.quiet else log_progress
    with StreamProber(timeout=args.timeout, user_agent=args.user_agent) as prober:
        results = prober.probe_entries(entries, max_streams=args.max_streams, progress=progress)

    summary = write_report(args.output, results)
    logging.info(
        "Available: %s, unavailable: %s, availability rate: %.2f%%",
        summary.available,
        summary.unavailable,
        summary.rate,
    )

    if args.clean or args.clean_output:
        clean_path = args.clean_output or default_clean_path(args.input)
        unavailable_urls = {result.entry.url for result in results if not result.available}
        cleaned = filter_playlist(raw_lines, unavailable_urls)
        write_lines(clean_path, cleaned)
        logging.info("Saved cleaned playlist (%s of %s lines kept) to %s", len(cleaned), len(raw_lines), clean_path)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
