# src/lottery_ticket_extractor/demo.py
import argparse
import logging
import sys

_SAMPLE_TICKETS = [
    "569815571556",
    "4938532894754",
    "1234567",
    "472844278465445",
]


def main(argv=None):
    """CLI demo: split candidate digit strings into 7-number lottery tickets."""
    from .extraction.orchestrator import read_candidates, render_tickets
    from .extraction.utils import ConfigTypeError

    parser = argparse.ArgumentParser(
        prog="lottery-demo",
        description="Split digit strings into 7 unique lottery numbers (1-59).",
    )
    parser.add_argument(
        "tickets",
        nargs="*",
        help="Candidate digit strings (e.g. 4938532894754)",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="file",
        help="Read one candidate per line from this file",
    )
    parser.add_argument(
        "--report-rejections",
        action="store_true",
        default=None,
        dest="report_rejections",
        help="Also print inputs that cannot be split",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    try:
        candidates = list(args.tickets)
        if args.file:
            candidates.extend(read_candidates(args.file))
        if not candidates:
            candidates = list(_SAMPLE_TICKETS)
        for line in render_tickets(
            candidates, report_rejections=args.report_rejections, debug=args.debug
        ):
            print(line)
    except (OSError, ValueError, ConfigTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
