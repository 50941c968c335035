"""toplog-lite CLI entry point.

Finds the most frequently requested resources in an access log and the
cumulative bytes transferred for each.

Usage: toplog-lite count FILE [--strategy deterministic|probabilistic]
       toplog-lite compare FILE
       toplog-lite generate [--events N]
"""
import argparse
import logging
import sys

from toplog_lite.analytics.approximate import approximate_top_k
from toplog_lite.analytics.exact import exact_top_k
from toplog_lite.domain.config import ConfigurationError, CountConfig
from toplog_lite.parsing.filters import select_events
from toplog_lite.parsing.log_line import parse_lines

log = logging.getLogger(__name__)


def _add_count_options(p: argparse.ArgumentParser) -> None:
    defaults = CountConfig()
    p.add_argument(
        "--top", type=int, default=defaults.k,
        help=f"Number of resources to report (default: {defaults.k})",
    )
    p.add_argument(
        "--depth", type=int, default=defaults.depth,
        help=f"Sketch rows / hash functions (default: {defaults.depth})",
    )
    p.add_argument(
        "--width", type=int, default=defaults.width,
        help=f"Sketch counters per row (default: {defaults.width})",
    )
    p.add_argument(
        "--seed", type=int, default=defaults.seed,
        help=f"Sketch hash seed (default: {defaults.seed})",
    )


def _add_count_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "count",
        help="Report the top resources of a log file.",
    )
    p.add_argument("file", help="Access log to read")
    p.add_argument(
        "--strategy", choices=("deterministic", "probabilistic"),
        default="probabilistic",
        help="Exact in-memory counting or Count-Min Sketch (default: probabilistic)",
    )
    _add_count_options(p)


def _add_compare_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "compare",
        help="Run both strategies on a log file and report sketch accuracy.",
    )
    p.add_argument("file", help="Access log to read")
    _add_count_options(p)


def _add_generate_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "generate",
        help="Write synthetic access-log lines to stdout.",
    )
    p.add_argument(
        "--events", type=int, default=10_000,
        help="Number of lines to generate (default: 10000)",
    )
    p.add_argument(
        "--seed", type=int, default=0,
        help="RNG seed for reproducible output (default: 0)",
    )
    p.add_argument(
        "--random-fraction", type=float, default=0.2,
        help="Share of one-off random paths (default: 0.2)",
    )


def _config(args: argparse.Namespace) -> CountConfig:
    return CountConfig(k=args.top, depth=args.depth, width=args.width, seed=args.seed)


def _run_count(args: argparse.Namespace, config: CountConfig) -> None:
    from toplog_lite.profiling.report import format_results

    with open(args.file, encoding="utf-8", errors="replace") as fh:
        events = select_events(parse_lines(fh))
        if args.strategy == "deterministic":
            results = exact_top_k(events, config.k)
        else:
            results = approximate_top_k(
                events, config.k, config.depth, config.width, config.seed
            )
    if results:
        print(format_results(results))


def _run_compare(args: argparse.Namespace, config: CountConfig) -> None:
    from toplog_lite.profiling.harness import compare_strategies
    from toplog_lite.profiling.report import format_comparison

    with open(args.file, encoding="utf-8", errors="replace") as fh:
        result = compare_strategies(fh, config)
    print(format_comparison(result))


def _run_generate(args: argparse.Namespace) -> None:
    from toplog_lite.profiling.load_generator import LoadGenerator

    gen = LoadGenerator(
        num_events=args.events,
        seed=args.seed,
        high_cardinality_probability=args.random_fraction,
    )
    for line in gen.lines():
        print(line)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="toplog-lite",
        description="Top requested resources and bytes transferred from an access log.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging on stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_count_parser(subparsers)
    _add_compare_parser(subparsers)
    _add_generate_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "generate":
        try:
            _run_generate(args)
        except ValueError as exc:
            parser.error(str(exc))
        return

    try:
        config = _config(args)
    except ConfigurationError as exc:
        parser.error(str(exc))

    try:
        if args.command == "count":
            _run_count(args, config)
        elif args.command == "compare":
            _run_compare(args, config)
    except FileNotFoundError:
        log.debug("missing input file %s", args.file)
        print(f"Could not find location {args.file}", file=sys.stderr)
        sys.exit(1)
