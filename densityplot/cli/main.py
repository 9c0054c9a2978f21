import argparse
import sys

from densityplot.cli import plot
from densityplot.cli.exitcodes import EXIT_ERROR, exit_code_for_error
from densityplot.core.logging import LOG_LEVELS, configure_logging


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="densityplot", description="Densityplot: text-mode probability density charts"
    )
    p.add_argument(
        "--log-level", dest="log_level", choices=LOG_LEVELS, default="WARNING", help="Log level (stderr)."
    )

    sub = p.add_subparsers(dest="cmd", required=True)

    # plot
    plot_p = sub.add_parser("plot", help="Estimate the density of samples and draw it.")
    plot_p.add_argument("path", nargs="?", default="-", help="Sample file (.txt/.csv/.json/.yaml) or - for stdin.")
    plot_p.add_argument("--title", default=None, help="Chart title.")
    plot_p.add_argument("--widen", type=int, default=None, help="Horizontal widening factor (default: 4).")
    plot_p.add_argument("--bins", type=int, default=None, help="Bin count for non-integer data (default: 20).")
    plot_p.add_argument("--height", type=int, default=None, help="Chart height in rows (default: 15).")
    plot_p.add_argument("--width", type=int, default=None, help="Resample the curve to N points.")
    plot_p.add_argument("--offset", type=int, default=None, help="Left x-label offset in columns (default: 10).")
    plot_p.add_argument("--config", default=None, help="Plot config file (YAML or JSON).")

    # estimate
    est_p = sub.add_parser("estimate", help="Print the density estimation as JSON.")
    est_p.add_argument("path", nargs="?", default="-", help="Sample file (.txt/.csv/.json/.yaml) or - for stdin.")
    est_p.add_argument("--bins", type=int, default=None, help="Bin count for non-integer data (default: 20).")
    est_p.add_argument("--config", default=None, help="Plot config file (YAML or JSON).")

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.cmd == "plot":
            return plot.run(
                path=args.path,
                title=args.title,
                widen=args.widen,
                bins=args.bins,
                height=args.height,
                width=args.width,
                offset=args.offset,
                config=args.config,
            )

        if args.cmd == "estimate":
            return plot.estimate(path=args.path, bins=args.bins, config=args.config)

        print("Unknown command.", file=sys.stderr)
        return EXIT_ERROR

    except Exception as e:
        print(f"densityplot: error: {e}", file=sys.stderr)
        return exit_code_for_error(e)


if __name__ == "__main__":
    sys.exit(main())
