"""Command line interface to convert WKT geometries between WKT and EWKT."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def _ensure_project_root_on_path() -> None:
    """Make the repository root importable when running as a script."""

    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_project_root_on_path()

import pandas as pd  # noqa: E402  (import after path fix)

from geoserial.config import Settings, configure_logging, load_environment  # noqa: E402
from geoserial.frame import decode_wkt_column, encode_wkt_column  # noqa: E402
from geoserial.wkt import FORMATS, WktCodec, WktDecoder  # noqa: E402

logger = logging.getLogger("geoserial.convert")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "input",
        type=Path,
        help="CSV file with a WKT column, or a text file with one geometry per line (see --lines).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="CSV file where the converted rows are written. Defaults to <input>.converted.csv.",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format for the geometry column.",
    )
    parser.add_argument(
        "--column",
        default=None,
        help="Name of the column holding the WKT text.",
    )
    parser.add_argument(
        "--lines",
        action="store_true",
        help="Read the input as plain text, one geometry per line.",
    )
    parser.add_argument(
        "--strict-dimensions",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Reject coordinates whose ordinate count differs from the Z/M marker.",
    )
    parser.add_argument(
        "--expand",
        action="store_true",
        help="Add the normalized record fields (type, srid, flags, coordinates) as columns.",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Keep going on invalid geometries, leaving their output empty.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING...).",
    )
    return parser


def _read_input(path: Path, column: str, lines: bool) -> pd.DataFrame:
    if lines:
        rows = [line.strip() for line in path.read_text(encoding="utf-8").splitlines()]
        return pd.DataFrame({column: [row for row in rows if row]})
    return pd.read_csv(path)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    load_environment()
    configure_logging(args.log_level)
    settings = Settings.from_env()

    column = args.column or settings.wkt_column
    output_format = args.format or settings.default_format
    strict = settings.strict_dimensions if args.strict_dimensions is None else args.strict_dimensions
    errors = "coerce" if args.skip_invalid else "raise"
    codec = WktCodec(decoder=WktDecoder(strict_dimensions=strict))

    dataframe = _read_input(args.input, column, args.lines)
    if column not in dataframe.columns:
        parser.error(f"column {column!r} not found in {args.input}")

    if args.expand:
        dataframe = decode_wkt_column(dataframe, column, codec=codec, errors=errors)
    dataframe = encode_wkt_column(dataframe, column, output_format, codec=codec, errors=errors)

    output_path = args.output or args.input.with_suffix(".converted.csv")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    dataframe.to_csv(output_path, index=False, encoding="utf-8")
    logger.info("Wrote %s rows to %s (%s)", len(dataframe), output_path, output_format)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
