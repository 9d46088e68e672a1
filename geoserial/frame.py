"""Batch conversion of WKT columns held in pandas DataFrames."""

from __future__ import annotations

import logging
from typing import Any, Callable

import pandas as pd

from .errors import GeometrySerializationError, UnsupportedFormat
from .record import GeometryRecord
from .wkt.codec import WktCodec
from .wkt.encoder import EWKT_FORMAT

logger = logging.getLogger(__name__)

RECORD_COLUMNS = ("geometry_type", "srid", "is_3d", "is_measured", "coordinates")
_ERROR_MODES = ("raise", "coerce")


def _check_column(df: pd.DataFrame, column: str) -> None:
    if column not in df.columns:
        raise ValueError(f"input DataFrame must contain a {column!r} column")


def _check_errors(errors: str) -> None:
    if errors not in _ERROR_MODES:
        raise ValueError(f"errors must be one of {_ERROR_MODES}, got {errors!r}")


def _convert(
    series: pd.Series,
    convert: Callable[[str], Any],
    errors: str,
) -> list[Any]:
    """Apply ``convert`` to every non-null value, honouring ``errors``."""

    values: list[Any] = []
    for index, text in series.items():
        if text is None or (not isinstance(text, str) and pd.isna(text)):
            values.append(None)
            continue
        try:
            values.append(convert(text))
        except GeometrySerializationError as exc:
            if errors == "raise":
                raise
            logger.warning("Row %s: could not convert %r (%s)", index, text, exc)
            values.append(None)
    return values


def decode_wkt_column(
    df: pd.DataFrame,
    column: str = "wkt",
    *,
    codec: WktCodec | None = None,
    errors: str = "raise",
) -> pd.DataFrame:
    """Return a copy of ``df`` with the WKT in ``column`` expanded to record fields.

    Parameters
    ----------
    df:
        DataFrame holding WKT or EWKT strings under ``column``.
    column:
        Name of the text column.
    codec:
        Codec used to decode; a default one is built when omitted.
    errors:
        ``"raise"`` propagates the first decoding error. ``"coerce"`` logs
        it and leaves the row's record columns empty.
    """

    _check_column(df, column)
    _check_errors(errors)
    codec = codec or WktCodec()

    records: list[GeometryRecord | None] = _convert(df[column], codec.decode, errors)

    result = df.copy()
    result["geometry_type"] = [record.type.value if record else None for record in records]
    result["srid"] = pd.array([record.crs.srid if record else None for record in records], dtype="Int64")
    result["is_3d"] = pd.array([record.crs.is_3d if record else None for record in records], dtype="boolean")
    result["is_measured"] = pd.array(
        [record.crs.is_measured if record else None for record in records], dtype="boolean"
    )
    result["coordinates"] = pd.Series(
        [record.coordinates if record else None for record in records],
        index=result.index,
        dtype=object,
    )
    logger.info("Decoded %s geometries from column %r", sum(record is not None for record in records), column)
    return result


def encode_wkt_column(
    df: pd.DataFrame,
    column: str = "wkt",
    format: str = EWKT_FORMAT,
    *,
    target: str | None = None,
    codec: WktCodec | None = None,
    errors: str = "raise",
) -> pd.DataFrame:
    """Return a copy of ``df`` with ``column`` re-rendered in ``format``.

    The output goes to ``target`` (``column`` itself when omitted).
    """

    _check_column(df, column)
    _check_errors(errors)
    codec = codec or WktCodec()
    if not codec.supports_encoding(format):
        raise UnsupportedFormat(f"Unsupported format {format!r}")

    def _reencode(text: str) -> str:
        return codec.encode(codec.decode(text), format)

    result = df.copy()
    result[target or column] = pd.Series(_convert(df[column], _reencode, errors), index=result.index, dtype=object)
    return result


__all__ = ["RECORD_COLUMNS", "decode_wkt_column", "encode_wkt_column"]
