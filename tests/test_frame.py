from __future__ import annotations

import logging

import pandas as pd
import pytest

from geoserial.errors import UnsupportedFormat, WktSyntaxError
from geoserial.frame import RECORD_COLUMNS, decode_wkt_column, encode_wkt_column


@pytest.fixture
def geometries_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "name": ["a", "b", "c"],
            "wkt": [
                "SRID=4326;POINT (1 2)",
                "LINESTRING Z (0 0 0, 1 1 1)",
                "POLYGON EMPTY",
            ],
        }
    )


def test_decode_wkt_column(geometries_df):
    result = decode_wkt_column(geometries_df)

    assert set(RECORD_COLUMNS).issubset(result.columns)
    assert result["geometry_type"].tolist() == ["Point", "LineString", "Polygon"]
    assert result["srid"].tolist() == [4326, -1, -1]
    assert result["is_3d"].tolist() == [False, True, False]
    assert result["is_measured"].tolist() == [False, False, False]
    assert result["coordinates"].tolist() == [[1, 2], [[0, 0, 0], [1, 1, 1]], []]
    assert "geometry_type" not in geometries_df.columns


def test_decode_wkt_column_requires_column():
    df = pd.DataFrame({"id": [1, 2]})

    with pytest.raises(ValueError):
        decode_wkt_column(df)


def test_decode_wkt_column_raises_on_invalid_rows(geometries_df):
    geometries_df.loc[1, "wkt"] = "POINT (1,2)"

    with pytest.raises(WktSyntaxError):
        decode_wkt_column(geometries_df)


def test_decode_wkt_column_coerce(geometries_df, caplog):
    geometries_df.loc[1, "wkt"] = "MULTIPOLYGON (((0 0,1 0,1 1,0 0)))"

    with caplog.at_level(logging.WARNING, logger="geoserial.frame"):
        result = decode_wkt_column(geometries_df, errors="coerce")

    assert result["geometry_type"].tolist() == ["Point", None, "Polygon"]
    assert result["srid"].isna().tolist() == [False, True, False]
    assert result["coordinates"][1] is None
    assert "Row 1" in caplog.text


def test_decode_wkt_column_keeps_missing_values():
    df = pd.DataFrame({"geom": ["POINT (1 2)", None]})

    result = decode_wkt_column(df, "geom")

    assert result["geometry_type"].tolist() == ["Point", None]


def test_decode_wkt_column_rejects_unknown_error_mode(geometries_df):
    with pytest.raises(ValueError):
        decode_wkt_column(geometries_df, errors="ignore")


def test_encode_wkt_column_to_ewkt(geometries_df):
    result = encode_wkt_column(geometries_df, "wkt", "ewkt", target="ewkt")

    assert result["ewkt"].tolist() == [
        "SRID=4326;POINT (1 2)",
        "LINESTRING Z (0 0 0,1 1 1)",
        "POLYGON EMPTY",
    ]
    assert result["wkt"].tolist() == geometries_df["wkt"].tolist()


def test_encode_wkt_column_to_wkt_overwrites(geometries_df):
    result = encode_wkt_column(geometries_df, format="wkt")

    assert result["wkt"].tolist()[0] == "POINT (1 2)"


def test_encode_wkt_column_rejects_unknown_format(geometries_df):
    with pytest.raises(UnsupportedFormat):
        encode_wkt_column(geometries_df, format="wkb", errors="coerce")


def test_decode_wkt_column_coerces_overflowing_numerals():
    df = pd.DataFrame({"wkt": ["POINT (1 2)", "POINT (1e999 0)"]})

    result = decode_wkt_column(df, errors="coerce")

    assert result["geometry_type"].tolist() == ["Point", None]


def test_encode_wkt_column_coerces_overflowing_numerals():
    df = pd.DataFrame({"wkt": ["POINT (1 2)", "POINT (1e999 0)"]})

    result = encode_wkt_column(df, errors="coerce")

    assert result["wkt"].tolist() == ["POINT (1 2)", None]


def test_encode_wkt_column_raises_on_overflowing_numerals():
    df = pd.DataFrame({"wkt": ["POINT (1e999 0)"]})

    with pytest.raises(WktSyntaxError):
        encode_wkt_column(df)
