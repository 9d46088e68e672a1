"""Format-aware WKT/EWKT codec."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..errors import UnsupportedFormat
from ..record import GeometryRecord
from .decoder import WktDecoder
from .encoder import FORMATS, WKT_FORMAT, WktEncoder


class WktCodec:
    """Pair a decoder and an encoder behind the ``wkt``/``ewkt`` selectors.

    Both formats decode the same way: an ``SRID=<n>;`` prefix is accepted
    and kept in the record even for ``wkt``. They differ on output only,
    where ``ewkt`` writes the prefix whenever the record has a SRID.
    """

    FORMATS = FORMATS

    def __init__(self, decoder: WktDecoder | None = None, encoder: WktEncoder | None = None):
        self.decoder = decoder or WktDecoder()
        self.encoder = encoder or WktEncoder()

    def supports_decoding(self, format: str) -> bool:
        return format in self.FORMATS

    def supports_encoding(self, format: str) -> bool:
        return self.supports_decoding(format)

    def _check_format(self, format: str) -> None:
        if format not in self.FORMATS:
            raise UnsupportedFormat(f"Unsupported format {format!r}; expected one of {', '.join(self.FORMATS)}")

    def decode(self, text: str, format: str = WKT_FORMAT) -> GeometryRecord:
        self._check_format(format)
        return self.decoder.decode_geometry(text)

    def encode(self, record: GeometryRecord | Mapping[str, Any], format: str = WKT_FORMAT) -> str:
        self._check_format(format)
        return self.encoder.encode(record, format)


__all__ = ["FORMATS", "WktCodec"]
