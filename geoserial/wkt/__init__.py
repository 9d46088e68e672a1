"""WKT and EWKT support."""

from .codec import FORMATS, WktCodec
from .decoder import WktDecoder, decode_geometry
from .encoder import EWKT_FORMAT, WKT_FORMAT, WktEncoder, encode
from .lexer import Token, TokenKind, WktLexer

__all__ = [
    "EWKT_FORMAT",
    "FORMATS",
    "Token",
    "TokenKind",
    "WKT_FORMAT",
    "WktCodec",
    "WktDecoder",
    "WktEncoder",
    "WktLexer",
    "decode_geometry",
    "encode",
]
