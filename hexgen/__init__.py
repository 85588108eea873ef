from .errors import HexdumpError, MissingOutputPathError, FileOpenError
from .formatter import OffsetCounter, is_hex_line, gen_hexdump, format_hexdump
from .readers import read_hex_str, read_hex_gen_dump
from .cli import convert, main

__all__ = [
    'HexdumpError',
    'MissingOutputPathError',
    'FileOpenError',
    'OffsetCounter',
    'is_hex_line',
    'gen_hexdump',
    'format_hexdump',
    'read_hex_str',
    'read_hex_gen_dump',
    'convert',
    'main',
]
