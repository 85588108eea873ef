"""
Hex Text Input Readers

Two ways of feeding a file to the formatter:
- read_hex_str() loads the whole file as one packet that may span many lines
- read_hex_gen_dump() formats the file line by line, one packet per line,
  letting non-hex lines reset the offset between packets
"""

import logging
from typing import TextIO

from .errors import FileOpenError
from .formatter import OffsetCounter, gen_hexdump

logger = logging.getLogger(__name__)


def _read_text(fname: str) -> str:
    try:
        # latin-1 decodes any byte; newline='' keeps carriage returns for the classifier
        with open(fname, "r", encoding="latin-1", newline="") as f:
            return f.read()
    except OSError as e:
        raise FileOpenError.from_os_error(fname, "reading", e) from e


def read_hex_str(fname: str) -> str:
    """
    Read a whole file as a single hex string.

    Line breaks are kept and every line, including the last one, ends with a
    newline.

    Args:
        fname (str): Path to the input file

    Returns:
        str: File contents

    Raises:
        FileOpenError: If the file cannot be opened for reading
    """
    lines = _read_text(fname).split("\n")
    if lines[-1] == "":
        lines.pop()

    hex_str = "".join(line + "\n" for line in lines)
    logger.debug("Read %d line(s), %d character(s) from %s", len(lines), len(hex_str), fname)
    return hex_str


def read_hex_gen_dump(fname: str, sink: TextIO, counter: OffsetCounter) -> int:
    """
    Format a file holding one packet per line.

    Empty lines are skipped without touching the offset. Every other line goes
    through gen_hexdump() with packet detection enabled.

    Args:
        fname (str): Path to the input file
        sink (TextIO): Stream the rows are written to
        counter (OffsetCounter): Offset counter carried from line to line

    Returns:
        int: Number of rows written

    Raises:
        FileOpenError: If the file cannot be opened for reading
    """
    rows = 0
    for line in _read_text(fname).split("\n"):
        if line:
            rows += gen_hexdump(line, sink, counter)

    logger.debug("Formatted %d row(s) from %s", rows, fname)
    return rows
