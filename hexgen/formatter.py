"""
Wireshark Hex Dump Formatter

This module turns loosely formatted hex text, such as bytes copied from a serial
console log or a protocol trace, into the fixed-column layout accepted by
Wireshark's "File -> Import from Hex Dump" dialog.

Every output row starts with a six digit lowercase offset followed by up to 16
space separated byte groups, split into two halves of 8 by an extra space:

    000000 c2 ef 0a 00 00 91 88 43  e1 38 a7 2b 08 00 45 00
    000010 00 3c d3 73 40 00 40 06  58 ac 02 02 02 0a 0a 00

Any character that is not a hex digit is ignored, so the input may be grouped
in words, split across lines or interleaved with other separators.

Main features:
- Line classification to detect packet boundaries in multi-packet logs
- Offset tracking across calls through an explicit OffsetCounter
- Byte-exact row layout for the Wireshark importer
"""

import io
import logging
from dataclasses import dataclass
from typing import Optional, TextIO

from .globals import (
    BLANKS,
    BYTES_PER_ROW,
    CLASSIFIER_HEX_DIGITS,
    CLASSIFIER_WINDOW,
    HALF_ROW,
    HEX_DIGITS,
    OFFSET_MASK,
    OFFSET_WIDTH,
)

logger = logging.getLogger(__name__)


@dataclass
class OffsetCounter:
    """Byte offset of the next row, shared by every line of one packet."""

    value: int = 0

    def reset(self) -> None:
        self.value = 0

    def advance(self, num_bytes: int) -> None:
        self.value = (self.value + num_bytes) & OFFSET_MASK

    def prefix(self) -> str:
        return f"{self.value:0{OFFSET_WIDTH}x} "


def is_hex_line(line: str, counter: OffsetCounter) -> bool:
    """
    Decide whether a line holds hex byte data.

    Leading carriage returns are skipped (some serial terminals emit them at
    the start of each log line). The line counts as hex data when it then
    starts with two hex digits, a blank and two more hex digits. Anything else
    is taken as the start of a new packet and resets the offset counter.

    Args:
        line (str): One line of input text
        counter (OffsetCounter): Offset counter reset on non-hex lines

    Returns:
        bool: True if the line looks like hex byte data
    """
    start = len(line) - len(line.lstrip("\r"))
    head = line[start:start + CLASSIFIER_WINDOW]

    if (len(head) == CLASSIFIER_WINDOW
            and head[0] in CLASSIFIER_HEX_DIGITS
            and head[1] in CLASSIFIER_HEX_DIGITS
            and head[2] in BLANKS
            and head[3] in CLASSIFIER_HEX_DIGITS
            and head[4] in CLASSIFIER_HEX_DIGITS):
        return True

    counter.reset()
    return False


def gen_hexdump(hex_str: str, sink: TextIO, counter: OffsetCounter, detect: bool = True) -> int:
    """
    Format hex text into Wireshark hex dump rows.

    Hex digits are collected in order, lowercased and grouped in pairs. A row
    is written to the sink after 16 bytes and the counter moves on by 16; the
    remaining bytes (or a trailing unpaired digit) are written as a final
    short row. Nothing is written when the classifier rejects the input.

    Args:
        hex_str (str): Text containing the hex digits, separators are ignored
        sink (TextIO): Stream the rows are written to
        counter (OffsetCounter): Offset of the first row, advanced per full row
        detect (bool, optional): Run is_hex_line() first. Defaults to True.

    Returns:
        int: Number of rows written
    """
    if detect and not is_hex_line(hex_str, counter):
        logger.debug("Skipping non-hex line: %r", hex_str[:40])
        return 0

    rows = 0
    row = [counter.prefix()]
    num_hex = 0
    pending = 0

    for c in hex_str.lower():
        if c not in HEX_DIGITS:
            continue

        row.append(c)
        pending += 1
        if pending == 2:
            pending = 0
            num_hex += 1
            if num_hex == HALF_ROW:
                # gap between the two 8-byte halves
                row.append(" ")
            if num_hex != BYTES_PER_ROW:
                row.append(" ")

        if num_hex == BYTES_PER_ROW:
            sink.write("".join(row) + "\n")
            rows += 1
            counter.advance(num_hex)
            num_hex = 0
            row = [counter.prefix()]

    if num_hex or pending:
        sink.write("".join(row) + "\n")
        rows += 1

    return rows


def format_hexdump(hex_str: str, counter: Optional[OffsetCounter] = None, detect: bool = True) -> str:
    """Return the hex dump of hex_str as a string instead of writing it to a stream."""
    buffer = io.StringIO()
    gen_hexdump(hex_str, buffer, counter if counter is not None else OffsetCounter(), detect)
    return buffer.getvalue()
