"""
gen-hexdump command line

Generate a Wireshark-understandable hex dump from hex text.

Usage:
    gen-hexdump [-i input_file] [-n] [-s hex_str] -o out_file [-v]

Examples:
1. format a single hex string:
    gen-hexdump -o <output> -s <hex_string>

2. format a single packet spread over the lines of a file:
    gen-hexdump -n -i <input> -o <output>

3. format multiple packets from a file (one packet per line):
    gen-hexdump -i <input> -o <output>

The formatted file can be analyzed by Wireshark using the
"File -> Import from Hex Dump" dialog box.
"""

import argparse
import io
import logging
from typing import List, Optional

from .errors import FileOpenError, HexdumpError, MissingOutputPathError
from .formatter import OffsetCounter, gen_hexdump
from .globals import err_console
from .log import setup_logging
from .readers import read_hex_gen_dump, read_hex_str

logger = logging.getLogger(__name__)


def convert(out_file: Optional[str], in_file: Optional[str] = None, hex_str: Optional[str] = None,
            single_packet: bool = False) -> int:
    """
    Format hex input and write the hex dump to out_file.

    A literal hex_str implies single packet mode. In single packet mode the
    literal string followed by the whole input file is formatted as one packet.
    With an input file and no single packet mode, the file holds one packet per
    line. The output is only written once all input has been read.

    Args:
        out_file (str): Destination of the hex dump
        in_file (str, optional): File holding the hex text
        hex_str (str, optional): Hex text given directly
        single_packet (bool, optional): Treat the input file as one packet. Defaults to False.

    Returns:
        int: Number of rows written

    Raises:
        MissingOutputPathError: If out_file is empty
        FileOpenError: If the input or output file cannot be opened
    """
    if not out_file:
        raise MissingOutputPathError()

    if hex_str is not None:
        single_packet = True

    buffer = io.StringIO()
    counter = OffsetCounter()

    if single_packet and in_file:
        logger.debug("Single packet mode, reading %s", in_file)
        rows = gen_hexdump((hex_str or "") + read_hex_str(in_file), buffer, counter, detect=False)
    elif in_file:
        logger.debug("Multi-packet mode, reading %s", in_file)
        rows = read_hex_gen_dump(in_file, buffer, counter)
    else:
        logger.debug("Single packet mode, formatting literal string")
        rows = gen_hexdump(hex_str or "", buffer, counter, detect=False)

    try:
        with open(out_file, "w", encoding="ascii", newline="\n") as ofs:
            ofs.write(buffer.getvalue())
    except OSError as e:
        raise FileOpenError.from_os_error(out_file, "writing", e) from e

    logger.debug("Wrote %d row(s) to %s", rows, out_file)
    return rows


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gen-hexdump",
        description="Generate a Wireshark-understandable hex dump from a hex string.",
    )
    parser.add_argument("-i", dest="in_file", metavar="input_file",
                        help="read hex data from a file (one packet per line unless -n is given)")
    parser.add_argument("-n", dest="single_packet", action="store_true",
                        help="treat the whole input file as a single packet")
    parser.add_argument("-s", dest="hex_str", metavar="hex_str",
                        help="hex data given on the command line, implies -n")
    parser.add_argument("-o", "--output", dest="out_file", metavar="out_file", required=True,
                        help="output file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        rows = convert(args.out_file, args.in_file, args.hex_str, args.single_packet)
    except MissingOutputPathError as e:
        parser.error(str(e))
    except HexdumpError as e:
        err_console.print(f"[!] {e}", style="yellow", markup=False, highlight=False, soft_wrap=True)
        return 1

    err_console.print(f"[+] Wrote {rows} row(s) to {args.out_file}", style="green", markup=False, highlight=False,
                      soft_wrap=True)
    return 0
