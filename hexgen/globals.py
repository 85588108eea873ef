from rich.console import Console

BYTES_PER_ROW = 16
HALF_ROW = 8
OFFSET_WIDTH = 6
OFFSET_MASK = 0xffffffff

# "hh hh" at the start of a line marks it as byte data
CLASSIFIER_WINDOW = 5

HEX_DIGITS = frozenset("0123456789abcdef")
CLASSIFIER_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
BLANKS = frozenset(" \t")

LOGGER_NAME = "hexgen"

err_console = Console(stderr=True)
