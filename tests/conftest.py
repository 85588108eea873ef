import pytest

EXAMPLE_INPUT = (
    "c2ef0a00 00918843 e138a72b 08004500 003cd373 40004006 58ac0202 020a0a00\n"
    "0091aae6 0016b446 7f860000 0000a002 39082c11 00000204 05b40402 080acf40\n"
    "26400000 00000103 0307\n"
)

EXAMPLE_OUTPUT = (
    "000000 c2 ef 0a 00 00 91 88 43  e1 38 a7 2b 08 00 45 00\n"
    "000010 00 3c d3 73 40 00 40 06  58 ac 02 02 02 0a 0a 00\n"
    "000020 00 91 aa e6 00 16 b4 46  7f 86 00 00 00 00 a0 02\n"
    "000030 39 08 2c 11 00 00 02 04  05 b4 04 02 08 0a cf 40\n"
    "000040 26 40 00 00 00 00 01 03  03 07 \n"
)


@pytest.fixture
def example_input():
    return EXAMPLE_INPUT


@pytest.fixture
def example_output():
    return EXAMPLE_OUTPUT
