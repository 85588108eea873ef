import io

import pytest

from hexgen.errors import FileOpenError
from hexgen.formatter import OffsetCounter
from hexgen.readers import read_hex_gen_dump, read_hex_str

MULTI_PACKET_LOG = (
    "Frame 1\n"
    "00 01 02 03 04 05 06 07 08 09 0a 0b 0c 0d 0e 0f\n"
    "\n"
    "10 11\n"
    "Frame 2\n"
    "AA BB CC\n"
)


def test_read_hex_str_terminates_every_line(tmp_path):
    path = tmp_path / "packet.txt"
    path.write_text("c2ef\n0a00", encoding="utf-8")
    assert read_hex_str(str(path)) == "c2ef\n0a00\n"


def test_read_hex_str_keeps_carriage_returns(tmp_path):
    path = tmp_path / "packet.txt"
    path.write_bytes(b"00 11\r\n22 33\r\n")
    assert read_hex_str(str(path)) == "00 11\r\n22 33\r\n"


def test_read_hex_str_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert read_hex_str(str(path)) == ""


def test_read_hex_str_missing_file(tmp_path):
    path = tmp_path / "missing.txt"
    with pytest.raises(FileOpenError) as excinfo:
        read_hex_str(str(path))
    assert excinfo.value.path == str(path)
    assert excinfo.value.mode == "reading"
    assert isinstance(excinfo.value.__cause__, OSError)


def test_read_hex_gen_dump_resets_between_packets(tmp_path):
    path = tmp_path / "packets.txt"
    path.write_text(MULTI_PACKET_LOG, encoding="utf-8")
    sink = io.StringIO()
    counter = OffsetCounter()

    assert read_hex_gen_dump(str(path), sink, counter) == 3
    assert sink.getvalue() == (
        "000000 00 01 02 03 04 05 06 07  08 09 0a 0b 0c 0d 0e 0f\n"
        "000010 10 11 \n"
        "000000 aa bb cc \n"
    )


def test_read_hex_gen_dump_skips_empty_lines_without_reset(tmp_path):
    path = tmp_path / "packets.txt"
    path.write_text("00 01 02 03 04 05 06 07 08 09 0a 0b 0c 0d 0e 0f\n\n\n10 11\n", encoding="utf-8")
    sink = io.StringIO()

    read_hex_gen_dump(str(path), sink, OffsetCounter())
    assert sink.getvalue().splitlines()[-1] == "000010 10 11 "


def test_read_hex_gen_dump_crlf_lines(tmp_path):
    path = tmp_path / "packets.txt"
    path.write_bytes(b"\r00 11\r\n\r\n22 33\r\n")
    sink = io.StringIO()
    counter = OffsetCounter()

    assert read_hex_gen_dump(str(path), sink, counter) == 2
    assert sink.getvalue() == "000000 00 11 \n000000 22 33 \n"


def test_read_hex_gen_dump_missing_file(tmp_path):
    with pytest.raises(FileOpenError):
        read_hex_gen_dump(str(tmp_path / "missing.txt"), io.StringIO(), OffsetCounter())


def test_read_hex_gen_dump_non_ascii_label_is_skipped(tmp_path):
    path = tmp_path / "packets.txt"
    path.write_bytes(b"Temp 25\xb0C\n00 11 22\n\xff\xfe\n33 44\n")
    sink = io.StringIO()

    assert read_hex_gen_dump(str(path), sink, OffsetCounter()) == 2
    assert sink.getvalue() == "000000 00 11 22 \n000000 33 44 \n"


def test_read_hex_str_ignores_non_ascii_bytes(tmp_path):
    path = tmp_path / "packet.txt"
    path.write_bytes(b"00 \xb0 11\n")
    assert read_hex_str(str(path)) == "00 \xb0 11\n"
