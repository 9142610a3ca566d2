import pytest

from deskutils.hexdump import (
    MAX_DUMP_SIZE,
    Segment,
    Style,
    format_hexdump,
    hexdump_segments,
    read_dump_source,
)


def _joined(data, style):
    return "".join(s.text for s in hexdump_segments(data) if s.style is style)


def test_empty_data_gives_empty_dump():
    assert format_hexdump(b"") == ""
    assert list(hexdump_segments(b"")) == []


def test_one_line_per_sixteen_bytes():
    data = bytes(16) * 3
    lines = format_hexdump(data).splitlines()
    assert len(lines) == 3


def test_every_line_ends_with_newline():
    text = format_hexdump(bytes(range(40)))
    assert text.endswith("\n")
    assert text.count("\n") == len(text.splitlines())


def test_partial_last_line_is_padded_to_full_width():
    lines = format_hexdump(bytes(range(40))).splitlines()
    assert len({len(line) for line in lines}) == 1


def test_hex_segments_round_trip():
    data = bytes(range(256)) + b"tail"
    assert bytes.fromhex(_joined(data, Style.HEX)) == data


def test_offsets_step_by_sixteen():
    data = bytes(range(100))
    offsets = [int(s.text, 16) for s in hexdump_segments(data) if s.style is Style.OFFSET]
    assert offsets == list(range(0, len(data), 16))


def test_hex_is_upper_case():
    assert "AB CD" in format_hexdump(b"\xab\xcd")


def test_ascii_column_masks_unprintable_bytes():
    assert _joined(b"Hi\x00\x7f~", Style.ASCII) == "Hi..~"


def test_segments_concatenate_to_text():
    data = b"hello world, this is a dump!"
    assert "".join(s.text for s in hexdump_segments(data)) == format_hexdump(data)


def test_padding_segments_are_plain():
    segments = list(hexdump_segments(b"abc"))
    assert all(s.style is Style.PLAIN for s in segments if not s.text.strip())
    assert Segment("\n") in segments


def test_segment_colors():
    segments = list(hexdump_segments(b"A"))
    colors = {s.style: s.style.color for s in segments}
    assert colors[Style.OFFSET] == "#FFA500"
    assert colors[Style.HEX] == "#00FFFF"
    assert colors[Style.ASCII] == "#7CFC00"
    assert colors[Style.PLAIN] is None


def test_read_small_file(tmp_path):
    path = tmp_path / "small.bin"
    path.write_bytes(b"\x00\x01payload")
    assert read_dump_source(path) == b"\x00\x01payload"


def test_read_truncates_large_file(tmp_path):
    path = tmp_path / "large.bin"
    path.write_bytes(b"\xff" * (MAX_DUMP_SIZE + 10))
    data = read_dump_source(path)
    assert len(data) == MAX_DUMP_SIZE


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_dump_source(tmp_path / "absent.bin")