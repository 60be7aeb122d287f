import io
import struct

import pytest

from datahash.hashing import (
    encode_binary_records,
    hash_binary_file,
    hash_bytes,
    hash_text_file,
    iter_binary_records,
    iter_text_records,
    main,
    write_hashes,
)

RECORDS = [b"", b"\x00", b"hello world", bytes(range(256)), b"\xff" * 1000]


def _text_for(records):
    lines = [str(len(records))]
    for record in records:
        lines.append(" ".join([str(len(record))] + [str(b) for b in record]))
    return "\n".join(lines) + "\n"


def test_empty_record_hash_is_seed():
    assert hash_bytes(b"") == 104395301


def test_hash_fits_in_64_bits():
    for record in RECORDS:
        value = hash_bytes(record)
        assert 0 <= value < 2**64


def test_hash_accepts_ints_and_bytes_alike():
    data = b"some bytes"
    assert hash_bytes(data) == hash_bytes(list(data))


def test_hash_depends_on_order():
    assert hash_bytes(b"ab") != hash_bytes(b"ba")


def test_encode_layout():
    encoded = encode_binary_records([b"ab"])
    assert encoded == struct.pack("<Q", 1) + struct.pack("<Q", 2) + b"ab"


def test_binary_round_trip():
    encoded = encode_binary_records(RECORDS)
    assert list(iter_binary_records(encoded)) == RECORDS


def test_binary_empty_data_set():
    assert list(iter_binary_records(encode_binary_records([]))) == []


def test_binary_too_short():
    with pytest.raises(ValueError):
        list(iter_binary_records(b"\x01\x00"))


def test_binary_truncated_body():
    encoded = encode_binary_records([b"abcdef"])
    with pytest.raises(ValueError):
        list(iter_binary_records(encoded[:-2]))


def test_binary_missing_record():
    encoded = struct.pack("<Q", 2) + struct.pack("<Q", 1) + b"x"
    with pytest.raises(ValueError):
        list(iter_binary_records(encoded))


def test_text_records_parse():
    stream = io.StringIO("2\n3 1 2 3\n0\n")
    assert list(iter_text_records(stream)) == [[1, 2, 3], []]


def test_text_records_across_whitespace():
    stream = io.StringIO("1 2\n  7\n\t9\n")
    assert list(iter_text_records(stream)) == [[7, 9]]


def test_text_truncated():
    with pytest.raises(ValueError):
        list(iter_text_records(io.StringIO("1\n3 1 2\n")))


def test_text_not_a_number():
    with pytest.raises(ValueError):
        list(iter_text_records(io.StringIO("1\n1 abc\n")))


def test_text_value_out_of_range():
    with pytest.raises(ValueError):
        list(iter_text_records(io.StringIO("1\n1 70000\n")))


def test_text_and_binary_files_agree(tmp_path):
    text_path = tmp_path / "Data.txt"
    bin_path = tmp_path / "Data.bin"
    text_path.write_text(_text_for(RECORDS))
    bin_path.write_bytes(encode_binary_records(RECORDS))
    from_text = hash_text_file(text_path)
    from_binary = hash_binary_file(bin_path)
    assert from_text == from_binary
    assert from_binary == [hash_bytes(r) for r in RECORDS]


def test_write_hashes(tmp_path):
    out = tmp_path / "hashes.txt"
    write_hashes([104395301, 2**64 - 1], out)
    assert out.read_text() == "104395301\n18446744073709551615\n"


def test_main_binary_and_text_outputs_match(tmp_path):
    text_path = tmp_path / "Data.txt"
    bin_path = tmp_path / "Data.bin"
    text_path.write_text(_text_for(RECORDS))
    bin_path.write_bytes(encode_binary_records(RECORDS))
    out_text = tmp_path / "a.txt"
    out_bin = tmp_path / "b.txt"
    assert main([str(text_path), "-o", str(out_text)]) == 0
    assert main([str(bin_path), "-o", str(out_bin)]) == 0
    assert out_text.read_text() == out_bin.read_text()
    lines = out_bin.read_text().splitlines()
    assert [int(x) for x in lines] == [hash_bytes(r) for r in RECORDS]


def test_main_explicit_format(tmp_path):
    data = tmp_path / "data.dat"
    data.write_text("1\n0\n")
    out = tmp_path / "out.txt"
    assert main([str(data), "--format", "text", "-o", str(out)]) == 0
    assert out.read_text() == "104395301\n"


def test_main_missing_file(tmp_path):
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / "missing.bin"), "-o", str(tmp_path / "o.txt")])
    assert info.value.code == 1