import pytest

from classicrypt.bitwise import bitwise_operations, format_mask_table, mask_table

LABELS = ["a & b", "a | b", "a ^ b", "~a", "~b", "a << 1", "b << 1", "a >> 1", "b >> 1"]


def test_labels_in_order():
    assert list(bitwise_operations(10, 5)) == LABELS


@pytest.mark.parametrize("a, b", [(10, 5), (12, 7), (0, 255), (1000, 3)])
def test_operation_invariants(a, b):
    ops = bitwise_operations(a, b)
    assert ops["a & b"] + ops["a | b"] == a + b
    assert ops["a ^ b"] == ops["a | b"] - ops["a & b"]
    assert ops["~a"] == -a - 1
    assert ops["~b"] == -b - 1
    assert ops["a << 1"] == 2 * a
    assert ops["b << 1"] == 2 * b
    assert ops["a >> 1"] == a // 2
    assert ops["b >> 1"] == b // 2


def test_shift_wraps_to_32_bits():
    assert bitwise_operations(0x40000000, 1)["a << 1"] == -(2**31)


@pytest.mark.parametrize("text", ["Hello World", "xyz", "A1 !"])
def test_mask_rows(text):
    rows = mask_table(text, 127)
    assert "".join(row.char for row in rows) == text
    for row in rows:
        assert row.code == ord(row.char)
        assert row.masked_xor ^ 127 == row.code
        assert row.masked_and + row.masked_or == row.code + 127


def test_mask_default_is_127():
    assert mask_table("Hi") == mask_table("Hi", 127)


def test_format_header_and_rows():
    lines = format_mask_table("Hello World").splitlines()
    assert lines[:3] == [
        "Original\tAND\tOR\tXOR",
        "Char\tASCII\t127\t127\t127",
        "-----\t-----\t---\t---\t---",
    ]
    assert len(lines) == 3 + len("Hello World")
    assert lines[3].startswith(f"H\t{ord('H')}\t")
    assert all(len(line.split("\t")) == 5 for line in lines[3:])