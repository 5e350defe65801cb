import pytest

from huffzip.huffman import (
    CorruptTreeError,
    HuffNode,
    build_frequency_table,
    build_tree,
    deserialize_tree,
    generate_codes,
    serialize_tree,
)


def test_frequency_table_counts_bytes():
    table = build_frequency_table(b"abracadabra")
    assert dict(table) == {ord("a"): 5, ord("b"): 2, ord("r"): 2, ord("c"): 1, ord("d"): 1}


def test_frequency_table_empty():
    assert dict(build_frequency_table(b"")) == {}


def test_build_tree_empty_is_none():
    assert build_tree({}) is None


def test_root_frequency_is_total():
    data = b"the quick brown fox jumps over the lazy dog"
    root = build_tree(build_frequency_table(data))
    assert root.freq == len(data)
    assert not root.is_leaf()


def test_single_symbol_tree_shape():
    root = build_tree({ord("x"): 7})
    assert not root.is_leaf()
    assert root.left.is_leaf()
    assert root.left.ch == ord("x")
    assert root.right is None
    assert root.freq == 7


def test_single_symbol_code_is_zero():
    root = build_tree({ord("x"): 3})
    assert generate_codes(root) == {ord("x"): "0"}


def test_generate_codes_none():
    assert generate_codes(None) == {}


def test_code_lengths_follow_frequencies():
    codes = generate_codes(build_tree(build_frequency_table(b"aaaabbc")))
    assert len(codes[ord("a")]) == 1
    assert len(codes[ord("b")]) == 2
    assert len(codes[ord("c")]) == 2


def test_codes_are_prefix_free_and_complete():
    data = bytes(range(256)) + b"hello world" * 10
    codes = generate_codes(build_tree(build_frequency_table(data)))
    assert set(codes) == set(data)
    values = list(codes.values())
    for a in values:
        for b in values:
            if a is not b:
                assert not b.startswith(a)
    assert sum(2.0 ** -len(c) for c in values) == pytest.approx(1.0)


def test_serialize_single_symbol_layout():
    root = build_tree({ord("x"): 1})
    assert serialize_tree(root) == b"01x"


def test_serialize_none_is_empty():
    assert serialize_tree(None) == b""


def test_serialize_leaf_only():
    assert serialize_tree(HuffNode(ch=65, freq=1)) == b"1A"


def test_round_trip_preserves_codes():
    data = b"mississippi river banks"
    root = build_tree(build_frequency_table(data))
    blob = serialize_tree(root)
    restored, end = deserialize_tree(blob, 0)
    assert end == len(blob)
    assert generate_codes(restored) == generate_codes(root)
    assert serialize_tree(restored) == blob


def test_deserialize_with_offset():
    root = build_tree(build_frequency_table(b"abcabd"))
    blob = serialize_tree(root)
    prefixed = b"HEAD" + blob + b"tail"
    restored, end = deserialize_tree(prefixed, 4)
    assert end == 4 + len(blob)
    assert serialize_tree(restored) == blob


def test_deserialized_nodes_have_zero_frequency():
    restored, _ = deserialize_tree(b"01a1b", 0)
    assert restored.freq == 0
    assert restored.left.freq == 0
    assert restored.left.ch == ord("a")
    assert restored.right.ch == ord("b")


def test_deserialize_single_symbol_serialisation_is_corrupt():
    with pytest.raises(CorruptTreeError):
        deserialize_tree(b"01x", 0)


@pytest.mark.parametrize("blob", [b"", b"1", b"0", b"01a", b"001a1b"])
def test_deserialize_truncated(blob):
    with pytest.raises(CorruptTreeError):
        deserialize_tree(blob, 0)


def test_deserialize_deep_garbage_raises_corrupt():
    with pytest.raises(CorruptTreeError):
        deserialize_tree(b"0" * 5000, 0)


def test_corrupt_error_is_value_error():
    with pytest.raises(ValueError, match="Corrupt file!"):
        deserialize_tree(b"", 0)