import pytest

from chainhash.chain import SortedChain


def make(*keys):
    chain = SortedChain()
    for key in keys:
        chain.insert(key)
    return chain


def test_insert_keeps_sorted_order():
    chain = make("world", "apple", "hello", "banana")
    assert list(chain) == sorted(["world", "apple", "hello", "banana"])


def test_insert_duplicate_returns_false():
    chain = SortedChain()
    assert chain.insert("hello") is True
    assert chain.insert("hello") is False
    assert len(chain) == 1


def test_len_counts_every_key_including_tail_appends():
    chain = make("a", "b", "c", "d")
    assert len(chain) == 4


def test_remove_head_keeps_the_rest():
    chain = make("cat", "cow", "dog")
    assert chain.remove("cat") is True
    assert list(chain) == ["cow", "dog"]
    assert len(chain) == 2


def test_remove_middle_and_missing():
    chain = make("cat", "cow", "dog")
    assert chain.remove("cow") is True
    assert chain.remove("cow") is False
    assert list(chain) == ["cat", "dog"]


def test_contains():
    chain = make("Moscow", "Madrid")
    assert "Moscow" in chain
    assert "London" not in chain
    assert 42 not in chain


def test_str_puts_space_after_each_key():
    assert str(make("Moscow", "Madrid")) == "Madrid Moscow "
    assert str(SortedChain()) == ""


def test_copy_is_independent():
    original = make("x", "y")
    duplicate = original.copy()
    duplicate.insert("z")
    original.remove("x")
    assert list(original) == ["y"]
    assert list(duplicate) == ["x", "y", "z"]


def test_non_string_key_rejected():
    with pytest.raises(TypeError):
        SortedChain().insert(5)