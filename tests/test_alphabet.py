import pytest

from classical_ciphers import alphabet


def test_letters_are_the_26_lowercase_latin_letters():
    assert alphabet.LETTERS == "abcdefghijklmnopqrstuvwxyz"
    assert alphabet.SIZE == 26
    assert len(set(alphabet.LETTERS)) == 26


@pytest.mark.parametrize("char,expected", [
    ("a", 0), ("A", 0), ("m", 12), ("Z", 25), ("z", 25),
    ("1", None), (" ", None), ("[", None), ("`", None), ("é", None),
])
def test_index_of(char, expected):
    assert alphabet.index_of(char) == expected


def test_index_matches_position_for_every_letter():
    for i, ch in enumerate(alphabet.LETTERS):
        assert alphabet.index_of(ch) == i
        assert alphabet.index_of(ch.upper()) == i
        assert alphabet.at(i) == ch


def test_at_wraps():
    assert alphabet.at(26) == "a"
    assert alphabet.at(-1) == "z"


def test_shift_letter_restores_case():
    assert alphabet.shift_letter("y", 3) == "b"
    assert alphabet.shift_letter("Y", 3) == "B"
    assert alphabet.shift_letter("B", -3) == "Y"


def test_shift_letter_rejects_non_letters():
    with pytest.raises(ValueError):
        alphabet.shift_letter("!", 1)
