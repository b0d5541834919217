import pytest

from resumeroast.services.seeded_random import SeededRandom, seeded_pick, seeded_shuffle, text_seed


@pytest.mark.parametrize("text,expected", [
    ("", 0),
    ("a", 97),
    ("ab", 3105),
    ("hello", 99162322),
    ("\U0001F600", 1772899),  # surrogate pair hashes as two code units
])
def test_text_seed(text, expected):
    assert text_seed(text) == expected


def test_text_seed_is_non_negative():
    for text in ("resume " * 40, "zzzzzzzzzzzz", "Experience\nEducation"):
        assert 0 <= text_seed(text) <= 2 ** 31


def test_lcg_sequence():
    rng = SeededRandom(0)
    assert rng.next() == 12345
    assert SeededRandom(1).next() == 1103527590


def test_lcg_stays_in_31_bits():
    rng = SeededRandom(2 ** 31 - 1)
    for _ in range(100):
        assert 0 <= rng.next() < 2 ** 31


def test_shuffle_is_a_permutation_of_a_copy():
    items = list(range(10))
    shuffled = seeded_shuffle(items, 42)
    assert sorted(shuffled) == items
    assert items == list(range(10))


def test_shuffle_deterministic():
    assert seeded_shuffle("abcdefgh", 7) == seeded_shuffle("abcdefgh", 7)


def test_shuffle_trivial_inputs():
    assert seeded_shuffle([], 3) == []
    assert seeded_shuffle(["x"], 3) == ["x"]


def test_pick():
    items = ("a", "b", "c")
    # first LCG draw from seed 0 is 12345, 12345 % 3 == 0
    assert seeded_pick(items, 0) == "a"
    assert seeded_pick(items, 99) == seeded_pick(items, 99)
