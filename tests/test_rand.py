import string

import pytest

from onekit.rand import CharPool, Generator, Randomizer

SPECIALS = set("'\"\\!@#$%^&*()-_=+[]{}|;:,.<>`~ /?")


def test_same_seed_same_sequence():
    a = Randomizer(Generator.DEFAULT, 42)
    b = Randomizer(Generator.DEFAULT, 42)
    assert [a.between(0, 1000) for _ in range(50)] == [b.between(0, 1000) for _ in range(50)]


def test_reseed_repeats():
    r = Randomizer()
    assert r.seed(7) is True
    first = [r.between(1, 100) for _ in range(20)]
    r.seed(7)
    assert [r.between(1, 100) for _ in range(20)] == first


def test_seed_on_system_generator_is_refused():
    r = Randomizer(Generator.RANDOM)
    assert r.seed(7) is False
    assert r.repeatable is False


def test_invalid_generator():
    with pytest.raises(ValueError):
        Randomizer(5)


def test_generator_by_number():
    assert Randomizer(1).generator is Generator.RANDOM


@pytest.mark.parametrize("generator", [Generator.DEFAULT, Generator.RANDOM])
def test_between_is_inclusive(generator):
    r = Randomizer(generator, 3) if generator is Generator.DEFAULT else Randomizer(generator)
    seen = {r.between(5, 8) for _ in range(500)}
    assert seen == {5, 6, 7, 8}


def test_between_single_value():
    assert Randomizer(seed=1).between(9, 9) == 9


def test_between_empty_range():
    with pytest.raises(ValueError):
        Randomizer(seed=1).between(10, 2)


def test_dice_bounds():
    r = Randomizer(seed=11)
    rolls = [r.dice(3, 6) for _ in range(1000)]
    assert min(rolls) >= 3
    assert max(rolls) <= 18
    assert len(set(rolls)) > 10


def test_dice_zero():
    assert Randomizer(seed=1).dice(0, 6) == 0


def test_shuffle_preserves_items():
    r = Randomizer(seed=5)
    cards = list(range(52))
    r.shuffle(cards)
    assert sorted(cards) == list(range(52))
    assert cards != list(range(52))


def test_shuffle_repeatable():
    a, b = list("abcdefgh"), list("abcdefgh")
    Randomizer(seed=9).shuffle(a)
    Randomizer(seed=9).shuffle(b)
    assert a == b


def test_shuffle_empty():
    items = []
    Randomizer(seed=1).shuffle(items)
    assert items == []


def test_character_families():
    r = Randomizer(seed=2)
    lowers = {r.lower() for _ in range(2000)}
    uppers = {r.upper() for _ in range(2000)}
    digits = {r.digit() for _ in range(1000)}
    specials = {r.special() for _ in range(3000)}
    assert lowers == set(string.ascii_lowercase)
    assert uppers == set(string.ascii_uppercase)
    assert digits == set(string.digits)
    assert specials == SPECIALS


@pytest.mark.parametrize(
    "pool, allowed",
    [
        (CharPool.LOWER, set(string.ascii_lowercase)),
        (CharPool.UPPER, set(string.ascii_uppercase)),
        (CharPool.DIGIT, set(string.digits)),
        (CharPool.SPECIAL, SPECIALS),
        (CharPool.DIGIT | CharPool.SPECIAL, set(string.digits) | SPECIALS),
    ],
)
def test_character_from_stays_in_pool(pool, allowed):
    r = Randomizer(seed=4)
    drawn = {r.character_from(pool) for _ in range(3000)}
    assert drawn == allowed


def test_character_from_all():
    r = Randomizer(seed=8)
    drawn = {r.character_from(CharPool.ALL) for _ in range(10000)}
    everything = set(string.ascii_letters) | set(string.digits) | SPECIALS
    assert drawn == everything


def test_character_from_empty_pool():
    with pytest.raises(ValueError):
        Randomizer(seed=1).character_from(0)


def test_character_from_ignores_unknown_bits():
    r = Randomizer(seed=6)
    assert all(r.character_from(16 | CharPool.DIGIT) in string.digits for _ in range(100))
    with pytest.raises(ValueError):
        r.character_from(16)