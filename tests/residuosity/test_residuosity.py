import pytest

from rabin_williams.element import ElementSampler
from rabin_williams.residuosity import ResiduosityClassifier, ResiduosityTweaker


def squares_mod(p: int) -> set:
    return {(x * x) % p for x in range(p)}


@pytest.mark.parametrize("p", [3, 7, 11, 19, 23, 43])
def test_is_residue_matches_squares(p):
    power = (p + 1) // 4
    squares = squares_mod(p)
    for e in range(3 * p):
        assert ResiduosityClassifier.is_residue(e, p, power) == (e % p in squares)


@pytest.mark.parametrize(
    "e, state, doubled, negated, tweaked",
    [
        (4, (True, True), False, False, 4),     # already a square mod 77
        (2, (False, True), True, False, 4),     # 2 * 2
        (10, (False, False), False, True, 67),  # -10 mod 77
        (27, (True, False), True, True, 23),    # -54 mod 77
    ],
)
def test_tweak_combinations(small_modulus, e, state, doubled, negated, tweaked):
    result = ResiduosityTweaker.tweak(e, small_modulus)
    assert result.residue_state == state
    assert result.doubled == doubled
    assert result.negated == negated
    assert result.element == tweaked


def test_tweak_every_element_small(small_modulus):
    p, q = small_modulus.get_p(), small_modulus.get_q()
    for e in range(77):
        tweaked = ResiduosityTweaker.tweak(e, small_modulus).element
        assert 0 <= tweaked < 77
        assert ResiduosityClassifier.is_residue(tweaked, p, small_modulus.get_p_power())
        assert ResiduosityClassifier.is_residue(tweaked, q, small_modulus.get_q_power())


def test_tweak_random_elements(urandom_source, random_modulus):
    sampler = ElementSampler(urandom_source)
    N = random_modulus.get_N()
    p, q = random_modulus.get_p(), random_modulus.get_q()
    seen_states = set()

    for _ in range(200):
        result = ResiduosityTweaker.tweak(sampler.sample(N.bit_length(), N), random_modulus)
        seen_states.add(result.residue_state)
        assert ResiduosityClassifier.is_residue(result.element, p, random_modulus.get_p_power())
        assert ResiduosityClassifier.is_residue(result.element, q, random_modulus.get_q_power())

    # Each pattern has probability 1/4, missing one in 200 draws is negligible
    assert len(seen_states) == 4
