import pytest

from classicrypt.numtheory import gcd, mod_inverse, power_mod


def test_gcd_known_value():
    assert gcd(48, 18) == 6


@pytest.mark.parametrize("a, b", [(48, 18), (17, 5), (100, 75), (7, 7), (1, 99)])
def test_gcd_is_symmetric(a, b):
    assert gcd(a, b) == gcd(b, a)


@pytest.mark.parametrize("a, b", [(48, 18), (270, 192), (35, 64), (81, 27)])
def test_gcd_divides_both(a, b):
    g = gcd(a, b)
    assert a % g == 0
    assert b % g == 0
    assert gcd(a // g, b // g) == 1


def test_gcd_with_zero():
    assert gcd(42, 0) == 42
    assert gcd(0, 42) == 42


@pytest.mark.parametrize("a, m", [(3, 7), (7, 26), (17, 3120), (10, 17), (40, 7)])
def test_mod_inverse_is_inverse(a, m):
    inverse = mod_inverse(a, m)
    assert 0 <= inverse < m
    assert (a * inverse) % m == 1


@pytest.mark.parametrize("a, m", [(4, 8), (6, 9), (0, 5)])
def test_mod_inverse_missing(a, m):
    with pytest.raises(ValueError):
        mod_inverse(a, m)


def test_mod_inverse_bad_modulus():
    with pytest.raises(ValueError):
        mod_inverse(3, 0)


@pytest.mark.parametrize(
    "base, exp, mod", [(5, 6, 23), (5, 15, 23), (65, 7, 3233), (2, 100, 97), (123, 0, 11)]
)
def test_power_mod_matches_builtin(base, exp, mod):
    assert power_mod(base, exp, mod) == pow(base, exp, mod)


def test_power_mod_bad_modulus():
    with pytest.raises(ValueError):
        power_mod(2, 3, 0)