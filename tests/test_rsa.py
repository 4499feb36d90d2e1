import pytest

from classicrypt.numtheory import gcd
from classicrypt.rsa import KeyPair, generate_keys


@pytest.mark.parametrize("p, q", [(3, 11), (61, 53), (17, 19), (101, 113)])
def test_key_invariants(p, q):
    keys = generate_keys(p, q)
    phi = (p - 1) * (q - 1)
    assert keys.n == p * q
    assert gcd(phi, keys.e) == 1
    assert all(gcd(phi, i) != 1 for i in range(2, keys.e))
    assert (keys.e * keys.d) % phi == 1


@pytest.mark.parametrize("ch", ["A", "z", "!", "~"])
def test_character_round_trip(ch):
    keys = generate_keys(61, 53)
    assert keys.decrypt(keys.encrypt(ch)) == ord(ch)


@pytest.mark.parametrize("value", [0, 1, 2, 100, 3232])
def test_integer_round_trip(value):
    keys = generate_keys(61, 53)
    assert keys.decrypt(keys.encrypt(value)) == value


def test_encrypt_character_same_as_code():
    keys = generate_keys(61, 53)
    assert keys.encrypt("A") == keys.encrypt(ord("A"))


def test_value_beyond_modulus_does_not_survive():
    keys = generate_keys(3, 11)
    assert keys.decrypt(keys.encrypt("A")) != ord("A")
    assert keys.decrypt(keys.encrypt("A")) == ord("A") % keys.n


def test_multi_character_rejected():
    keys = generate_keys(61, 53)
    with pytest.raises(ValueError):
        keys.encrypt("AB")


def test_too_small_primes():
    with pytest.raises(ValueError):
        generate_keys(2, 3)


def test_manual_key_pair():
    keys = KeyPair(n=33, e=3, d=7)
    assert keys.decrypt(keys.encrypt(5)) == 5