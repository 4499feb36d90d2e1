import pytest

from classicrypt.diffie_hellman import exchange, public_key


def test_known_exchange():
    result = exchange(23, 5, 6, 15)
    assert result.shared_key == 2


@pytest.mark.parametrize(
    "q, alpha, x_a, x_b", [(23, 5, 6, 15), (353, 3, 97, 233), (97, 5, 36, 58), (11, 2, 3, 9)]
)
def test_both_sides_agree(q, alpha, x_a, x_b):
    result = exchange(q, alpha, x_a, x_b)
    assert result.k_a == result.k_b
    assert result.successful is True


@pytest.mark.parametrize("q, alpha, x_a, x_b", [(23, 5, 6, 15), (353, 3, 97, 233)])
def test_public_values(q, alpha, x_a, x_b):
    result = exchange(q, alpha, x_a, x_b)
    assert result.y_a == public_key(q, alpha, x_a)
    assert result.y_b == public_key(q, alpha, x_b)
    assert result.y_a == pow(alpha, x_a, q)
    assert result.shared_key == pow(alpha, x_a * x_b, q)


def test_inputs_are_recorded():
    result = exchange(23, 5, 6, 15)
    assert (result.q, result.alpha, result.x_a, result.x_b) == (23, 5, 6, 15)


def test_public_key_in_range():
    assert 0 <= public_key(353, 3, 97) < 353


def test_bad_modulus():
    with pytest.raises(ValueError):
        exchange(0, 5, 6, 15)