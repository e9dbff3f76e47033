import pytest

from algokit.sieve import primes_up_to


@pytest.mark.unit
def test_primes_up_to_thirty():
    assert primes_up_to(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


@pytest.mark.unit
def test_bound_is_inclusive():
    assert primes_up_to(2) == [2]
    assert primes_up_to(29)[-1] == 29


@pytest.mark.unit
@pytest.mark.parametrize("n", [1, 0, -7])
def test_nothing_below_two(n):
    assert primes_up_to(n) == []


@pytest.mark.unit
def test_prime_count_below_one_thousand():
    assert len(primes_up_to(1000)) == 168


@pytest.mark.unit
@pytest.mark.parametrize("n", [10.0, "10", True, None])
def test_non_integer_bound_fails(n):
    with pytest.raises(TypeError):
        primes_up_to(n)


@pytest.mark.unit
def test_bool_bound_uses_standard_type_message():
    with pytest.raises(TypeError, match="^n must be int, got bool$"):
        primes_up_to(False)
