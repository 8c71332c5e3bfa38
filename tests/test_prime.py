from pycoll.prime import is_prime, next_prime


def test_is_prime():
    primes = [2, 3, 5, 7, 11, 13, 23, 47, 97, 7919]
    composites = [-7, 0, 1, 4, 9, 15, 21, 25, 49, 7917]

    for n in primes:
        assert is_prime(n)
    for n in composites:
        assert not is_prime(n)


def test_next_prime():
    # should return n itself when n is prime
    assert next_prime(11) == 11
    assert next_prime(22) == 23
    assert next_prime(46) == 47
    assert next_prime(94) == 97
    assert next_prime(0) == 2
    assert next_prime(-5) == 2
