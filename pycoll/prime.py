import math


def is_prime(number: int) -> bool:
    if number <= 1:
        return False
    if number == 2:
        return True
    if number % 2 == 0:
        return False

    for i in range(3, math.isqrt(number) + 1, 2):
        if number % i == 0:
            return False
    return True


def next_prime(number: int) -> int:
    """Smallest prime that is >= number."""
    candidate = max(number, 2)
    while not is_prime(candidate):
        candidate += 1
    return candidate
