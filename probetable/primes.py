def is_prime(n: int) -> bool:
    if n <= 1:
        return False

    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def next_prime(n: int) -> int:
    """Smallest prime greater than or equal to `n`."""
    candidate = n
    while not is_prime(candidate):
        candidate += 1
    return candidate
