# Sieve of Eratosthenes over the infinite stream of integers

import logging
import sys

from api import delayed, cons, iterate, filter, force, take, to_list, memo


@delayed
def sieve(numbers):
    node = force(numbers)
    p = node.head
    return cons(p, sieve(filter(lambda n: n % p != 0, node.tail)))


def primes():
    return memo(sieve(iterate(lambda n: n + 1, 2)))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)

    for p in take(20, primes()):
        print(p)

    print(to_list(take(10, primes())))
