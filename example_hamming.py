# Hamming numbers: all positive integers whose only prime factors are 2, 3 and 5

import logging
import sys

from api import delayed, cons, map, memo, truncate, to_list, head, tail


@delayed
def merge(a, b):
    x, y = head(a), head(b)
    if x < y:
        return cons(x, merge(tail(a), b))
    if y < x:
        return cons(y, merge(a, tail(b)))
    return cons(x, merge(tail(a), tail(b)))


def hamming():
    @delayed
    def rest():
        return merge(map(lambda n: 2 * n, numbers),
                     merge(map(lambda n: 3 * n, numbers),
                           map(lambda n: 5 * n, numbers)))

    numbers = memo(cons(1, rest()))
    return numbers


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)

    print(to_list(truncate(20, hamming())))
