"""Functions that build streams from scratch or from eager containers."""

from collections.abc import Sequence

from functional_data_structures import Empty, Cons
from stream import suspend, memo


def empty():
    return suspend(Empty)


def singleton(x):
    return cons(x, empty())


def cons(x, rest):
    """stream of x followed by the elements of rest"""
    return suspend(lambda: Cons(x, rest))


def make(n, elt):
    """stream of n repetitions of elt"""
    if n < 0:
        raise ValueError('make: negative count {}'.format(n))

    def compute(n=n):
        if n == 0:
            return Empty()
        return Cons(elt, suspend(lambda: compute(n - 1)))

    return suspend(compute)


def unfold(step, seed):
    """stream of the values produced by step until it returns Nothing

    step receives a seed and returns Some((value, next_seed)) or Nothing().
    It is called once per element actually forced.
    """

    def compute():
        produced = step(seed)
        if not produced.is_present():
            return Empty()
        value, next_seed = produced.unwrap()
        return Cons(value, unfold(step, next_seed))

    return suspend(compute)


def range_step(step, start, end):
    """inclusive stream from start to end, stepping by step

    The sign of step decides the direction; a step that cannot reach end
    gives the empty stream.
    """
    if step == 0:
        raise ValueError('range_step: step must not be zero')

    if step > 0:
        def in_range(i):
            return i <= end
    else:
        def in_range(i):
            return i >= end

    def compute(i=start):
        if not in_range(i):
            return Empty()
        return Cons(i, suspend(lambda: compute(i + step)))

    return suspend(compute)


def range(start, end):
    return range_step(1 if end >= start else -1, start, end)


def of(collection):
    """stream over the elements of a list-like or indexable collection"""
    if not isinstance(collection, Sequence):
        raise TypeError("of: expected a list-like or indexable collection, got '{}'"
                        .format(type(collection).__name__))
    return _indexed(collection, 0, 1)


def of_vector_reversed(buffer):
    """stream over the elements of buffer from the last to the first"""
    return _indexed(buffer, len(buffer) - 1, -1)


def of_text(text):
    return _indexed(text, 0, 1)


def _indexed(items, i, direction):
    def compute():
        if not 0 <= i < len(items):
            return Empty()
        return Cons(items[i], _indexed(items, i + direction, direction))

    return suspend(compute)


def forever(compute):
    """infinite stream of the results of calling compute again and again"""
    return suspend(lambda: Cons(compute(), forever(compute)))


def iterate(func, x):
    """infinite stream x, func(x), func(func(x)), ..."""

    def rest():
        return iterate(func, func(x)).force()

    return suspend(lambda: Cons(x, suspend(rest)))


def of_iterator(iterable):
    """stream over a one-shot iterable

    The result is memoized so that it can be traversed more than once while
    the iterator is advanced only once per element.
    """
    iterator = iter(iterable)

    def compute():
        try:
            value = next(iterator)
        except StopIteration:
            return Empty()
        return Cons(value, suspend(compute))

    return memo(suspend(compute))
