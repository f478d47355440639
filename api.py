"""Public entry point of the stream library.

map, filter, zip and range share their names with builtins, so they are left
out of __all__; use them as api.map or import them by name.
"""

from combinators import (map, filter, filter_map, flat_map, append, snoc, concat, flatten, interleave, cycle,
                         truncate, take, drop, take_while, drop_while, zip_with, zip, unzip, chunks)
from constructors import (empty, singleton, cons, make, unfold, range_step, range, of, of_vector_reversed, of_text,
                          forever, iterate, of_iterator)
from consumers import (is_empty, head, tail, fold_left, for_each, drain, to_list, to_text, length, nth, into_buffer,
                       equal, equal_with, for_all, exists, contains, contains_with, find, find_map)
from functional_data_structures import Empty, Cons, Nothing, Some
from stream import Stream, MemoStream, SequenceExhausted, suspend, force, memo

__all__ = [
    'Stream', 'MemoStream', 'SequenceExhausted', 'suspend', 'force', 'memo', 'delayed',
    'Empty', 'Cons', 'Nothing', 'Some',
    'empty', 'singleton', 'cons', 'make', 'unfold', 'range_step', 'of', 'of_vector_reversed', 'of_text',
    'forever', 'iterate', 'of_iterator',
    'is_empty', 'head', 'tail', 'fold_left', 'for_each', 'drain', 'to_list', 'to_text', 'length', 'nth',
    'into_buffer', 'equal', 'equal_with', 'for_all', 'exists', 'contains', 'contains_with', 'find', 'find_map',
    'filter_map', 'flat_map', 'append', 'snoc', 'concat', 'flatten', 'interleave', 'cycle',
    'truncate', 'take', 'drop', 'take_while', 'drop_while', 'zip_with', 'unzip', 'chunks',
]


def delayed(func):
    """Decorator that turns a function returning a stream into one whose body
    runs only when the returned stream is forced.

    This makes recursive definitions possible:
        @delayed
        def naturals(n):
            return cons(n, naturals(n + 1))

    Without the decorator naturals(0) would recurse forever right away.
    """

    def wrapper(*args, **kwargs):
        return suspend(lambda: func(*args, **kwargs).force())

    wrapper.__name__ = func.__name__
    wrapper.__doc__ = func.__doc__
    return wrapper
