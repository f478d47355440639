"""Functions that force streams to compute a result.

Everything here walks the stream with a loop and stops forcing as soon as
the result is known. Walking an infinite stream to its end never returns.
"""

import logging
import operator

from constructors import empty
from functional_data_structures import Nothing, Some
from stream import SequenceExhausted

logger = logging.getLogger(__name__)


def _nodes(stream):
    while True:
        node = stream.force()
        if node.is_empty():
            return
        yield node
        stream = node.tail


def is_empty(stream):
    return stream.force().is_empty()


def head(stream):
    node = stream.force()
    if node.is_empty():
        raise SequenceExhausted('head')
    return node.head


def tail(stream):
    node = stream.force()
    if node.is_empty():
        raise SequenceExhausted('tail')
    return node.tail


def fold_left(combine, init, stream):
    acc = init
    for node in _nodes(stream):
        acc = combine(acc, node.head)
    return acc


def for_each(effect, stream):
    for node in _nodes(stream):
        effect(node.head)


def drain(stream):
    for _ in _nodes(stream):
        pass


def to_list(stream):
    return [node.head for node in _nodes(stream)]


def to_text(stream):
    return ''.join(node.head for node in _nodes(stream))


def length(stream):
    return fold_left(lambda n, _: n + 1, 0, stream)


def nth(n, stream):
    """element at 0-based position n"""
    if n < 0:
        raise ValueError('nth: negative index {}'.format(n))
    for i, node in enumerate(_nodes(stream)):
        if i == n:
            return node.head
    raise SequenceExhausted('nth')


def into_buffer(start, count, buffer, stream):
    """Fill buffer with elements of stream and return (rest, not_filled).

    With count >= 0 element N goes to buffer[start + N]; with count < 0 it
    goes to buffer[start - N], filling the same number of slots downwards.
    rest is the unconsumed part of stream and not_filled the number of slots
    left untouched because the stream ended early.
    """
    size = len(buffer)
    if not 0 <= start < size:
        raise IndexError('into_buffer: start {} out of bounds for length {}'.format(start, size))
    end = start + count
    if count >= 0 and end > size or count < 0 and end < -1:
        raise IndexError('into_buffer: count {} from {} out of bounds for length {}'.format(count, start, size))

    step = 1 if count >= 0 else -1
    index = start
    missing = abs(count)
    while missing:
        node = stream.force()
        if node.is_empty():
            logger.debug('into_buffer: stream ended with %d slots unfilled', missing)
            return empty(), missing
        buffer[index] = node.head
        index += step
        missing -= 1
        stream = node.tail
    return stream, 0


def equal_with(cmp, stream1, stream2):
    node1 = stream1.force()
    node2 = stream2.force()
    while not (node1.is_empty() or node2.is_empty()):
        if not cmp(node1.head, node2.head):
            return False
        node1 = node1.tail.force()
        node2 = node2.tail.force()
    return node1.is_empty() and node2.is_empty()


def equal(stream1, stream2):
    return equal_with(operator.eq, stream1, stream2)


def for_all(pred, stream):
    return all(pred(node.head) for node in _nodes(stream))


def exists(pred, stream):
    return any(pred(node.head) for node in _nodes(stream))


def contains_with(cmp, x, stream):
    return exists(lambda y: cmp(x, y), stream)


def contains(x, stream):
    return contains_with(operator.eq, x, stream)


def find(pred, stream):
    for node in _nodes(stream):
        if pred(node.head):
            return Some(node.head)
    return Nothing()


def find_map(project, stream):
    for node in _nodes(stream):
        produced = project(node.head)
        if produced.is_present():
            return produced
    return Nothing()
