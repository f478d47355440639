"""Functions that build new streams out of existing ones.

None of these force anything when called. The returned stream forces its
inputs only as far as needed to produce its own next node.
"""

import operator

from constructors import of, singleton
from consumers import into_buffer
from functional_data_structures import Empty, Cons
from stream import Stream, suspend, SequenceExhausted


def _check_count(name, n):
    if n < 0:
        raise ValueError('{}: negative count {}'.format(name, n))


def map(func, stream):
    def compute():
        node = stream.force()
        if node.is_empty():
            return node
        return Cons(func(node.head), map(func, node.tail))

    return suspend(compute)


def filter(pred, stream):
    def compute(stream=stream):
        while True:
            node = stream.force()
            if node.is_empty():
                return node
            if pred(node.head):
                return Cons(node.head, filter(pred, node.tail))
            stream = node.tail

    return suspend(compute)


def filter_map(project, stream):
    """stream of the present results of project, skipping the Nothing ones"""

    def compute(stream=stream):
        while True:
            node = stream.force()
            if node.is_empty():
                return node
            produced = project(node.head)
            if produced.is_present():
                return Cons(produced.unwrap(), filter_map(project, node.tail))
            stream = node.tail

    return suspend(compute)


def append(stream_a, stream_b):
    if isinstance(stream_a, _Appended):
        return _Appended(stream_a.first, stream_a.front, (stream_b, stream_a.rear))
    return _Appended(stream_a, None, (stream_b, None))


class _Appended(Stream):
    """first followed by the queued streams

    The queue is split into front, linked in walking order, and rear, linked
    newest first, so appending to an appended stream is O(1) and a chain of
    appends is walked in a loop.
    """

    __slots__ = 'first', 'front', 'rear'

    def __init__(self, first, front, rear):
        super().__init__(None)
        self.first = first
        self.front = front
        self.rear = rear

    def force(self):
        stream, front, rear = self.first, self.front, self.rear
        while True:
            node = stream.force()
            if not node.is_empty():
                if front is None and rear is None:
                    return node
                return Cons(node.head, _Appended(node.tail, front, rear))
            if front is None:
                while rear is not None:
                    later, rear = rear
                    front = (later, front)
                if front is None:
                    return node
            stream, front = front


def flat_map(project, stream):
    """concatenation of the streams project returns for each element

    Each sub-stream is walked to its end before the next element of stream
    is forced.
    """

    def compute(stream=stream):
        while True:
            node = stream.force()
            if node.is_empty():
                return node
            inner = project(node.head).force()
            if not inner.is_empty():
                return Cons(inner.head, append(inner.tail, flat_map(project, node.tail)))
            stream = node.tail

    return suspend(compute)


def snoc(stream, x):
    """stream followed by the single element x"""
    return append(stream, singleton(x))


def flatten(streams):
    return flat_map(lambda s: s, streams)


def concat(streams):
    return flatten(of(list(streams)))


def interleave(stream_a, stream_b):
    """alternate the elements of both streams, starting with stream_a

    When one of them ends the rest of the other follows, so two infinite
    streams are both enumerated.
    """

    def compute():
        node = stream_a.force()
        if node.is_empty():
            return stream_b.force()
        return Cons(node.head, interleave(stream_b, node.tail))

    return suspend(compute)


def cycle(stream):
    """endless repetition of stream; cycling the empty stream gives the empty stream"""

    def compute():
        node = stream.force()
        if node.is_empty():
            return node
        return Cons(node.head, append(node.tail, cycle(stream)))

    return suspend(compute)


def truncate(n, stream):
    """the first n elements of stream, or all of them if there are fewer"""
    _check_count('truncate', n)

    def compute():
        if n == 0:
            return Empty()
        node = stream.force()
        if node.is_empty():
            return node
        return Cons(node.head, truncate(n - 1, node.tail))

    return suspend(compute)


def take(n, stream):
    """the first n elements of stream

    Forcing past the end of a shorter stream raises SequenceExhausted.
    """
    _check_count('take', n)

    def compute():
        if n == 0:
            return Empty()
        node = stream.force()
        if node.is_empty():
            raise SequenceExhausted('take')
        return Cons(node.head, take(n - 1, node.tail))

    return suspend(compute)


def drop(n, stream):
    _check_count('drop', n)
    if n == 0:
        return stream

    def compute(stream=stream):
        for _ in range(n):
            node = stream.force()
            if node.is_empty():
                raise SequenceExhausted('drop')
            stream = node.tail
        return stream.force()

    return suspend(compute)


def take_while(pred, stream):
    def compute():
        node = stream.force()
        if node.is_empty() or not pred(node.head):
            return Empty()
        return Cons(node.head, take_while(pred, node.tail))

    return suspend(compute)


def drop_while(pred, stream):
    def compute(stream=stream):
        while True:
            node = stream.force()
            if node.is_empty() or not pred(node.head):
                return node
            stream = node.tail

    return suspend(compute)


def zip_with(combine, stream1, stream2):
    def compute():
        node1 = stream1.force()
        if node1.is_empty():
            return node1
        node2 = stream2.force()
        if node2.is_empty():
            return node2
        return Cons(combine(node1.head, node2.head), zip_with(combine, node1.tail, node2.tail))

    return suspend(compute)


def zip(stream1, stream2):
    return zip_with(lambda a, b: (a, b), stream1, stream2)


def unzip(pairs):
    """split a stream of pairs into the stream of firsts and the stream of seconds

    Both results walk pairs independently; memoize pairs first to compute
    each pair only once.
    """
    return map(operator.itemgetter(0), pairs), map(operator.itemgetter(1), pairs)


def chunks(n, stream):
    """stream of lists holding n consecutive elements each

    The last list is shorter when the length of stream is not a multiple of n.
    """
    if n < 1:
        raise ValueError('chunks: size must be at least 1, got {}'.format(n))

    def compute():
        buffer = [None] * n
        rest, not_filled = into_buffer(0, n, buffer, stream)
        if not_filled == n:
            return Empty()
        if not_filled:
            buffer = buffer[:n - not_filled]
        return Cons(buffer, chunks(n, rest))

    return suspend(compute)
