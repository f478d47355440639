"""
A stream is a suspended computation that produces one node when forced.
A node is either Empty or a Cons of a value and the stream of the rest.

Forcing a plain stream runs its computation again every time:

>>> s = suspend(lambda: Cons(1, suspend(Empty)))
>>> force(s) is force(s)
False

A memoized stream runs it at most once and replays the cached node,
recursively memoizing the tail so a whole chain is cached as it is walked.
"""

import logging

from functional_data_structures import Empty, Cons

logger = logging.getLogger(__name__)


class SequenceExhausted(IndexError):
    """A stream ended before an operation got the elements it needed"""

    def __init__(self, operation):
        super().__init__('{} called on empty sequence'.format(operation))
        self.operation = operation


class Stream:
    __slots__ = '_compute',

    def __init__(self, compute):
        self._compute = compute

    def force(self):
        return self._compute()

    # Static so the generator does not keep the first node alive while
    # the rest of the stream is walked.
    @staticmethod
    def _iter(stream):
        while True:
            node = stream.force()
            if node.is_empty():
                return
            yield node.head
            stream = node.tail

    def __iter__(self):
        return self._iter(self)

    def __repr__(self):
        return '<Stream>'


_UNEVALUATED = object()


class MemoStream(Stream):
    __slots__ = '_node',

    def __init__(self, stream):
        super().__init__(stream.force)
        self._node = _UNEVALUATED

    def is_evaluated(self):
        return self._node is not _UNEVALUATED

    def force(self):
        if self._node is _UNEVALUATED:
            node = self._compute()
            if not node.is_empty():
                node = Cons(node.head, memo(node.tail))
            logger.debug('memoized %r', node)
            self._node = node
            self._compute = None
        return self._node

    def __repr__(self):
        return '<MemoStream {}>'.format('evaluated' if self.is_evaluated() else 'unevaluated')


def suspend(compute):
    return Stream(compute)


def force(stream):
    return stream.force()


def memo(stream):
    if isinstance(stream, MemoStream):
        return stream
    return MemoStream(stream)
