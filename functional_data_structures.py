class Singleton:
    """Class with a single instance"""

    def __new__(cls):
        obj = object.__new__(cls)
        cls.__new__ = lambda _: obj
        return obj


class Empty(Singleton):
    """The terminal node of a stream"""

    @staticmethod
    def is_empty():
        return True

    def __repr__(self):
        return 'Empty'


class Cons(tuple):
    """A produced value followed by the stream of everything after it.

    Nodes are immutable; the tail is a suspension and is not forced by
    constructing or inspecting the node.
    """

    __match_args__ = 'head', 'tail'

    def __new__(cls, head, tail):
        return super().__new__(cls, (head, tail))

    @staticmethod
    def is_empty():
        return False

    @property
    def head(self):
        return self[0]

    @property
    def tail(self):
        return self[1]

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __repr__(self):
        return 'Cons({!r}, {!r})'.format(self.head, self.tail)


class Nothing(Singleton):
    """The absent optional value"""

    @staticmethod
    def is_present():
        return False

    @staticmethod
    def unwrap():
        raise ValueError('unwrap called on Nothing')

    def __repr__(self):
        return 'Nothing'


class Some(tuple):
    """A present optional value"""

    def __new__(cls, value):
        return super().__new__(cls, (value,))

    @staticmethod
    def is_present():
        return True

    def unwrap(self):
        return self[0]

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __repr__(self):
        return 'Some({!r})'.format(self[0])
