""" Fixed size bit set implementation.

Dominator sets are sets of dense node numbers, so a python integer
used as bitmask is a compact and fast representation. Intersection
becomes a single `&`, and checking that a set only ever shrinks is
a matter of comparing masks.

A bitset knows its size, mixing bitsets of different sizes is an
error.
"""


def popcount(v: int) -> int:
    """ Count the number of set bits """
    return bin(v).count('1')


class BitSet:
    """ An immutable set of integers in the range [0, size) """

    __slots__ = ('size', 'bits')

    def __init__(self, size, bits=0):
        if size < 0:
            raise ValueError('Bitset size cannot be negative')
        if bits < 0 or bits >> size:
            raise ValueError(
                'Bits {:#x} do not fit in {} entries'.format(bits, size))
        self.size = size
        self.bits = bits

    @classmethod
    def empty(cls, size):
        return cls(size)

    @classmethod
    def full(cls, size):
        """ Create a bitset containing all values """
        return cls(size, (1 << size) - 1)

    @classmethod
    def single(cls, size, value):
        cls._check_range(size, value)
        return cls(size, 1 << value)

    @classmethod
    def from_iterable(cls, size, values):
        """ Create a bitset from some integers """
        bits = 0
        for value in values:
            cls._check_range(size, value)
            bits |= 1 << value
        return cls(size, bits)

    @staticmethod
    def _check_range(size, value):
        if not 0 <= value < size:
            raise ValueError(
                'Value {} outside of bitset range 0..{}'.format(
                    value, size - 1))

    def __repr__(self):
        inner = ",".join(str(x) for x in self)
        return "{{{}}}".format(inner)

    def __len__(self):
        return popcount(self.bits)

    def __bool__(self):
        return bool(self.bits)

    def __iter__(self):
        """ Yield members in ascending order """
        bits = self.bits
        value = 0
        while bits:
            if bits & 1:
                yield value
            bits >>= 1
            value += 1

    def __contains__(self, value):
        if not isinstance(value, int) or not 0 <= value < self.size:
            return False
        return bool((self.bits >> value) & 1)

    def __eq__(self, other):
        if isinstance(other, BitSet):
            return self.size == other.size and self.bits == other.bits
        return NotImplemented

    def __hash__(self):
        return hash((self.size, self.bits))

    def _check_other(self, other):
        if not isinstance(other, BitSet):
            raise TypeError('Expected BitSet, got {}'.format(type(other)))
        if other.size != self.size:
            raise ValueError(
                'Bitset sizes differ: {} and {}'.format(
                    self.size, other.size))

    def __and__(self, other):
        self._check_other(other)
        return BitSet(self.size, self.bits & other.bits)

    def __or__(self, other):
        self._check_other(other)
        return BitSet(self.size, self.bits | other.bits)

    def __sub__(self, other):
        self._check_other(other)
        return BitSet(self.size, self.bits & ~other.bits)

    def issubset(self, other) -> bool:
        self._check_other(other)
        return self.bits & ~other.bits == 0

    def with_member(self, value):
        """ Return a copy of this set with value added """
        self._check_range(self.size, value)
        return BitSet(self.size, self.bits | (1 << value))

    def without(self, value):
        """ Return a copy of this set with value removed """
        self._check_range(self.size, value)
        return BitSet(self.size, self.bits & ~(1 << value))

    def to_set(self):
        return set(self)
