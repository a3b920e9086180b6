import heapq
from decimal import Decimal, InvalidOperation
from fractions import Fraction

import numpy as np


def is_nan(value):
    return value != value


def midpoint(a, b):
    """Average of two values, safe against float overflow.

    midpoint(MAX, MAX) is MAX rather than inf for float and numpy float
    types, and the midpoint of +inf and -inf is 0. Integers too large for
    a float division give an exact Fraction.
    """
    if is_nan(a) or is_nan(b):
        raise ValueError('Value must not be NaN!')
    try:
        with np.errstate(over='ignore', invalid='ignore'):
            total = a + b
    except InvalidOperation:
        # Decimal('Infinity') + Decimal('-Infinity')
        return Decimal(0)
    if isinstance(total, (float, np.floating)) and np.isinf(total) \
            and not (np.isinf(a) or np.isinf(b)):
        return a / 2 + b / 2
    try:
        mid = total / 2
    except OverflowError:
        return Fraction(total, 2)
    if is_nan(mid):
        return 0.0
    return mid


def push_high(l, x):
    heapq.heappush(l, x)


def pop_high(l):
    return heapq.heappop(l)


def top_high(l):
    return l[0]


# low is a max-heap kept as negated values
def push_low(l, x):
    heapq.heappush(l, -x)


def pop_low(l):
    return -heapq.heappop(l)


def top_low(l):
    return -l[0]


class StreamMedian(object):
    """Running median of every value pushed so far.

    Values are split over two heaps: ``low`` holds the smaller half and
    ``high`` the larger half, with every element of ``low`` <= every
    element of ``high``. ``low`` carries the extra element when the count
    is odd. ``push`` is O(log n) and ``get`` is O(1).

    NaN has no place in the ordering and is rejected by ``push``. numpy
    scalars are stored as the equivalent Python numbers.
    """

    def __init__(self, values=()):
        self.low = []
        self.high = []
        for value in values:
            self.push(value)

    def __len__(self):
        return len(self.low) + len(self.high)

    def push(self, value):
        # numpy integer scalars wrap on negation and addition
        if isinstance(value, np.generic):
            value = value.item()
        if is_nan(value):
            raise ValueError('Value must not be NaN!')

        if len(self.low) == 0 or value <= top_low(self.low):
            push_low(self.low, value)
        else:
            push_high(self.high, value)

        if len(self.low) > len(self.high)+1:
            push_high(self.high, pop_low(self.low))
        elif len(self.high) > len(self.low):
            push_low(self.low, pop_high(self.high))

    def get(self):
        if len(self.low) == 0:
            return None
        if len(self.low) == len(self.high):
            return midpoint(top_low(self.low), top_high(self.high))
        return top_low(self.low)

    median = get

    def double_median(self):
        if len(self.low) == 0:
            return None
        if len(self.low) == len(self.high):
            return top_low(self.low), top_high(self.high)
        median = top_low(self.low)
        return median, median

    def __call__(self, value):
        self.push(value)
        return self.double_median()
