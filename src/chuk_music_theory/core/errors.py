"""
Errors raised by the music theory primitives.
"""


class TheoryError(ValueError):
    """
    Raised when a note, interval or chord cannot be constructed.

    Every constructor either returns a fully valid value or raises this
    error with a message naming the offending value. It is also raised
    for internal invariant violations, which indicate a bug rather than
    bad input.
    """
