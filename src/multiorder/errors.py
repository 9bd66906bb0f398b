from __future__ import annotations


class PreconditionError(ValueError):
    """
    A model was asked about a path (or context) it was never fitted on.

    Raised instead of defaulting the probability, since a silent default
    would make the likelihood wrong rather than merely imprecise.
    """


class DegeneracyError(ArithmeticError):
    """
    The likelihood-ratio test cannot be evaluated: a zero probability,
    a non-finite statistic, or no extra degrees of freedom between orders.
    """
