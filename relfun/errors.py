"""
Exceptions raised by the relfun library.

Law violations are never exceptions: the checker reports them as verdicts
with a counterexample. These are for malformed inputs only.
"""


class RelfunError(Exception):
    """Base class for relfun errors."""


class RelationError(RelfunError, ValueError):
    """A relation does not describe a function."""

    def __init__(self, message, counterexample=None):
        super().__init__(message)
        self.counterexample = counterexample


class NotTotalError(RelationError):
    """Some input has no related output."""


class NotFunctionalError(RelationError):
    """Some input has two different related outputs."""


class NoWitnessError(RelfunError, LookupError):
    """choice could not produce an element satisfying the predicate."""


class InfiniteCarrierError(RelfunError, TypeError):
    """An operation needs to enumerate a carrier that is infinite."""


class NotBijectiveError(RelfunError, ValueError):
    """A bijection was required but the function is not one."""

    def __init__(self, message, counterexample=None):
        super().__init__(message)
        self.counterexample = counterexample
