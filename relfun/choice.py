"""
The choice operator: turn "some element satisfies pred" into that element.

Witnesses are never conjured. Either the caller hands over a computable
witness routine, or the carrier is enumerated until an element satisfies
the predicate. Both paths are deterministic.
"""
import logging
from itertools import islice
from typing import Any, Callable, Optional

from .errors import NoWitnessError
from .types import Carrier

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 10_000


def choice_ok(pred: Callable[[Any], bool], value: Any) -> bool:
    """The chosen value satisfies the predicate it was chosen for."""
    return bool(pred(value))


def choice(carrier: Carrier,
           pred: Callable[[Any], bool],
           witness: Optional[Callable[[], Any]] = None,
           limit: Optional[int] = None) -> Any:
    """Pick an element of carrier satisfying pred.

    Args:
        carrier: Where to look
        pred: The existence claim being discharged
        witness: Optional routine computing the element directly
        limit: Maximum number of elements to try on an infinite carrier

    Returns:
        The witness, or the first element in enumeration order satisfying pred

    Raises:
        NoWitnessError: if the witness routine is wrong or the search fails
    """
    if witness is not None:
        value = witness()
        if value not in carrier or not choice_ok(pred, value):
            raise NoWitnessError(f"witness {value!r} does not satisfy the predicate in {carrier.name}")
        return value

    if carrier.is_finite:
        candidates = carrier.elements()
    else:
        limit = DEFAULT_SEARCH_LIMIT if limit is None else limit
        candidates = islice(carrier.elements(), limit)

    for value in candidates:
        if choice_ok(pred, value):
            return value

    if carrier.is_finite:
        raise NoWitnessError(f"no element of {carrier.name} satisfies the predicate")
    logger.debug("search in %s exhausted after %d candidates", carrier.name, limit)
    raise NoWitnessError(f"no witness among the first {limit} elements of {carrier.name}")
