"""
Injectivity, surjectivity and invertibility of Functions on finite carriers.
"""
from typing import Any, Optional, Tuple

from .choice import choice
from .errors import InfiniteCarrierError, NotBijectiveError
from .function import Function, by_formula, comp, identity


def _require_finite(f: Function) -> None:
    for carrier in (f.dom, f.cod):
        if not carrier.is_finite:
            raise InfiniteCarrierError(
                f"{f.name}: {carrier.name} is infinite, the property cannot be decided by enumeration")


def non_injective_pair(f: Function) -> Optional[Tuple[Any, Any]]:
    """Two distinct inputs with the same output, if any."""
    _require_finite(f)
    seen = {}
    for x in f.dom.elements():
        y = f(x)
        for x_prev, y_prev in seen.items():
            if y_prev == y:
                return (x_prev, x)
        seen[x] = y
    return None


def unreached(f: Function) -> Optional[Any]:
    """A codomain element no input maps to, if any."""
    _require_finite(f)
    image = [f(x) for x in f.dom.elements()]
    for y in f.cod.elements():
        if not any(v == y for v in image):
            return y
    return None


def injective(f: Function) -> bool:
    return non_injective_pair(f) is None


def surjective(f: Function) -> bool:
    return unreached(f) is None


def bijective(f: Function) -> bool:
    return injective(f) and surjective(f)


def is_inverse(f: Function, g: Function) -> bool:
    """g undoes f on both sides."""
    if g.dom != f.cod or g.cod != f.dom:
        return False
    return comp(f, g) == identity(f.cod) and comp(g, f) == identity(f.dom)


def preimage(f: Function, y: Any) -> Any:
    """An input mapped to y, chosen by enumeration of the domain."""
    return choice(f.dom, lambda x: f(x) == y)


def inverse_of(f: Function) -> Function:
    """The inverse of a bijection, built from chosen preimages.

    Raises:
        NotBijectiveError: with the offending pair or unreached element
    """
    pair = non_injective_pair(f)
    if pair is not None:
        raise NotBijectiveError(f"{f.name} is not injective: {pair[0]!r} and {pair[1]!r} collide",
                                counterexample=pair)
    missing = unreached(f)
    if missing is not None:
        raise NotBijectiveError(f"{f.name} is not surjective: {missing!r} is never reached",
                                counterexample=missing)
    return by_formula(f.cod, f.dom, lambda y: preimage(f, y), name=f"{f.name}_inv")


def find_inverse(f: Function) -> Optional[Function]:
    """A two-sided inverse of f, or None.

    Any two-sided inverse sends y to its unique preimage, so trying the
    preimage map is a complete search.
    """
    _require_finite(f)
    if not surjective(f):
        return None
    candidate = by_formula(f.cod, f.dom, lambda y: preimage(f, y), name=f"{f.name}_inv")
    if is_inverse(f, candidate):
        return candidate
    return None


def invertible(f: Function) -> bool:
    return find_inverse(f) is not None
