"""
Diagonal constructions.

Given f : A -> (A -> C) and a twist t : C -> C without fixed points, the
diagonal k(a) = t(f(a)(a)) differs from every f(a) at a itself, so f never
reaches k. With C = nat and t = successor this is the argument that no
enumeration of nat -> nat is complete; with C = bool and t = negation it is
Cantor's theorem.
"""
import logging
from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Callable, List, Tuple

from .errors import InfiniteCarrierError
from .function import Function, by_formula
from .types import BOOL, Carrier, FunctionSpace, NAT

logger = logging.getLogger(__name__)


def successor(n: int) -> int:
    return n + 1


def negation(b: bool) -> bool:
    return not b


def fixed_points(twist: Callable[[Any], Any], carrier: Carrier) -> List[Any]:
    return [c for c in carrier.finite_elements() if twist(c) == c]


@dataclass
class DiagonalWitness:
    """The diagonal and, per index a, the pair (f(a)(a), k(a)) telling them apart."""
    diagonal: Function
    misses: List[Tuple[Any, Any, Any]] = field(default_factory=list)

    @property
    def checked(self) -> int:
        return len(self.misses)


def _inner_space(f: Function) -> FunctionSpace:
    if not isinstance(f.cod, FunctionSpace) or f.cod.dom != f.dom:
        raise TypeError(f"{f.name} must map {f.dom.name} into functions on {f.dom.name}")
    return f.cod


def diagonalize(f: Function, twist: Callable[[Any], Any], name: str = "k") -> Function:
    """k(a) = twist(f(a)(a))."""
    inner = _inner_space(f)
    return by_formula(f.dom, inner.cod, lambda a: twist(f(a)(a)), name=name)


def _witness(f: Function, k: Function, indices) -> DiagonalWitness:
    witness = DiagonalWitness(diagonal=k)
    for a in indices:
        own, twisted = f(a)(a), k(a)
        if own == twisted:
            raise ValueError(f"twist has a fixed point at {own!r}; diagonal argument fails at {a!r}")
        witness.misses.append((a, own, twisted))
    return witness


def uncomputable(f: Function, limit: int = 100) -> DiagonalWitness:
    """Exhibit the successor diagonal missed by an enumeration f : nat -> (nat -> nat).

    Only the first limit indices can be inspected; the statement for every
    index is the symbolic claim of the same name.
    """
    inner = _inner_space(f)
    if f.dom != NAT or inner.cod != NAT:
        raise TypeError(f"{f.name} must enumerate functions nat -> nat")
    k = diagonalize(f, successor)
    logger.debug("checking successor diagonal against %d indices of %s", limit, f.name)
    return _witness(f, k, islice(f.dom.elements(), limit))


def cantor(f: Function) -> DiagonalWitness:
    """Exhibit the negated diagonal missed by f : A -> (A -> bool), for every a in A."""
    inner = _inner_space(f)
    if inner.cod != BOOL:
        raise TypeError(f"{f.name} must map into predicates {f.dom.name} -> bool")
    if not f.dom.is_finite:
        raise InfiniteCarrierError(f"{f.dom.name} is infinite; use the symbolic claim")
    k = diagonalize(f, negation, name="g")
    return _witness(f, k, f.dom.elements())
