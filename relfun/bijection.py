"""
"Has a bijection to" and its equivalence-relation laws over a Universe.
"""
import logging
from dataclasses import dataclass
from itertools import product
from typing import Optional, Tuple

from .errors import InfiniteCarrierError, NotBijectiveError
from .function import Function, comp, identity
from .properties import injective, inverse_of, is_inverse, non_injective_pair, surjective, unreached
from .types import Carrier, FunctionSpace, Universe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bijection:
    """A Function together with the evidence that it is injective and surjective."""
    function: Function
    injective: bool
    surjective: bool

    @classmethod
    def of(cls, f: Function) -> "Bijection":
        pair = non_injective_pair(f)
        if pair is not None:
            raise NotBijectiveError(f"{f.name} is not injective", counterexample=pair)
        missing = unreached(f)
        if missing is not None:
            raise NotBijectiveError(f"{f.name} is not surjective", counterexample=missing)
        return cls(function=f, injective=True, surjective=True)

    @property
    def dom(self) -> Carrier:
        return self.function.dom

    @property
    def cod(self) -> Carrier:
        return self.function.cod


def has_bijection(a: Carrier, b: Carrier, universe: Optional[Universe] = None) -> Optional[Bijection]:
    """A bijection a -> b, or None.

    A carrier is in bijection with itself through the identity. Otherwise
    explicit bijections registered in the universe are tried first, then
    every Function a -> b is enumerated.

    Raises:
        InfiniteCarrierError: for two different carriers not both finite
    """
    if a == b:
        return bij_refl(a)
    if not (a.is_finite and b.is_finite):
        raise InfiniteCarrierError(f"cannot search for a bijection between {a.name} and {b.name}")
    if universe is not None:
        for f in universe.explicit(a, b):
            if injective(f) and surjective(f):
                return Bijection.of(f)
    if a.size != b.size:
        return None
    for f in FunctionSpace(a, b).elements():
        if injective(f) and surjective(f):
            return Bijection.of(f)
    return None


def inv_then_inj(f: Function, g: Function) -> bool:
    """If g is a two-sided inverse of f then f is injective."""
    if not is_inverse(f, g):
        return True
    return injective(f)


def bij_refl(a: Carrier) -> Bijection:
    """The identity on a, injective and surjective for every carrier."""
    return Bijection(function=identity(a), injective=True, surjective=True)


def bij_sym(b: Bijection) -> Bijection:
    """The inverse bijection b.cod -> b.dom."""
    f = b.function
    g = inverse_of(f)
    # g is injective because it has inverse f, and surjective because f,
    # having inverse g, is injective: every x is reached as g(f(x))
    if not (inv_then_inj(g, f) and inv_then_inj(f, g)):
        raise NotBijectiveError(f"inverse of {f.name} is not a bijection")
    return Bijection.of(g)


def bij_trans(first: Bijection, second: Bijection) -> Bijection:
    """Compose first: A -> B with second: B -> C."""
    return Bijection.of(comp(second.function, first.function))


def equivalence_report(universe: Universe) -> Optional[Tuple[str, Tuple[Carrier, ...]]]:
    """The first failing equivalence law as (law, carriers), or None.

    Reflexivity is checked on every carrier, symmetry on every connected
    pair and transitivity on every connected triple.
    """
    carriers = list(universe)
    for a in carriers:
        ident = bij_refl(a).function
        if not (injective(ident) and surjective(ident)):
            return ("reflexive", (a,))

    connected = {}
    for a, b in product(carriers, repeat=2):
        found = has_bijection(a, b, universe)
        if found is not None:
            connected[(a.name, b.name)] = found

    for (a_name, b_name), found in connected.items():
        back = bij_sym(found)
        if (b_name, a_name) not in connected or back.cod != universe[a_name]:
            return ("symmetric", (universe[a_name], universe[b_name]))

    for (a_name, b_name), first in connected.items():
        for (b2_name, c_name), second in connected.items():
            if b2_name != b_name:
                continue
            through = bij_trans(first, second)
            if (a_name, c_name) not in connected or through.cod != universe[c_name]:
                return ("transitive", (universe[a_name], universe[b_name], universe[c_name]))
    logger.debug("equivalence laws hold on %d carriers, %d connected pairs",
                 len(carriers), len(connected))
    return None
