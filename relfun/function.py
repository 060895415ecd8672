"""
Functions represented as total, single-valued relations.

A Function packages a relation rel(x, y) between two carriers. Application
does not look anything up: it asks the choice operator for the unique y
related to x, which is why totality and functionality matter.
"""
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from .choice import choice
from .errors import InfiniteCarrierError, NotFunctionalError, NotTotalError
from .types import Carrier


class Function:
    """A total functional relation dom -> cod."""

    def __init__(self,
                 dom: Carrier,
                 cod: Carrier,
                 rel: Callable[[Any, Any], bool],
                 witness: Optional[Callable[[Any], Any]] = None,
                 check: bool = True,
                 search_limit: Optional[int] = None,
                 name: str = "f"):
        """Create a Function from a relation.

        Args:
            dom: Domain carrier
            cod: Codomain carrier
            rel: Predicate over (input, output) pairs
            witness: Optional routine computing the related output directly
            check: Verify totality and functionality when both carriers are finite
            search_limit: Bound for the output search on an infinite codomain
            name: Used in reports only
        """
        self.dom = dom
        self.cod = cod
        self._rel = rel
        self.witness = witness
        self.search_limit = search_limit
        self.name = name
        if check and dom.is_finite and cod.is_finite:
            self.check()

    @classmethod
    def from_table(cls, dom: Carrier, cod: Carrier, mapping: Dict[Any, Any],
                   name: str = "f") -> "Function":
        """A Function given by an explicit input -> output table."""
        for x in dom.finite_elements():
            if x not in mapping:
                raise NotTotalError(f"{name}: no output listed for {x!r}", counterexample=x)
            if mapping[x] not in cod:
                raise ValueError(f"{name}: output {mapping[x]!r} is not in {cod.name}")
        table = dict(mapping)
        return by_formula(dom, cod, table.__getitem__, name=name)

    def rel(self, x: Any, y: Any) -> bool:
        return bool(self._rel(x, y))

    def app(self, x: Any) -> Any:
        """The unique output related to x."""
        if x not in self.dom:
            raise ValueError(f"{x!r} is not in the domain {self.dom.name} of {self.name}")
        witness = None
        if self.witness is not None:
            witness = lambda: self.witness(x)
        return choice(self.cod, lambda y: self._rel(x, y),
                      witness=witness, limit=self.search_limit)

    __call__ = app

    def untotal_input(self) -> Optional[Any]:
        """An input with no related output, if any."""
        for x in self.dom.finite_elements():
            if not any(self.rel(x, y) for y in self.cod.finite_elements()):
                return x
        return None

    def conflicting_outputs(self) -> Optional[Tuple[Any, Any, Any]]:
        """An input related to two distinct outputs, as (x, y1, y2), if any."""
        outputs = self.cod.finite_elements()
        for x in self.dom.finite_elements():
            related = [y for y in outputs if self.rel(x, y)]
            if len(related) > 1:
                return (x, related[0], related[1])
        return None

    def is_total(self) -> bool:
        return self.untotal_input() is None

    def is_functional(self) -> bool:
        return self.conflicting_outputs() is None

    def check(self) -> None:
        """Raise unless the relation is total and functional."""
        x = self.untotal_input()
        if x is not None:
            raise NotTotalError(f"{self.name}: nothing in {self.cod.name} is related to {x!r}",
                                counterexample=x)
        conflict = self.conflicting_outputs()
        if conflict is not None:
            raise NotFunctionalError(f"{self.name}: {conflict[0]!r} is related to both "
                                     f"{conflict[1]!r} and {conflict[2]!r}",
                                     counterexample=conflict)

    def graph(self) -> Tuple[Tuple[Any, Any], ...]:
        return tuple((x, self(x)) for x in self.dom.finite_elements())

    def agrees_on(self, other: "Function", xs: Iterable[Any]) -> bool:
        """Pointwise agreement on the given inputs."""
        return all(self(x) == other(x) for x in xs)

    def __eq__(self, other: Any) -> bool:
        # extensionality: equal means agreeing on every input
        if not isinstance(other, Function):
            return NotImplemented
        if self is other:
            return True
        if self.dom != other.dom or self.cod != other.cod:
            return False
        if not self.dom.is_finite:
            raise InfiniteCarrierError(
                f"cannot decide equality of {self.name} and {other.name} on infinite {self.dom.name}")
        return self.agrees_on(other, self.dom.elements())

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        if not self.dom.is_finite:
            return hash((self.dom, self.cod))
        return hash((self.dom, self.cod, self.graph()))

    def __repr__(self) -> str:
        if self.dom.is_finite:
            table = ", ".join(f"{x!r}: {y!r}" for x, y in self.graph())
            return f"{self.name}: {self.dom.name} -> {self.cod.name} {{{table}}}"
        return f"{self.name}: {self.dom.name} -> {self.cod.name}"


def app(f: Function, x: Any) -> Any:
    return f.app(x)


def by_formula(dom: Carrier, cod: Carrier, g: Callable[[Any], Any],
               name: str = "f", search_limit: Optional[int] = None) -> Function:
    """The Function whose relation is {(x, y) | g(x) == y}.

    Totality (witness g(x)) and functionality (equality is deterministic)
    hold by construction, so nothing is checked up front. Outputs are
    memoized so that a Function-valued output is the same object every
    time, which keeps rel decidable on infinite function spaces.
    """
    outputs: Dict[Any, Tuple[Any, Any]] = {}

    def formula(x):
        key = _memo_key(x)
        if key not in outputs:
            # the input is kept alongside its output so an id() key stays valid
            outputs[key] = (x, g(x))
        return outputs[key][1]

    return Function(dom, cod, lambda x, y: _same(formula(x), y), witness=formula,
                    check=False, search_limit=search_limit, name=name)


def _memo_key(x: Any) -> Any:
    # Functions on an infinite domain have no decidable equality, key them by identity
    if isinstance(x, Function) and not x.dom.is_finite:
        return (Function, id(x))
    return x


def _same(a: Any, b: Any) -> bool:
    return a is b or a == b


def comp(g: Function, f: Function) -> Function:
    """Apply f, then g."""
    if f.cod != g.dom:
        raise TypeError(f"cannot compose {g.name}: {g.dom.name} -> {g.cod.name} "
                        f"after {f.name}: {f.dom.name} -> {f.cod.name}")
    return by_formula(f.dom, g.cod, lambda x: g(f(x)), name=f"{g.name}.{f.name}")


def identity(carrier: Carrier) -> Function:
    return by_formula(carrier, carrier, lambda x: x, name=f"id_{carrier.name}")
