"""
Carriers: the types that Functions go between.

A carrier is either an explicit finite set, the naturals, or a space of
Functions between two other carriers. Finite carriers can be enumerated,
which is what the exhaustive checks rely on.
"""
from itertools import count, product
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import InfiniteCarrierError


class Carrier:
    """Base class for carriers."""

    name: str = "?"

    @property
    def size(self) -> Optional[int]:
        """Number of elements, or None when infinite."""
        return None

    @property
    def is_finite(self) -> bool:
        return self.size is not None

    def elements(self) -> Iterable[Any]:
        raise NotImplementedError

    def finite_elements(self) -> Tuple[Any, ...]:
        """All elements as a tuple; raises for infinite carriers."""
        if not self.is_finite:
            raise InfiniteCarrierError(f"carrier {self.name} is infinite")
        return tuple(self.elements())

    def __contains__(self, value: Any) -> bool:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements())

    def __repr__(self) -> str:
        return self.name


class FiniteType(Carrier):
    """An explicit finite set with a fixed enumeration order."""

    def __init__(self, name: str, elements: Iterable[Any]):
        self.name = name
        self._elements = tuple(elements)
        if len(set(self._elements)) != len(self._elements):
            raise ValueError(f"carrier {name} lists an element twice")

    @property
    def size(self) -> int:
        return len(self._elements)

    def elements(self) -> Tuple[Any, ...]:
        return self._elements

    def __contains__(self, value: Any) -> bool:
        # bool is an int subclass, so True must not slip into {0, 1}
        return any(type(value) is type(e) and value == e for e in self._elements)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FiniteType):
            return False
        return self.name == other.name and self._elements == other._elements

    def __hash__(self) -> int:
        return hash((self.name, self._elements))


class Naturals(Carrier):
    """The natural numbers, enumerated from zero."""

    name = "nat"

    def elements(self) -> Iterator[int]:
        return count()

    def __contains__(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Naturals)

    def __hash__(self) -> int:
        return hash(Naturals)


class FunctionSpace(Carrier):
    """The carrier of all Functions dom -> cod."""

    def __init__(self, dom: Carrier, cod: Carrier):
        self.dom = dom
        self.cod = cod
        self.name = f"({dom.name} -> {cod.name})"

    @property
    def size(self) -> Optional[int]:
        if not (self.dom.is_finite and self.cod.is_finite):
            return None
        return self.cod.size ** self.dom.size

    def elements(self) -> Iterator[Any]:
        """Every Function dom -> cod, one per table, in lexicographic order."""
        from .function import Function

        inputs = self.dom.finite_elements()
        outputs = self.cod.finite_elements()
        for row in product(outputs, repeat=len(inputs)):
            yield Function.from_table(self.dom, self.cod, dict(zip(inputs, row)))

    def __contains__(self, value: Any) -> bool:
        from .function import Function

        return (isinstance(value, Function)
                and value.dom == self.dom and value.cod == self.cod)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FunctionSpace):
            return False
        return self.dom == other.dom and self.cod == other.cod

    def __hash__(self) -> int:
        return hash((FunctionSpace, self.dom, self.cod))


BOOL = FiniteType("bool", (False, True))
NAT = Naturals()


class Universe:
    """A closed registry of carriers plus explicit bijections between them.

    "Has a bijection to" over all types cannot be quantified in Python, so
    the equivalence is stated over the carriers registered here.
    """

    def __init__(self, carriers: Iterable[Carrier] = ()):
        self._carriers: Dict[str, Carrier] = {}
        self._bijections: Dict[Tuple[str, str], List[Any]] = {}
        for carrier in carriers:
            self.register(carrier)

    def register(self, carrier: Carrier) -> Carrier:
        existing = self._carriers.get(carrier.name)
        if existing is not None and existing != carrier:
            raise ValueError(f"a different carrier named {carrier.name} is registered")
        self._carriers[carrier.name] = carrier
        return carrier

    def connect(self, function: Any) -> None:
        """Register an explicit Function between two registered carriers."""
        for carrier in (function.dom, function.cod):
            if carrier.name not in self._carriers:
                raise KeyError(f"carrier {carrier.name} is not registered")
        key = (function.dom.name, function.cod.name)
        self._bijections.setdefault(key, []).append(function)

    def explicit(self, dom: Carrier, cod: Carrier) -> List[Any]:
        """Explicit Functions registered from dom to cod."""
        return list(self._bijections.get((dom.name, cod.name), []))

    def __getitem__(self, name: str) -> Carrier:
        return self._carriers[name]

    def __contains__(self, carrier: Carrier) -> bool:
        return self._carriers.get(carrier.name) == carrier

    def __iter__(self) -> Iterator[Carrier]:
        return iter(self._carriers.values())

    def __len__(self) -> int:
        return len(self._carriers)


def default_universe() -> Universe:
    """Small finite carriers used by the exhaustive checks."""
    three = FiniteType("three", (0, 1, 2))
    abc = FiniteType("abc", ("a", "b", "c"))
    universe = Universe([
        FiniteType("unit", (0,)),
        BOOL,
        FiniteType("two", (0, 1)),
        three,
        abc,
        FiniteType("four", (0, 1, 2, 3)),
        FiniteType("five", (0, 1, 2, 3, 4)),
    ])
    from .function import Function

    universe.connect(Function.from_table(three, abc, {0: "a", 1: "b", 2: "c"}))
    return universe
