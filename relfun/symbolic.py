"""
Symbolic Functions for proofs that hold over every type.

Types become uninterpreted sorts and Functions become uninterpreted
function symbols, so a proof about them is a proof for all carriers at
once. Equality of symbolic Functions is always pointwise (extensionality);
they are never compared as terms.
"""
from itertools import count
from typing import Any, Callable

from .backends import Backend


class SymFn:
    """A symbolic Function dom -> cod."""

    def __init__(self, dom, cod, name: str):
        self.dom = dom
        self.cod = cod
        self.name = name

    def __call__(self, x):
        raise NotImplementedError

    def __repr__(self) -> str:
        return self.name


class Symbol(SymFn):
    """An arbitrary Function: an uninterpreted function symbol."""

    def __init__(self, decl, dom, cod, name: str):
        super().__init__(dom, cod, name)
        self.decl = decl

    def __call__(self, x):
        return self.decl(x)


class Formula(SymFn):
    """by_formula: the Function x => body(x)."""

    def __init__(self, body: Callable[[Any], Any], dom, cod, name: str = "formula"):
        super().__init__(dom, cod, name)
        self.body = body

    def __call__(self, x):
        return self.body(x)


class Comp(SymFn):
    """Apply f, then g."""

    def __init__(self, g: SymFn, f: SymFn):
        if f.cod != g.dom:
            raise TypeError(f"cannot compose {g.name} after {f.name}")
        super().__init__(f.dom, g.cod, f"{g.name}.{f.name}")
        self.g = g
        self.f = f

    def __call__(self, x):
        return self.g(self.f(x))


class Id(SymFn):
    def __init__(self, sort):
        super().__init__(sort, sort, f"id_{sort}")

    def __call__(self, x):
        return x


class Family:
    """f : A -> (B -> C), curried over a two-argument symbol."""

    def __init__(self, decl, dom, cod, name: str):
        self.decl = decl
        self.dom = dom
        self.cod = cod
        self.name = name

    def __call__(self, a) -> Formula:
        return Formula(lambda b: self.decl(a, b), self.dom, self.cod, name=f"{self.name}({a})")


class Vocabulary:
    """Builds sorts, symbols and the predicates of the theory over a backend."""

    def __init__(self, backend: Backend):
        self.backend = backend
        self._counter = count()

    def sort(self, name: str):
        return self.backend.DeclareSort(name)

    def nat(self):
        return self.backend.IntSort()

    def boolean(self):
        return self.backend.BoolSort()

    def const(self, name: str, sort):
        return self.backend.Const(name, sort)

    def fresh(self, sort, prefix: str = "x"):
        return self.backend.Const(f"{prefix}!{next(self._counter)}", sort)

    def function(self, name: str, dom, cod) -> Symbol:
        return Symbol(self.backend.Function(name, dom, cod), dom, cod, name)

    def family(self, name: str, index, dom, cod) -> Family:
        return Family(self.backend.Function(name, index, dom, cod), dom, cod, name)

    def relation(self, name: str, dom, cod):
        return self.backend.Function(name, dom, cod, self.boolean())

    # -- relations ---------------------------------------------------------

    def total(self, rel, dom, cod):
        x, y = self.fresh(dom), self.fresh(cod, "y")
        return self.backend.ForAll([x], self.backend.Exists([y], rel(x, y)))

    def functional(self, rel, dom, cod):
        x, y1, y2 = self.fresh(dom), self.fresh(cod, "y"), self.fresh(cod, "y")
        return self.backend.ForAll(
            [x, y1, y2],
            self.backend.Implies(self.backend.And(rel(x, y1), rel(x, y2)), y1 == y2))

    def choice_ok(self, rel, chosen: SymFn):
        """The chosen output is related to its input."""
        x = self.fresh(chosen.dom)
        return self.backend.ForAll([x], rel(x, chosen(x)))

    # -- functions ---------------------------------------------------------

    def equal(self, f: SymFn, g: SymFn):
        """Extensionality: f = g means f(x) = g(x) for every x."""
        if f.dom != g.dom or f.cod != g.cod:
            raise TypeError(f"{f.name} and {g.name} have different types")
        x = self.fresh(f.dom)
        return self.backend.ForAll([x], f(x) == g(x))

    def injective(self, f: SymFn):
        x1, x2 = self.fresh(f.dom), self.fresh(f.dom)
        return self.backend.ForAll([x1, x2], self.backend.Implies(f(x1) == f(x2), x1 == x2))

    def surjective(self, f: SymFn):
        x, y = self.fresh(f.dom), self.fresh(f.cod, "y")
        return self.backend.ForAll([y], self.backend.Exists([x], f(x) == y))

    def reaches(self, f: SymFn, y):
        """Some input is mapped to y."""
        x = self.fresh(f.dom)
        return self.backend.Exists([x], f(x) == y)

    def section(self, f: SymFn, name: str) -> Symbol:
        """A symbol for the preimage chosen by surjectivity; pair with chosen()."""
        return self.function(name, f.cod, f.dom)

    def chosen(self, f: SymFn, s: SymFn):
        """Every y is reached from its chosen preimage s(y)."""
        y = self.fresh(f.cod, "y")
        return self.backend.ForAll([y], f(s(y)) == y)

    def inverse(self, f: SymFn, g: SymFn):
        """g is a two-sided inverse of f."""
        return self.backend.And(self.equal(Comp(f, g), Id(f.cod)),
                                self.equal(Comp(g, f), Id(f.dom)))
