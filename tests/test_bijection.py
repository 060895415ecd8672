"""
Tests for "has a bijection to".
"""
import pytest
from relfun.bijection import (Bijection, bij_refl, bij_sym, bij_trans, equivalence_report,
                              has_bijection, inv_then_inj)
from relfun.errors import InfiniteCarrierError, NotBijectiveError
from relfun.function import Function, by_formula, identity
from relfun.types import BOOL, NAT, FiniteType, FunctionSpace, Universe, default_universe

TWO = FiniteType("two", (0, 1))
THREE = FiniteType("three", (0, 1, 2))
ABC = FiniteType("abc", ("a", "b", "c"))

def test_bijection_of_rejects_non_bijection():
    with pytest.raises(NotBijectiveError):
        Bijection.of(by_formula(THREE, TWO, lambda x: x % 2))
    with pytest.raises(NotBijectiveError):
        Bijection.of(by_formula(TWO, THREE, lambda x: x))

def test_has_bijection_same_size():
    found = has_bijection(THREE, ABC)
    assert found is not None
    assert found.dom == THREE and found.cod == ABC
    assert found.injective and found.surjective

def test_has_bijection_different_size():
    assert has_bijection(TWO, THREE) is None
    assert has_bijection(THREE, TWO) is None

def test_has_bijection_prefers_registered():
    universe = default_universe()
    three, abc = universe["three"], universe["abc"]
    found = has_bijection(three, abc, universe)
    assert found.function.graph() == ((0, "a"), (1, "b"), (2, "c"))

def test_bij_refl():
    b = bij_refl(THREE)
    assert b.function == identity(THREE)

def test_bij_sym():
    f = Function.from_table(THREE, ABC, {0: "c", 1: "a", 2: "b"})
    back = bij_sym(Bijection.of(f))
    assert back.dom == ABC and back.cod == THREE
    assert [back.function(y) for y in ABC] == [1, 2, 0]

def test_bij_trans():
    first = Bijection.of(Function.from_table(TWO, BOOL, {0: True, 1: False}))
    second = Bijection.of(Function.from_table(BOOL, TWO, {False: 0, True: 1}))
    through = bij_trans(first, second)
    assert through.dom == TWO and through.cod == TWO
    assert through.function.graph() == ((0, 1), (1, 0))

def test_inv_then_inj():
    for f in FunctionSpace(TWO, TWO).elements():
        for g in FunctionSpace(TWO, TWO).elements():
            assert inv_then_inj(f, g)

def test_equivalence_on_default_universe():
    assert equivalence_report(default_universe()) is None

def test_equivalence_on_small_universe():
    universe = Universe([TWO, BOOL, FiniteType("unit", (0,))])
    assert equivalence_report(universe) is None

def test_bij_refl_on_naturals():
    b = bij_refl(NAT)
    assert b.injective and b.surjective
    assert b.dom == NAT and b.cod == NAT
    assert b.function(41) == 41

def test_has_bijection_on_infinite_carriers():
    found = has_bijection(NAT, NAT)
    assert found is not None and found.function(7) == 7
    with pytest.raises(InfiniteCarrierError):
        has_bijection(NAT, THREE)
