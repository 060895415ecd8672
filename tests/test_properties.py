"""
Tests for injectivity, surjectivity and inverses.
"""
import pytest
from relfun.errors import InfiniteCarrierError, NotBijectiveError
from relfun.function import Function, by_formula, comp, identity
from relfun.properties import (bijective, find_inverse, injective, invertible, inverse_of,
                               is_inverse, non_injective_pair, preimage, surjective, unreached)
from relfun.types import NAT, FiniteType, FunctionSpace

TWO = FiniteType("two", (0, 1))
THREE = FiniteType("three", (0, 1, 2))
ABC = FiniteType("abc", ("a", "b", "c"))

def letters():
    return Function.from_table(THREE, ABC, {0: "b", 1: "c", 2: "a"}, name="letters")

def test_identity_is_bijective():
    assert injective(identity(THREE))
    assert surjective(identity(THREE))
    assert bijective(identity(ABC))

def test_non_injective_pair():
    f = by_formula(THREE, TWO, lambda x: x % 2)
    assert non_injective_pair(f) == (0, 2)
    assert not injective(f)
    assert surjective(f)

def test_unreached():
    f = by_formula(TWO, THREE, lambda x: x + 1)
    assert unreached(f) == 0
    assert injective(f)
    assert not surjective(f)

def test_properties_need_finite_carriers():
    with pytest.raises(InfiniteCarrierError):
        injective(by_formula(NAT, NAT, lambda n: n))

def test_inverse_of_bijection():
    f = letters()
    g = inverse_of(f)
    assert g.dom == ABC and g.cod == THREE
    assert [g(y) for y in ABC] == [2, 0, 1]
    assert is_inverse(f, g)
    assert comp(g, f) == identity(THREE)

def test_inverse_of_non_bijection():
    f = by_formula(THREE, TWO, lambda x: x % 2)
    with pytest.raises(NotBijectiveError) as info:
        inverse_of(f)
    assert info.value.counterexample == (0, 2)

def test_preimage():
    f = letters()
    assert preimage(f, "a") == 2

def test_is_inverse_rejects_one_sided():
    """A left inverse that is not a right inverse does not count"""
    f = by_formula(TWO, THREE, lambda x: x)
    g = by_formula(THREE, TWO, lambda y: min(y, 1))
    assert comp(g, f) == identity(TWO)
    assert not is_inverse(f, g)

def test_invertible_iff_bijective():
    for f in FunctionSpace(THREE, THREE).elements():
        assert invertible(f) == bijective(f)

def test_find_inverse():
    assert find_inverse(by_formula(THREE, TWO, lambda x: x % 2)) is None
    inv = find_inverse(letters())
    assert inv is not None and is_inverse(letters(), inv)
