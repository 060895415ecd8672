"""
Tests for the diagonal constructions.
"""
import pytest
from relfun.diagonal import (cantor, diagonalize, fixed_points, negation, successor,
                             uncomputable)
from relfun.errors import InfiniteCarrierError
from relfun.function import by_formula
from relfun.types import BOOL, NAT, FiniteType, FunctionSpace

THREE = FiniteType("three", (0, 1, 2))

def test_twists_have_no_fixed_points():
    assert fixed_points(negation, BOOL) == []
    assert all(successor(n) != n for n in range(100))

def test_uncomputable_diagonal():
    """k(n) = f(n)(n) + 1 differs from every f(n) at n"""
    f = by_formula(NAT, FunctionSpace(NAT, NAT),
                   lambda i: by_formula(NAT, NAT, lambda j: i * j))
    witness = uncomputable(f, limit=30)
    assert witness.checked == 30
    k = witness.diagonal
    assert k(5) == 26
    for n in range(30):
        assert f(n)(n) != k(n)

def test_uncomputable_requires_nat_enumeration():
    f = by_formula(THREE, FunctionSpace(THREE, THREE), lambda i: by_formula(THREE, THREE, lambda j: i))
    with pytest.raises(TypeError):
        uncomputable(f)

def test_cantor_every_enumeration():
    """No f : three -> (three -> bool) reaches its negated diagonal"""
    space = FunctionSpace(THREE, FunctionSpace(THREE, BOOL))
    for f in space.elements():
        witness = cantor(f)
        assert witness.checked == 3
        assert all(f(a) != witness.diagonal for a in THREE)

def test_cantor_on_naturals():
    f = by_formula(NAT, FunctionSpace(NAT, BOOL), lambda i: by_formula(NAT, BOOL, lambda j: j > i))
    with pytest.raises(InfiniteCarrierError):
        cantor(f)

def test_cantor_requires_predicates():
    f = by_formula(THREE, FunctionSpace(THREE, THREE), lambda i: by_formula(THREE, THREE, lambda j: i))
    with pytest.raises(TypeError):
        cantor(f)

def test_diagonal_with_fixed_point_twist():
    """Without a proper twist the diagonal can be reached"""
    space = FunctionSpace(THREE, BOOL)
    const = next(iter(space.elements()))
    f = by_formula(THREE, FunctionSpace(THREE, BOOL), lambda i: const)
    d = diagonalize(f, lambda c: c)
    assert f(0) == d

def test_diagonalize_type_error():
    f = by_formula(THREE, THREE, lambda x: x)
    with pytest.raises(TypeError):
        diagonalize(f, negation)
