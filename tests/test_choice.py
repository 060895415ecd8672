"""
Tests for the choice operator.
"""
import pytest
from relfun.choice import choice, choice_ok
from relfun.errors import NoWitnessError
from relfun.types import NAT, FiniteType

FOUR = FiniteType("four", (0, 1, 2, 3))

def test_choice_by_enumeration():
    """The first element in enumeration order is chosen"""
    assert choice(FOUR, lambda x: x > 1) == 2

def test_choice_satisfies_predicate():
    pred = lambda x: x % 2 == 1
    assert choice_ok(pred, choice(FOUR, pred))

def test_choice_with_witness():
    assert choice(FOUR, lambda x: x > 1, witness=lambda: 3) == 3

def test_choice_rejects_wrong_witness():
    with pytest.raises(NoWitnessError):
        choice(FOUR, lambda x: x > 1, witness=lambda: 0)
    with pytest.raises(NoWitnessError):
        choice(FOUR, lambda x: x > 1, witness=lambda: 7)

def test_choice_without_witness_fails():
    with pytest.raises(NoWitnessError):
        choice(FOUR, lambda x: x > 10)

def test_choice_on_naturals():
    assert choice(NAT, lambda n: n * n > 50) == 8

def test_choice_on_naturals_is_bounded():
    with pytest.raises(NoWitnessError):
        choice(NAT, lambda n: n > 500, limit=100)
    assert choice(NAT, lambda n: n > 500, limit=1000) == 501

def test_no_witness_error_is_lookup_error():
    with pytest.raises(LookupError):
        choice(FOUR, lambda x: False)
