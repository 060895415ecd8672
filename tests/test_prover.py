"""
Tests for the solver backend and step-by-step proofs.
"""
import pytest
from relfun.backends import Z3Backend, default_backend
from relfun.prover import Proof, Prover
from relfun.symbolic import Comp, Formula, Id

def test_default_backend_basic():
    backend = default_backend()
    x = backend.Int("x")
    y = backend.Int("y")
    backend.add(x + y == 10)
    backend.add(x > 0)
    backend.add(y > 0)
    assert backend.is_sat(backend.check())
    model = backend.model()
    assert int(model["x"]) + int(model["y"]) == 10

def test_default_backend_unsat():
    backend = default_backend()
    x = backend.Int("x")
    backend.add(backend.If(x > 0, x, -x) < 0)
    assert backend.is_unsat(backend.check())

def test_push_pop():
    backend = Z3Backend()
    x = backend.Int("x")
    backend.add(x > 0)
    backend.push()
    backend.add(x < 0)
    assert backend.is_unsat(backend.check())
    backend.pop()
    assert backend.is_sat(backend.check())

def test_entails():
    prover = Prover()
    b = prover.backend
    p, q = b.Bool("p"), b.Bool("q")
    result, model = prover.entails([p, b.Implies(p, q)], q)
    assert result == "unsat" and model is None
    result, model = prover.entails([b.Implies(p, q)], q)
    assert result == "sat"
    assert model["q"] == "False"

def test_proof_with_steps():
    """Injective functions compose"""
    prover = Prover()
    v = prover.vocab
    A, B, C = v.sort("A"), v.sort("B"), v.sort("C")
    f, g = v.function("f", A, B), v.function("g", B, C)
    a1, a2 = v.const("a1", A), v.const("a2", A)
    same = g(f(a1)) == g(f(a2))
    verdict = prover.prove(Proof(
        name="comp_inj",
        hypotheses=[v.injective(f), v.injective(g)],
        steps=[prover.backend.Implies(same, f(a1) == f(a2))],
        goal=prover.backend.Implies(same, a1 == a2),
    ))
    assert verdict.proved
    assert verdict.method == "smt"
    assert prover.obligations == 2

def test_false_goal_gives_counterexample():
    """Surjective does not imply injective"""
    prover = Prover()
    v = prover.vocab
    A, B = v.sort("A"), v.sort("B")
    f = v.function("f", A, B)
    a1, a2 = v.const("a1", A), v.const("a2", A)
    verdict = prover.prove(Proof(
        name="surj_inj",
        hypotheses=[v.chosen(f, v.section(f, "f_pre"))],
        goal=prover.backend.Implies(f(a1) == f(a2), a1 == a2),
    ))
    assert verdict.status == "counterexample"
    assert "a1" in verdict.counterexample

def test_failing_step_is_reported():
    prover = Prover()
    b = prover.backend
    x = b.Int("x")
    verdict = prover.prove(Proof(name="bad_step", hypotheses=[x > 0],
                                 steps=[x > 1], goal=x > -1))
    assert verdict.status == "counterexample"
    assert "step 1" in verdict.message

def test_identity_and_formula():
    prover = Prover()
    v = prover.vocab
    N = v.nat()
    double = Formula(lambda n: n + n, N, N, name="double")
    x = v.const("x", N)
    verdict = prover.prove(Proof(name="id_double",
                                 goal=Comp(Id(N), double)(x) == double(x)))
    assert verdict.proved

def test_comp_sort_mismatch():
    prover = Prover()
    v = prover.vocab
    A, B = v.sort("A"), v.sort("B")
    f = v.function("f", A, B)
    with pytest.raises(TypeError):
        Comp(f, f)

def test_dump_smt2(tmp_path):
    prover = Prover(dump_dir=str(tmp_path))
    b = prover.backend
    p = b.Bool("p")
    prover.prove(Proof(name="excluded_middle", goal=b.Or(p, b.Not(p))))
    dumped = tmp_path / "excluded_middle.smt2"
    assert dumped.exists()
    assert "assert" in dumped.read_text()
