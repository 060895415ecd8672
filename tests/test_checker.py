"""
Tests for the theorem checker and the bundled claims.
"""
from pathlib import Path

import pytest
from relfun import homework, lemmas
from relfun.checker import TheoremChecker, find_claims
from relfun.verdict import COUNTEREXAMPLE, PROVED, Verdict, combine

import theorem_checker

BUGGY = Path(__file__).resolve().parent.parent / "benchmarks" / "theorems" / "buggy.py"

LEMMAS = ["thm_app_rel", "thm_by_formula_ok", "thm_comp_ok", "thm_comp_assoc",
          "thm_comp_id_left", "thm_comp_id_right", "thm_id_inj", "thm_id_surj",
          "thm_surj_cancel", "thm_inj_cancel", "thm_bij_invertible",
          "thm_comp_invertible", "thm_uncomputable", "thm_cantor"]

def test_claims_are_found_in_order():
    assert [name for name, _ in find_claims(lemmas)] == LEMMAS
    assert [name for name, _ in find_claims(homework)] == [
        "thm_comp_inj", "thm_comp_surj", "thm_inv_then_inj", "thm_bij_equiv"]

@pytest.mark.parametrize("name,claim", find_claims(lemmas) + find_claims(homework))
def test_claim_is_proved(name, claim):
    checker = TheoremChecker(timeout=60)
    verdict = checker.check_claim(claim, name)
    assert verdict.status == PROVED, verdict.message
    assert "smt" in verdict.method
    assert "enumeration" in verdict.method

def test_buggy_claims_are_refuted():
    checker = TheoremChecker(timeout=60)
    results = checker.check_module(BUGGY)
    assert len(results) == 6
    for result in results:
        assert result.status == COUNTEREXAMPLE, result.name
        assert result.counterexample
    assert not checker.all_proved()

def test_counterexample_names_parameters():
    checker = TheoremChecker(timeout=60)
    results = checker.check_module(BUGGY)
    by_name = {r.name: r for r in results}
    assert set(by_name["thm_buggy_comp_inj_outer"].counterexample) == {"f", "g"}
    assert set(by_name["thm_buggy_bijection_any_size"].counterexample) == {"a", "b"}

def test_error_in_claim():
    def thm_broken(ctx):
        raise RuntimeError("boom")
    verdict = TheoremChecker().check_claim(thm_broken, "thm_broken")
    assert verdict.status == "error"
    assert "boom" in verdict.message

def test_claim_returning_non_verdict():
    def thm_bare_bool(ctx):
        return True
    checker = TheoremChecker()
    verdict = checker.check_claim(thm_bare_bool, "thm_bare_bool")
    assert verdict.status == "error"
    assert verdict.name == "thm_bare_bool"
    assert "bool" in verdict.message

def test_timeout_in_claim():
    def thm_slow(ctx):
        while True:
            pass
    verdict = TheoremChecker(timeout=0.5).check_claim(thm_slow, "thm_slow")
    assert verdict.status == "timeout"

def test_combine():
    ok = Verdict(name="a", status=PROVED, method="smt")
    ok2 = Verdict(name="b", status=PROVED, method="enumeration")
    bad = Verdict(name="c", status=COUNTEREXAMPLE, method="enumeration", counterexample={"x": 1})
    assert combine("t", ok, ok2, ok).method == "smt+enumeration"
    failed = combine("t", ok, bad)
    assert failed.status == COUNTEREXAMPLE
    assert failed.name == "t"
    assert failed.counterexample == {"x": 1}

def test_stats_table():
    checker = TheoremChecker(timeout=60)
    checker.check_claim(lemmas.thm_id_inj, "thm_id_inj")
    table = checker.stats.summary_table()
    assert table.startswith("## Proof Statistics")
    assert "thm_id_inj" in table
    assert "QED" in table
    assert "1/1 proved" in table

def test_cli_exit_codes(capsys):
    assert theorem_checker.main(["--thm-prefix", "thm_id_", "--stats"]) == 0
    out = capsys.readouterr().out
    assert "thm_id_inj" in out and "thm_id_surj" in out
    assert "## Proof Statistics" in out
    assert theorem_checker.main(["--thm-file", str(BUGGY), "--thm-prefix", "thm_buggy_inj"]) == 1
