"""
Intentionally false claims for testing the theorem checker.

ALL claims in this file should FAIL (counterexample expected).
This validates that the checker finds violations instead of proving
whatever it is handed.

Run with:
    python theorem_checker.py --thm-file benchmarks/theorems/buggy.py

Expected: every claim ends with a counterexample.
"""
from relfun.bijection import has_bijection
from relfun.diagonal import diagonalize
from relfun.function import comp
from relfun.properties import injective, surjective
from relfun.prover import Proof
from relfun.types import BOOL, FunctionSpace

# =============================================================================
# Confusing injective and surjective
# =============================================================================

def thm_buggy_surj_implies_inj(ctx):
    """BUG: Claims every surjective function is injective.

    Counterexample: any f : three -> two that hits both outputs
    """
    finite = ctx.refute("buggy_surj_implies_inj",
                        lambda f: not surjective(f) or injective(f),
                        ctx.functions("three", "two"))

    v = ctx.vocab
    A, B = v.sort("A"), v.sort("B")
    f = v.function("f", A, B)
    a1, a2 = v.const("a1", A), v.const("a2", A)
    symbolic = ctx.prove(Proof(
        name="buggy_surj_implies_inj",
        hypotheses=[v.chosen(f, v.section(f, "f_pre"))],
        goal=v.backend.Implies(f(a1) == f(a2), a1 == a2),
    ))
    return ctx.combine(finite, symbolic)


def thm_buggy_inj_implies_surj(ctx):
    """BUG: Claims every injective function is surjective.

    Counterexample: any f : two -> three
    """
    return ctx.refute("buggy_inj_implies_surj",
                      lambda f: not injective(f) or surjective(f),
                      ctx.functions("two", "three"))


# =============================================================================
# Composition in the wrong direction
# =============================================================================

def thm_buggy_comp_inj_outer(ctx):
    """BUG: Claims comp(g, f) injective forces g injective.

    Only f is forced. Counterexample: f : two -> three missing a point
    that g collapses.
    """
    return ctx.refute("buggy_comp_inj_outer",
                      lambda f, g: not injective(comp(g, f)) or injective(g),
                      ctx.functions("two", "three"), ctx.functions("three", "two"))


def thm_buggy_comp_surj_inner(ctx):
    """BUG: Claims comp(g, f) surjective forces f surjective.

    Only g is forced.
    """
    return ctx.refute("buggy_comp_surj_inner",
                      lambda f, g: not surjective(comp(g, f)) or surjective(f),
                      ctx.functions("two", "three"), ctx.functions("three", "two"))


# =============================================================================
# Diagonal without a twist
# =============================================================================

def thm_buggy_untwisted_diagonal(ctx):
    """BUG: Claims the plain diagonal a => f(a)(a) is never reached.

    Without a twist the diagonal can coincide with some f(a).
    Counterexample: f constant
    """
    three = ctx.carrier("three")
    space = FunctionSpace(three, FunctionSpace(three, BOOL))

    def missed(f):
        d = diagonalize(f, lambda c: c, name="d")
        return all(f(a) != d for a in three.elements())

    return ctx.refute("buggy_untwisted_diagonal", missed, space.elements())


# =============================================================================
# Bijections between carriers of different size
# =============================================================================

def thm_buggy_bijection_any_size(ctx):
    """BUG: Claims any two registered carriers are in bijection.

    Counterexample: two and three
    """
    carriers = list(ctx.universe)
    return ctx.refute("buggy_bijection_any_size",
                      lambda a, b: has_bijection(a, b, ctx.universe) is not None,
                      carriers, carriers)
