"""
Homework: closure properties and "has a bijection to" as an equivalence.

    comp_inj      composition of injective functions is injective
    comp_surj     composition of surjective functions is surjective
    inv_then_inj  invertible functions are injective
    bij_equiv     has_bijection is reflexive, symmetric and transitive
"""
from .bijection import equivalence_report, inv_then_inj
from .checker import CheckContext
from .function import comp
from .properties import injective, surjective
from .prover import Proof
from .symbolic import Comp, Id, Vocabulary
from .verdict import COUNTEREXAMPLE, PROVED, Verdict


def _comp_inj_proof(v: Vocabulary, name: str, extra=()) -> Proof:
    A, B, C = v.sort("A"), v.sort("B"), v.sort("C")
    f, g = v.function("f", A, B), v.function("g", B, C)
    a1, a2 = v.const("a1", A), v.const("a2", A)
    same_output = g(f(a1)) == g(f(a2))
    return Proof(
        name=name,
        hypotheses=[v.injective(f), v.injective(g), *extra],
        # outer injectivity first, then inner
        steps=[v.backend.Implies(same_output, f(a1) == f(a2))],
        goal=v.backend.Implies(same_output, a1 == a2),
    )


def _comp_surj_proof(v: Vocabulary, name: str, extra=()) -> Proof:
    A, B, C = v.sort("A"), v.sort("B"), v.sort("C")
    f, g = v.function("f", A, B), v.function("g", B, C)
    f_pre, g_pre = v.section(f, "f_pre"), v.section(g, "g_pre")
    c0 = v.const("c0", C)
    return Proof(
        name=name,
        hypotheses=[v.chosen(f, f_pre), v.chosen(g, g_pre), *extra],
        steps=[
            g(g_pre(c0)) == c0,
            f(f_pre(g_pre(c0))) == g_pre(c0),
            g(f(f_pre(g_pre(c0)))) == c0,
        ],
        goal=v.reaches(Comp(g, f), c0),
    )


def thm_comp_inj(ctx: CheckContext) -> Verdict:
    """Composing two injective functions gives an injective function."""
    symbolic = ctx.prove(_comp_inj_proof(ctx.vocab, "comp_inj"))

    def preserved(f, g):
        return injective(comp(g, f))

    f_space = [f for f in ctx.functions("three", "four") if injective(f)]
    g_space = [g for g in ctx.functions("four", "five") if injective(g)]
    finite = ctx.refute("comp_inj", preserved, f_space, g_space)
    return ctx.combine(symbolic, finite)


def thm_comp_surj(ctx: CheckContext) -> Verdict:
    """Composing two surjective functions gives a surjective function."""
    symbolic = ctx.prove(_comp_surj_proof(ctx.vocab, "comp_surj"))

    def preserved(f, g):
        return surjective(comp(g, f))

    f_space = [f for f in ctx.functions("four", "three") if surjective(f)]
    g_space = [g for g in ctx.functions("three", "two") if surjective(g)]
    finite = ctx.refute("comp_surj", preserved, f_space, g_space)
    return ctx.combine(symbolic, finite)


def thm_inv_then_inj(ctx: CheckContext) -> Verdict:
    """A function with a two-sided inverse is injective."""
    v = ctx.vocab
    A, B = v.sort("A"), v.sort("B")
    f, g = v.function("f", A, B), v.function("g", B, A)
    a1, a2 = v.const("a1", A), v.const("a2", A)
    symbolic = ctx.prove(Proof(
        name="inv_then_inj",
        hypotheses=[v.inverse(f, g)],
        # cancel g on both sides of f(a1) = f(a2)
        steps=[
            g(f(a1)) == a1,
            g(f(a2)) == a2,
        ],
        goal=v.backend.Implies(f(a1) == f(a2), a1 == a2),
    ))

    finite = ctx.refute("inv_then_inj", inv_then_inj,
                        ctx.functions("three", "abc"), ctx.functions("abc", "three"))
    return ctx.combine(symbolic, finite)


def thm_bij_equiv(ctx: CheckContext) -> Verdict:
    """has_bijection is an equivalence relation on the carriers of the universe."""
    v, b = ctx.vocab, ctx.prover.backend

    A = v.sort("A")
    a1, a2, a0 = v.const("a1", A), v.const("a2", A), v.const("a0", A)
    reflexive = ctx.prove(Proof(
        name="bij_equiv_reflexive",
        steps=[Id(A)(a0) == a0],
        goal=b.And(b.Implies(Id(A)(a1) == Id(A)(a2), a1 == a2), v.reaches(Id(A), a0)),
    ))

    # the inverse of f : A -> B is its chosen section, which is injective ...
    B = v.sort("B")
    f = v.function("f", A, B)
    f_pre = v.section(f, "f_pre")
    b1, b2 = v.const("b1", B), v.const("b2", B)
    bijection = [v.injective(f), v.chosen(f, f_pre)]
    symmetric_inj = ctx.prove(Proof(
        name="bij_equiv_symmetric_inj",
        hypotheses=bijection,
        steps=[f(f_pre(b1)) == b1, f(f_pre(b2)) == b2],
        goal=b.Implies(f_pre(b1) == f_pre(b2), b1 == b2),
    ))
    # ... and surjective, every a0 being the chosen preimage of f(a0)
    symmetric_surj = ctx.prove(Proof(
        name="bij_equiv_symmetric_surj",
        hypotheses=bijection,
        steps=[f(f_pre(f(a0))) == f(a0), f_pre(f(a0)) == a0],
        goal=v.reaches(f_pre, a0),
    ))

    C = v.sort("C")
    g = v.function("g", B, C)
    g_pre = v.section(g, "g_pre")
    transitive_inj = ctx.prove(_comp_inj_proof(
        v, "bij_equiv_transitive_inj", extra=[v.chosen(f, f_pre), v.chosen(g, g_pre)]))
    transitive_surj = ctx.prove(_comp_surj_proof(
        v, "bij_equiv_transitive_surj", extra=[v.injective(f), v.injective(g)]))

    failure = equivalence_report(ctx.universe)
    if failure is None:
        finite = Verdict(name="bij_equiv", status=PROVED, method="enumeration",
                         message=f"{len(ctx.universe)} carriers")
    else:
        law, carriers = failure
        finite = Verdict(name="bij_equiv", status=COUNTEREXAMPLE, method="enumeration",
                         counterexample={"law": law, "carriers": [c.name for c in carriers]})
    ctx.record(finite)

    return ctx.combine(reflexive, symmetric_inj, symmetric_surj,
                       transitive_inj, transitive_surj, finite)
