"""
Definitions-level lemmas about Functions as relations.

Each thm_* claim proves its statement for every type with the solver and
refutes it exhaustively on the small carriers of the universe.
"""
from .checker import CheckContext
from .diagonal import cantor, negation, successor, uncomputable
from .function import Function, by_formula, comp, identity
from .properties import bijective, find_inverse, injective, inverse_of, invertible, is_inverse, surjective
from .prover import Proof
from .symbolic import Comp, Id
from .types import BOOL, NAT, FunctionSpace
from .verdict import Verdict


def thm_app_rel(ctx: CheckContext) -> Verdict:
    """app(f, x) = y exactly when f relates x to y."""
    v, b = ctx.vocab, ctx.prover.backend
    A, B = v.sort("A"), v.sort("B")
    R = v.relation("R", A, B)
    app_R = v.function("app_R", A, B)
    x0, y0 = v.const("x0", A), v.const("y0", B)
    symbolic = ctx.prove(Proof(
        name="app_rel",
        hypotheses=[v.total(R, A, B), v.functional(R, A, B), v.choice_ok(R, app_R)],
        steps=[
            R(x0, app_R(x0)),
            b.Implies(R(x0, y0), y0 == app_R(x0)),
        ],
        goal=(app_R(x0) == y0) == R(x0, y0),
    ))

    # the same graphs, but given only as relations, so app has to search
    three, four = ctx.carrier("three"), ctx.carrier("four")
    relational = [Function(f.dom, f.cod, f.rel, name=f"rel{i}")
                  for i, f in enumerate(ctx.functions("three", "four"))]
    finite = ctx.refute("app_rel", lambda f, x, y: (f(x) == y) == f.rel(x, y),
                        relational, three.elements(), four.elements())

    squares = Function(three, NAT, lambda x, y: y == x * x + 3,
                       search_limit=ctx.search_limit, name="square_plus_3")
    infinite = ctx.refute("app_rel", lambda f, x, y: (f(x) == y) == f.rel(x, y),
                          [squares], three.elements(), range(20))
    return ctx.combine(symbolic, finite, infinite)


def thm_by_formula_ok(ctx: CheckContext) -> Verdict:
    """app(by_formula(g), x) = g(x)."""
    v = ctx.vocab
    A, B = v.sort("A"), v.sort("B")
    g = v.function("g", A, B)
    app_g = v.function("app_g", A, B)
    x0 = v.const("x0", A)
    symbolic = ctx.prove(Proof(
        name="by_formula_ok",
        hypotheses=[v.choice_ok(lambda x, y: g(x) == y, app_g)],
        goal=app_g(x0) == g(x0),
    ))

    three = ctx.carrier("three")
    formulas = [lambda x: x, lambda x: (x + 1) % 3, lambda x: 2 - x, lambda x: 0]
    finite = ctx.refute("by_formula_ok",
                        lambda g, x: by_formula(three, three, g)(x) == g(x),
                        formulas, three.elements())
    arithmetic = [lambda n: n + 1, lambda n: 2 * n, lambda n: n * n, lambda n: n // 2]
    infinite = ctx.refute("by_formula_ok",
                          lambda g, n: by_formula(NAT, NAT, g)(n) == g(n),
                          arithmetic, range(50))
    return ctx.combine(symbolic, finite, infinite)


def thm_comp_ok(ctx: CheckContext) -> Verdict:
    """app(comp(g, f), a) = app(g, app(f, a))."""
    v = ctx.vocab
    A, B, C = v.sort("A"), v.sort("B"), v.sort("C")
    f, g = v.function("f", A, B), v.function("g", B, C)
    app_gf = v.function("app_gf", A, C)
    a0 = v.const("a0", A)
    # comp(g, f) is by_formula(x => g(f(x))), applied through choice
    symbolic = ctx.prove(Proof(
        name="comp_ok",
        hypotheses=[v.choice_ok(lambda x, y: g(f(x)) == y, app_gf)],
        goal=app_gf(a0) == g(f(a0)),
    ))

    finite = ctx.refute("comp_ok", lambda f, g, a: comp(g, f)(a) == g(f(a)),
                        ctx.functions("three", "two"), ctx.functions("two", "three"),
                        ctx.carrier("three").elements())
    return ctx.combine(symbolic, finite)


def thm_comp_assoc(ctx: CheckContext) -> Verdict:
    """comp(f, comp(g, h)) = comp(comp(f, g), h)."""
    v = ctx.vocab
    A, B, C, D = v.sort("A"), v.sort("B"), v.sort("C"), v.sort("D")
    h, g, f = v.function("h", A, B), v.function("g", B, C), v.function("f", C, D)
    symbolic = ctx.prove(Proof(
        name="comp_assoc",
        goal=v.equal(Comp(f, Comp(g, h)), Comp(Comp(f, g), h)),
    ))

    finite = ctx.refute("comp_assoc",
                        lambda f, g, h: comp(f, comp(g, h)) == comp(comp(f, g), h),
                        ctx.functions("two", "two"), ctx.functions("three", "two"),
                        ctx.functions("two", "three"))
    return ctx.combine(symbolic, finite)


def thm_comp_id_left(ctx: CheckContext) -> Verdict:
    """comp(id, f) = f."""
    v = ctx.vocab
    A, B = v.sort("A"), v.sort("B")
    f = v.function("f", A, B)
    symbolic = ctx.prove(Proof(name="comp_id_left", goal=v.equal(Comp(Id(B), f), f)))

    two = ctx.carrier("two")
    finite = ctx.refute("comp_id_left", lambda f: comp(identity(two), f) == f,
                        ctx.functions("three", "two"))
    return ctx.combine(symbolic, finite)


def thm_comp_id_right(ctx: CheckContext) -> Verdict:
    """comp(f, id) = f."""
    v = ctx.vocab
    A, B = v.sort("A"), v.sort("B")
    f = v.function("f", A, B)
    symbolic = ctx.prove(Proof(name="comp_id_right", goal=v.equal(Comp(f, Id(A)), f)))

    three = ctx.carrier("three")
    finite = ctx.refute("comp_id_right", lambda f: comp(f, identity(three)) == f,
                        ctx.functions("three", "two"))
    return ctx.combine(symbolic, finite)


def thm_id_inj(ctx: CheckContext) -> Verdict:
    """The identity is injective."""
    v = ctx.vocab
    A = v.sort("A")
    symbolic = ctx.prove(Proof(name="id_inj", goal=v.injective(Id(A))))
    finite = ctx.refute("id_inj", lambda carrier: injective(identity(carrier)), list(ctx.universe))
    return ctx.combine(symbolic, finite)


def thm_id_surj(ctx: CheckContext) -> Verdict:
    """The identity is surjective."""
    v = ctx.vocab
    A = v.sort("A")
    y0 = v.const("y0", A)
    symbolic = ctx.prove(Proof(
        name="id_surj",
        steps=[Id(A)(y0) == y0],
        goal=v.reaches(Id(A), y0),
    ))
    finite = ctx.refute("id_surj", lambda carrier: surjective(identity(carrier)), list(ctx.universe))
    return ctx.combine(symbolic, finite)


def thm_surj_cancel(ctx: CheckContext) -> Verdict:
    """A surjective f is right-cancellable: comp(g, f) = comp(h, f) implies g = h."""
    v = ctx.vocab
    A, B, C = v.sort("A"), v.sort("B"), v.sort("C")
    f = v.function("f", A, B)
    g, h = v.function("g", B, C), v.function("h", B, C)
    s = v.section(f, "f_pre")
    b0 = v.const("b0", B)
    symbolic = ctx.prove(Proof(
        name="surj_cancel",
        hypotheses=[v.chosen(f, s), v.equal(Comp(g, f), Comp(h, f))],
        steps=[
            f(s(b0)) == b0,
            g(f(s(b0))) == h(f(s(b0))),
        ],
        goal=g(b0) == h(b0),
    ))

    def cancels(f, g, h):
        if not surjective(f) or comp(g, f) != comp(h, f):
            return True
        return g == h

    finite = ctx.refute("surj_cancel", cancels,
                        ctx.functions("three", "two"), ctx.functions("two", "three"),
                        ctx.functions("two", "three"))
    return ctx.combine(symbolic, finite)


def thm_inj_cancel(ctx: CheckContext) -> Verdict:
    """An injective f is left-cancellable: comp(f, g) = comp(f, h) implies g = h."""
    v = ctx.vocab
    A, B, C = v.sort("A"), v.sort("B"), v.sort("C")
    f = v.function("f", B, C)
    g, h = v.function("g", A, B), v.function("h", A, B)
    a0 = v.const("a0", A)
    symbolic = ctx.prove(Proof(
        name="inj_cancel",
        hypotheses=[v.injective(f), v.equal(Comp(f, g), Comp(f, h))],
        steps=[f(g(a0)) == f(h(a0))],
        goal=g(a0) == h(a0),
    ))

    def cancels(f, g, h):
        if not injective(f) or comp(f, g) != comp(f, h):
            return True
        return g == h

    finite = ctx.refute("inj_cancel", cancels,
                        ctx.functions("two", "three"), ctx.functions("three", "two"),
                        ctx.functions("three", "two"))
    return ctx.combine(symbolic, finite)


def thm_bij_invertible(ctx: CheckContext) -> Verdict:
    """An injective and surjective f is invertible; its inverse picks preimages."""
    v = ctx.vocab
    A, B = v.sort("A"), v.sort("B")
    f = v.function("f", A, B)
    s = v.section(f, "f_pre")
    a0, b0 = v.const("a0", A), v.const("b0", B)
    symbolic = ctx.prove(Proof(
        name="bij_invertible",
        hypotheses=[v.injective(f), v.chosen(f, s)],
        steps=[
            f(s(f(a0))) == f(a0),
            s(f(a0)) == a0,
        ],
        goal=ctx.prover.backend.And(f(s(b0)) == b0, s(f(a0)) == a0),
    ))

    def inverts(f):
        if not bijective(f):
            return True
        return invertible(f) and is_inverse(f, inverse_of(f))

    finite = ctx.refute("bij_invertible", inverts,
                        ctx.functions("three", "abc") + ctx.functions("two", "bool"))
    return ctx.combine(symbolic, finite)


def thm_comp_invertible(ctx: CheckContext) -> Verdict:
    """comp(f, g) is invertible with inverse comp(g_inv, f_inv)."""
    v = ctx.vocab
    A, B, C = v.sort("A"), v.sort("B"), v.sort("C")
    g, g_inv = v.function("g", A, B), v.function("g_inv", B, A)
    f, f_inv = v.function("f", B, C), v.function("f_inv", C, B)
    a0, c0 = v.const("a0", A), v.const("c0", C)
    symbolic = ctx.prove(Proof(
        name="comp_invertible",
        hypotheses=[v.inverse(f, f_inv), v.inverse(g, g_inv)],
        steps=[
            g(g_inv(f_inv(c0))) == f_inv(c0),
            f(f_inv(c0)) == c0,
            f_inv(f(g(a0))) == g(a0),
            g_inv(g(a0)) == a0,
        ],
        goal=ctx.prover.backend.And(
            Comp(Comp(f, g), Comp(g_inv, f_inv))(c0) == c0,
            Comp(Comp(g_inv, f_inv), Comp(f, g))(a0) == a0,
        ),
    ))

    def composes(g, f):
        g_inv, f_inv = find_inverse(g), find_inverse(f)
        if g_inv is None or f_inv is None:
            return True
        return is_inverse(comp(f, g), comp(g_inv, f_inv))

    finite = ctx.refute("comp_invertible", composes,
                        ctx.functions("three", "abc"), ctx.functions("abc", "three"))
    return ctx.combine(symbolic, finite)


def thm_uncomputable(ctx: CheckContext) -> Verdict:
    """No f : nat -> (nat -> nat) is surjective: k(n) = f(n)(n) + 1 is never reached."""
    v, b = ctx.vocab, ctx.prover.backend
    N = v.nat()
    n = v.const("n", N)
    no_fixed_point = ctx.prove(Proof(name="successor_no_fixed_point", goal=n != n + 1))

    F = v.family("f", N, N, N)
    n0, m = v.const("n0", N), v.fresh(N, "m")
    # surjectivity, specialised to k: some n0 has f(n0) = k
    hits_diagonal = b.ForAll([m], b.Implies(m >= 0, F(n0)(m) == F(m)(m) + 1))
    symbolic = ctx.prove(Proof(
        name="uncomputable",
        hypotheses=[n0 >= 0, hits_diagonal],
        steps=[F(n0)(n0) == F(n0)(n0) + 1],
        goal=b.BoolVal(False),
    ))

    space = FunctionSpace(NAT, NAT)
    enumerations = [
        by_formula(NAT, space, lambda i: by_formula(NAT, NAT, lambda j: i * j), name="products"),
        by_formula(NAT, space, lambda i: by_formula(NAT, NAT, lambda j: i), name="constants"),
        by_formula(NAT, space, lambda i: by_formula(NAT, NAT, lambda j: i + j), name="shifts"),
        by_formula(NAT, space, lambda i: by_formula(NAT, NAT, lambda j: j * j % (i + 1)), name="residues"),
    ]
    limit = ctx.diagonal_limit
    concrete = ctx.refute("uncomputable",
                          lambda f: uncomputable(f, limit).checked == limit,
                          enumerations)
    twist = ctx.refute("uncomputable", lambda n: successor(n) != n, range(limit))
    return ctx.combine(no_fixed_point, symbolic, concrete, twist)


def thm_cantor(ctx: CheckContext) -> Verdict:
    """No f : A -> (A -> bool) is surjective: g(a) = not f(a)(a) is never reached."""
    v, b = ctx.vocab, ctx.prover.backend
    Bool = v.boolean()
    p = v.const("p", Bool)
    no_fixed_point = ctx.prove(Proof(name="negation_no_fixed_point", goal=p != b.Not(p)))

    A = v.sort("A")
    F = v.family("f", A, A, Bool)
    a0, x = v.const("a0", A), v.fresh(A)
    # surjectivity, specialised to g: some a0 has f(a0) = g
    hits_diagonal = b.ForAll([x], F(a0)(x) == b.Not(F(x)(x)))
    symbolic = ctx.prove(Proof(
        name="cantor",
        hypotheses=[hits_diagonal],
        steps=[F(a0)(a0) == b.Not(F(a0)(a0))],
        goal=b.BoolVal(False),
    ))

    three = ctx.carrier("three")

    def misses_diagonal(f):
        witness = cantor(f)
        return (not surjective(f)
                and witness.checked == three.size
                and all(f(a) != witness.diagonal for a in three.elements()))

    finite = ctx.refute("cantor", misses_diagonal,
                        FunctionSpace(three, FunctionSpace(three, BOOL)).elements())
    twist = ctx.refute("cantor", lambda c: negation(c) != c, BOOL.elements())
    return ctx.combine(no_fixed_point, symbolic, finite, twist)
