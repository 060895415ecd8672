from .types import Carrier, FiniteType, Naturals, FunctionSpace, Universe, BOOL, NAT, default_universe
from .choice import choice, choice_ok
from .function import Function, app, by_formula, comp, identity
from .properties import injective, surjective, bijective, invertible, is_inverse, inverse_of, find_inverse, preimage
from .diagonal import diagonalize, uncomputable, cantor, successor, negation
from .bijection import Bijection, has_bijection, bij_refl, bij_sym, bij_trans, inv_then_inj, equivalence_report
from .prover import Proof, Prover
from .verdict import Verdict
from .checker import CheckContext, TheoremChecker

__version__ = "0.1.0"
