"""
Discharging claims.

A claim is a function named thm_* that takes a CheckContext and returns a
Verdict. Most claims prove their statement symbolically for every type and
also refute it exhaustively on the small carriers of the universe; the
claim holds only if both agree.
"""
import importlib.util
import inspect
import logging
from itertools import product
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from func_timeout import FunctionTimedOut, func_timeout

from .backends import default_backend
from .choice import DEFAULT_SEARCH_LIMIT
from .prover import Proof, Prover
from .stats import ProofStats
from .types import Carrier, FunctionSpace, Universe, default_universe
from .verdict import COUNTEREXAMPLE, ERROR, PROVED, TIMEOUT, Verdict, combine

logger = logging.getLogger(__name__)


class CheckContext:
    """What a claim gets to work with."""

    def __init__(self, prover: Prover, universe: Universe, claim: str = "?",
                 stats: Optional[ProofStats] = None,
                 search_limit: int = DEFAULT_SEARCH_LIMIT,
                 diagonal_limit: int = 100):
        self.prover = prover
        self.universe = universe
        self.claim = claim
        self.stats = stats
        self.search_limit = search_limit
        self.diagonal_limit = diagonal_limit
        self._spaces: Dict[Tuple[str, str], List[Any]] = {}

    @property
    def vocab(self):
        return self.prover.vocab

    def carrier(self, name: str) -> Carrier:
        return self.universe[name]

    def functions(self, dom: str, cod: str) -> List[Any]:
        """Every Function between two registered carriers, cached per run."""
        key = (dom, cod)
        if key not in self._spaces:
            space = FunctionSpace(self.carrier(dom), self.carrier(cod))
            self._spaces[key] = list(space.elements())
        return self._spaces[key]

    def prove(self, proof: Proof) -> Verdict:
        verdict = self.prover.prove(proof)
        self.record(verdict)
        return verdict

    def refute(self, name: str, claim: Callable[..., bool], *spaces: Sequence[Any]) -> Verdict:
        """Check claim on every combination drawn from spaces.

        Args:
            name: Reported name of this part of the claim
            claim: Predicate taking one value per space
            spaces: Finite collections of candidate values

        Returns:
            A proved verdict, or a counterexample naming the failing values
            after the claim's parameters
        """
        labels = list(inspect.signature(claim).parameters)
        instances = 0
        for values in product(*spaces):
            instances += 1
            if not claim(*values):
                verdict = Verdict(name=name, status=COUNTEREXAMPLE, method="enumeration",
                                  counterexample=dict(zip(labels, values)),
                                  message=f"fails on instance {instances}")
                self.record(verdict)
                return verdict
        verdict = Verdict(name=name, status=PROVED, method="enumeration",
                          message=f"{instances} instances")
        self.record(verdict)
        return verdict

    def combine(self, *verdicts: Verdict) -> Verdict:
        return combine(self.claim, *verdicts)

    def record(self, verdict: Verdict):
        if self.stats is not None:
            self.stats.add(self.claim, verdict)


ClaimSource = Union[str, Path, ModuleType]


def load_module(path: Union[str, Path]) -> ModuleType:
    path = Path(path)
    spec = importlib.util.spec_from_file_location(path.stem, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot load claims from {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def find_claims(module: ModuleType, prefix: str = "thm_") -> List[Tuple[str, Callable]]:
    """Claim functions of a module, in definition order."""
    claims = []
    for name, obj in vars(module).items():
        if name.startswith(prefix) and inspect.isfunction(obj) and obj.__module__ == module.__name__:
            claims.append((name, obj))
    return claims


class TheoremChecker:
    def __init__(self,
                 timeout: float = 10,
                 solver_timeout: int = 5000,
                 search_limit: int = DEFAULT_SEARCH_LIMIT,
                 diagonal_limit: int = 100,
                 dump_dir: Optional[str] = None,
                 universe: Optional[Universe] = None):
        """
        Args:
            timeout: Wall-clock seconds allowed per claim
            solver_timeout: Milliseconds allowed per solver check
            search_limit: Bound for choice on infinite carriers
            diagonal_limit: Indices inspected by the concrete diagonal checks
            dump_dir: Write every solver obligation there as SMT-LIB2
            universe: Carriers used by the exhaustive checks
        """
        self.timeout = timeout
        self.solver_timeout = solver_timeout
        self.search_limit = search_limit
        self.diagonal_limit = diagonal_limit
        self.dump_dir = dump_dir
        self.universe = universe or default_universe()
        self.results: List[Verdict] = []
        self.stats = ProofStats()

    def context(self, claim: str) -> CheckContext:
        prover = Prover(default_backend(timeout=self.solver_timeout), dump_dir=self.dump_dir)
        return CheckContext(prover, self.universe, claim=claim, stats=self.stats,
                            search_limit=self.search_limit, diagonal_limit=self.diagonal_limit)

    def check_claim(self, claim: Callable[[CheckContext], Verdict], name: str) -> Verdict:
        """Discharge a single claim."""
        ctx = self.context(name)
        try:
            verdict = func_timeout(self.timeout, claim, args=(ctx,))
        except FunctionTimedOut:
            verdict = Verdict(name=name, status=TIMEOUT,
                              message=f"not discharged within {self.timeout}s")
        except Exception as e:
            logger.exception("claim %s raised", name)
            verdict = Verdict(name=name, status=ERROR, message=f"{type(e).__name__}: {e}")
        if not isinstance(verdict, Verdict):
            logger.error("claim %s returned %r instead of a Verdict", name, verdict)
            verdict = Verdict(name=name, status=ERROR,
                              message=f"claim returned {type(verdict).__name__}, not a Verdict")
        if verdict.name != name:
            verdict.name = name
        self.stats.finish(verdict)
        return verdict

    def check_module(self, source: ClaimSource, prefix: str = "thm_") -> List[Verdict]:
        """Discharge every claim of a module or of a Python file."""
        module = source if isinstance(source, ModuleType) else load_module(source)
        results = []
        for name, claim in find_claims(module, prefix):
            print(f"\n{'='*60}")
            print(f"Checking {name}")
            print(f"{'='*60}")
            doc = inspect.getdoc(claim)
            if doc:
                print(doc.splitlines()[0])

            result = self.check_claim(claim, name)
            results.append(result)
            self.results.append(result)
            self._print_result(result)
        return results

    def all_proved(self) -> bool:
        return all(result.proved for result in self.results)

    def _print_result(self, result: Verdict):
        if result.status == "counterexample":
            print(f"  ✗ COUNTEREXAMPLE ({result.method}):")
            for param, value in (result.counterexample or {}).items():
                print(f"    {param} = {value!r}")
            if result.message:
                print(f"    {result.message}")
        elif result.status == "proved":
            print(f"  ✓ Proved ({result.method})")
        elif result.status == "timeout":
            print(f"  ? Timeout: {result.message}")
        elif result.status == "unknown":
            print(f"  ? Unknown ({result.method}): {result.message}")
        elif result.status == "error":
            print(f"  ! Error: {result.message}")

    def print_summary(self):
        """Print summary of all verdicts."""
        print(f"\n{'='*60}")
        print("SUMMARY")
        print(f"{'='*60}")

        by_status: Dict[str, List[Verdict]] = {}
        for result in self.results:
            by_status.setdefault(result.status, []).append(result)

        print(f"Total claims checked: {len(self.results)}")
        print(f"  ✓ Proved: {len(by_status.get('proved', []))}")
        print(f"  ✗ Counterexamples: {len(by_status.get('counterexample', []))}")
        print(f"  ? Unknown: {len(by_status.get('unknown', []))}")
        print(f"  ? Timeouts: {len(by_status.get('timeout', []))}")
        print(f"  ! Errors: {len(by_status.get('error', []))}")

        failed = [r for r in self.results if not r.proved]
        if failed:
            print("\nClaims not proved:")
            for r in failed:
                print(f"  - {r.name}: {r.status}")
