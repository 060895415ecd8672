"""
Step-by-step proofs checked by an SMT solver.

A proof is a list of hypotheses, a list of intermediate steps and a goal.
Every step has to follow from the hypotheses and the steps before it, and
then the goal has to follow from all of them. "Follows" means the solver
finds the hypotheses together with the negated step unsatisfiable. Steps
play the role of tactic steps: they pin down the instantiations (which
preimage, which input) that the argument needs.

Universally quantified goals are stated about fresh constants, as after
"intros": a proof for an arbitrary constant is a proof for every value.
Surjectivity hypotheses are taken in chosen form, a section s with
f(s(y)) = y; that is the choice operator at the level of sorts.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Tuple

from .backends import Backend, default_backend
from .symbolic import Vocabulary
from .verdict import COUNTEREXAMPLE, PROVED, UNKNOWN, Verdict

logger = logging.getLogger(__name__)


@dataclass
class Proof:
    name: str
    goal: Any
    hypotheses: List[Any] = field(default_factory=list)
    steps: List[Any] = field(default_factory=list)


class Prover:
    def __init__(self, backend: Optional[Backend] = None, dump_dir: Optional[str] = None):
        """
        Args:
            backend: Solver backend, the default backend when omitted
            dump_dir: If set, every obligation is written there as SMT-LIB2
        """
        self.backend = backend or default_backend()
        self.vocab = Vocabulary(self.backend)
        self.dump_dir = Path(dump_dir) if dump_dir else None
        self.obligations = 0

    def entails(self, premises: List[Any], conclusion: Any, label: str = "goal") -> Tuple[str, Optional[dict]]:
        """Check premises |= conclusion.

        Returns:
            ('unsat', None) when it follows, ('sat', model) when the
            premises admit a model where it fails, ('unknown', None) otherwise
        """
        self.backend.push()
        try:
            for premise in premises:
                self.backend.add(premise)
            self.backend.add(self.backend.Not(conclusion))
            self._dump(label)
            result = self.backend.check()
            model = self.backend.model() if self.backend.is_sat(result) else None
        finally:
            self.backend.pop()
        self.obligations += 1
        return result, model

    def prove(self, proof: Proof) -> Verdict:
        known = list(proof.hypotheses)
        for index, step in enumerate(proof.steps, start=1):
            result, model = self.entails(known, step, label=f"{proof.name}_step{index}")
            if result != 'unsat':
                logger.info("%s: step %d not established (%s)", proof.name, index, result)
                return self._failure(proof.name, result, model, f"step {index} does not follow: {step}")
            known.append(step)

        result, model = self.entails(known, proof.goal, label=proof.name)
        if result == 'unsat':
            logger.debug("%s: proved with %d steps", proof.name, len(proof.steps))
            return Verdict(name=proof.name, status=PROVED, method="smt")
        return self._failure(proof.name, result, model, f"goal does not follow: {proof.goal}")

    def _failure(self, name: str, result: str, model: Optional[dict], message: str) -> Verdict:
        if result == 'sat':
            return Verdict(name=name, status=COUNTEREXAMPLE, method="smt",
                           counterexample=model, message=message)
        return Verdict(name=name, status=UNKNOWN, method="smt", message=message)

    def _dump(self, label: str):
        if self.dump_dir is None:
            return
        self.dump_dir.mkdir(parents=True, exist_ok=True)
        path = self.dump_dir / f"{label}.smt2"
        path.write_text(self.backend.to_smt2())
        logger.debug("wrote %s", path)
