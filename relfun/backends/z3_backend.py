"""
Z3 backend implementation.
"""
import gc
import logging
from typing import Any, Dict

import z3

from .base import Backend

logger = logging.getLogger(__name__)


class Z3Backend(Backend):
    name = "z3"

    def __init__(self, timeout: int = 5000):
        """
        Args:
            timeout: Per-check solver timeout in milliseconds
        """
        self.timeout = timeout
        self.solver = None
        self.reset()

    def reset(self):
        """Reset the solver state"""
        if self.solver is not None:
            self.cleanup()
        self.solver = z3.Solver()
        self.solver.set(timeout=self.timeout)

    def cleanup(self):
        """Cleanup solver resources"""
        if self.solver is not None:
            self.solver = None
            gc.collect()

    def DeclareSort(self, name: str) -> Any:
        return z3.DeclareSort(name)

    def IntSort(self) -> Any:
        return z3.IntSort()

    def BoolSort(self) -> Any:
        return z3.BoolSort()

    def Const(self, name: str, sort) -> Any:
        return z3.Const(name, sort)

    def Int(self, name: str) -> Any:
        return z3.Int(name)

    def Bool(self, name: str) -> Any:
        return z3.Bool(name)

    def BoolVal(self, val: bool) -> Any:
        return z3.BoolVal(val)

    def Function(self, name: str, *sorts) -> Any:
        """Uninterpreted function; the last sort is the range"""
        return z3.Function(name, *sorts)

    def And(self, *args) -> Any:
        return z3.And(*args)

    def Or(self, *args) -> Any:
        return z3.Or(*args)

    def Not(self, arg) -> Any:
        return z3.Not(arg)

    def Implies(self, a, b) -> Any:
        return z3.Implies(a, b)

    def If(self, cond, t, f) -> Any:
        return z3.If(cond, t, f)

    def ForAll(self, vars, body) -> Any:
        return z3.ForAll(vars, body)

    def Exists(self, vars, body) -> Any:
        return z3.Exists(vars, body)

    def push(self):
        """Push a new scope for backtracking"""
        self.solver.push()

    def pop(self):
        """Pop the most recent scope"""
        self.solver.pop()

    def add(self, constraint):
        """Add constraint to current scope"""
        self.solver.add(constraint)

    def check(self) -> str:
        """Check satisfiability, returning 'sat', 'unsat' or 'unknown'"""
        result = str(self.solver.check())
        if result == 'unknown':
            logger.debug("z3 returned unknown: %s", self.solver.reason_unknown())
        return result

    def is_sat(self, result: str) -> bool:
        return result == 'sat'

    def is_unsat(self, result: str) -> bool:
        return result == 'unsat'

    def model(self) -> Dict[str, str]:
        """The current model as name -> printed value"""
        model = self.solver.model()
        return {decl.name(): str(model[decl]) for decl in model.decls()}

    def to_smt2(self) -> str:
        """The current assertions as an SMT-LIB2 benchmark"""
        return self.solver.to_smt2()
