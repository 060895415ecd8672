"""
Verdicts: the outcome of discharging one claim.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

PROVED = "proved"
COUNTEREXAMPLE = "counterexample"
UNKNOWN = "unknown"
TIMEOUT = "timeout"
ERROR = "error"

STATUSES = (PROVED, COUNTEREXAMPLE, UNKNOWN, TIMEOUT, ERROR)


@dataclass
class Verdict:
    """Result of checking a claim."""
    name: str
    status: str  # one of STATUSES
    method: str = ""  # "smt", "enumeration" or both joined with "+"
    counterexample: Optional[Dict[str, Any]] = None
    message: Optional[str] = None

    @property
    def proved(self) -> bool:
        return self.status == PROVED


def combine(name: str, *verdicts: Verdict) -> Verdict:
    """All parts proved gives proved; otherwise the first failing part wins."""
    for verdict in verdicts:
        if not verdict.proved:
            return Verdict(name=name, status=verdict.status, method=verdict.method,
                           counterexample=verdict.counterexample, message=verdict.message)
    return Verdict(name=name, status=PROVED, method="+".join(dict.fromkeys(v.method for v in verdicts)))
