"""
Proof statistics tracking.

Tracks per-claim, per-method outcomes so a run can be summarized as a
markdown table.
"""
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional

from .verdict import Verdict


@dataclass
class MethodResult:
    """Result from a single method on a claim."""
    claim: str
    method: str  # 'smt' or 'enumeration'
    status: str
    message: Optional[str] = None


class ProofStats:
    """Collects and reports per-method results across claims."""

    def __init__(self):
        self.results: List[MethodResult] = []
        self._claim_methods: Dict[str, Dict[str, MethodResult]] = defaultdict(dict)
        self._final: Dict[str, str] = {}

    def add(self, claim: str, verdict: Verdict):
        """Record the outcome of one method on a claim."""
        result = MethodResult(claim=claim, method=verdict.method,
                              status=verdict.status, message=verdict.message)
        self.results.append(result)
        previous = self._claim_methods[claim].get(verdict.method)
        # a claim may run a method several times; keep the worst outcome
        if previous is None or previous.status == "proved":
            self._claim_methods[claim][verdict.method] = result

    def finish(self, verdict: Verdict):
        """Record the combined verdict of a claim."""
        self._claim_methods.setdefault(verdict.name, {})
        self._final[verdict.name] = verdict.status

    def get_methods(self) -> List[str]:
        return sorted({result.method for result in self.results})

    def get_claims(self) -> List[str]:
        return list(self._claim_methods.keys())

    def summary_table(self) -> str:
        """Generate a markdown table of results."""
        claims = self.get_claims()
        if not claims:
            return "No claims recorded.\n"

        methods = self.get_methods()
        headers = ["Claim"] + methods + ["Verdict"]
        data_rows = []
        for claim in claims:
            row = [claim]
            for method in methods:
                result = self._claim_methods[claim].get(method)
                row.append(self._status_symbol(result.status) if result else "-")
            row.append(self._status_symbol(self._final.get(claim, "-")))
            data_rows.append(row)

        col_widths = [len(h) for h in headers]
        for row in data_rows:
            for i, cell in enumerate(row):
                col_widths[i] = max(col_widths[i], len(cell))

        def format_row(cells):
            return "| " + " | ".join(cell.ljust(col_widths[i]) for i, cell in enumerate(cells)) + " |"

        header_line = format_row(headers)
        separator = "|" + "|".join("-" * (w + 2) for w in col_widths) + "|"
        row_lines = [format_row(row) for row in data_rows]

        table = "\n".join([header_line, separator] + row_lines)
        return f"## Proof Statistics\n\n{table}\n\n{self._summary_counts()}"

    def _status_symbol(self, status: str) -> str:
        symbols = {
            'proved': 'QED',
            'counterexample': 'CEX',
            'unknown': '?',
            'timeout': 'T/O',
            'error': 'ERR'
        }
        return symbols.get(status, status)

    def _summary_counts(self) -> str:
        counts = defaultdict(int)
        for status in self._final.values():
            counts[status] += 1
        total = len(self._final)
        if not total:
            return ""
        parts = [f"{counts[s]}/{total} {s}" for s in ('proved', 'counterexample', 'unknown', 'timeout', 'error')
                 if counts[s]]
        return "- " + ", ".join(parts)
