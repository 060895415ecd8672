#!/usr/bin/env python3
"""
Check the theory of functions as relations.

Every thm_* claim is discharged twice: by a step-by-step proof checked with
an SMT solver, which covers every type, and by exhaustive enumeration over
small finite carriers. The run succeeds only if every claim is proved.

Run with:
    python theorem_checker.py
    python theorem_checker.py --thm-file benchmarks/theorems/buggy.py
"""
import argparse
import logging
import sys

from relfun import homework, lemmas
from relfun.checker import TheoremChecker
from relfun.choice import DEFAULT_SEARCH_LIMIT


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Check claims about functions as relations")
    parser.add_argument('--thm-file', action='append', default=None,
                        help='Python file containing claim functions (repeatable); '
                             'defaults to the built-in lemmas and homework')
    parser.add_argument('--thm-prefix', default='thm_',
                        help='Prefix for claim function names (default: thm_)')
    parser.add_argument('--timeout', type=float, default=10,
                        help='Seconds allowed per claim')
    parser.add_argument('--solver-timeout', type=int, default=5000,
                        help='Milliseconds allowed per solver check')
    parser.add_argument('--search-limit', type=int, default=DEFAULT_SEARCH_LIMIT,
                        help='Candidates tried by choice on infinite carriers')
    parser.add_argument('--diagonal-limit', type=int, default=100,
                        help='Indices inspected by the concrete diagonal checks')
    parser.add_argument('--dump-smt2', metavar='DIR', default=None,
                        help='Write every solver obligation to DIR as SMT-LIB2')
    parser.add_argument('--stats', action='store_true',
                        help='Print a per-method statistics table')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')

    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    checker = TheoremChecker(timeout=args.timeout,
                             solver_timeout=args.solver_timeout,
                             search_limit=args.search_limit,
                             diagonal_limit=args.diagonal_limit,
                             dump_dir=args.dump_smt2)

    sources = args.thm_file or [lemmas, homework]
    for source in sources:
        checker.check_module(source, args.thm_prefix)
    checker.print_summary()

    if args.stats:
        print()
        print(checker.stats.summary_table())

    return 0 if checker.all_proved() else 1


if __name__ == "__main__":
    sys.exit(main())
