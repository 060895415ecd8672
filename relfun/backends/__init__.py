"""
Solver backends for the symbolic proofs.
"""
from .base import Backend
from .z3_backend import Z3Backend

default_backend = Z3Backend

__all__ = ['Backend', 'Z3Backend', 'default_backend']
