"""
Base backend implementation.
"""


class Backend:
    name = "base"

    def to_smt2(self) -> str:
        raise NotImplementedError
