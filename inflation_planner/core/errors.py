from __future__ import annotations

from typing import List


class InvalidParameterError(ValueError):
    """Raised when a core computation is called with inputs outside its domain."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors
