"""
Process-pool decomposition.

``decompose`` is a pure function, so a batch can be mapped over worker
processes with no shared state. Outputs keep the input order.
"""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from concurrent.futures.process import BrokenProcessPool
from typing import Any, List, Optional, Sequence

from name_validator.entities.decomposer import decompose
from name_validator.entities.name_validation import NameValidation


class DecomposerPool:
    """
    Worker pool kept alive across several ``decompose`` calls.

    Create it once per batch; each chunk of the batch reuses the same
    processes.
    """

    def __init__(self, *, max_workers: Optional[int] = None, chunksize: int = 16) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        if chunksize < 1:
            raise ValueError("chunksize must be >= 1")

        self._chunksize = chunksize
        self._closed = False
        self._executor = ProcessPoolExecutor(max_workers=max_workers)

    @property
    def closed(self) -> bool:
        return self._closed

    def decompose(self, names: Sequence[Any]) -> List[NameValidation]:
        if self._closed:
            raise RuntimeError("process pool is closed")
        if not names:
            return []

        try:
            return list(self._executor.map(decompose, names, chunksize=self._chunksize))
        except BrokenProcessPool as exc:
            message = (
                "failed to start worker processes. On Windows/macOS, call this API "
                "from a module guarded by `if __name__ == '__main__':`."
            )
            raise RuntimeError(message) from exc

    def close(self) -> None:
        if self._closed:
            return
        self._executor.shutdown(wait=True)
        self._closed = True

    def __enter__(self) -> DecomposerPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def decompose_many(
    names: Sequence[Any],
    *,
    max_workers: Optional[int] = None,
    chunksize: int = 16,
) -> List[NameValidation]:
    """Decompose one batch in a temporary process pool."""
    with DecomposerPool(max_workers=max_workers, chunksize=chunksize) as pool:
        return pool.decompose(names)
