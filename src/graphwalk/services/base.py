"""BaseService — shared helpers for graphwalk services.

Services translate domain exceptions into failed ServiceResults so the
CLI never sees a traceback for expected input problems.
"""

from __future__ import annotations

import logging
from typing import Any

from graphwalk.domain.errors import (
    GraphError,
    IndexOutOfRangeError,
    InvalidSizeError,
    MatrixFormatError,
    SearchLimitError,
)
from graphwalk.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

# Domain exception → ServiceError code. Checked in order (subclasses first).
_ERROR_CODES: list[tuple[type[GraphError], str]] = [
    (IndexOutOfRangeError, "INVALID_VERTEX"),
    (InvalidSizeError, "INVALID_SIZE"),
    (MatrixFormatError, "INVALID_MATRIX"),
    (SearchLimitError, "SEARCH_LIMIT"),
]


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CircuitService(BaseService):
            def euler(self, start: int = 0) -> ServiceResult:
                try:
                    ...
                except GraphError as exc:
                    return self._failure("euler", exc)
    """

    @staticmethod
    def _error(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    @classmethod
    def _failure(cls, op: str, exc: GraphError, **detail: Any) -> ServiceResult:
        """Convert a domain exception into a failed ServiceResult."""
        code = next((c for t, c in _ERROR_CODES if isinstance(exc, t)), "GRAPH_ERROR")
        if isinstance(exc, IndexOutOfRangeError):
            detail.setdefault("index", exc.index)
            detail.setdefault("vertex_count", exc.vertex_count)
        elif isinstance(exc, MatrixFormatError) and exc.line is not None:
            detail.setdefault("line", exc.line)
        elif isinstance(exc, SearchLimitError):
            detail.setdefault("max_steps", exc.max_steps)
        logger.debug("%s failed: %s (%s)", op, exc, code)
        return cls._error(op, code, str(exc), **detail)
