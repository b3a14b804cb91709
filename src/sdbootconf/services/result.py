"""ServiceResult and ServiceError — what every BootConfService op returns.

Library exceptions stop at the service layer. The CLI only sees results
and picks stdout or stderr (and the exit code) from ``ok``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an op failed.

    ``code`` is one of ``NOT_FOUND``, ``IO_ERROR``, ``PARSE_ERROR`` or
    ``INVALID_FILENAME``; ``detail`` carries ``path`` and ``lineno`` when
    the failure points at a file.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one op (``show``, ``set_default``, ...).

    ``data`` holds the payload on success; ``warnings`` lists problems
    that did not stop the op, such as a dangling ``default``; ``meta``
    names the file the op read or wrote.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
