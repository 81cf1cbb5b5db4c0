# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from storefront.shared.errors.base import DomainError


class InvariantViolationError(DomainError):
    """An entity or store rejected a value that would break its invariants.

    Rendered over HTTP as a 422 ``validation_error`` naming the field.
    """

    code = "validation_error"
    status = HTTPStatus.UNPROCESSABLE_ENTITY

    def __init__(self, message: str, *, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(context=self.to_context())

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message

    def to_context(self) -> dict[str, Any]:
        return {"field": self.field or "unknown", "message": self.message}


InvariantViolation = InvariantViolationError

__all__ = ["DomainError", "InvariantViolation", "InvariantViolationError"]
