# tests/unit/infrastructure/middleware/test_request_context.py
from __future__ import annotations

import uuid

import pytest

from rediscache_api.infrastructure.middleware.request_context import resolve_request_id


@pytest.mark.parametrize("value", ["abc-123", "svc:edge@42", "a.b_c"])
def test_well_formed_ids_are_reused(value: str) -> None:
    assert resolve_request_id(value) == value


@pytest.mark.parametrize("value", [None, "", "has space", "x" * 129, "naïve"])
def test_other_values_get_a_fresh_uuid(value: str | None) -> None:
    generated = resolve_request_id(value)
    assert generated != value
    assert uuid.UUID(hex=generated).version == 4
