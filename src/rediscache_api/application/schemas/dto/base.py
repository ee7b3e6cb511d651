# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""Application DTO base.

Use-case results are plain pydantic models with no HTTP concerns; the
adapters layer maps them onto its own response schemas.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """Frozen, closed model shared by the product result DTOs."""

    model_config = ConfigDict(extra="forbid", frozen=True)
