from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from core.pieces import BOARD_SIZE


class ClickRequest(BaseModel):
    row: int = Field(..., ge=0, lt=BOARD_SIZE)
    col: int = Field(..., ge=0, lt=BOARD_SIZE)


class ResetRequest(BaseModel):
    mandatoryCapture: Optional[bool] = None
