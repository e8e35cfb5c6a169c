from typing import Literal

from pydantic import BaseModel, Field


class OkOut(BaseModel):
    status: Literal["ok"] = "ok"


class ErrorOut(BaseModel):
    detail: str = Field(..., description="Human-readable reason naming the code type")
