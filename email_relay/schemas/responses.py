from typing import Literal

from pydantic import BaseModel, Field


class SuccessOut(BaseModel):
    status: Literal["SUCCESS"] = "SUCCESS"
    statusCode: int = Field(1000, description="Relay status code, always 1000")
    message: str = "NA"


class ErrorOut(BaseModel):
    error: str = Field(..., description="Human-readable error message")
