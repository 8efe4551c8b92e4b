"""
Request body models.

The client core sends whatever it is given; these models describe the
backend's accepted shapes so that front ends can validate user input
before calling the client.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, field_validator

ProcessParams = Optional[Union[Dict[str, Any], str, int, float]]


class LoginRequest(BaseModel):
    """Body of ``POST /login``."""

    username: str = Field(..., min_length=1, description="Account user name or email")
    password: str


class ProcessRequest(BaseModel):
    """Body of ``POST /toProcess``."""

    tx: int = Field(..., description="Transaction code understood by the backend")
    params: ProcessParams = Field(None, description="Object (non-array), string, number or null")

    @field_validator("params", mode="before")
    @classmethod
    def reject_arrays(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            raise ValueError("params must not be an array")
        return v
