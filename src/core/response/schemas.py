from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PostDbStatus(str, Enum):
    OK = "Ok"
    ERR = "Err"


class PostDbResponse(BaseModel, Generic[T]):
    """Outcome of a store operation: a status plus its payload."""

    status: PostDbStatus
    value: T

    @classmethod
    def ok(cls, value: Any) -> "PostDbResponse":
        return cls(status=PostDbStatus.OK, value=value)

    @classmethod
    def err(cls, value: Any = None) -> "PostDbResponse":
        return cls(status=PostDbStatus.ERR, value=value)

    @property
    def is_ok(self) -> bool:
        return self.status == PostDbStatus.OK


class BaseResponse(BaseModel):
    success: bool = True
    message: Optional[str] = Field(default=None)


class ErrorDetail(BaseModel):
    field: str = ""
    code: str = Field(default="ERROR")
    message: str = Field(default="Unknown Error")
    target: Optional[str] = Field(default=None)


class ErrorResponse(BaseResponse):
    success: bool = Field(default=False)
    error_code: str = Field(default="ERROR")
    error_details: List[ErrorDetail] = Field(default=[])
