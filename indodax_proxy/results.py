"""Tagged handler results and their mapping onto HTTP responses."""
import enum
from dataclasses import dataclass
from typing import Any, Union

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class ErrorKind(enum.Enum):
    VALIDATION = 400
    NOT_FOUND = 404
    UPSTREAM = 500

    @property
    def status_code(self) -> int:
        return self.value


@dataclass(frozen=True)
class Ok:
    payload: Any


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str


Result = Union[Ok, Failure]


def to_response(result: Result) -> JSONResponse:
    if isinstance(result, Ok):
        return JSONResponse(content=jsonable_encoder(result.payload))
    if isinstance(result, Failure):
        return JSONResponse(status_code=result.kind.status_code, content={"error": result.message})
    raise TypeError(f"Not a handler result: {result!r}")
