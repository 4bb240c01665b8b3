"""
schemas/errors.py — Error body returned by every failing endpoint

Built by the HTTPException and RequestValidationError handlers in main.py.
Messages are fixed strings chosen by the routers; driver errors never
reach this body.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    status_code: int
    request_id: str = ""
    detail: list | None = None

    @classmethod
    def for_status(cls, status_code: int, message: str, request_id: str = "",
                   detail: list | None = None) -> "ErrorResponse":
        return cls(error=message, status_code=status_code, request_id=request_id, detail=detail)

    def body(self) -> dict:
        return self.model_dump(exclude_none=True)
