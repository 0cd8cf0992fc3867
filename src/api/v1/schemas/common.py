"""Common Pydantic schemas shared across the API."""

from pydantic import BaseModel, RootModel


class ErrorResponse(RootModel[dict[str, str]]):
    """Error body: a map of field name to message."""


class SuccessResponse(BaseModel):
    """Acknowledgement for deletes."""

    success: bool = True
