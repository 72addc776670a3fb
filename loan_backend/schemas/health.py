"""Pydantic schema for the health-check endpoint."""

from pydantic import BaseModel

from loan_backend import __version__


class HealthResponse(BaseModel):
    message: str = "pong"
    version: str = __version__
