"""Pydantic schemas for todo request/response validation."""

from pydantic import BaseModel, ConfigDict
from datetime import date
from typing import Optional


class TodoCreate(BaseModel):
    title: Optional[str] = None
    priority: Optional[str] = "low"
    deadline: Optional[date] = None


class TodoUpdate(BaseModel):
    """Full replacement of the mutable fields; anything omitted is written as null."""

    title: Optional[str] = None
    priority: Optional[str] = None
    deadline: Optional[date] = None


class TodoResponse(BaseModel):
    id: int
    title: str
    priority: Optional[str]
    deadline: Optional[date]
    completed: bool

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
