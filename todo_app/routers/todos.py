import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional

from todo_app.core.database import get_db
from todo_app.core.errors import TodoAPIError, fails_with
from todo_app.schemas.todo import TodoCreate, TodoUpdate, TodoResponse, MessageResponse, ErrorResponse
from todo_app.services import todo_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/todos", tags=["todos"], responses={500: {"model": ErrorResponse}})

# sqlite3 lève OverflowError (non wrappé par SQLAlchemy) pour un id > 64 bits
STORE_ERRORS = (SQLAlchemyError, OverflowError)


def _store_failure(db: Session, message: str) -> TodoAPIError:
    # le détail reste dans les logs, le client ne voit que le message fixe
    logger.exception(message)
    db.rollback()
    return TodoAPIError(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


@router.post("", response_model=TodoResponse)
@fails_with("Something went wrong")
def create_todo(todo_data: TodoCreate, db: Session = Depends(get_db)):
    logger.debug("Create todo: %s", todo_data.model_dump())
    try:
        return todo_service.create_todo(db, todo_data)
    except STORE_ERRORS:
        raise _store_failure(db, create_todo.error_message)


@router.get("", response_model=List[TodoResponse])
@fails_with("Cannot get todos")
def list_todos(db: Session = Depends(get_db)):
    try:
        return todo_service.list_todos(db)
    except STORE_ERRORS:
        raise _store_failure(db, list_todos.error_message)


# Doit rester avant /{todo_id}
@router.delete("/clear", response_model=MessageResponse)
@fails_with("Error deleting all tasks")
def clear_todos(db: Session = Depends(get_db)):
    try:
        todo_service.clear_todos(db)
    except STORE_ERRORS:
        raise _store_failure(db, clear_todos.error_message)
    return {"message": "All tasks deleted successfully"}


@router.delete("/{todo_id}", response_model=MessageResponse, responses={404: {"model": ErrorResponse}})
@fails_with("Error deleting task")
def delete_todo(todo_id: int, db: Session = Depends(get_db)):
    try:
        deleted = todo_service.delete_todo(db, todo_id)
    except STORE_ERRORS:
        raise _store_failure(db, delete_todo.error_message)

    if not deleted:
        raise TodoAPIError(status.HTTP_404_NOT_FOUND, "Task not found")
    return {"message": "Task deleted successfully"}


@router.put("/{todo_id}", response_model=Optional[TodoResponse])
@fails_with("Cannot update todo")
def update_todo(todo_id: int, todo_data: TodoUpdate, db: Session = Depends(get_db)):
    """Overwrite title, priority and deadline.

    An unknown ``todo_id`` is not an error here: the body is ``null`` with a
    200, unlike delete which answers 404.
    """
    try:
        return todo_service.update_todo(db, todo_id, todo_data)
    except STORE_ERRORS:
        raise _store_failure(db, update_todo.error_message)
