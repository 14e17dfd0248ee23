"""Todo service: one statement per operation, no read before write."""

from sqlalchemy.orm import Session
from typing import List, Optional
from todo_app.models.todo import Todo
from todo_app.schemas.todo import TodoCreate, TodoUpdate


def create_todo(db: Session, todo_data: TodoCreate) -> Todo:
    new_todo = Todo(
        title=todo_data.title,
        priority=todo_data.priority,
        deadline=todo_data.deadline,
    )
    db.add(new_todo)
    db.commit()
    db.refresh(new_todo)
    return new_todo


def list_todos(db: Session) -> List[Todo]:
    return db.query(Todo).order_by(Todo.id.desc()).all()


def update_todo(db: Session, todo_id: int, todo_data: TodoUpdate) -> Optional[Todo]:
    # tous les champs sont écrasés, même ceux absents du body
    updated = db.query(Todo).filter(Todo.id == todo_id).update(
        todo_data.model_dump(include={"title", "priority", "deadline"}),
        synchronize_session=False,
    )
    db.commit()
    if updated == 0:
        return None
    return db.get(Todo, todo_id)


def delete_todo(db: Session, todo_id: int) -> int:
    deleted = db.query(Todo).filter(Todo.id == todo_id).delete(synchronize_session=False)
    db.commit()
    return deleted


def clear_todos(db: Session) -> int:
    deleted = db.query(Todo).delete(synchronize_session=False)
    db.commit()
    return deleted
