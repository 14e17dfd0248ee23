"""Todo model"""

from sqlalchemy import Column, Integer, String, Date, Boolean
from todo_app.core.database import Base


class Todo(Base):
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    # low / medium / high, pas validé côté serveur
    priority = Column(String, nullable=True)
    deadline = Column(Date, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
