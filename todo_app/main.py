from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from todo_app.core import database
from todo_app.core.config import settings
from todo_app.core.errors import TodoAPIError, todo_api_error_handler, validation_error_handler
from todo_app.models import todo  # noqa: F401  (enregistre la table)
from todo_app.routers import todos

# Init DB
database.Base.metadata.create_all(bind=database.engine)

app = FastAPI(
    title="Todo API",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(TodoAPIError, todo_api_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

# Routes
app.include_router(todos.router)
