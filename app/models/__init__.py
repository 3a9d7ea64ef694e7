# ./app/models/__init__.py

from .project import Project, ToDo, create_project, create_todo, coerce_date, new_id
from .user import User, create_user

__all__ = [
    "Project", "ToDo", "User",
    "create_project", "create_todo", "create_user",
    "coerce_date", "new_id",
]
