"""
➡️ But : Définir la table des tâches (todo-list).

Task : une tâche avec titre, description, priorité, état et échéance optionnelle.
Priority : low < medium < high (ordre utilisé pour le tri).
"""

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Text
from sqlmodel import Field

from .base import BaseModelDB

TITLE_MAX_LENGTH = 255


class Priority(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"


PRIORITY_RANK = {Priority.low: 1, Priority.medium: 2, Priority.high: 3}


class Task(BaseModelDB, table=True):
    """Une tâche de la todo-list."""

    __tablename__ = "tasks"  # type: ignore[assignment]

    title: str = Field(max_length=TITLE_MAX_LENGTH, index=True, description="Titre (jamais vide)")
    description: str = Field(default="", sa_type=Text, description="Description libre")
    completed: bool = Field(default=False, index=True, description="Tâche terminée ?")
    priority: Priority = Field(default=Priority.medium, index=True, description="Priorité")
    due_date: Optional[datetime] = Field(
        default=None, sa_type=DateTime(timezone=True), index=True, description="Échéance (UTC)"
    )
