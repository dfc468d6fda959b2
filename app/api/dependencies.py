"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_task_service() : crée un TaskService à partir d’une session DB.

task_list_query() : paramètres de liste (filtres, tri, page et limit).

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).
"""

from typing import Optional

import pydantic
from fastapi import Depends, Query
from sqlmodel import Session

from app.core.errors import ValidationError, format_validation_errors
from app.db.session import get_session
from app.db.models.tasks import Priority
from app.db.repositories.tasks import TaskRepository
from app.features.tasks.schemas import TaskListQuery, SortField, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, MAX_PAGE
from app.features.tasks.services import TaskService


def task_list_query(
    completed: Optional[bool] = Query(None, description="Filtre par état"),
    priority: Optional[Priority] = Query(None, description="Filtre par priorité"),
    search: Optional[str] = Query(None, description="Recherche dans titre et description", examples=["math"]),
    sort_by: SortField = Query("created_at", alias="sortBy", description="Champ de tri"),
    sort_order: str = Query("DESC", alias="sortOrder", description="ASC ou DESC"),
    page: int = Query(1, ge=1, le=MAX_PAGE, description="Numéro de page", examples=[1]),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Taille de page", examples=[10]),
) -> TaskListQuery:
    try:
        return TaskListQuery(
            completed=completed,
            priority=priority,
            search=search,
            sort_by=sort_by,
            sort_order=sort_order,
            page=page,
            limit=limit,
        )
    except pydantic.ValidationError as exc:
        raise ValidationError(format_validation_errors(exc.errors())) from exc


# -----------------------------
# Repositories
# -----------------------------
def get_task_repository(session: Session = Depends(get_session)) -> TaskRepository:
    return TaskRepository(session)


# -----------------------------
# Services
# -----------------------------
def get_task_service(
    task_repo: TaskRepository = Depends(get_task_repository),
) -> TaskService:
    return TaskService(repo=task_repo)
