"""
➡️ But : Contenir la logique métier des tâches : orchestrer le repo, appliquer les règles, gérer les erreurs.

TaskService :
- get / create / update (partiel) / delete
- list : filtres + recherche + tri + pagination

Lève des erreurs métier NotFoundError (les entrées invalides sont rejetées par les schémas), traduites en HTTP par app.core.errors.

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging
import math

from app.core.errors import NotFoundError
from app.db.models.base import utcnow
from app.db.models.tasks import Task
from app.db.repositories.tasks import TaskRepository
from app.features.tasks.schemas import TaskCreateIn, TaskUpdateIn, TaskListQuery, TaskListOut, TaskOut

logger = logging.getLogger(__name__)


def total_pages(total: int, limit: int) -> int:
    """ceil(total / limit) ; 0 quand aucune tâche ne correspond."""
    if limit < 1:
        raise ValueError("limit must be >= 1")
    return math.ceil(total / limit)


class TaskService:
    def __init__(self, repo: TaskRepository):
        self.repo = repo

    # -------- Reads --------

    def list(self, query: TaskListQuery) -> TaskListOut:
        rows, total = self.repo.search(
            completed=query.completed,
            priority=query.priority,
            search=query.search,
            sort_by=query.sort_by,
            descending=(query.sort_order == "DESC"),
            offset=query.offset,
            limit=query.limit,
        )
        return TaskListOut(
            tasks=[TaskOut.model_validate(t) for t in rows],
            total=total,
            total_pages=total_pages(total, query.limit),
            current_page=query.page,
        )

    def get(self, task_id: int) -> Task:
        task = self.repo.get(task_id)
        if not task:
            logger.debug("Task %s not found", task_id)
            raise NotFoundError("Task not found")
        return task

    # -------- Writes --------

    def create(self, payload: TaskCreateIn) -> Task:
        task = self.repo.create(
            title=payload.title,
            description=payload.description or "",
            priority=payload.priority,
            due_date=payload.due_date,
            completed=False,
        )
        logger.info("Created task %s", task.id)
        return task

    def update(self, task_id: int, payload: TaskUpdateIn) -> Task:
        task = self.get(task_id)
        changes = payload.changes()
        # updated_at rafraîchi à chaque mutation, même sans changement effectif
        changes["updated_at"] = utcnow()
        task = self.repo.update(task, **changes)
        logger.info("Updated task %s (%s)", task.id, ", ".join(sorted(k for k in changes if k != "updated_at")) or "touch")
        return task

    def delete(self, task_id: int) -> None:
        task = self.get(task_id)
        self.repo.delete(task)
        logger.info("Deleted task %s", task_id)
