"""
➡️ But : Encapsuler toutes les opérations de base de données sur la table Task.

TaskRepository : CRUD hérité de BaseRepository + la requête de liste
(filtres, recherche, tri, pagination).

Ne contient aucune logique métier, juste de la persistance.
"""

# app/db/repositories/tasks.py
from typing import Optional, Sequence, Tuple

from sqlalchemy import case
from sqlmodel import select, or_, func

from app.db.repositories.base import BaseRepository
from app.db.models.tasks import Task, Priority, PRIORITY_RANK

# Tri par priorité : ordre low < medium < high (pas l'ordre alphabétique)
_PRIORITY_ORDER = case(
    *[(Task.priority == p, rank) for p, rank in PRIORITY_RANK.items()],
    else_=0,
)

SORT_COLUMNS = {
    "created_at": Task.created_at,
    "updated_at": Task.updated_at,
    "due_date": Task.due_date,
    "priority": _PRIORITY_ORDER,
    "title": Task.title,
}


class TaskRepository(BaseRepository[Task]):
    """CRUD Tasks + requête de liste paginée."""
    model = Task

    # ---------- HELPERS ----------

    @staticmethod
    def _filters(
        *,
        completed: Optional[bool] = None,
        priority: Optional[Priority] = None,
        search: Optional[str] = None,
    ) -> list:
        """
        Conditions WHERE :
        - completed / priority : égalité stricte si fournis
        - search : sous-chaîne insensible à la casse sur title OU description
        """
        conditions = []
        if completed is not None:
            conditions.append(Task.completed == completed)
        if priority is not None:
            conditions.append(Task.priority == priority)
        if search:
            conditions.append(
                or_(
                    Task.title.icontains(search, autoescape=True),
                    Task.description.icontains(search, autoescape=True),
                )
            )
        return conditions

    # ---------- LISTES / RECHERCHE ----------

    def search(
        self,
        *,
        completed: Optional[bool] = None,
        priority: Optional[Priority] = None,
        search: Optional[str] = None,
        sort_by: str = "created_at",
        descending: bool = True,
        offset: int = 0,
        limit: int = 10,
    ) -> Tuple[Sequence[Task], int]:
        """
        Retourne (tâches de la page, nombre total de correspondances).
        Le total ignore offset/limit. Les égalités de tri sont départagées par id
        dans le même sens, pour que les pages soient stables.
        """
        if sort_by not in SORT_COLUMNS:
            raise ValueError(f"Unsupported sort field: {sort_by}")

        conditions = self._filters(completed=completed, priority=priority, search=search)

        column = SORT_COLUMNS[sort_by]
        if descending:
            primary, tie = column.desc(), Task.id.desc()
        else:
            primary, tie = column.asc(), Task.id.asc()
        if sort_by == "due_date":
            # les tâches sans échéance toujours en fin de liste
            primary = primary.nulls_last()
        order = (primary, tie)

        stmt = select(Task).where(*conditions).order_by(*order).offset(offset).limit(limit)
        rows = self.session.exec(stmt).all()

        count_stmt = select(func.count(Task.id)).where(*conditions)
        total = self.session.exec(count_stmt).one()
        return rows, total

    # ---------- GETTERS SPÉCIFIQUES ----------

    def get_by_title(self, title: str) -> Optional[Task]:
        """Retourne la première tâche portant exactement ce titre (utilisé par le seed)."""
        stmt = select(self.model).where(self.model.title == title)
        return self.session.exec(stmt).first()
