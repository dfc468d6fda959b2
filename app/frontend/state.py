"""
➡️ But : État du frontend, synchronisé avec l'API.

Le serveur est la seule source de vérité. TaskBoard ne garde que :
la page courante de tâches, le filtre, la page courante, le nombre de pages et le total.

Chaque mutation (création, édition, suppression, bascule) recharge la page courante
au lieu de patcher l'état local.

Utilisation :
    with httpx.Client(base_url="http://localhost:3000") as http:
        board = TaskBoard(http)
        board.load()
        board.add("Acheter du lait")
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

PAGE_SIZE = 5
TASKS_PATH = "/api/tasks"

# filtre UI → valeur du query param "completed"
FILTERS = {"all": None, "active": "false", "completed": "true"}


class TaskBoardError(Exception):
    """Erreur affichable à l'utilisateur (message du serveur ou validation locale)."""


class TaskBoard:
    def __init__(self, client: httpx.Client, page_size: int = PAGE_SIZE):
        self.client = client
        self.page_size = page_size

        self.tasks: List[Dict[str, Any]] = []
        self.filter: str = "all"
        self.current_page: int = 1
        self.total_pages: int = 1
        self.total: int = 0

    # -------- Helpers --------

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise TaskBoardError(f"Request failed: {exc}") from exc
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("error") if isinstance(body, dict) else None
            raise TaskBoardError(message or f"HTTP {response.status_code}")
        return response

    @property
    def completed_on_page(self) -> int:
        return sum(1 for t in self.tasks if t.get("completed"))

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def find(self, task_id: int) -> Optional[Dict[str, Any]]:
        return next((t for t in self.tasks if t["id"] == task_id), None)

    # -------- Chargement --------

    def load(self) -> List[Dict[str, Any]]:
        """Recharge la page courante depuis le serveur."""
        params: Dict[str, Any] = {"page": self.current_page, "limit": self.page_size}
        completed = FILTERS[self.filter]
        if completed is not None:
            params["completed"] = completed

        data = self._request("GET", TASKS_PATH, params=params).json()
        self.tasks = data.get("tasks") or []
        self.total = data.get("total") or 0
        # le serveur renvoie 0 page quand rien ne correspond ; l'affichage en garde 1
        self.total_pages = data.get("totalPages") or 1

        if not self.tasks and self.current_page > self.total_pages:
            # page devenue vide (ex: suppression de la dernière tâche de la dernière page)
            self.current_page = self.total_pages
            return self.load()
        return self.tasks

    def set_filter(self, name: str) -> None:
        if name not in FILTERS:
            raise TaskBoardError(f"Unknown filter: {name}")
        self.filter = name
        self.current_page = 1
        self.load()

    def next_page(self) -> None:
        if self.has_next:
            self.current_page += 1
            self.load()

    def prev_page(self) -> None:
        if self.has_prev:
            self.current_page -= 1
            self.load()

    # -------- Mutations --------

    def add(self, title: str, description: str = "", priority: str = "medium") -> Optional[Dict[str, Any]]:
        title = title.strip()
        if not title:
            return None
        created = self._request(
            "POST",
            TASKS_PATH,
            json={"title": title, "description": description.strip(), "priority": priority},
        ).json()
        self.current_page = 1
        self.load()
        return created

    def edit(
        self,
        task_id: int,
        *,
        title: str,
        description: Optional[str] = None,
        priority: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """Seuls les champs fournis sont envoyés ; les autres gardent leur valeur côté serveur."""
        title = title.strip()
        if not title:
            raise TaskBoardError("Task title cannot be empty")
        body: Dict[str, Any] = {"title": title}
        if description is not None:
            body["description"] = description.strip()
        if priority is not None:
            body["priority"] = priority
        if completed is not None:
            body["completed"] = completed
        updated = self._request("PUT", f"{TASKS_PATH}/{task_id}", json=body).json()
        self.load()
        return updated

    def toggle(self, task_id: int, completed: bool) -> Dict[str, Any]:
        updated = self._request("PUT", f"{TASKS_PATH}/{task_id}", json={"completed": completed}).json()
        self.load()
        return updated

    def delete(self, task_id: int) -> None:
        self._request("DELETE", f"{TASKS_PATH}/{task_id}")
        logger.debug("Deleted task %s, reloading page %s", task_id, self.current_page)
        self.load()
