"""
➡️ But : Remplir la base avec des tâches de démonstration décrites en YAML.

Format attendu :

tasks:
  - title: Faire les devoirs
    description: Exercices de maths
    priority: high          # low | medium | high (défaut: medium)
    completed: false
    due_date: 2024-01-15T23:59:59Z

Idempotent : une tâche dont le titre existe déjà n'est pas recréée.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import ValidationError as PydanticValidationError
from sqlmodel import Session

from app.db.repositories.tasks import TaskRepository
from app.features.tasks.schemas import TaskCreateIn

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).resolve().parent / "seed_data.yaml"


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML not found: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Seed YAML must contain a root mapping.")
    return data


# -----------------------------
# Seed
# -----------------------------
def seed_tasks(session: Session, data: Dict[str, Any]) -> List[int]:
    """Crée les tâches absentes, retourne les ids créés."""
    repo = TaskRepository(session)
    tasks_yaml: List[Dict[str, Any]] = data.get("tasks") or []
    created: List[int] = []

    for i, raw in enumerate(tasks_yaml):
        try:
            payload = TaskCreateIn.model_validate(raw)
        except PydanticValidationError as exc:
            raise ValueError(f"Invalid task #{i} in seed: {exc}") from exc

        if repo.get_by_title(payload.title):
            logger.debug("Seed: task %r already exists, skipped", payload.title)
            continue

        task = repo.create(
            title=payload.title,
            description=payload.description,
            priority=payload.priority,
            due_date=payload.due_date,
            completed=bool(raw.get("completed", False)),
        )
        created.append(task.id)

    logger.info("Seed: %d task(s) created, %d skipped", len(created), len(tasks_yaml) - len(created))
    return created


def seed_all(session: Session, seed_path: str | Path = DEFAULT_SEED_PATH) -> List[int]:
    return seed_tasks(session, load_seed_yaml(seed_path))
