"""
➡️ But : Définir les formats d’entrée/sortie de l’API tâches (couche validation).

TaskCreateIn → corps de requête POST
TaskUpdateIn → corps PUT (partiel : seuls les champs envoyés changent)
TaskOut      → réponse de l’API
TaskListQuery / TaskListOut → paramètres et réponse de la liste paginée

Les noms côté JSON sont en camelCase (dueDate, createdAt, totalPages...).
Toutes les heures sont en UTC.
"""

from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from app.db.models.tasks import Priority, TITLE_MAX_LENGTH

SortField = Literal["created_at", "updated_at", "due_date", "priority", "title"]
SortOrder = Literal["ASC", "DESC"]

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# Bornes des entiers SQL (INTEGER 64 bits) : id et offset doivent y tenir
MAX_ID = 2**63 - 1
MAX_PAGE = MAX_ID // MAX_PAGE_SIZE


def to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Heure naïve = UTC ; heure avec fuseau = convertie en UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _clean_title(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Title must not be empty")
    return value


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- IN / UPDATE ----------

class TaskCreateIn(CamelModel):
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, examples=["Faire les devoirs"])
    description: Optional[str] = Field("", examples=["Exercices de maths"])
    priority: Optional[Priority] = Field(Priority.medium, examples=["medium"])
    due_date: Optional[datetime] = Field(None, examples=["2024-01-15T23:59:59.999Z"])

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return _clean_title(value)

    @field_validator("description")
    @classmethod
    def description_default(cls, value: Optional[str]) -> str:
        return value or ""

    @field_validator("priority")
    @classmethod
    def priority_default(cls, value: Optional[Priority]) -> Priority:
        return value or Priority.medium

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_utc(value)


class TaskUpdateIn(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH, examples=["Titre modifié"])
    description: Optional[str] = Field(None, examples=["Description modifiée"])
    completed: Optional[bool] = Field(None, examples=[True])
    priority: Optional[Priority] = Field(None, examples=["high"])
    due_date: Optional[datetime] = Field(None, examples=["2024-01-20T23:59:59.999Z"])

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        return _clean_title(value) if value is not None else None

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_utc(value)

    @model_validator(mode="after")
    def required_fields_not_null(self):
        # null explicite interdit pour les colonnes non nullables
        for name in ("title", "completed", "priority"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} must not be null")
        return self

    def changes(self) -> dict:
        """Seulement les champs envoyés par le client (description null → "")."""
        data = self.model_dump(exclude_unset=True)
        if "description" in data and data["description"] is None:
            data["description"] = ""
        return data


# ---------- OUT ----------

class TaskOut(CamelModel):
    id: int
    title: str
    description: str
    completed: bool
    priority: Priority
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("due_date", "created_at", "updated_at")
    @classmethod
    def tag_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # SQLite ne conserve pas le fuseau : on le remet
        return to_utc(value)


# ---------- LISTE ----------

class TaskListQuery(BaseModel):
    completed: Optional[bool] = None
    priority: Optional[Priority] = None
    search: Optional[str] = None
    sort_by: SortField = "created_at"
    sort_order: SortOrder = "DESC"
    page: int = Field(1, ge=1, le=MAX_PAGE)
    limit: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    @field_validator("search")
    @classmethod
    def search_blank_is_none(cls, value: Optional[str]) -> Optional[str]:
        # terme gardé tel quel (espaces compris) ; seul un terme vide est ignoré
        if value is None or not value.strip():
            return None
        return value

    @field_validator("sort_order", mode="before")
    @classmethod
    def sort_order_upper(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class TaskListOut(CamelModel):
    tasks: List[TaskOut]
    total: int
    total_pages: int
    current_page: int
