import logging
from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, select, func

from app.core.errors import InternalError

# Type générique pour le modèle (Task, ...)
ModelT = TypeVar("ModelT", bound=SQLModel)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : create, read, update, delete, count.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    👉 Une erreur SQLAlchemy annule la transaction et remonte en InternalError.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- HELPERS ----------

    def _commit(self, entity: Optional[ModelT] = None) -> None:
        try:
            self.session.commit()
            if entity is not None:
                self.session.refresh(entity)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Database error on %s: %s", self.model.__name__, exc)
            raise InternalError("Database error") from exc

    # ---------- READ ----------

    def count(self) -> int:
        """Retourne le nombre total d’enregistrements."""
        return self.session.exec(select(func.count(self.model.id))).one()

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        return self.session.get(self.model, id_)

    # ---------- CREATE ----------

    def create(self, **fields) -> ModelT:
        """Crée et persiste un nouvel enregistrement."""
        entity = self.model(**fields)
        self.session.add(entity)
        self._commit(entity)
        return entity

    # ---------- UPDATE ----------

    def update(self, entity: ModelT, **changes) -> ModelT:
        """Met à jour un enregistrement existant (seuls les champs fournis changent)."""
        for key, value in changes.items():
            setattr(entity, key, value)
        self.session.add(entity)
        self._commit(entity)
        return entity

    # ---------- DELETE ----------

    def delete(self, entity: ModelT) -> None:
        """Supprime définitivement un enregistrement."""
        self.session.delete(entity)
        self._commit()
