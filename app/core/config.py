"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, chemin DB, logs, CORS, etc.)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from app.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Todo List API"
    APP_VERSION: str = "1.0.0"
    ENV: str = "dev"  # dev | prod | test

    # -----------------------------
    # Serveur
    # -----------------------------
    HOST: str = "127.0.0.1"
    PORT: int = 3000

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "todo.db"  # fichier SQLite
    # Si tu veux forcer une URL différente (ex: Postgres), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None
    DB_ECHO: Optional[bool] = None  # auto selon ENV si None

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "INFO"

    # -----------------------------
    # Web
    # -----------------------------
    CORS_ORIGINS: List[str] = ["*"]
    SERVE_FRONTEND: bool = True  # sert la page statique sur "/"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")

        # echo SQL seulement en dev si non spécifié
        if self.DB_ECHO is None:
            object.__setattr__(self, "DB_ECHO", self.ENV == "dev")


# Instance globale importable partout
settings = Settings()
