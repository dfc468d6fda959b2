"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

les logs (setup_logging)

CORS (autorisations de qui peut appeler ces API)

la traduction des erreurs en {"error": ...}

titre, version, tags, schéma OpenAPI personnalisé (/api-docs)

Inclut les routers (/api/tasks, /health) et sert le frontend statique sur "/".

Initialise la base au démarrage (lifespan).

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d’exécution : uvicorn app.main:app --reload.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging
from app.core.openapi import custom_openapi
from app.db.session import init_db

from app.api.routers import tasks, health

import uvicorn

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

FRONTEND_DIR = Path(__file__).resolve().parent / "frontend" / "static"


# Démarrage
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s %s started (env=%s)", settings.APP_NAME, settings.APP_VERSION, settings.ENV)
    yield


app = FastAPI(
    lifespan=lifespan,
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/api-docs",
    redoc_url=None,
    openapi_tags=[
        {"name": "tasks", "description": "Opérations sur les tâches"},
        {"name": "health", "description": "Supervision"},
    ],
)

# CORS (ajustez selon vos besoins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

register_exception_handlers(app)

# Routers
app.include_router(tasks.router, prefix="/api")
app.include_router(health.router)

# Génération du schéma OpenAPI custom
app.openapi = lambda: custom_openapi(app)

# Frontend (monté en dernier : les routes API restent prioritaires)
if settings.SERVE_FRONTEND and FRONTEND_DIR.is_dir():
    app.mount("/", StaticFiles(directory=FRONTEND_DIR, html=True), name="frontend")

if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=(settings.ENV == "dev"))
