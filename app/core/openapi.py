"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI (servie sur /api-docs).

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description détaillée et les conventions de l'API,

déclarer le schéma d'erreur commun {"error": "..."}.
"""

from fastapi.openapi.utils import get_openapi

ERROR_SCHEMA = {
    "title": "Error",
    "type": "object",
    "properties": {"error": {"type": "string", "description": "Message d'erreur"}},
    "required": ["error"],
}


def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de gestion des tâches d'une todo-list.\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC.\n"
            "- Champs JSON en camelCase (`dueDate`, `createdAt`, ...).\n"
            "- Pagination: query params `page` & `limit` (1-100).\n"
            "- `totalPages` vaut 0 quand aucune tâche ne correspond.\n"
            "- Erreurs: `{\"error\": \"message\"}` (400, 404, 500).\n"
        ),
        routes=app.routes,
    )
    openapi_schema.setdefault("components", {}).setdefault("schemas", {})["Error"] = ERROR_SCHEMA
    app.openapi_schema = openapi_schema
    return app.openapi_schema
