"""
➡️ But : Définir les endpoints de l’API tâches (/api/tasks).

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, DELETE)

Appelle le TaskService

Retourne les schémas de sortie (response_model)

Les erreurs métier (404, 400) sont levées par le service et sérialisées en {"error": ...}.
"""

from fastapi import APIRouter, Depends, Path, Response, status

from app.api.dependencies import get_task_service, task_list_query
from app.features.tasks.schemas import TaskCreateIn, TaskUpdateIn, TaskOut, TaskListOut, TaskListQuery, MAX_ID
from app.features.tasks.services import TaskService

ERROR_EXAMPLE = {"application/json": {"example": {"error": "Task not found"}}}

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={
        404: {"description": "Tâche introuvable", "content": ERROR_EXAMPLE},
        500: {"description": "Erreur serveur"},
    },
)

@router.get(
    "",
    summary="Lister les tâches",
    description="Liste filtrée, triée et paginée. `totalPages` vaut 0 quand rien ne correspond.",
    response_model=TaskListOut,
    responses={
        200: {
            "description": "Liste paginée",
            "content": {
                "application/json": {
                    "example": {"tasks": [{"id": 1, "title": "Faire les devoirs", "description": "Maths",
                                           "completed": False, "priority": "medium", "dueDate": None,
                                           "createdAt": "2024-01-01T10:00:00Z",
                                           "updatedAt": "2024-01-01T10:00:00Z"}],
                                "total": 1, "totalPages": 1, "currentPage": 1}
                }
            },
        }
    },
)
def list_tasks(
    query: TaskListQuery = Depends(task_list_query),
    svc: TaskService = Depends(get_task_service),
):
    return svc.list(query)

@router.get(
    "/{task_id}",
    summary="Récupérer une tâche",
    response_model=TaskOut,
)
def get_task(task_id: int = Path(..., ge=1, le=MAX_ID), svc: TaskService = Depends(get_task_service)):
    return svc.get(task_id)

@router.post(
    "",
    summary="Créer une tâche",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskOut,
    responses={400: {"description": "Données invalides"}},
)
def create_task(payload: TaskCreateIn, svc: TaskService = Depends(get_task_service)):
    return svc.create(payload)

@router.put(
    "/{task_id}",
    summary="Mettre à jour une tâche",
    description="Mise à jour partielle : seuls les champs envoyés sont modifiés.",
    response_model=TaskOut,
    responses={400: {"description": "Données invalides"}},
)
def update_task(payload: TaskUpdateIn, task_id: int = Path(..., ge=1, le=MAX_ID), svc: TaskService = Depends(get_task_service)):
    return svc.update(task_id, payload)

@router.delete(
    "/{task_id}",
    summary="Supprimer une tâche",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_task(task_id: int = Path(..., ge=1, le=MAX_ID), svc: TaskService = Depends(get_task_service)):
    svc.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
