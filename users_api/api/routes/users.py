"""Users Routes — HTTP adapter over UserService.

Invariants:
    - Ids are generated here, before the write; the store never assigns them
    - Not-found answers 404 with an empty body (get and delete)
    - Create answers 201 with the body and a Location header for get-by-id
    - Store errors are not caught here: global handlers answer 5xx

Design Decisions:
    - One UserService per request, built from the factory on app.state
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from users_api.core.domain_types import User, UserId, new_user_id
from users_api.core.errors import UserNotCreatedError
from users_api.infrastructure.database import (
    DatabaseConnectionFactory, get_connection_factory,
)
from users_api.infrastructure.user_repository import SqlUserRepository
from users_api.schemas.user import UserCreate, UserResponse
from users_api.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


def get_user_service(
    factory: DatabaseConnectionFactory = Depends(get_connection_factory),
) -> UserService:
    """FastAPI dependency wiring the service to the SQL repository."""
    return UserService(SqlUserRepository(factory))


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    users = await service.get_all()
    return [UserResponse.from_user(u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID, service: UserService = Depends(get_user_service),
):
    user = await service.get_by_id(UserId(user_id))
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return UserResponse.from_user(user)


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate,
    request: Request,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    """Create a user; the id is assigned before the insert."""
    user = User(id=new_user_id(), full_name=body.full_name)
    if not await service.create(user):
        raise UserNotCreatedError(str(user.id))
    response.headers["Location"] = str(
        request.url_for("get_user", user_id=str(user.id)),
    )
    return UserResponse.from_user(user)


@router.delete("/{user_id}", status_code=status.HTTP_200_OK)
async def delete_user(
    user_id: UUID, service: UserService = Depends(get_user_service),
):
    if not await service.delete_by_id(UserId(user_id)):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_200_OK)
