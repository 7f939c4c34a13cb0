"""
User endpoints.

CRUD for users.  Passwords are accepted on write and never returned.
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import UserId, get_user_service
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services.user_service import UserService

router = APIRouter()


@router.get("", summary="List all users.", response_model=list[UserResponse], )
def list_users(service: UserService = Depends(get_user_service)):
    return service.get_all()


@router.get("/{user_id}", summary="Get a user.", response_model=UserResponse, )
def get_user(user_id: UserId, service: UserService = Depends(get_user_service)):
    return service.get(user_id)


@router.post("", summary="Create a user.", response_model=UserResponse, status_code=status.HTTP_201_CREATED, )
def create_user(data: UserCreate, service: UserService = Depends(get_user_service)):
    """
    Create a user.

    Raises:
        422: If the payload is invalid or the email is already taken
    """
    return service.create(data)


@router.put("/{user_id}", summary="Update a user.", response_model=UserResponse, )
@router.patch("/{user_id}", summary="Partially update a user.", response_model=UserResponse, )
def update_user(user_id: UserId, data: UserUpdate, service: UserService = Depends(get_user_service)):
    """Only the fields present in the body are changed."""
    return service.update(user_id, data)


@router.delete("/{user_id}", summary="Delete a user.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_user(user_id: UserId, service: UserService = Depends(get_user_service)):
    """Events created by the user are kept and lose their creator reference."""
    service.delete(user_id)
