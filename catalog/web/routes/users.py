"""
Routes des utilisateurs et des roles.

Le mot de passe n'est accepte qu'a la creation et n'est jamais renvoye.
"""

from fastapi import APIRouter, Depends, Response, status

from ...core.value_objects import PageRequest
from ...services.account_service import AccountService
from ...services.dto import RoleView, UserInsertView, UserUpdateView, UserView
from ..deps import get_account_service, get_page_request
from ..schemas import PageResponse

router = APIRouter(tags=["users"])


@router.get("/users", response_model=PageResponse[UserView])
def list_users(
    page_request: PageRequest = Depends(get_page_request),
    service: AccountService = Depends(get_account_service),
):
    return PageResponse.from_page(service.list_users(page_request))


@router.get("/users/{user_id}", response_model=UserView)
def get_user(user_id: int, service: AccountService = Depends(get_account_service)):
    return service.get_user(user_id)


@router.post("/users", response_model=UserView, status_code=status.HTTP_201_CREATED)
def create_user(
    view: UserInsertView,
    response: Response,
    service: AccountService = Depends(get_account_service),
):
    created = service.create_user(view)
    response.headers["Location"] = f"/users/{created.id}"
    return created


@router.put("/users/{user_id}", response_model=UserView)
def update_user(
    user_id: int,
    view: UserUpdateView,
    service: AccountService = Depends(get_account_service),
):
    return service.update_user(user_id, view)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, service: AccountService = Depends(get_account_service)):
    service.delete_user(user_id)


@router.get("/roles", response_model=list[RoleView])
def list_roles(service: AccountService = Depends(get_account_service)):
    return service.list_roles()
