"""FastAPI endpoints for accounts, profiles, address books and wishlists."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from store.api.deps import current_user
from store.api.schemas import (
    AddressRequest,
    ChangePasswordRequest,
    IdResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UpdateProfileRequest,
)
from store.api.serializers import session_payload, user_payload
from store.auth import issue_token
from store.user.addresses import AddAddress, RemoveAddress, SetDefaultAddress
from store.user.authentication import ChangePassword, LoginUser
from store.user.profile import UpdateProfile
from store.user.registration import RegisterUser
from store.user.user import User
from store.user.wishlist import AddToWishlist, RemoveFromWishlist

router = APIRouter(prefix="/api/users", tags=["users"])


def _reload(user_id):
    return current_domain.repository_for(User).get(user_id)


@router.post("/register", status_code=201)
async def register(body: RegisterRequest) -> dict:
    user_id = current_domain.process(
        RegisterUser(username=body.username, email=body.email, password=body.password),
        asynchronous=False,
    )
    return session_payload(_reload(user_id), issue_token(user_id))


@router.post("/login")
async def login(body: LoginRequest) -> dict:
    user_id = current_domain.process(LoginUser(email=body.email, password=body.password), asynchronous=False)
    return session_payload(_reload(user_id), issue_token(user_id))


@router.get("/profile")
async def get_profile(user: User = Depends(current_user)) -> dict:
    return user_payload(user)


@router.put("/profile")
async def update_profile(body: UpdateProfileRequest, user: User = Depends(current_user)) -> dict:
    current_domain.process(
        UpdateProfile(user_id=str(user.id), first_name=body.first_name, last_name=body.last_name, phone=body.phone),
        asynchronous=False,
    )
    return user_payload(_reload(user.id))


@router.put("/password", response_model=MessageResponse)
async def change_password(body: ChangePasswordRequest, user: User = Depends(current_user)) -> MessageResponse:
    current_domain.process(
        ChangePassword(
            user_id=str(user.id),
            current_password=body.current_password,
            new_password=body.new_password,
        ),
        asynchronous=False,
    )
    return MessageResponse(message="Password updated")


@router.post("/addresses", status_code=201, response_model=IdResponse)
async def add_address(body: AddressRequest, user: User = Depends(current_user)) -> IdResponse:
    address_id = current_domain.process(AddAddress(user_id=str(user.id), **body.model_dump()), asynchronous=False)
    return IdResponse(id=address_id)


@router.delete("/addresses/{address_id}", response_model=MessageResponse)
async def remove_address(address_id: str, user: User = Depends(current_user)) -> MessageResponse:
    current_domain.process(RemoveAddress(user_id=str(user.id), address_id=address_id), asynchronous=False)
    return MessageResponse(message="Address removed")


@router.put("/addresses/{address_id}/default", response_model=MessageResponse)
async def set_default_address(address_id: str, user: User = Depends(current_user)) -> MessageResponse:
    current_domain.process(SetDefaultAddress(user_id=str(user.id), address_id=address_id), asynchronous=False)
    return MessageResponse(message="Default address updated")


@router.post("/wishlist/{product_id}")
async def add_to_wishlist(product_id: str, user: User = Depends(current_user)) -> dict:
    current_domain.process(AddToWishlist(user_id=str(user.id), product_id=product_id), asynchronous=False)
    return {"wishlist": _reload(user.id).wishlist_ids}


@router.delete("/wishlist/{product_id}")
async def remove_from_wishlist(product_id: str, user: User = Depends(current_user)) -> dict:
    current_domain.process(RemoveFromWishlist(user_id=str(user.id), product_id=product_id), asynchronous=False)
    return {"wishlist": _reload(user.id).wishlist_ids}
