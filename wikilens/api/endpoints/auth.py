"""
Session login routes
"""
from fastapi import APIRouter, Depends, HTTPException, Request, status

from wikilens.api.dependencies import get_user_repository
from wikilens.core.security import invalidate_session, login_session, verify_password
from wikilens.schemas import LoginRequest, MessageResponse
from wikilens.services.repositories import UserRepository


router = APIRouter(tags=["Auth"])


@router.post("/login", response_model=MessageResponse)
async def login(
    credentials: LoginRequest,
    request: Request,
    user_repo: UserRepository = Depends(get_user_repository)
):
    user = await user_repo.find_by_email(str(credentials.email))
    if user is None or not verify_password(credentials.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )

    login_session(request, user.id)
    return MessageResponse(status="Logged in")


@router.post("/logout", response_model=MessageResponse)
async def logout(request: Request):
    invalidate_session(request)
    return MessageResponse(status="Logged out")
