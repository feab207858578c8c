"""
Profile management - edit, update and account deletion
"""
from typing import Optional
from fastapi import HTTPException, UploadFile
from starlette.requests import Request

from wikilens.core.security import verify_password, invalidate_session
from wikilens.core.settings import settings
from wikilens.models import User
from wikilens.schemas import ProfileOut, ProfileUpdate
from wikilens.services.repositories import UserRepository
from wikilens.services.storage import PublicStorage
import logging

logger = logging.getLogger(__name__)

AVATAR_DIR = "avatar"


def field_error(field: str, message: str) -> HTTPException:
    """422 shaped like FastAPI's own request validation errors"""
    return HTTPException(
        status_code=422,
        detail=[{"loc": ["body", field], "msg": message, "type": "value_error"}],
    )


class ProfileService:
    def __init__(self, user_repository: UserRepository, storage: PublicStorage):
        self.user_repo = user_repository
        self.storage = storage

    def edit(self, user: User) -> ProfileOut:
        return ProfileOut(
            name=user.name,
            email=user.email,
            phoneNumber=user.phone_number,
            gender=user.gender,
            img=user.avatar,
            emailVerifiedAt=user.email_verified_at,
        )

    async def update(
        self,
        user: User,
        data: ProfileUpdate,
        avatar: Optional[UploadFile] = None
    ) -> User:
        """
        Update profile fields and optionally replace the avatar

        A changed email address drops the verification timestamp.
        """
        email = str(data.email)
        if email != user.email:
            other = await self.user_repo.find_by_email(email)
            if other is not None and other.id != user.id:
                raise field_error("email", "The email has already been taken.")

        old_avatar = user.avatar
        new_avatar = None
        if avatar is not None:
            new_avatar = await self._store_avatar(avatar)
            user.avatar = new_avatar

        if email != user.email:
            user.email_verified_at = None

        user.name = data.name
        user.email = email
        if data.phone_number is not None:
            user.phone_number = data.phone_number
        if data.gender is not None:
            user.gender = data.gender

        try:
            saved = await self.user_repo.save(user)
        except Exception:
            if new_avatar is not None:
                user.avatar = old_avatar
                self.storage.delete(new_avatar)
            raise

        if new_avatar is not None and old_avatar:
            self.storage.delete(old_avatar)

        return saved

    async def _store_avatar(self, avatar: UploadFile) -> str:
        if not (avatar.content_type or "").startswith("image/"):
            raise field_error("img", "The img must be an image.")

        limit = settings.avatar_max_kb * 1024
        # one byte past the limit is enough to reject
        content = await avatar.read(limit + 1)
        if len(content) > limit:
            raise field_error("img", f"The img must not be greater than {settings.avatar_max_kb} kilobytes.")

        return self.storage.put(AVATAR_DIR, content, avatar.filename)

    async def destroy(self, user: User, password: str, request: Request) -> None:
        """Delete the account after checking the current password, ending the session"""
        if not verify_password(password, user.password_hash):
            raise field_error("password", "The password is incorrect.")

        invalidate_session(request)
        await self.user_repo.delete(user)
        logger.info(f"Deleted account {user.id}")
