"""
Pydantic schemas for request validation and response serialization
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SearchResult(BaseModel):
    keyword: str
    summary: str
    article: str
    imageSource: str


class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    body: Optional[str] = None
    img_src: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PopularPostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    text: Optional[str] = None
    img_src: Optional[str] = None
    views: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PopularSearchOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    keyword: str
    text: Optional[str] = None
    img_src: Optional[str] = None
    views: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class HistoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    search_text: str
    created_at: Optional[datetime] = None


class TopSearches(BaseModel):
    tops: list[PopularSearchOut]


class ProfileOut(BaseModel):
    """Profile fields exposed to the profile form"""
    name: str
    email: str
    phoneNumber: Optional[str] = None
    gender: Optional[str] = None
    img: Optional[str] = None
    emailVerifiedAt: Optional[datetime] = None


class ProfileUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    phone_number: Optional[str] = Field(None, max_length=32)
    gender: Optional[str] = Field(None, max_length=16)


class AccountDelete(BaseModel):
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class MessageResponse(BaseModel):
    status: str


class ProfileResponse(BaseModel):
    status: Optional[str] = None
    user: ProfileOut
