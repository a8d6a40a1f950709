from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from taskdesk.domain.users.entities import UserProfile


class RegisterRequestDTO(BaseModel):
    # Emptiness and password length are checked by the use case so the same
    # rules hold for every caller, not only HTTP.
    name: str = ""
    email: str = ""
    password: str = ""


class LoginRequestDTO(BaseModel):
    email: str = ""
    password: str = ""


class UserDTO(BaseModel):
    id: str
    name: str
    email: str
    created_at: datetime = Field(serialization_alias="createdAt")

    @classmethod
    def from_profile(cls, profile: UserProfile) -> UserDTO:
        return cls(
            id=profile.id,
            name=profile.name,
            email=profile.email,
            created_at=profile.created_at,
        )


class AuthSuccessDTO(BaseModel):
    ok: bool = True
    user: UserDTO | None = None
    message: str | None = None

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
