from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from blogapi.domain.users.entities import PublicUser


class CredentialsDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # usernames are matched exactly, so no stripping or case folding here
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)


class SignupRequestDTO(CredentialsDTO):
    pass


class LoginRequestDTO(CredentialsDTO):
    pass


class PublicUserDTO(BaseModel):
    username: str

    @classmethod
    def from_domain(cls, user: PublicUser) -> "PublicUserDTO":
        return cls(username=user.username)


class UserDataDTO(BaseModel):
    user: PublicUserDTO


class UserEnvelopeDTO(BaseModel):
    status: Literal["success"] = "success"
    data: UserDataDTO

    @classmethod
    def for_user(cls, user: PublicUser) -> "UserEnvelopeDTO":
        return cls(data=UserDataDTO(user=PublicUserDTO.from_domain(user)))


class SuccessDTO(BaseModel):
    status: Literal["success"] = "success"
