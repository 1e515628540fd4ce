from typing import Annotated

from pydantic import BaseModel, Field

Address = Annotated[str, Field(min_length=1, max_length=128)]


class MemberCreate(BaseModel):
    address: Address


class MemberResponse(BaseModel):
    group_id: int
    address: str
    balance: int


class MemberBalance(BaseModel):
    address: str
    balance: int


class MemberListResponse(BaseModel):
    group_id: int
    members: list[str] = Field(default_factory=list)
