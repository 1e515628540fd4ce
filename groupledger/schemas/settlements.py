from pydantic import BaseModel, ConfigDict, Field

from groupledger.schemas.members import Address


class SettlementCreate(BaseModel):
    from_address: Address
    to_address: Address
    amount: int


class SettlementRecord(BaseModel):
    from_address: str
    to_address: str
    amount: int

    model_config = ConfigDict(from_attributes=True)


class SettlementListResponse(BaseModel):
    group_id: int
    settlements: list[SettlementRecord] = Field(default_factory=list)
