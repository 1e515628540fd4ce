from fastapi import APIRouter

from groupledger.api.v1 import groups, members, payments, settlements

api_router = APIRouter()

api_router.include_router(groups.router, prefix="/groups", tags=["groups"])
api_router.include_router(members.router, prefix="/groups", tags=["members"])
api_router.include_router(payments.router, prefix="/groups", tags=["payments"])
api_router.include_router(
    settlements.router, prefix="/groups", tags=["settlements"]
)
