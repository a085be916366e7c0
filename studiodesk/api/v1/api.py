"""Version 1 API router."""
from fastapi import APIRouter

from studiodesk.api.v1.endpoints import attendance, contracts, members, plans, sessions

api_router = APIRouter()
api_router.include_router(attendance.router)
api_router.include_router(contracts.router)
api_router.include_router(members.router)
api_router.include_router(plans.router)
api_router.include_router(sessions.router)
