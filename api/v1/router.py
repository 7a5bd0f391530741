# api/v1/router.py
from fastapi import APIRouter

from . import plans, session

api_router = APIRouter()

api_router.include_router(plans.router, tags=["Plans"])
api_router.include_router(session.router, prefix="/session", tags=["Session"])
