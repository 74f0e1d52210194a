"""API v1 router registration."""

from fastapi import APIRouter

from pocket_budget.api.routes import money

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(money.router)
