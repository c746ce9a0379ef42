from __future__ import annotations

from fastapi import APIRouter
from app.domains.review_generator.router import router as review_generator_router

api_router = APIRouter()
api_router.include_router(review_generator_router)
