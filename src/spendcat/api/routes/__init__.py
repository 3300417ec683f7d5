"""API routes."""

from fastapi import APIRouter

from spendcat.api.routes import categories, questions

router = APIRouter()

# Include routers
router.include_router(categories.router)
router.include_router(questions.router)
