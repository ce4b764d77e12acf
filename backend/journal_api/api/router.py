"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from journal_api.api.routes import auth, users, journals, categories, prompts

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(journals.router)
api_router.include_router(categories.router)
api_router.include_router(prompts.router)
