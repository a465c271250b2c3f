"""
HTMX Routes Package - HTML pages served by FastAPI with Jinja2 templates.

- auth: sign in with a storefront token, sign out
- categories: category tree page, tree partials, editor panel and mutations
"""

from fastapi import APIRouter

from ziva_admin.api.htmx.auth import router as auth_router
from ziva_admin.api.htmx.categories import router as categories_router

router = APIRouter()

router.include_router(auth_router)
router.include_router(categories_router)
