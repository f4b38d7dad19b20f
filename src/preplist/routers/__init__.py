"""API routers for the preplist application."""

from preplist.routers.prep_lists import router as prep_lists_router

__all__ = ["prep_lists_router"]
