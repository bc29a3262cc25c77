"""
Health check endpoint.
"""

import time

from fastapi import APIRouter

from core.qa_export import __version__

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": time.time()
    }
