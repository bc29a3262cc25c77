#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
FastAPI Web Server - REST API for the Exam Answer Generator export.

Thin orchestration shell: app creation, middleware, router includes.

Usage:
    uvicorn api.main:app --host 0.0.0.0 --port 8000
"""

from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

from config.logging_config import get_logger, setup_logging
from config.settings import settings
from core.qa_export import __version__

from api.routes.export import router as export_router
from api.routes.health import router as health_router

setup_logging(settings.log_level)
logger = get_logger(__name__)

# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title="Exam Answer Generator API",
    description="Exports question/answer transcripts as paginated PDF documents",
    version=__version__
)

# CORS middleware: origins from settings (env var) or dev defaults
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router)
app.include_router(export_router)

logger.info(f"Export API ready (overflow policy: {settings.overflow_policy})")
