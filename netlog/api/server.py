"""
FastAPI application entry point for netlog.

Responsibilities:
- create the FastAPI app
- construct the shared LogStore singleton
- include the log routes

Run with:

    uvicorn netlog.api.server:app --reload
"""

import logging

from fastapi import FastAPI

from configs.settings import settings
from netlog.store.log_store import LogStore
from . import log_routes


# Apply the configured level to every netlog.* logger.
logging.getLogger("netlog").setLevel(settings.log_level)


# ---------------------------------------------------------------------------
# Shared singletons
# ---------------------------------------------------------------------------

# One store per process; HTTP interceptors and the overlay both use it.
log_store = LogStore(max_entries=settings.max_entries)


# ---------------------------------------------------------------------------
# FastAPI app + route registration
# ---------------------------------------------------------------------------

app = FastAPI(title="netlog")

# Initialize the router module with our shared store, then include it.
log_routes.init_routes(log_store=log_store)
app.include_router(log_routes.router)
