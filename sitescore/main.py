# sitescore/main.py
# -----------------------------------------------------------------------------
# FastAPI entrypoint
# - logging is configured on import of sitescore.core.logging
# -----------------------------------------------------------------------------
from fastapi import FastAPI

from sitescore.core import logging  # noqa: F401
from sitescore.core.config import settings
from sitescore.routers import analysis

app = FastAPI(title=settings.APP_NAME)

app.include_router(analysis.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
