"""FastAPI application entry - Markdown to HTML service."""

import logging

from . import __version__, config
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import router

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
)

app = FastAPI(
    title="Markdown to HTML",
    description="Convert a Markdown subset (headings, emphasis, pipe tables) to HTML",
    version=__version__,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.get("/")
async def root():
    return {"service": "md-to-html", "docs": "/docs"}
