# indiaaura/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .catalog import catalog_router


logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="IndiaAura Heritage API",
    description=(
        "Browse monuments, festivals and art forms of India by state and "
        "region, search them, read details enriched from Wikipedia and keep "
        "bookmarks in a browser cookie."
    ),
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(catalog_router)


@app.get("/", tags=["health"])
def health_check():
    return {"status": "ok"}
