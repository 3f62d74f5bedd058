"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from ddtrace import patch_all
from fastapi import FastAPI

from translate_ai.dependencies import get_storage
from translate_ai.logging import setup_logging
from translate_ai.routes import auth_router, pages_router, translate_router

patch_all()

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    get_storage().ensure_bucket_exists()
    logger.info("Translation service started")
    yield


app = FastAPI(title="TranslateAI", lifespan=lifespan)
app.include_router(pages_router)
app.include_router(translate_router)
app.include_router(auth_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
