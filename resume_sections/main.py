import logging

from fastapi import FastAPI

from resume_sections.api.routes.parse import router as parse_router
from resume_sections.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    description="Deterministic parser that turns pasted resume section text into structured records",
    version="0.1.0",
    debug=settings.debug,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "resume-sections", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}
