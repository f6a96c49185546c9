# cubita/app/main.py
from __future__ import annotations

import logging
import sys

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cubita.app.config import settings
from cubita.app.deps import close_content_client
from cubita.app.domain.errors import (
    ArtistNotFoundError,
    InquiryError,
    InquiryValidationError,
)
from cubita.app.routers.contact import INQUIRY_PATH
from cubita.app.routers.contact import router as contact_router
from cubita.app.routers.content import router as content_router
from cubita.app.routers.pages import router as pages_router
from cubita.app.services.inquiry_service import (
    FAILURE_MESSAGE,
    VALIDATION_MESSAGE,
    field_errors,
)

# Plain stdout logging (dev and containers)
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Cubita Producciones API", version="0.3.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(contact_router)
app.include_router(content_router)
app.include_router(pages_router)


@app.exception_handler(ArtistNotFoundError)
async def artist_not_found_handler(request: Request, exc: ArtistNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "Artista no encontrado", "slug": exc.slug},
    )


@app.exception_handler(InquiryValidationError)
async def inquiry_validation_handler(request: Request, exc: InquiryValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"error": VALIDATION_MESSAGE, "fields": exc.errors},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # inquiry bodies that are not JSON objects answer in the inquiry error shape
    if request.url.path.rstrip("/") == contact_router.prefix + INQUIRY_PATH:
        return JSONResponse(
            status_code=422,
            content={"error": VALIDATION_MESSAGE, "fields": field_errors(exc.errors(), "body")},
        )
    return await request_validation_exception_handler(request, exc)


@app.exception_handler(InquiryError)
async def inquiry_error_handler(request: Request, exc: InquiryError) -> JSONResponse:
    # transport details stay in the log
    logger.error("Error sending inquiry: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": FAILURE_MESSAGE},
    )


@app.on_event("shutdown")
async def shutdown() -> None:
    await close_content_client()


@app.get("/health")
def health():
    return {"ok": True}
