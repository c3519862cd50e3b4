"""FastAPI application factory.

The store domain must be initialized before the app serves requests; every
request then runs inside the domain's context with request-scoped log
context bound.
"""

import uuid
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from store.api.categories import router as category_router
from store.api.coupons import router as coupon_router
from store.api.errors import register_error_handlers
from store.api.orders import router as order_router
from store.api.products import router as product_router
from store.api.reviews import router as review_router
from store.api.site import router as site_router
from store.api.users import router as user_router
from store.config import get_settings
from store.domain import store
from store.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="T-Shirt Store API",
        description="Accounts, catalogue, orders and reviews for the t-shirt store",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the store domain context and bind request log context."""
        clear_context()
        add_context(
            request_id=request.headers.get("X-Request-ID") or str(uuid.uuid4()),
            method=request.method,
            path=request.url.path,
        )
        try:
            with store.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        return response

    register_error_handlers(app)

    for router in (
        user_router,
        product_router,
        order_router,
        review_router,
        category_router,
        coupon_router,
        site_router,
    ):
        app.include_router(router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "domain": store.name}

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=upload_dir), name="uploads")

    # Mounted last so it never shadows the API routes
    public_dir = Path(settings.public_dir)
    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")

    logger.info("Application created", upload_dir=str(upload_dir), public_dir=str(public_dir))
    return app
