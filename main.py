"""
WeFund Webhook API - Main application entry point
Receives WooCommerce order webhooks and serves the most recent ones

Run with: uvicorn main:app --reload
"""
import logging
import os
from typing import Optional
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware

from webhook_api.core.config import Settings, settings
from webhook_api.core.clock import Clock, utc_now
from webhook_api.core.errors import register_exception_handlers
from webhook_api.api import health_router, web_router
from webhook_api.services.woocommerce.api.routes import router as woocommerce_router
from webhook_api.services.woocommerce.store import RecentWebhookStore

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[RecentWebhookStore] = None,
    clock: Optional[Clock] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    The store and the clock belong to the app instance and reach the route
    handlers through dependencies, so every app (and every test) gets its own.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Receives WooCommerce order webhooks and keeps the most recent ones in memory",
        version=app_settings.APP_VERSION
    )
    app.state.settings = app_settings
    app.state.webhook_store = store if store is not None else RecentWebhookStore(capacity=app_settings.MAX_STORED_WEBHOOKS)
    app.state.clock = clock or utc_now

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=app_settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=app_settings.CORS_ALLOW_METHODS,
        allow_headers=app_settings.CORS_ALLOW_HEADERS,
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health_router, tags=["Health"])
    app.include_router(woocommerce_router, tags=["WooCommerce Webhook"])
    app.include_router(web_router, tags=["Web"])

    # Mount static files
    if not os.path.exists(app_settings.PUBLIC_DIR):
        os.makedirs(app_settings.PUBLIC_DIR, exist_ok=True)
        logger.info(f"📁 Pasta garantida: {app_settings.PUBLIC_DIR}")
    app.mount("/static", StaticFiles(directory=str(app_settings.PUBLIC_DIR)), name="static")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    port = settings.PORT
    logger.info(f"🚀 {settings.APP_NAME} running")
    logger.info(f"📍 Server: http://localhost:{port}")
    logger.info(f"🔗 Webhook URL: http://localhost:{port}/api/webhook/woocommerce")
    logger.info(f"🧪 Test endpoint: http://localhost:{port}/api/test/simulate-webhook")
    logger.info(f"📊 Recent webhooks: http://localhost:{port}/api/webhooks/recent")
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=port,
        reload=False,
        log_level=settings.LOG_LEVEL.lower()
    )
