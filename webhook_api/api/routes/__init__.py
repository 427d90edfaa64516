"""
Health check and monitoring endpoints
"""
from fastapi import APIRouter, Depends, Request

from webhook_api.core.clock import Clock, get_clock, to_iso

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health")
async def health_check(request: Request, clock: Clock = Depends(get_clock)):
    """Health check endpoint"""
    app_settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": app_settings.APP_NAME,
        "timestamp": to_iso(clock()),
        "version": app_settings.APP_VERSION
    }


@router.get("")
async def api_root(request: Request):
    """API root endpoint"""
    app_settings = request.app.state.settings
    return {
        "message": f"Welcome to {app_settings.APP_NAME} API",
        "version": app_settings.APP_VERSION,
        "docs": "/docs",
        "health": "/api/health",
        "webhook": "/api/webhook/woocommerce",
        "recent": "/api/webhooks/recent",
        "latest": "/api/webhooks/latest",
        "simulate": "/api/test/simulate-webhook"
    }
