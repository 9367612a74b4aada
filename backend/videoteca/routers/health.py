from datetime import datetime, timezone

from fastapi import APIRouter

from videoteca.core.config import get_settings

router = APIRouter(tags=["health"])

@router.get("/")
def root():
    """Service banner and endpoint map"""
    return {
        "message": "Bienvenido a MiVideoteca API",
        "version": get_settings().APP_VERSION,
        "endpoints": {
            "health": "/api/health",
            "auth": "/api/auth",
            "movies": "/api/movies",
        },
    }

@router.get("/api/health")
def health_check():
    return {
        "status": "OK",
        "message": "API funcionando correctamente",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
