"""
Web routes for serving the frontend page
"""
import os

from fastapi import APIRouter, Request, status
from fastapi.responses import FileResponse, JSONResponse

router = APIRouter(tags=["Web Pages"])


@router.get("/", include_in_schema=False)
async def home(request: Request):
    """Página inicial com a lista de webhooks recentes"""
    index_path = os.path.join(str(request.app.state.settings.PUBLIC_DIR), "index.html")
    if os.path.exists(index_path):
        return FileResponse(index_path)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"success": False, "error": "Frontend not found", "path": "/", "method": request.method},
    )
