"""REST API routes for todo files."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from todofiles.tools.todo_tools import (
    handle_cache_status,
    handle_todo_list,
    handle_todo_normalize,
    handle_todo_render,
)


class NormalizeBody(BaseModel):
    file_path: Optional[str] = None


def register_todo_routes(app_router: APIRouter, cache) -> None:
    """Attach todo REST routes that use the shared cache."""

    @app_router.get("/todos")
    def list_todos(file_path: Optional[str] = Query(None)):
        try:
            result = handle_todo_list(cache, file_path=file_path)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        if "error" in result:
            raise HTTPException(status_code=404, detail=result["error"])
        return result

    @app_router.get("/views/{view}", response_class=HTMLResponse)
    def render_view(
        view: str,
        file_path: Optional[str] = Query(None),
        group_by: str = Query("priority"),
        today: Optional[str] = Query(None),
    ):
        try:
            result = handle_todo_render(
                cache, file_path=file_path, view=view, group_by=group_by, today=today
            )
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        if "error" in result:
            raise HTTPException(status_code=404, detail=result["error"])
        return HTMLResponse(content=result["html"])

    @app_router.post("/todos/normalize")
    def normalize_todos(body: NormalizeBody):
        try:
            result = handle_todo_normalize(cache, file_path=body.file_path)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        if "error" in result:
            raise HTTPException(status_code=404, detail=result["error"])
        return result

    @app_router.get("/cache/status")
    def get_cache_status():
        return handle_cache_status(cache)
