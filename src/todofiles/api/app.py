"""FastAPI application factory for the todo REST API."""

from fastapi import APIRouter, FastAPI

from todofiles.api.todo_routes import register_todo_routes


def create_app(cache) -> FastAPI:
    """Build and return a FastAPI app wired to the given FileCache."""
    app = FastAPI(title="todofiles", docs_url="/api/docs", openapi_url="/api/openapi.json")

    api = APIRouter(prefix="/api")
    register_todo_routes(api, cache)
    app.include_router(api)

    return app
