"""
todofiles MCP server entry point.

Startup sequence:
1. Read TODO_FILE and API settings from environment
2. Initialize FileCache and load the default file once
3. Start REST API server in background thread (if API_ENABLED)
4. Register all MCP tools
5. Run MCP server (stdio transport)
"""

import logging
import os
import sys
import threading
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from todofiles.cache import FileCache
from todofiles.tools import register_todo_tools

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    stream=sys.stderr,
)
log = logging.getLogger(__name__)

DEFAULT_API_PORT = 9410


def _start_api_server(cache, host: str, port: int) -> None:
    """Run the FastAPI/uvicorn server in a daemon thread."""
    import uvicorn

    from todofiles.api.app import create_app

    app = create_app(cache)
    log.info("Starting REST API on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level="warning")


def main() -> None:
    todo_file_env = os.environ.get("TODO_FILE", "")
    if not todo_file_env:
        log.error("TODO_FILE environment variable is not set")
        sys.exit(1)

    todo_file = Path(todo_file_env)
    if not todo_file.is_file():
        log.error("TODO_FILE does not exist or is not a file: %s", todo_file)
        sys.exit(1)

    log.info("Todo file: %s", todo_file)

    cache = FileCache(default_file=todo_file)
    cache.get()

    api_enabled = os.environ.get("API_ENABLED", "true").lower() in ("true", "1", "yes")
    if api_enabled:
        api_host = os.environ.get("API_HOST", "127.0.0.1")
        api_port = int(os.environ.get("API_PORT", str(DEFAULT_API_PORT)))
        api_thread = threading.Thread(
            target=_start_api_server, args=(cache, api_host, api_port), daemon=True
        )
        api_thread.start()

    mcp = FastMCP("todofiles")
    register_todo_tools(mcp, cache)

    log.info("Starting todofiles server")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
