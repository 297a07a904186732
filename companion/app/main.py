"""FastAPI application for the Catan companion service."""

import common.app

from .routers import catan, stats

app = common.app.create_app('Catan Companion')

app.include_router(catan.router)
app.include_router(stats.router)


@app.get('/')
async def index() -> dict[str, list[str]]:
    """List the service's API entry points."""
    return {'endpoints': ['/catan/board', '/catan/board/download', '/catan/sizes', '/stats']}
