import logging

logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
)
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from groupslot.config import get_settings
from groupslot.controllers.events import router as events_router
from groupslot.controllers.health import router as health_router
from groupslot.controllers.participants import router as participants_router
from groupslot.controllers.schedules import router as schedules_router
from groupslot.errors import register_exception_handlers
from groupslot.lifespan import cleanup_resources, setup_resources
from groupslot.middleware import HTTPLogMiddleware

settings = get_settings()

app = FastAPI(title="groupslot", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_origin_regex=settings.cors.origins_regex or None,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.debug.request:
    logging.getLogger("groupslot.http").setLevel(logging.DEBUG)
    app.add_middleware(HTTPLogMiddleware)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    resources = await setup_resources()
    try:
        yield
    finally:
        await cleanup_resources(resources)

app.router.lifespan_context = lifespan

register_exception_handlers(app)

app.include_router(health_router)
app.include_router(events_router)
app.include_router(participants_router)
app.include_router(schedules_router)
