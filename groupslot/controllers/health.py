from fastapi import APIRouter
from typing import Dict

from groupslot.dependencies import OptionalRedis

router = APIRouter()


@router.get("/health")
async def health(client: OptionalRedis) -> Dict[str, str]:
    store_status = "disconnected"
    if client is not None:
        try:
            await client.ping()
            store_status = "healthy"
        except Exception:
            store_status = "unhealthy"

    return {"status": "ok", "store": store_status}
