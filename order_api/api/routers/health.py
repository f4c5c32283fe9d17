from fastapi import APIRouter
from fastapi.responses import JSONResponse

from order_api.data.database import ping_db

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    if not ping_db():
        return JSONResponse(status_code=503, content={"ok": False, "database": "down"})
    return {"ok": True, "database": "up"}
