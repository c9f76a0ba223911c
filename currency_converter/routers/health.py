from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness and rate-table status")
async def health(request: Request):
    store = request.app.state.rate_store
    table = store.table
    return {
        "status": "ok" if not table.is_empty else "degraded",
        "version": request.app.version,
        "rates_loaded": len(table),
        "last_error": store.last_error,
    }
