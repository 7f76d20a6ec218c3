"""
Diagnose API

Latest warehouse performance rows for the diagnose view.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from statasphere.api.deps import get_diagnose_service
from statasphere.services.diagnose_service import DiagnoseService, normalise_rows

router = APIRouter(prefix="/api", tags=["diagnose"])


@router.get("/diagnose")
async def get_diagnose_rows(service: DiagnoseService = Depends(get_diagnose_service)):
    """Most recent 20 performance rows, newest first."""
    result = await run_in_threadpool(service.get_performance)
    if not result["success"]:
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to run diagnose query",
                "message": result["error"],
            },
        )

    return [row.model_dump(by_alias=True) for row in normalise_rows(result["data"])]
