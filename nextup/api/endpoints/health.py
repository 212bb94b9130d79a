# nextup/api/endpoints/health.py
from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health_check():
    """
    Liveness probe; does not require authentication
    """
    return {"status": "ok"}
