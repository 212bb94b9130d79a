# nextup/api/endpoints/export.py
import time
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response
from sqlalchemy.orm import Session, selectinload

from nextup.db.session import get_db
from nextup.middleware.auth import get_current_user
from nextup.models.user import User
from nextup.models.team import Team
from nextup.services.export import export_service

router = APIRouter()


def attachment_headers(extension: str) -> dict:
    filename = f"teams-export-{int(time.time() * 1000)}.{extension}"
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.get("/export")
def export_teams(
    format: str = Query("json", pattern="^(json|csv)$"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Download every team with its presentation records as JSON or CSV
    """
    teams = (
        db.query(Team)
        .options(selectinload(Team.presentations))
        .filter(Team.user_id == current_user.id)
        .order_by(Team.created_at, Team.id)
        .all()
    )

    if format == "csv":
        return Response(
            content=export_service.to_csv(teams),
            media_type="text/csv",
            headers=attachment_headers("csv"),
        )

    return JSONResponse(
        content=export_service.to_json(teams),
        headers=attachment_headers("json"),
    )
