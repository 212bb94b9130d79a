# nextup/services/export.py
import csv
import io
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from nextup.models.team import Team

CSV_HEADER = [
    "Team Name",
    "Topic",
    "Members",
    "Notes",
    "Created At",
    "Presentation Minutes",
    "Q&A Minutes",
    "Total Minutes",
    "Presented At",
]

NOT_AVAILABLE = "N/A"


def format_minutes(seconds: int) -> str:
    """Seconds as minutes with two decimals, e.g. 420 -> "7.00"."""
    return f"{seconds / 60:.2f}"


def format_timestamp(value: Optional[datetime]) -> str:
    return value.isoformat() if value else ""


class ExportService:
    """
    Flattens an account's teams and presentation records for download.
    """

    def presentation_entry(self, presentation) -> Dict[str, str]:
        total = presentation.presentation_seconds + presentation.qa_seconds
        return {
            "presentationMinutes": format_minutes(presentation.presentation_seconds),
            "qaMinutes": format_minutes(presentation.qa_seconds),
            "totalMinutes": format_minutes(total),
            "timestamp": format_timestamp(presentation.created_at),
        }

    def to_json(self, teams: Iterable[Team]) -> List[Dict[str, Any]]:
        return [
            {
                "id": team.id,
                "name": team.name,
                "topic": team.topic,
                "members": list(team.members or []),
                "notes": team.notes or "",
                "createdAt": format_timestamp(team.created_at),
                "presentations": [self.presentation_entry(p) for p in team.presentations],
            }
            for team in teams
        ]

    def to_csv(self, teams: Iterable[Team]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(CSV_HEADER)

        for team in teams:
            team_fields = [
                team.name,
                team.topic,
                "; ".join(team.members or []),
                team.notes or "",
                format_timestamp(team.created_at),
            ]
            if not team.presentations:
                writer.writerow(team_fields + [NOT_AVAILABLE] * 4)
                continue
            for presentation in team.presentations:
                entry = self.presentation_entry(presentation)
                writer.writerow(team_fields + [
                    entry["presentationMinutes"],
                    entry["qaMinutes"],
                    entry["totalMinutes"],
                    entry["timestamp"],
                ])

        return buffer.getvalue()


export_service = ExportService()
