from fastapi import APIRouter, Depends

from app.api.deps import get_activity_log, require_roles
from app.core.activity_log import ActivityLog
from app.schemas.message import ActivityEntry, ActivityLogResponse

router = APIRouter(prefix="/activity", tags=["activity"])


@router.get("", response_model=ActivityLogResponse)
def get_activity(
    activity_log: ActivityLog = Depends(get_activity_log),
    current_user=Depends(require_roles("admin")),
):
    """Get the in-memory activity log. Only admin users can read it."""
    entries = activity_log.entries
    return ActivityLogResponse(
        count=len(entries),
        entries=[
            ActivityEntry(message=entry.message, timestamp=entry.timestamp, level=entry.level)
            for entry in entries
        ],
    )
