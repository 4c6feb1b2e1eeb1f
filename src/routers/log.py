from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from core.models.log_entry import LogCategory
from core.service_manager import get_controller
from core.services.monitor_controller import MonitorController
from schemas import LogEntryModel, LogList

VALID_CATEGORY_VALUES = ", ".join([c.value for c in LogCategory])

router = APIRouter(prefix="/log", tags=["log"])


@router.get("", response_model=LogList, responses={
    400: {
        "description": "Invalid category provided.",
        "content": {
            "application/json": {
                "example": {"detail": f"Invalid category: INVALID. Valid values are: {VALID_CATEGORY_VALUES}"}
            }
        }
    }
})
async def get_log(category: Optional[str] = None,
                  controller: MonitorController = Depends(get_controller)) -> LogList:
    """
    Get the event log, oldest entry first.
    Optionally restricted to one category: info, alert or manual.
    """
    selected = None
    if category is not None:
        try:
            selected = LogCategory(category.lower())
        except ValueError:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid category: {category}. Valid values are: {VALID_CATEGORY_VALUES}"
            )

    entries = controller.event_log.entries(selected)
    return LogList(list=[LogEntryModel.from_entry(e) for e in entries])
