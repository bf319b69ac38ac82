"""
Checklists Routes
"""
from fastapi import APIRouter, HTTPException, Depends
import logging

from ..models import ChecklistRequest, ChecklistSummary, UpdateChecklistItemRequest
from ..services.ai import AIService, get_ai_service
from ..services.checklist import generate_checklist, update_checklist_item

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Checklists"])


@router.post("/generate-checklist", response_model=ChecklistSummary)
async def create_checklist(request: ChecklistRequest, ai: AIService = Depends(get_ai_service)):
    """Generate an ethical AI checklist for a feature idea"""
    return await generate_checklist(ai, request.feature_idea)


@router.post("/update-checklist-item", response_model=ChecklistSummary)
async def update_item(request: UpdateChecklistItemRequest):
    """Set the status of one checklist item"""
    try:
        return update_checklist_item(request.checklist, request.item_index, request.status)
    except IndexError as e:
        logger.error(f"Checklist update error: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to update checklist item")
