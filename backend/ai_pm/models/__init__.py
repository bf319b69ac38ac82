# Pydantic Models
from .checklist import (
    ChecklistItem, ChecklistStatus, ChecklistSummary,
    ChecklistRequest, UpdateChecklistItemRequest
)
from .completion import GenerateRequest, GenerateResponse

__all__ = [
    # Checklist
    "ChecklistItem", "ChecklistStatus", "ChecklistSummary",
    "ChecklistRequest", "UpdateChecklistItemRequest",
    # Completion
    "GenerateRequest", "GenerateResponse",
]
