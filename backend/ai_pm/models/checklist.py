"""
Checklist Models
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class ChecklistStatus(str, Enum):
    """Recognized item statuses (the updater stores any string verbatim)"""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class ChecklistItem(BaseModel):
    """Single ethical-review item; its position in the checklist is its identity"""
    category: str = "Uncategorized"
    item: str = "Unnamed Item"
    description: str = "No description provided"
    importance: int = 3  # 1-5
    status: str = ChecklistStatus.PENDING.value
    recommendations: str = "No recommendations provided"


class ChecklistSummary(BaseModel):
    """Checklist with derived completion stats"""
    model_config = ConfigDict(populate_by_name=True)

    checklist: List[ChecklistItem]
    percentage: int
    total_items: int = Field(alias="totalItems")


class ChecklistRequest(BaseModel):
    """Request for generating a checklist"""
    model_config = ConfigDict(populate_by_name=True)

    feature_idea: Optional[str] = Field(default=None, alias="featureIdea")


class UpdateChecklistItemRequest(BaseModel):
    """Request for changing the status of one item"""
    model_config = ConfigDict(populate_by_name=True)

    item_index: int = Field(alias="itemIndex")
    status: str
    checklist: List[ChecklistItem]
