# Business Logic Services
from .ai import AIService, get_ai_service
from .checklist import (
    build_checklist_prompt,
    calculate_percentage,
    fallback_checklist,
    generate_checklist,
    normalize_item,
    parse_checklist,
    strip_code_fences,
    update_checklist_item,
)

__all__ = [
    # AI
    "AIService",
    "get_ai_service",
    # Checklist
    "build_checklist_prompt",
    "calculate_percentage",
    "fallback_checklist",
    "generate_checklist",
    "normalize_item",
    "parse_checklist",
    "strip_code_fences",
    "update_checklist_item",
]
