"""
Checklist Service - ethical AI checklist generation and progress tracking
"""
import json
import logging
import math
import re
from typing import Any, List

from ..errors import ParseError, UpstreamError, ValidationError
from ..models import ChecklistItem, ChecklistStatus, ChecklistSummary
from .ai import AIService

logger = logging.getLogger(__name__)


CHECKLIST_SYSTEM_PROMPT = (
    "You are an AI ethics expert. "
    "Respond only with valid JSON arrays containing checklist items."
)


CHECKLIST_PROMPT_TEMPLATE = """Create an ethical AI checklist for: "{feature_idea}"

Return ONLY a JSON array with objects in this EXACT format:
[
  {{
    "category": "Category Name",
    "item": "Specific Item to Check",
    "description": "Detailed Explanation",
    "importance": 5,
    "status": "pending",
    "recommendations": "Specific Actions"
  }}
]

Include items for:
- Bias and fairness assessment
- Privacy and data protection
- Transparency and explainability
- Safety and security measures
- Environmental impact considerations
- Social impact evaluation
- User rights and autonomy
- Regulatory compliance

Keep descriptions concise and specific to {feature_idea}."""


DEFAULT_IMPORTANCE = 3
MIN_IMPORTANCE = 1
MAX_IMPORTANCE = 5

# ```json / ``` markers, with the newline hugging them
_CODE_FENCE_RE = re.compile(r"```(?:json)?[ \t]*\n?|\n?```", re.IGNORECASE)


def build_checklist_prompt(feature_idea: str) -> str:
    return CHECKLIST_PROMPT_TEMPLATE.format(feature_idea=feature_idea)


def build_checklist_messages(feature_idea: str) -> List[dict]:
    return [
        {"role": "system", "content": CHECKLIST_SYSTEM_PROMPT},
        {"role": "user", "content": build_checklist_prompt(feature_idea)},
    ]


def fallback_checklist(feature_idea: str) -> List[ChecklistItem]:
    """Fixed four-item checklist used when model output is unusable"""
    return [
        ChecklistItem(
            category="Bias and Fairness",
            item="Data Bias Assessment",
            description=f"Evaluate potential biases in the {feature_idea} feature's data processing and outcomes",
            importance=5,
            recommendations="Conduct regular bias audits and implement fairness metrics",
        ),
        ChecklistItem(
            category="Privacy and Data Protection",
            item="Data Collection Review",
            description=f"Review all data collection points in the {feature_idea} feature",
            importance=5,
            recommendations="Implement data minimization and ensure GDPR compliance",
        ),
        ChecklistItem(
            category="Transparency",
            item="Algorithm Explainability",
            description=f"Ensure the {feature_idea} feature's decision-making process is transparent",
            importance=4,
            recommendations="Implement explainable AI techniques and user-friendly explanations",
        ),
        ChecklistItem(
            category="Safety and Security",
            item="Security Assessment",
            description=f"Conduct security analysis of the {feature_idea} feature",
            importance=5,
            recommendations="Implement encryption and regular security audits",
        ),
    ]


def strip_code_fences(text: str) -> str:
    """Remove markdown code-fence wrapping from a model reply"""
    return _CODE_FENCE_RE.sub("", text).strip()


def _text_or_default(value: Any, default: str) -> str:
    # Empty and null values count as missing
    if not value:
        return default
    if isinstance(value, str):
        return value
    return str(value)


def _importance(value: Any) -> int:
    if isinstance(value, bool) or value is None:
        return DEFAULT_IMPORTANCE
    try:
        number = float(value)
    except (TypeError, ValueError):
        return DEFAULT_IMPORTANCE
    if not math.isfinite(number) or number == 0:
        return DEFAULT_IMPORTANCE
    return max(MIN_IMPORTANCE, min(MAX_IMPORTANCE, int(round(number))))


def normalize_item(raw: Any) -> ChecklistItem:
    """
    Fill missing fields of one model-produced item with defaults

    Status is always reset to pending, whatever the model said.

    Raises:
        ParseError: the element is not a JSON object
    """
    if not isinstance(raw, dict):
        raise ParseError(f"Checklist item must be an object, got {type(raw).__name__}")

    return ChecklistItem(
        category=_text_or_default(raw.get("category"), "Uncategorized"),
        item=_text_or_default(raw.get("item"), "Unnamed Item"),
        description=_text_or_default(raw.get("description"), "No description provided"),
        importance=_importance(raw.get("importance")),
        status=ChecklistStatus.PENDING.value,
        recommendations=_text_or_default(raw.get("recommendations"), "No recommendations provided"),
    )


def parse_checklist(content: str) -> List[ChecklistItem]:
    """
    Extract a checklist from a model reply

    Raises:
        ParseError: not JSON, not a non-empty array, or an element is not an object
    """
    json_str = strip_code_fences(content)
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParseError(f"Model reply is not valid JSON: {e}") from e

    if not isinstance(data, list) or len(data) == 0:
        raise ParseError("Invalid checklist format")

    return [normalize_item(raw) for raw in data]


def calculate_percentage(checklist: List[ChecklistItem]) -> int:
    """
    Share of completed items, rounded half-up to a whole percent

    An empty checklist is 0% complete.
    """
    total = len(checklist)
    if total == 0:
        return 0
    completed = sum(1 for item in checklist if item.status == ChecklistStatus.COMPLETED.value)
    return (200 * completed + total) // (2 * total)


def summarize(checklist: List[ChecklistItem]) -> ChecklistSummary:
    return ChecklistSummary(
        checklist=checklist,
        percentage=calculate_percentage(checklist),
        total_items=len(checklist),
    )


async def generate_checklist(ai: AIService, feature_idea: str) -> ChecklistSummary:
    """
    Generate an ethical AI checklist for a feature idea

    Upstream and parse failures degrade to the fallback checklist instead
    of surfacing an error.

    Raises:
        ValidationError: feature idea missing or blank
    """
    if not feature_idea or not feature_idea.strip():
        raise ValidationError("Feature idea is required")

    try:
        content = await ai.chat_completion(build_checklist_messages(feature_idea))
    except UpstreamError as e:
        logger.error(f"Checklist generation error, using sample checklist: {e.message}")
        return summarize(fallback_checklist(feature_idea))

    try:
        checklist = parse_checklist(content)
    except ParseError as e:
        logger.warning(f"Failed to parse AI response, using sample checklist: {e.message}")
        checklist = fallback_checklist(feature_idea)

    logger.info(f"Generated checklist with {len(checklist)} items")
    return summarize(checklist)


def update_checklist_item(
    checklist: List[ChecklistItem],
    index: int,
    status: str
) -> ChecklistSummary:
    """
    Set the status of one item and recompute progress

    The input list and its items are left untouched; status is stored verbatim.

    Raises:
        IndexError: index outside the checklist
    """
    if index < 0 or index >= len(checklist):
        raise IndexError(f"Item index {index} out of range for {len(checklist)} items")

    updated = [item.model_copy() for item in checklist]
    updated[index] = updated[index].model_copy(update={"status": status})
    return summarize(updated)
