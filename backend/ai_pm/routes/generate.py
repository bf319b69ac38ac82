"""
Generate Routes
"""
from fastapi import APIRouter, HTTPException, Depends
import logging

from ..errors import UpstreamError
from ..models import GenerateRequest, GenerateResponse
from ..services.ai import AIService, get_ai_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Generate"])


@router.post("/generate", response_model=GenerateResponse)
async def generate(request: GenerateRequest, ai: AIService = Depends(get_ai_service)):
    """Forward a prompt to the LLM and return its reply"""
    if not request.prompt:
        raise HTTPException(status_code=400, detail="Prompt is required")

    try:
        message = await ai.generate(request.prompt)
    except UpstreamError as e:
        logger.error(f"Generate error: {e.message}")
        raise HTTPException(status_code=500, detail="Failed to generate response from Groq")

    return GenerateResponse(response=message)
