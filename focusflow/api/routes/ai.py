"""
AI Route - Breakdown, images, coaching, and the daily summary

Every endpoint here calls an external generator and every one has a local
fallback: templates for breakdowns, a placeholder SVG for images, fixed
text for coaching and summaries. An upstream failure never becomes an
error response; poweredBy tells the client which path answered.

The state lock is held only while reading or writing state, never while
waiting on a generator.
"""

import logging

from fastapi import APIRouter, Depends

from focusflow.ai.coach import coach_reply, daily_summary
from focusflow.ai.image_generator import build_image_request, generate_with_fallback
from focusflow.api.dependencies import get_state
from focusflow.api.models import BreakdownRequest, CoachRequest, ImageRequestBody
from focusflow.errors import ValidationError
from focusflow.state import AppState
from focusflow.tasks.decompose import ai_breakdown


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/breakdown")
async def breakdown_task(request: BreakdownRequest, state: AppState = Depends(get_state)):
    """
    Break a task into tiny timed steps.

    Uses the text generator when it is reachable, the keyword templates
    otherwise.
    """
    if not request.task or not request.task.strip():
        raise ValidationError("Task description required")

    max_steps = int(state.config.get("breakdown", {}).get("max_steps", 8))
    result = await ai_breakdown(request.task, state.text_generator, max_steps=max_steps)
    return result.to_dict()


@router.post("/image")
async def generate_image(request: ImageRequestBody, state: AppState = Depends(get_state)):
    """
    Generate an image for a prompt.

    Returns the image as base64 plus a ready-to-use data URL.
    """
    image_request = build_image_request(
        prompt=request.prompt,
        width=request.width,
        height=request.height,
        seed=request.seed,
        negative_prompt=request.negative_prompt,
        config=state.config["ai"]["image"],
    )
    image, powered_by = await generate_with_fallback(image_request, state.image_generator)

    return {
        "image": image.encoded,
        "mimeType": image.mime_type,
        "dataUrl": image.data_url,
        "width": image_request.width,
        "height": image_request.height,
        "seed": image_request.seed,
        "prompt": image_request.prompt,
        "poweredBy": powered_by,
    }


@router.post("/coach")
async def coach(request: CoachRequest, state: AppState = Depends(get_state)):
    """Short, kind reply to whatever the user is stuck on."""
    completed_today = request.completed_today
    if completed_today is None:
        with state.lock:
            state.reconcile_day()
            completed_today = state.ledger.completed_count

    coach_config = state.config.get("coach", {})
    result = await coach_reply(
        request.message,
        energy=request.energy,
        completed_today=completed_today,
        generator=state.text_generator,
        max_sentences=int(coach_config.get("max_sentences", 3)),
        max_chars=int(coach_config.get("max_message_chars", 2000)),
    )
    return {"response": result.text, "poweredBy": result.powered_by}


@router.get("/summary")
async def summary(state: AppState = Depends(get_state)):
    """Summary of today's progress."""
    with state.lock:
        stats = state.stats()

    result = await daily_summary(stats, state.text_generator)
    return {"summary": result.text, "stats": stats, "poweredBy": result.powered_by}
