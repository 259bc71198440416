"""HTTP routes for the chat widget."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Request

from faqbot.app import App
from faqbot.intent.catalog import SUGGESTED_TOPICS
from faqbot.intent.schema import ChatRequest, MatchResult
from faqbot.web.handlers import handle_message, handle_service_choice

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_app(request: Request) -> App:
    return request.app.state.faq_app


async def _read_chat_request(request: Request) -> ChatRequest:
    """Read the chat payload leniently: bad or missing bodies become an empty message."""

    try:
        payload: Any = await request.json()
    except ValueError:
        logger.info("unparseable body path=%s", request.url.path)
        payload = {}
    if not isinstance(payload, dict):
        payload = {}
    return ChatRequest.model_validate(payload)


@router.post("/get-response", response_model=MatchResult)
async def get_response(request: Request) -> MatchResult:
    chat = await _read_chat_request(request)
    return await handle_message(chat.message, _get_app(request))


@router.post("/services-detail", response_model=MatchResult)
async def services_detail(request: Request) -> MatchResult:
    chat = await _read_chat_request(request)
    return await handle_service_choice(chat.message, _get_app(request))


@router.get("/health")
async def health() -> dict[str, bool]:
    return {"ok": True}


@router.get("/version")
async def version(request: Request) -> dict[str, str]:
    return {"version": _get_app(request).settings.app_version}


@router.get("/suggest")
async def suggest() -> list[dict[str, str]]:
    """Static starter prompts for the widget; independent of the matcher."""

    return [asdict(topic) for topic in SUGGESTED_TOPICS]
