"""
Handler: Design Brief
Turns a business / product idea into a short, client-ready design brief.
"""
from pydantic import BaseModel, ValidationError

import errors
from ai_client import call_ai

MIN_QUERY_LENGTH = 10
TIMEOUT          = 30.0  # seconds


class BriefRequest(BaseModel):
    query: str


def _build_prompt(query: str) -> str:
    return (
        "As a world-class Creative Director, generate a concise, inspiring, "
        f"3-4 sentence design brief for: {query}\n\n"
        "Focus on:\n"
        "- Core visual challenge\n"
        "- Target audience insights\n"
        "- Creative direction and style\n"
        "- Key design principles\n\n"
        "Be specific, actionable, and professional."
    )


def parse_request(payload: dict) -> BriefRequest:
    try:
        req = BriefRequest.model_validate(payload)
    except ValidationError:
        raise errors.empty_input("Business Idea", "Query is required")
    if not req.query.strip():
        raise errors.empty_input("Business Idea", "Query is required")
    if len(req.query.strip()) < MIN_QUERY_LENGTH:
        raise errors.invalid_input(
            "Business Idea", f"Please provide at least {MIN_QUERY_LENGTH} characters"
        )
    return req


def process(payload: dict) -> dict:
    req   = parse_request(payload)
    brief = call_ai(_build_prompt(req.query), timeout=TIMEOUT)
    return {"brief": brief}
