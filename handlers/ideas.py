"""
Handler: Design Ideas
Asks the AI for design concepts, palette, typography and style notes
for a project type. The canned templates in idea_templates.py serve the
same request offline (see template()).
"""
from pydantic import BaseModel, ValidationError

import errors
import idea_templates
from ai_client import call_ai


class IdeasRequest(BaseModel):
    projectType: str


def _build_prompt(project_type: str) -> str:
    return (
        "As a professional graphic design assistant, generate creative ideas for: "
        f"{project_type}\n\n"
        "Provide:\n"
        "- 3-5 unique design concepts\n"
        "- Color palette suggestions\n"
        "- Typography recommendations\n"
        "- Style inspirations\n"
        "- Key considerations\n\n"
        "Format concisely for a client presentation. Keep it professional and actionable."
    )


def parse_request(payload: dict) -> IdeasRequest:
    try:
        req = IdeasRequest.model_validate(payload)
    except ValidationError:
        raise errors.empty_input("Project Type", "Project type is required")
    if not req.projectType.strip():
        raise errors.empty_input("Project Type", "Project type is required")
    return req


def process(payload: dict) -> dict:
    req   = parse_request(payload)
    ideas = call_ai(_build_prompt(req.projectType.strip()))
    return {"ideas": ideas, "source": "ai"}


def template(payload: dict) -> dict:
    req = parse_request(payload)
    return {"ideas": idea_templates.lookup(req.projectType.strip()), "source": "template"}
