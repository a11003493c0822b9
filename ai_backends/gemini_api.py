"""
AI backend: Google Gemini
Uses gemini-2.0-flash (override with GEMINI_TEXT_MODEL) for plain text output.
Requires GEMINI_API_KEY in environment.
"""
import os
import json

from google import genai
from google.genai import types

import errors

DEFAULT_MODEL = "gemini-2.0-flash"


def _retry_hint(msg: str) -> str:
    """Pull the RetryInfo delay out of a 429 error body, if there is one."""
    try:
        data = json.loads(msg[msg.index("{"):])
    except ValueError:
        return ""
    for d in data.get("error", {}).get("details", []):
        if d.get("@type", "").endswith("RetryInfo"):
            return f" Retry after: {d['retryDelay']}."
    return ""


def call(prompt: str, timeout: float) -> dict:
    """Send a text prompt to Gemini and return the generated text.

    Args:
        prompt:  Text prompt.
        timeout: Request timeout in seconds.

    Returns:
        {"text": str, "_model": str}
    """
    api_key = os.environ.get("GEMINI_API_KEY")
    if not api_key:
        raise errors.missing_api_key()

    model  = os.environ.get("GEMINI_TEXT_MODEL", DEFAULT_MODEL)
    client = genai.Client(
        api_key=api_key,
        http_options=types.HttpOptions(timeout=int(timeout * 1000)),
    )

    try:
        response = client.models.generate_content(model=model, contents=prompt)
    except Exception as e:
        msg = str(e)
        if "429" in msg or "RESOURCE_EXHAUSTED" in msg:
            raise errors.quota_exceeded(_retry_hint(msg)) from e
        raise

    return {"text": response.text or "", "_model": model}
