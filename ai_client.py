"""
AI client dispatcher.
Selects the active text backend based on the AI_PROVIDER environment variable
and delegates all calls to it.

Supported backends (ai_backends/<name>.py, each must expose call()):
  gemini_api  — Google Gemini via google-genai SDK (default)

To add a new backend:
  1. Create ai_backends/my_provider.py with a call() function matching the signature below.
  2. Set AI_PROVIDER=my_provider in .env.
"""
import os
import importlib

from dotenv import load_dotenv

import errors

load_dotenv()

DEFAULT_TIMEOUT = 30.0  # seconds


def call_ai(prompt: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Send a prompt to the active AI backend and return the generated text.

    Raises:
        AppError: parse error when the backend returns no text, or whatever
                  the backend failure maps to (timeout, network, quota, ...).
    """
    load_dotenv(override=True)  # re-read .env so changes apply without server restart
    provider = os.environ.get("AI_PROVIDER", "gemini_api")
    try:
        backend = importlib.import_module(f"ai_backends.{provider}")
    except ModuleNotFoundError:
        raise RuntimeError(
            f"AI backend '{provider}' not found. "
            f"Create ai_backends/{provider}.py or change AI_PROVIDER in .env."
        )

    try:
        result = backend.call(prompt, timeout)
    except Exception as e:
        raise errors.from_exception(e) from e

    text = (result.get("text") or "").strip()
    if not text:
        raise errors.parse_error("Empty response from AI provider")
    return text
