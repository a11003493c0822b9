"""
Image backend: Pollinations AI
The image is rendered by Pollinations when the browser loads the URL,
so nothing is fetched here and no API key is needed.
"""
from urllib.parse import quote, urlencode

BASE_URL = "https://image.pollinations.ai/prompt/"


def generate(prompt: str, config: dict) -> str:
    """Return the Pollinations URL for *prompt*."""
    params = {
        "width":  config.get("width", 1024),
        "height": config.get("height", 1024),
        "nologo": "true",
    }
    if config.get("seed") is not None:
        params["seed"] = config["seed"]
    return f"{BASE_URL}{quote(prompt.strip(), safe='')}?{urlencode(params)}"
