"""
Image backend: Google Imagen
Generates one image through the Gemini API and returns it as a data: URL.
Requires GEMINI_API_KEY in environment.
"""
import io
import os
import base64
import importlib

from google import genai
from google.genai import types
from PIL import Image

import errors


def _run_preprocessors(image: Image.Image, config: dict) -> Image.Image:
    for name in config.get("preprocessors", []):
        mod   = importlib.import_module(f"preprocessors.{name}")
        image = mod.process(image, config)
    return image


def _to_data_url(image_bytes: bytes, config: dict) -> str:
    try:
        image = Image.open(io.BytesIO(image_bytes))
        image.load()
    except Exception as e:
        raise errors.parse_error(f"Imagen returned unreadable image data ({e})") from e

    image = _run_preprocessors(image.convert("RGB"), config)

    buf = io.BytesIO()
    image.save(buf, "PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("utf-8")


def generate(prompt: str, config: dict) -> str:
    api_key = os.environ.get("GEMINI_API_KEY")
    if not api_key:
        raise errors.missing_api_key()

    client   = genai.Client(api_key=api_key)
    response = client.models.generate_images(
        model=config.get("model", "imagen-3.0-generate-002"),
        prompt=prompt,
        config=types.GenerateImagesConfig(
            number_of_images=1,
            aspect_ratio=config.get("aspect_ratio", "1:1"),
        ),
    )

    if not response.generated_images:
        raise errors.parse_error("Imagen returned no images")
    image_bytes = response.generated_images[0].image.image_bytes
    if not image_bytes:
        raise errors.parse_error("Imagen returned an empty image")
    return _to_data_url(image_bytes, config)
