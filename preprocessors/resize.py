"""
Preprocessor: Resize

Proportionally shrinks generated images to fit within the mode's
width × height box (1024 × 1024 by default) before they are inlined.
Smaller images are NOT upscaled — they are returned unchanged.
Uses LANCZOS resampling for best downscale quality.
"""
from PIL import Image

DEFAULT_MAX = 1024


def process(image: Image.Image, config: dict) -> Image.Image:
    max_w = config.get("width", DEFAULT_MAX)
    max_h = config.get("height", DEFAULT_MAX)

    w, h = image.size
    if w <= max_w and h <= max_h:
        return image

    ratio    = min(max_w / w, max_h / h)
    new_size = (max(1, int(w * ratio)), max(1, int(h * ratio)))
    return image.resize(new_size, Image.LANCZOS)
