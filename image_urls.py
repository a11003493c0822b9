"""Helpers for portfolio image URLs, registered as Jinja filters in app.py."""
from urllib.parse import quote


def optimize_image_url(url: str, width: int = 1200, quality: int = 80) -> str:
    """Add resize / quality parameters for CDN-hosted images; other URLs pass through."""
    if not url:
        return url
    if "cloudinary" in url:
        return f"{url}?w={width}&q={quality}&f=auto"
    if "imagekit" in url:
        return f"{url}?tr=w-{width},q-{quality},f-auto"
    return url


def image_placeholder(color: str = "#0B0F1A") -> str:
    """16:9 single-colour SVG as a data: URL, shown while the real image loads."""
    return (
        "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 16 9'%3E"
        f"%3Crect fill='{quote(color, safe='')}' width='16' height='9'/%3E%3C/svg%3E"
    )
