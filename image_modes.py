# ─────────────────────────────────────────────────────────────────────────────
#  Image mode registry
#
#  Each mode maps to a backend module in image_backends/.
#  Modes are offered on the design-concepts page in the order they appear here.
#
#  Per-mode config fields:
#    backend          — module name in image_backends/ (e.g. "pollinations")
#    name             — short title shown on the page and the result badge
#    description      — one-line description shown under the generate button
#    requires_api_key — whether the mode calls Gemini (False = no key needed)
#    width / height   — requested (or maximum) image size in pixels
#    preprocessors    — ordered list of preprocessor module names run on the
#                       returned image bytes (backends that return bytes only)
# ─────────────────────────────────────────────────────────────────────────────

_DEFAULT_FLAGS = {
    "requires_api_key": True,
    "width":            1024,
    "height":           1024,
    "preprocessors":    [],
}

IMAGE_MODES: dict[str, dict] = {

    "basic": {
        **_DEFAULT_FLAGS,
        "backend":          "pollinations",
        "name":             "Basic Mode",
        "description":      "Fast. Free. Instant. Generates concepts in seconds using Pollinations AI.",
        "requires_api_key": False,
    },

    "pro": {
        **_DEFAULT_FLAGS,
        "backend":       "imagen",
        "name":          "Pro Mode",
        "description":   (
            "Uses Google Imagen for photorealistic, ultra-premium quality visuals. "
            "Ideal for professional branding, packaging, and high-end portfolio work."
        ),
        "model":         "imagen-3.0-generate-002",
        "aspect_ratio":  "1:1",
        "preprocessors": ["resize"],
    },

}

# ── Mode used when the visitor has no saved preference ───────────────────────
DEFAULT_IMAGE_MODE = "basic"

# Cookie that remembers the last mode a visitor generated with
MODE_COOKIE = "designImageMode"
