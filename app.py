import os
import traceback
import importlib
from datetime import datetime

from flask import Flask, request, render_template, Response, jsonify
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

import errors
import contact_relay
import site_config
from enhancer import enhance
from errors import AppError
from handlers import brief, ideas
from image_modes import IMAGE_MODES, DEFAULT_IMAGE_MODE, MODE_COOKIE
from image_urls import optimize_image_url, image_placeholder
from site_config import SITE_CONFIG

load_dotenv()

app = Flask(__name__)
app.config["ERROR_LOG"] = "last_error.log"
app.config["DEFAULT_IMAGE_MODE"] = os.environ.get("DEFAULT_IMAGE_MODE", DEFAULT_IMAGE_MODE)

app.add_template_filter(optimize_image_url, "optimize")
app.add_template_filter(image_placeholder, "placeholder")

# Endpoints that always talk to Gemini; generate_image is checked per mode
_KEY_REQUIRED = {"generate_brief", "generate_ideas"}

MODE_COOKIE_MAX_AGE = 365 * 24 * 3600


class ImageRequest(BaseModel):
    prompt: str
    mode:   str = DEFAULT_IMAGE_MODE


# ── Inject site config into every template automatically ──────────────────────
@app.context_processor
def inject_globals():
    return {"site": SITE_CONFIG}


@app.before_request
def require_api_key():
    if request.endpoint == "generate_image":
        mode = _json_body().get("mode", DEFAULT_IMAGE_MODE)
        # Unknown modes fall through to validation in the route
        if not isinstance(mode, str) or not IMAGE_MODES.get(mode, {}).get("requires_api_key", False):
            return
    elif request.endpoint not in _KEY_REQUIRED:
        return
    if not os.environ.get("GEMINI_API_KEY"):
        err = errors.missing_api_key()
        _log_error(f"endpoint={request.endpoint}", err)
        return jsonify(err.to_dict()), err.status_code


@app.errorhandler(AppError)
def handle_app_error(err: AppError):
    _log_error(f"endpoint={request.endpoint}", err)
    return jsonify(err.to_dict()), err.status_code


# ── Helpers ───────────────────────────────────────────────────────────────────

def _log_error(context: str, exc: Exception) -> None:
    """Log the error and keep the last one with timestamp in last_error.log (no user data)."""
    code = getattr(exc, "code", type(exc).__name__)
    app.logger.error("[%s] (%s): %s", code, context, exc)
    with open(app.config["ERROR_LOG"], "w", encoding="utf-8") as f:
        f.write(f"[{datetime.now().isoformat(timespec='seconds')}] [{code}] {context}\n\n")
        if exc.__traceback__:
            traceback.print_exception(type(exc), exc, exc.__traceback__, file=f)
        else:
            f.write(f"{type(exc).__name__}: {exc}\n")


def _json_body() -> dict:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _saved_image_mode() -> str:
    """Image mode preference from the visitor's cookie, or the configured default."""
    mode = request.cookies.get(MODE_COOKIE)
    if mode in IMAGE_MODES:
        return mode
    return app.config["DEFAULT_IMAGE_MODE"]


def _get_image_backend(mode: str):
    backend_name = IMAGE_MODES[mode]["backend"]
    return importlib.import_module(f"image_backends.{backend_name}")


# ── Pages ─────────────────────────────────────────────────────────────────────

@app.route("/robots.txt")
def robots_txt():
    return Response("User-agent: *\nAllow: /\n", mimetype="text/plain")


@app.route("/")
def index():
    return render_template("index.html")


@app.route("/design-concepts")
def design_concepts():
    return render_template(
        "design_concepts.html",
        image_modes=IMAGE_MODES,
        image_mode=_saved_image_mode(),
    )


@app.route("/contact", methods=["POST"])
def contact():
    missing = contact_relay.missing_fields(request.form)
    if missing:
        return render_template(
            "error.html",
            message=f"Please fill in: {', '.join(missing)}.",
        ), 400

    try:
        sent = contact_relay.send(request.form, site_config.FORM_RELAY_URL)
    except (OSError, ValueError) as e:
        # HTTPError (relay rejected the form) is an OSError too
        _log_error("contact relay", e)
        sent = False
    else:
        if not sent:
            _log_error("contact relay", errors.api_error("form relay answered with a non-2xx status"))

    if not sent:
        return render_template(
            "error.html",
            message="Oops! There was a problem sending your form",
        ), 502
    return render_template("sent.html")


# ── AI endpoints ──────────────────────────────────────────────────────────────

@app.route("/api/generate-brief", methods=["POST"])
def generate_brief():
    try:
        return jsonify(brief.process(_json_body()))
    except AppError:
        raise
    except Exception as e:
        raise errors.ai_generation_error("brief") from e


@app.route("/api/generate-ideas", methods=["POST"])
def generate_ideas():
    try:
        return jsonify(ideas.process(_json_body()))
    except AppError:
        raise
    except Exception as e:
        raise errors.ai_generation_error("ideas") from e


@app.route("/api/generate-image", methods=["POST"])
def generate_image():
    try:
        req = ImageRequest.model_validate(_json_body())
    except ValidationError as e:
        if any(err["loc"][:1] == ("mode",) for err in e.errors()):
            raise errors.invalid_input("Mode", "mode must be one of: " + ", ".join(IMAGE_MODES))
        raise errors.empty_input("Prompt", "Prompt is required")
    if not req.prompt.strip():
        raise errors.empty_input("Prompt", "Prompt is required")
    if req.mode not in IMAGE_MODES:
        raise errors.invalid_input("Mode", f"unknown image mode '{req.mode}'")

    backend = _get_image_backend(req.mode)
    try:
        image_url = backend.generate(req.prompt, IMAGE_MODES[req.mode])
    except Exception as e:
        raise errors.from_exception(e) from e

    resp = jsonify({"imageUrl": image_url, "mode": req.mode})
    resp.set_cookie(MODE_COOKIE, req.mode, max_age=MODE_COOKIE_MAX_AGE, samesite="Lax")
    return resp


# ── Local helpers (no AI call) ────────────────────────────────────────────────

@app.route("/api/enhance-message", methods=["POST"])
def enhance_message():
    message = _json_body().get("message")
    if not isinstance(message, str) or not message.strip():
        raise errors.empty_input("Message", "Message is required")
    return jsonify({"message": enhance(message.strip())})


@app.route("/api/idea-template", methods=["POST"])
def idea_template():
    return jsonify(ideas.template(_json_body()))


if __name__ == "__main__":
    print("Starting on http://localhost:5000")
    app.run(debug=True, port=5000)
