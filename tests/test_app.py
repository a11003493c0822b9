import pytest

import errors
from enhancer import CLOSING
from handlers import brief, ideas
from idea_templates import IDEA_TEMPLATES
from image_modes import MODE_COOKIE


def test_index_page(client):
    response = client.get("/")
    assert response.status_code == 200
    html = response.data.decode()
    assert "Let's Work Together" in html
    assert "Generate Ideas" in html


def test_index_uses_optimized_project_images(client):
    html = client.get("/").data.decode()
    assert "sample.jpg?w=800&amp;q=80&amp;f=auto" in html or "sample.jpg?w=800&q=80&f=auto" in html


def test_robots_txt(client):
    response = client.get("/robots.txt")
    assert response.status_code == 200
    assert response.mimetype == "text/plain"


def test_design_concepts_defaults_to_basic(client):
    html = client.get("/design-concepts").data.decode()
    assert 'data-mode="basic"' in html


def test_design_concepts_reads_saved_mode(client):
    client.set_cookie(MODE_COOKIE, "pro")
    html = client.get("/design-concepts").data.decode()
    assert 'id="design-generator" data-mode="pro"' in html


def test_design_concepts_ignores_unknown_saved_mode(client):
    client.set_cookie(MODE_COOKIE, "ultra")
    html = client.get("/design-concepts").data.decode()
    assert 'id="design-generator" data-mode="basic"' in html


# ── /api/generate-brief ───────────────────────────────────────────────────────

def test_brief_success(client, api_key, monkeypatch):
    prompts = []

    def fake_call_ai(prompt, timeout=None):
        prompts.append((prompt, timeout))
        return "A bold, earthy identity for eco streetwear."

    monkeypatch.setattr(brief, "call_ai", fake_call_ai)
    response = client.post("/api/generate-brief", json={"query": "Sustainable streetwear brand"})

    assert response.status_code == 200
    assert response.get_json() == {"brief": "A bold, earthy identity for eco streetwear."}
    prompt, timeout = prompts[0]
    assert "Sustainable streetwear brand" in prompt
    assert "Creative Director" in prompt
    assert timeout == 30.0


@pytest.mark.parametrize("body", [{}, {"query": ""}, {"query": "   "}, {"query": 42}])
def test_brief_requires_query(client, api_key, body):
    response = client.post("/api/generate-brief", json=body)
    assert response.status_code == 400
    assert response.get_json()["error"] == "Query is required"


def test_brief_rejects_short_query(client, api_key):
    response = client.post("/api/generate-brief", json={"query": "logo"})
    assert response.status_code == 400
    assert response.get_json()["code"] == "INVALID_INPUT"


def test_brief_without_api_key(client, no_api_key, app, tmp_path):
    response = client.post("/api/generate-brief", json={"query": "Sustainable streetwear brand"})
    assert response.status_code == 500
    data = response.get_json()
    assert data["error"] == "API key not configured"
    assert data["code"] == "MISSING_API_KEY"
    with open(app.config["ERROR_LOG"], encoding="utf-8") as f:
        assert "MISSING_API_KEY" in f.read()


def test_brief_timeout(client, api_key, monkeypatch):
    def fake_call_ai(prompt, timeout=None):
        raise errors.timeout_error()

    monkeypatch.setattr(brief, "call_ai", fake_call_ai)
    response = client.post("/api/generate-brief", json={"query": "Sustainable streetwear brand"})
    assert response.status_code == 408
    assert response.get_json()["code"] == "TIMEOUT_ERROR"


def test_brief_unexpected_failure(client, api_key, monkeypatch):
    def fake_call_ai(prompt, timeout=None):
        raise RuntimeError("boom")

    monkeypatch.setattr(brief, "call_ai", fake_call_ai)
    response = client.post("/api/generate-brief", json={"query": "Sustainable streetwear brand"})
    assert response.status_code == 500
    assert response.get_json()["error"] == "Failed to generate brief"


# ── /api/generate-ideas and /api/idea-template ───────────────────────────────

def test_ideas_success(client, api_key, monkeypatch):
    monkeypatch.setattr(ideas, "call_ai", lambda prompt, timeout=30.0: "1. Geometric mark")
    response = client.post("/api/generate-ideas", json={"projectType": "Logo Design"})
    assert response.status_code == 200
    assert response.get_json() == {"ideas": "1. Geometric mark", "source": "ai"}


def test_ideas_requires_project_type(client, api_key):
    response = client.post("/api/generate-ideas", json={"projectType": " "})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Project type is required"


def test_ideas_without_api_key(client, no_api_key):
    response = client.post("/api/generate-ideas", json={"projectType": "Logo Design"})
    assert response.status_code == 500
    assert response.get_json()["error"] == "API key not configured"


def test_idea_template_works_without_api_key(client, no_api_key):
    response = client.post("/api/idea-template", json={"projectType": "Packaging for tea"})
    assert response.status_code == 200
    assert response.get_json() == {"ideas": dict(IDEA_TEMPLATES)["packaging"], "source": "template"}


def test_idea_template_requires_project_type(client):
    response = client.post("/api/idea-template", json={})
    assert response.status_code == 400


# ── /api/enhance-message ──────────────────────────────────────────────────────

def test_enhance_message(client, no_api_key):
    response = client.post("/api/enhance-message", json={"message": "  hi, i want a logo  "})
    assert response.status_code == 200
    assert response.get_json()["message"] == f"hi, I'm interested in a logo.\n\n{CLOSING}"


def test_enhance_message_requires_text(client):
    response = client.post("/api/enhance-message", json={"message": "   "})
    assert response.status_code == 400
    assert response.get_json()["code"] == "EMPTY_INPUT"


# ── /api/generate-image ───────────────────────────────────────────────────────

def test_basic_image_needs_no_key(client, no_api_key):
    response = client.post("/api/generate-image", json={"prompt": "violet fox logo", "mode": "basic"})
    assert response.status_code == 200
    data = response.get_json()
    assert data["mode"] == "basic"
    assert data["imageUrl"].startswith("https://image.pollinations.ai/prompt/violet%20fox%20logo?")
    assert f"{MODE_COOKIE}=basic" in response.headers.get("Set-Cookie", "")


def test_pro_image_without_api_key(client, no_api_key):
    response = client.post("/api/generate-image", json={"prompt": "violet fox logo", "mode": "pro"})
    assert response.status_code == 500
    assert response.get_json()["error"] == "API key not configured"


def test_pro_image_uses_imagen_backend(client, api_key, monkeypatch):
    import image_backends.imagen as imagen

    monkeypatch.setattr(imagen, "generate", lambda prompt, config: "data:image/png;base64,AAAA")
    response = client.post("/api/generate-image", json={"prompt": "violet fox logo", "mode": "pro"})
    assert response.status_code == 200
    assert response.get_json() == {"imageUrl": "data:image/png;base64,AAAA", "mode": "pro"}
    assert f"{MODE_COOKIE}=pro" in response.headers.get("Set-Cookie", "")


def test_image_backend_failure(client, api_key, monkeypatch):
    import image_backends.imagen as imagen

    def broken(prompt, config):
        raise ConnectionError("unreachable")

    monkeypatch.setattr(imagen, "generate", broken)
    response = client.post("/api/generate-image", json={"prompt": "violet fox logo", "mode": "pro"})
    assert response.status_code == 503
    assert response.get_json()["code"] == "NETWORK_ERROR"


def test_image_requires_prompt(client):
    response = client.post("/api/generate-image", json={"prompt": "  ", "mode": "basic"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Prompt is required"


def test_image_rejects_unknown_mode(client):
    response = client.post("/api/generate-image", json={"prompt": "violet fox logo", "mode": "ultra"})
    assert response.status_code == 400
    assert response.get_json()["code"] == "INVALID_INPUT"


@pytest.mark.parametrize("mode", [None, 5, ["pro"]])
def test_image_rejects_non_string_mode(client, mode):
    response = client.post("/api/generate-image", json={"prompt": "violet fox logo", "mode": mode})
    assert response.status_code == 400
    data = response.get_json()
    assert data["code"] == "INVALID_INPUT"
    assert data["error"].startswith("Invalid Mode")


def test_brief_script_rejects_empty_brief(client):
    script = client.get("/static/app.js").data.decode()
    assert "!data.brief.trim()" in script
    assert "Failed to process server response. Please try again." in script
