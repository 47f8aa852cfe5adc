from fastapi.testclient import TestClient

from mention_checker.config import Settings
from mention_checker.server import create_app
from conftest import FakeClient, RANKED_ANSWER

def test_docs_page_is_available(make_client):
    resp = make_client(None).get("/docs")
    assert resp.status_code == 200
    assert "Swagger UI" in resp.text or "swagger-ui" in resp.text.lower()

def test_root_and_health(make_client):
    client = make_client(None)
    body = client.get("/").json()
    assert body == {
        "status": "ok",
        "message": "Gemini Brand Mention Checker API",
        "model": "gemini-pro",
        "temperature": 0.0,
    }
    assert client.get("/health").json() == {"ok": True}

def test_check_requires_prompt_and_brand(make_client):
    client = make_client(FakeClient("whatever"))
    resp = client.post("/api/check", json={"prompt": "best crm"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Both prompt and brand are required"
    assert client.post("/api/check", json={"prompt": "", "brand": "Acme"}).status_code == 400

def test_check_success(make_client):
    resp = make_client(FakeClient(RANKED_ANSWER)).post(
        "/api/check", json={"prompt": "What are the best CRM tools?", "brand": "Zoho One"}
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["prompt"] == "What are the best CRM tools?"
    assert body["brand"] == "Zoho One"
    assert body["mentioned"] is True
    assert body["position"] == 3
    assert body["sentiment"] in {"very_positive", "positive", "neutral", "negative", "very_negative"}
    assert isinstance(body["sentimentScore"], float)
    assert body["sentimentConfidence"] >= 0
    assert len(body["sentimentContexts"]) <= 5
    assert body["raw"] == RANKED_ANSWER
    assert "error" not in body

def test_check_without_api_key(make_client):
    resp = make_client(None).post("/api/check", json={"prompt": "best crm", "brand": "Acme"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["mentioned"] is False and body["position"] == 0
    assert body["sentiment"] == "neutral"
    assert body["sentimentContexts"] == []
    assert body["raw"] == "API_ERROR"
    assert body["error"] == "GEMINI_API_KEY not configured on server"

def test_check_model_error(make_client):
    resp = make_client(FakeClient(error=ConnectionError("network down"))).post(
        "/api/check", json={"prompt": "best crm", "brand": "Acme"}
    )
    assert resp.status_code == 200
    assert resp.json()["error"] == "network down"

def test_llm_status(make_client):
    body = make_client(None).get("/llm/status").json()
    assert body["gemini"] == {"available": False, "api_key_set": False}
    assert body["current_config"]["model"] == "gemini-pro"

def test_check_without_body_or_with_bad_types(make_client):
    client = make_client(FakeClient("whatever"))
    for kwargs in [{}, {"json": {"prompt": 5, "brand": "Acme"}}, {"json": ["best crm", "Acme"]}]:
        resp = client.post("/api/check", **kwargs)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Both prompt and brand are required"

def _preflight(client, origin):
    return client.options(
        "/api/check",
        headers={"Origin": origin, "Access-Control-Request-Method": "POST"},
    )

def test_cors_allows_any_origin_by_default():
    client = TestClient(create_app(Settings.from_env({}), llm_client=None))
    resp = _preflight(client, "https://anywhere.example.com")
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"

def test_cors_restricted_by_frontend_origin():
    settings = Settings.from_env({"FRONTEND_ORIGIN": "http://localhost:5173"})
    client = TestClient(create_app(settings, llm_client=None))
    ok = _preflight(client, "http://localhost:5173")
    assert ok.status_code == 200
    assert ok.headers["access-control-allow-origin"] == "http://localhost:5173"
    denied = _preflight(client, "https://evil.example.com")
    assert denied.status_code == 400
    assert "access-control-allow-origin" not in denied.headers
