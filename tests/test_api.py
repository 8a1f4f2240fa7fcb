"""
HTTP endpoint tests through the FastAPI test client
"""

import pytest
from fastapi.testclient import TestClient

from emotion_detection.api import routes
from emotion_detection.api.app import app
from emotion_detection.core import AnalysisResult
from emotion_detection.utils.config import INTERNAL_ERROR_MESSAGE, INVALID_TEXT_MESSAGE


@pytest.fixture
def client():
    return TestClient(app)


class TestEmotionDetectorEndpoint:
    """POST and GET /emotionDetector"""

    def test_post_success(self, client):
        resp = client.post("/emotionDetector", json={"text": "I am so happy today!"})
        assert resp.status_code == 200
        data = resp.json()
        assert set(data) == {"original_emotions", "expanded_emotions"}
        assert data["original_emotions"]["dominant_emotion"] in {"anger", "disgust", "fear", "joy", "sadness"}
        assert "explanation" in data["expanded_emotions"]

    @pytest.mark.parametrize("payload", [{"text": ""}, {"text": "   "}, {}])
    def test_post_blank_is_400(self, client, payload):
        resp = client.post("/emotionDetector", json=payload)
        assert resp.status_code == 400
        assert resp.json() == {"error": INVALID_TEXT_MESSAGE, "status_code": 400}

    def test_get_query_success(self, client):
        resp = client.get("/emotionDetector", params={"textToAnalyze": "I feel so sad and lonely"})
        assert resp.status_code == 200
        assert "original_emotions" in resp.json()

    def test_get_without_text_is_400(self, client):
        resp = client.get("/emotionDetector")
        assert resp.status_code == 400
        assert resp.json()["error"] == INVALID_TEXT_MESSAGE

    def test_oversized_text_is_413(self, client):
        resp = client.post("/emotionDetector", json={"text": "a" * (routes.MAX_TEXT_BYTES + 1)})
        assert resp.status_code == 413

    def test_internal_error_is_500(self, client, monkeypatch):
        monkeypatch.setattr(routes, "detect_emotions", lambda text: AnalysisResult.internal_error())
        resp = client.post("/emotionDetector", json={"text": "anything"})
        assert resp.status_code == 500
        assert resp.json() == {"error": INTERNAL_ERROR_MESSAGE, "status_code": 500}


class TestServiceEndpoints:
    """Health and readiness checks"""

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_ready(self, client):
        resp = client.get("/ready")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ready"
        assert data["checks"]["dry_run_ok"] is True
