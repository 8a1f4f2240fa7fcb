import json

from fastapi.testclient import TestClient

from emotion_detection.api.app import app
from emotion_detection.samples import SAMPLE_TEXTS


def main():
    client = TestClient(app)
    print("Local client posting sample texts:", len(SAMPLE_TEXTS))
    for text in SAMPLE_TEXTS + ["   "]:
        payload = {"text": text}
        resp = client.post("/emotionDetector", json=payload)
        try:
            data = resp.json()
        except ValueError:
            data = {"status_code": resp.status_code, "text": resp.text}
        print(json.dumps({
            "request": payload,
            "status_code": resp.status_code,
            "response": data
        }, indent=2))


if __name__ == "__main__":
    main()
