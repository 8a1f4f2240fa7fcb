from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from emotion_detection.inference.detector import detect_emotions
from emotion_detection.inference.predictor import format_result

router = APIRouter()

MAX_TEXT_BYTES = 32 * 1024  # 32 KB


class EmotionRequest(BaseModel):
    text: Optional[str] = None


def _analyse(text: Optional[str]):
    if text is not None and len(text.encode("utf-8", errors="ignore")) > MAX_TEXT_BYTES:
        raise HTTPException(status_code=413, detail=f"Text too long. Limit: {MAX_TEXT_BYTES} bytes")
    payload = format_result(detect_emotions(text or ""))
    if "error" in payload:
        return JSONResponse(status_code=payload["status_code"], content=payload)
    return payload


@router.post("/emotionDetector")
def emotion_detector(req: EmotionRequest):
    return _analyse(req.text)


@router.get("/emotionDetector")
def emotion_detector_query(textToAnalyze: Optional[str] = None):
    return _analyse(textToAnalyze)
