from fastapi import FastAPI, HTTPException

from emotion_detection.api.routes import router
from emotion_detection.inference.detector import resolve_backend

app = FastAPI(title="Emotion Detection API")
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/ready")
def ready():
    checks = {
        "dry_run_ok": False,
        "model_loaded": None,
    }
    errors = {}

    # Dry-run end-to-end analysis through the public formatter
    try:
        from emotion_detection.inference.detector import detect_emotions
        from emotion_detection.inference.predictor import format_result
        res = format_result(detect_emotions("hello world"))
        checks["dry_run_ok"] = "original_emotions" in res and "expanded_emotions" in res
        if not checks["dry_run_ok"]:
            errors["dry_run"] = res.get("error")
    except Exception as e:
        errors["dry_run"] = str(e)

    # Model handle state only matters when the transformers backend is configured
    if resolve_backend() == "transformers":
        from emotion_detection.inference.backend import get_text_model_handle
        checks["model_loaded"] = get_text_model_handle().loaded

    if not checks["dry_run_ok"]:
        raise HTTPException(status_code=503, detail={"status": "not_ready", "checks": checks, "errors": errors})

    return {"status": "ready", "checks": checks}
