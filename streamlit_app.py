import json

import httpx
import pandas as pd
import streamlit as st

from emotion_detection.inference.predictor import predict_emotion
from emotion_detection.samples import SAMPLE_TEXTS
from emotion_detection.utils.config import API_URL

st.set_page_config(page_title="Emotion Detection", page_icon="🧠", layout="wide")
st.title("🧠 Emotion Detection")
st.caption("Enter text or pick a sample. Click Analyze to see the dominant emotion and every intensity score.")


def _analyse(text: str) -> dict:
    if st.session_state.get("use_api"):
        base_url = st.session_state.get("api_url", API_URL).rstrip("/")
        with httpx.Client(timeout=30.0) as client:
            resp = client.post(f"{base_url}/emotionDetector", json={"text": text})
        return resp.json()
    return json.loads(predict_emotion(text))


def _scores_frame(section: dict) -> pd.DataFrame:
    # Iterate generically: only numeric fields are scores
    scores = {k: v for k, v in section.items() if isinstance(v, (int, float)) and not isinstance(v, bool)}
    return pd.DataFrame({"emotion": list(scores.keys()), "score": list(scores.values())}).set_index("emotion")


def _render_result(result: dict):
    if not isinstance(result, dict) or not result:
        st.warning("No result to display.")
        return
    if "error" in result:
        st.error(result["error"])
        return
    original = result.get("original_emotions", {})
    expanded = result.get("expanded_emotions", {})
    c1, c2 = st.columns([1, 2])
    with c1:
        st.metric(label="Dominant emotion", value=str(original.get("dominant_emotion", "")).capitalize())
        st.metric(label="Dominant (expanded)", value=str(expanded.get("dominant_emotion", "")).capitalize())
    with c2:
        st.bar_chart(_scores_frame(original))
    if expanded:
        st.subheader("Expanded emotions")
        st.write(expanded.get("explanation", ""))
        df = _scores_frame(expanded).sort_values("score", ascending=False)
        st.bar_chart(df)
    with st.expander("Raw output (JSON)"):
        st.json(result)


def _run(text: str):
    with st.spinner("Analyzing..."):
        try:
            _render_result(_analyse(text))
        except (httpx.HTTPError, ValueError):
            st.error("Analysis failed. Please try again.")


analyze_tab, samples_tab, settings_tab = st.tabs(["Analyze", "Samples", "Settings"])

with analyze_tab:
    with st.form("analyze_form"):
        text_input = st.text_area(
            "Text",
            placeholder="Enter your text here to analyze emotions... (e.g., 'I am so happy today!')",
        )
        submitted = st.form_submit_button("Analyze Emotions", type="primary")
        if submitted:
            _run(text_input)

with samples_tab:
    st.subheader("Try these sample texts")
    for i, sample in enumerate(SAMPLE_TEXTS):
        if st.button(f'"{sample}"', key=f"sample_{i}"):
            _run(sample)

with settings_tab:
    st.subheader("Settings")
    st.write("Local analysis is used by default. Optionally, route requests through the FastAPI server.")
    st.checkbox("Use FastAPI server", value=False, key="use_api", help="Calls POST /emotionDetector.")
    st.text_input("API base URL", value=API_URL, key="api_url", help="E.g., http://localhost:8000")
