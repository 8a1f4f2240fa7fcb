from typing import List, Optional, Tuple

# Texts offered by the UI sample picker
SAMPLE_TEXTS: List[str] = [
    "I am so happy today! Everything is going perfectly.",
    "I'm really frustrated with this situation. It makes me angry.",
    "I'm scared about the upcoming presentation tomorrow.",
    "This food tastes absolutely disgusting.",
    "I feel so sad and lonely right now.",
]

# Self-check cases: (text, expected base-set dominant emotion); None means invalid input
LABELLED_SAMPLES: List[Tuple[str, Optional[str]]] = [
    ("I am so happy today!", "joy"),
    ("I am really angry about this!", "anger"),
    ("This is so scary and frightening", "fear"),
    ("I feel so sad and lonely", "sadness"),
    ("This food is absolutely disgusting", "disgust"),
    ("", None),
]
