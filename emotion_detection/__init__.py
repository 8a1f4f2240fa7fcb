# Root package initializer for emotion_detection
# Ensures Python treats this directory as a package for absolute imports.

__all__ = [
    "api",
    "cli",
    "core",
    "inference",
    "run",
    "samples",
    "utils",
]
