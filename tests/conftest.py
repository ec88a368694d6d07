"""
Shared test setup.

Environment variables are pinned BEFORE any ghmodels import so that a
developer's own GHMODELS_* settings or .env cannot leak into the tests.
"""

import os

os.environ["GHMODELS_INFERENCE_URL"] = "https://models.github.ai/inference/chat/completions"
os.environ["GHMODELS_REQUEST_TIMEOUT"] = "60.0"
os.environ["GHMODELS_DEFAULT_MODEL"] = "openai/gpt-4.1"
os.environ["GHMODELS_SYSTEM_PROMPT"] = ""
os.environ["GHMODELS_LOG_LEVEL"] = "WARNING"
