"""Parse the BigQuery service account blob from the environment.

``GOOGLE_APPLICATION_CREDENTIALS`` holds the service account JSON itself
(pasted into the env var on PaaS hosts), not a path to a file.  A value that
does not parse is logged and replaced by an empty dict: the client still gets
built, and requests made with it fail as unauthenticated.
"""
import json
from typing import Any, Dict, Optional

from statasphere.utils.logger import log


def _is_json(value: str) -> bool:
    """Check if a string looks like a JSON object (not a file path)."""
    stripped = value.strip()
    return stripped.startswith("{") and stripped.endswith("}")


def parse_credentials(raw: Optional[str]) -> Dict[str, Any]:
    """Return the service account info dict, or ``{}`` if ``raw`` is unusable."""
    if not raw or not raw.strip():
        return {}

    if not _is_json(raw):
        log.warning("GOOGLE_APPLICATION_CREDENTIALS does not contain a JSON object, using empty credentials")
        return {}

    try:
        info = json.loads(raw)
    except json.JSONDecodeError as e:
        log.warning(f"GOOGLE_APPLICATION_CREDENTIALS is not valid JSON ({e}), using empty credentials")
        return {}

    return info
