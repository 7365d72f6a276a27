"""Structured-text recovery — pulls a JSON value out of raw model output.

Completions arrive wrapped in prose or markdown fences and are sometimes cut
off at the token limit. Recovery runs a fixed sequence of attempts:

1. trim whitespace
2. take the interior of the first ```json fence, else of the first plain fence
3. if the content should be an array (object) but does not end with ] (}),
   cut it back to the last ] (}) so fully-formed leading content survives
4. strict ``json.loads``

Anything that still fails to parse is reported as a failed RecoveryResult;
callers decide whether to synthesize a substitute or surface the error.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Literal

logger = logging.getLogger(__name__)

Expected = Literal["object", "array"]

# A fence may be unterminated when the completion was truncated.
_JSON_FENCE = re.compile(r"```json[ \t]*\n?(.*?)(?:```|\Z)", re.DOTALL | re.IGNORECASE)
_ANY_FENCE = re.compile(r"```[^\n`]*\n?(.*?)(?:```|\Z)", re.DOTALL)

_CLOSERS = {"array": "]", "object": "}"}


@dataclass(frozen=True)
class RecoveryResult:
    ok: bool
    value: Any = None
    error: str | None = None


def extract_fenced(text: str) -> str:
    """Return the interior of the first fenced block, or the text unchanged."""
    if "```json" in text.lower():
        match = _JSON_FENCE.search(text)
        if match:
            return match.group(1)
    if "```" in text:
        match = _ANY_FENCE.search(text)
        if match:
            return match.group(1)
    return text


def truncate_to_closer(content: str, expect: Expected) -> str:
    """Cut content back to its last closing delimiter for the expected shape."""
    closer = _CLOSERS[expect]
    if content.endswith(closer):
        return content
    last = content.rfind(closer)
    if last == -1:
        return content
    return content[: last + 1]


def _infer_expected(content: str) -> Expected | None:
    if content.startswith("["):
        return "array"
    if content.startswith("{"):
        return "object"
    return None


def recover_json(text: str | None, expect: Expected | None = None) -> RecoveryResult:
    """Best-effort parse of near-JSON model output.

    ``expect`` selects the truncation rule; when omitted it is inferred from
    the first character of the extracted content.
    """
    if not text or not text.strip():
        return RecoveryResult(ok=False, error="Empty response")

    content = extract_fenced(text.strip()).strip()

    shape = expect or _infer_expected(content)
    if shape is not None:
        content = truncate_to_closer(content, shape)

    try:
        value = json.loads(content)
    except json.JSONDecodeError as e:
        logger.warning(f"Recovery failed: {e} (length={len(text)}, preview={text[:200]!r})")
        return RecoveryResult(ok=False, error=str(e))

    if shape == "array" and not isinstance(value, list):
        return RecoveryResult(ok=False, error="Response is not an array")
    if shape == "object" and not isinstance(value, dict):
        return RecoveryResult(ok=False, error="Response is not an object")

    return RecoveryResult(ok=True, value=value)
