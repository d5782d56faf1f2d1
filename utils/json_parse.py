"""Tolerant JSON parsing for model output.

Models occasionally wrap their JSON in Markdown fences, add prose around it, or
leave trailing commas. ``parse_json_object`` strips those artefacts before
decoding and always returns a plain ``dict``.
"""

from __future__ import annotations

import json
import re
from typing import Any, Iterable, Optional

_CODE_FENCE_RE = re.compile(
    r"^```[a-zA-Z0-9_+-]*\s*$|^```\s*$",
    flags=re.MULTILINE,
)
_TRAILING_COMMAS_RE = re.compile(r",\s*([}\]])")


def _strip_code_fences(s: str) -> str:
    """Remove Markdown code-fence lines and BOMs, leaving the body intact."""

    if not s:
        return s
    s = s.lstrip("﻿")
    return _CODE_FENCE_RE.sub("", s)


def _trim_to_object(candidate: str) -> str:
    """Return ``candidate`` cropped to the outermost JSON object if present."""

    start = candidate.find("{")
    end = candidate.rfind("}")
    if start != -1 and end != -1 and end > start:
        return candidate[start : end + 1]
    return candidate


def _strip_trailing_commas(candidate: str) -> str:
    return _TRAILING_COMMAS_RE.sub(r"\1", candidate)


def _largest_balanced_json(s: str) -> Optional[str]:
    """Return the largest balanced JSON object found within ``s``."""

    in_str = False
    esc = False
    depth = 0
    start = -1
    blocks: list[str] = []

    for i, ch in enumerate(s):
        if in_str:
            if esc:
                esc = False
            elif ch == "\\":
                esc = True
            elif ch == '"':
                in_str = False
            continue

        if ch == '"':
            in_str = True
            continue
        if ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
            if depth == 0 and start != -1:
                blocks.append(s[start : i + 1])
    if not blocks:
        return None
    return max(blocks, key=len)


def _iter_candidates(raw: str) -> Iterable[str]:
    """Yield sanitised candidates for JSON parsing attempts."""

    sanitized = _strip_code_fences(raw).strip()
    trimmed = _trim_to_object(sanitized)
    seen: set[str] = set()
    for candidate in (sanitized, trimmed, _strip_trailing_commas(trimmed)):
        key = candidate.strip()
        if key and key not in seen:
            seen.add(key)
            yield key

    largest_block = _largest_balanced_json(sanitized)
    if largest_block:
        for candidate in (largest_block, _strip_trailing_commas(largest_block)):
            key = candidate.strip()
            if key and key not in seen:
                seen.add(key)
                yield key


def parse_json_object(raw: str) -> dict[str, Any]:
    """Parse ``raw`` into a dictionary using lightweight repair strategies.

    Raises:
        ValueError: If no JSON object can be recovered from ``raw``.
    """

    last_err: Exception | None = None
    for candidate in _iter_candidates(raw or ""):
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError as exc:
            last_err = exc
            continue
        if isinstance(parsed, dict):
            return parsed
        last_err = ValueError("Parsed JSON is not an object")
    if last_err is not None:
        raise ValueError(f"Could not parse JSON object: {last_err}") from last_err
    raise ValueError("Empty response; no JSON to parse.")


__all__ = ["parse_json_object"]
