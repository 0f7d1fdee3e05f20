"""Prompt catalog backed by prompts/prompts.json.

Keys are dotted paths into the catalog (``summarizer.thread_prompt``) and the
values are ``string.Template`` strings. The catalog is re-read when the file
changes on disk, so prompts can be tuned without restarting the server.
"""
from __future__ import annotations

import json
from pathlib import Path
from string import Template
from typing import Any

PROMPTS_PATH = Path(__file__).resolve().parents[1] / "prompts" / "prompts.json"

_cache: dict[str, Any] = {"catalog": None, "mtime_ns": None}


def _catalog() -> dict[str, Any]:
    mtime_ns = PROMPTS_PATH.stat().st_mtime_ns
    if _cache["catalog"] is not None and _cache["mtime_ns"] == mtime_ns:
        return _cache["catalog"]

    payload = json.loads(PROMPTS_PATH.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"Prompt catalog at {PROMPTS_PATH} must be a JSON object.")
    _cache["catalog"] = payload
    _cache["mtime_ns"] = mtime_ns
    return payload


def get_template(key: str) -> Template:
    node: Any = _catalog()
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            raise KeyError(f"Prompt key not found: {key}")
        node = node[part]
    if isinstance(node, list):
        # Multi-line prompts are stored as a list of lines.
        node = "\n".join(str(line) for line in node)
    if not isinstance(node, str):
        raise TypeError(f"Prompt key must map to a string or list of lines: {key}")
    return Template(node)


def render_prompt(key: str, **values: Any) -> str:
    template = get_template(key)
    try:
        return template.substitute(**values)
    except KeyError as exc:
        missing = str(exc.args[0])
        raise KeyError(f"Missing template value '{missing}' for prompt '{key}'") from exc


def clear_prompt_cache() -> None:
    _cache["catalog"] = None
    _cache["mtime_ns"] = None
