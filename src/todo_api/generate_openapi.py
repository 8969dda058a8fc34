"""
Utility script to generate and write the OpenAPI schema for the Todo API.

Builds the application through the same factory the server uses and writes
its OpenAPI schema to a JSON file so that API clients and documentation
tools can consume a stable schema without running the server.

Usage:
    python -m todo_api.generate_openapi [OUTPUT_PATH]

OUTPUT_PATH defaults to interfaces/openapi.json under the current directory.
"""
from __future__ import annotations

import argparse
import json
import os
from typing import Any, Dict, List, Optional

from .main import create_app, openapi_tags
from .settings import Settings

DEFAULT_OUTPUT = os.path.join("interfaces", "openapi.json")


def _ensure_tags(schema: Dict[str, Any]) -> None:
    """
    Ensure the OpenAPI schema lists every tag declared by the application,
    without overriding tag definitions already present.
    """
    existing_tags: List[Dict[str, Any]] = schema.get("tags", []) or []
    existing_names = {t.get("name") for t in existing_tags if isinstance(t, dict)}
    for tag in openapi_tags:
        if tag.get("name") not in existing_names:
            existing_tags.append(tag)
    if existing_tags:
        schema["tags"] = existing_tags


# PUBLIC_INTERFACE
def generate_openapi(out_path: Optional[str] = None) -> str:
    """Write the OpenAPI schema to ``out_path`` and return the written path."""
    out_path = out_path or DEFAULT_OUTPUT
    schema = create_app(settings=Settings(log_level="WARNING")).openapi()
    _ensure_tags(schema)

    os.makedirs(os.path.dirname(os.path.abspath(out_path)), exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    return out_path


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Write the Todo API OpenAPI schema to a file.")
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT, help="destination JSON file")
    args = parser.parse_args(argv)
    out_path = generate_openapi(args.output)
    print(f"Wrote OpenAPI schema to: {out_path}")


if __name__ == "__main__":
    main()
