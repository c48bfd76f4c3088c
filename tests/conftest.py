"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest
import yaml

OLD_SPEC = {
    "openapi": "3.0.0",
    "info": {"title": "Converge API", "version": "1.0.0"},
    "servers": [{"url": "https://api.converge.example"}],
    "paths": {
        "/users/{id}": {
            "get": {
                "summary": "Get user",
                "parameters": [
                    {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}}
                ],
                "responses": {
                    "200": {
                        "content": {
                            "application/json": {
                                "schema": {
                                    "properties": {
                                        "user_name": {"type": "string"},
                                        "age": {"type": "string"},
                                    }
                                }
                            }
                        }
                    }
                },
            }
        },
        "/pay": {
            "get": {
                "parameters": [
                    {"name": "amount", "in": "query", "required": True, "schema": {"type": "string"}}
                ],
                "responses": {"200": {"description": "ok"}},
            }
        },
    },
}

NEW_SPEC = {
    "openapi": "3.0.0",
    "info": {"title": "Elavon API", "version": "2.0.0"},
    "servers": [{"url": "https://api.elavon.example"}],
    "paths": {
        "/users/{userId}": {
            "get": {
                "summary": "Get user",
                "parameters": [
                    {
                        "name": "userId",
                        "in": "path",
                        "required": True,
                        "schema": {"type": "string"},
                    }
                ],
                "responses": {
                    "200": {
                        "content": {
                            "application/json": {
                                "schema": {
                                    "properties": {
                                        "userName": {"type": "string"},
                                        "age": {"type": "integer"},
                                    }
                                }
                            }
                        }
                    }
                },
            }
        },
    },
}


@pytest.fixture
def old_spec() -> dict:
    return json.loads(json.dumps(OLD_SPEC))


@pytest.fixture
def new_spec() -> dict:
    return json.loads(json.dumps(NEW_SPEC))


@pytest.fixture
def spec_files(tmp_path: Path) -> tuple[Path, Path]:
    """Write the old spec as YAML and the new spec as JSON."""
    old_path = tmp_path / "old.yaml"
    new_path = tmp_path / "new.json"
    old_path.write_text(yaml.safe_dump(OLD_SPEC, sort_keys=False))
    new_path.write_text(json.dumps(NEW_SPEC))
    return old_path, new_path
