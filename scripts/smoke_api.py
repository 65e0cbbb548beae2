#!/usr/bin/env python3
"""Smoke test for the videohub API.

Drives a fresh in-process app through the full video lifecycle:
create -> read -> update -> delete -> clear.

Usage:
    python scripts/smoke_api.py

Exit codes:
    0: All checks passed
    1: Some checks failed
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from fastapi.testclient import TestClient  # noqa: E402

from videohub.api.app import create_app  # noqa: E402
from videohub.config import Settings  # noqa: E402
from videohub.store.memory import VideoStore  # noqa: E402

SAMPLE_VIDEO = {"title": "Smoke", "author": "Tester", "availableResolutions": ["P720", "P1080"]}


def check(label: str, ok: bool, detail: str = "") -> bool:
    """Print an OK/FAIL line and pass the result through."""
    if ok:
        print(f"OK: {label}")
    else:
        print(f"FAIL: {label}")
        if detail:
            print(f"     {detail}")
    return ok


def run_checks(client: TestClient) -> bool:
    """Exercise every endpoint once. Returns True if all checks pass."""
    results: list[bool] = []

    response = client.post("/videos", json=SAMPLE_VIDEO)
    results.append(check("create returns 201", response.status_code == 201, response.text))
    if response.status_code != 201:
        return False
    video_id = response.json()["id"]

    response = client.get(f"/videos/{video_id}")
    results.append(check("created video is readable", response.status_code == 200, response.text))

    update = {
        "title": "Smoke 2",
        "author": "Tester",
        "canBeDownloaded": True,
        "minAgeRestriction": 12,
        "publicationDate": "2030-01-01T00:00:00.000Z",
        "availableResolutions": ["P144"],
    }
    response = client.put(f"/videos/{video_id}", json=update)
    results.append(check("update returns 204", response.status_code == 204, response.text))

    response = client.get(f"/videos/{video_id}")
    results.append(check("update is visible", response.json().get("title") == "Smoke 2", response.text))

    response = client.post("/videos", json={"title": "", "author": "x"})
    results.append(check("invalid create returns 400", response.status_code == 400, response.text))

    response = client.delete(f"/videos/{video_id}")
    results.append(check("delete returns 204", response.status_code == 204, response.text))

    response = client.get(f"/videos/{video_id}")
    results.append(check("deleted video is gone", response.status_code == 404, response.text))

    response = client.delete("/testing/all-data")
    results.append(check("clear returns 204", response.status_code == 204, response.text))

    return all(results)


def main() -> int:
    app = create_app(store=VideoStore(), settings=Settings())
    with TestClient(app) as client:
        passed = run_checks(client)

    print()
    print("All checks passed" if passed else "Some checks failed")
    return 0 if passed else 1


if __name__ == "__main__":
    sys.exit(main())
