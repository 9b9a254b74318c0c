#!/usr/bin/env python3
"""Remove the stored contact list so the next access reseeds from the seed resource.

Uses the same settings as the API (AGENDA_STORAGE, AGENDA_STORAGE_PATH, NEO4J_*).
Run from repo root with .env. Idempotent.
"""
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))

from agenda.infrastructure import CONTACTS_KEY, LocalContactStore  # noqa: E402
from api.main import app, get_storage  # noqa: E402

logger = logging.getLogger("reset_storage")


def main() -> int:
    storage = get_storage(app)
    try:
        LocalContactStore(storage).clear()
    finally:
        if getattr(app.state, "driver", None) is not None:
            app.state.driver.close()
    logger.info("Removed storage key %r", CONTACTS_KEY)
    return 0


if __name__ == "__main__":
    sys.exit(main())
