"""
CLI entrypoint for pruning expired access tokens. Run from cron, e.g.:

  python -m app.prune_tokens

Or hourly: 0 * * * * cd /path/to/authgate && .venv/bin/python -m app.prune_tokens
"""

import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.services.tokens import prune_expired_tokens

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Delete access tokens whose expires_at is in the past."""
    settings = get_settings()
    db = SessionLocal()
    try:
        deleted = prune_expired_tokens(db, settings)
        logger.info("Token prune completed: tokens_deleted=%s", deleted)
        return 0
    except Exception as e:
        logger.exception("Token prune job failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
