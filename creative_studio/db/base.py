# creative_studio/db/base.py
import uuid
from datetime import datetime, timezone
from sqlalchemy.orm import declarative_base

# single source of truth for Alembic autogenerate
Base = declarative_base()


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Import models to register them with Base.metadata.
# Importing here is fine: models only need Base and the helpers above.
# Keep this list in sync whenever you add models.
from creative_studio.db.models import (  # noqa: E402,F401
    campaign,
    headline,
    image,
    creative,
)
