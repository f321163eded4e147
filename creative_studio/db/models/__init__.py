# creative_studio/db/models/__init__.py
# Expose model modules here so Alembic and imports work consistently.
from . import campaign
from . import headline
from . import image
from . import creative

__all__ = [
    "campaign",
    "headline",
    "image",
    "creative",
]
