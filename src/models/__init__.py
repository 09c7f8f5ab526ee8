"""Expose the ORM models at package level.

These re-exports are intentional so callers can import from
``models`` (e.g. `from models import Document`).
"""

from .base import Base  # noqa: F401
from .documents import Document  # noqa: F401
from .free_trial_logs import FreeTrialLog  # noqa: F401
from .summaries import Summary  # noqa: F401
