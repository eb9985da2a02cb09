"""FastAPI dependency injection for the legal assistant."""

import logging
from functools import lru_cache

from ....composition.container import build_pipeline
from ....config.settings import Settings, settings
from ....core.services import QueryPipeline

logger = logging.getLogger(__name__)


def get_settings() -> Settings:
    """Return the process-wide settings."""
    return settings


@lru_cache
def get_pipeline() -> QueryPipeline:
    """Get or create the QueryPipeline for this process."""
    return build_pipeline(get_settings())
