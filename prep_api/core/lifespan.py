from contextlib import asynccontextmanager
import logging

from prep_api.core.tables import get_scoring_config
from prep_api.features.matcher import get_default_matcher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    # Fail at startup, not on the first request, when a data table is broken.
    matcher = get_default_matcher()
    get_scoring_config()
    logger.info(
        "tables_loaded tech_tokens=%s hr_phrases=%s name_patterns=%s",
        len(matcher.tech_tokens),
        len(matcher.hr_phrases),
        len(matcher.name_patterns),
    )
    yield
