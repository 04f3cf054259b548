"""Health check endpoint.

The calculator endpoints are stateless, so the service is healthy even
without MongoDB. The body reports whether the chip set catalogue is
reachable and whether its presets have been seeded.
"""

import logging

from fastapi import APIRouter

from chipcalc.config import settings
from chipcalc.dal.chip_sets_dal import ChipSetDAL
from chipcalc.dal.database import get_database

logger = logging.getLogger("chipcalc.routes.health")
router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Report service status and the state of the chip set catalogue.

    Always answers 200. ``status`` is ``"degraded"`` when the catalogue
    cannot be read; ``checks.catalogue`` carries the stored and preset
    counts otherwise.
    """
    checks = {"database": "down", "catalogue": None}

    try:
        dal = ChipSetDAL(get_database())
        checks["catalogue"] = {
            "chip_sets": await dal.count_all(),
            "presets": await dal.count_presets(),
        }
        checks["database"] = "ok"
    except Exception as e:
        logger.warning("Chip set catalogue unavailable: %s", e)

    return {
        "status": "healthy" if checks["database"] == "ok" else "degraded",
        "version": settings.APP_VERSION,
        "checks": checks,
    }
