# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# - intake.py: Rider registration and job application endpoints
#
# Each router is mounted in main.py.
# =============================================================================

from . import intake

__all__ = [
    "intake",
]
