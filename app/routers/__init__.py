# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - projects.py: Project creation, listing, aggregate read, related parties
# - media.py: Multipart media upload
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import projects
from . import media

__all__ = [
    "health",
    "projects",
    "media",
]
