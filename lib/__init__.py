# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Process-wide Supabase client and connection probe
# - utils.py: Shared utilities (UUID normalization, id and timestamp helpers)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError, is_no_rows_error
from lib.utils import new_id, normalize_uuid, utc_now_iso

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    "is_no_rows_error",
    # Utils
    "new_id",
    "normalize_uuid",
    "utc_now_iso",
]
