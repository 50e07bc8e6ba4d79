"""
Endpoint subpackage for API v1.

Each module defines an APIRouter which is aggregated in ``router.py``.
"""
