"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one domain.  The
routers are aggregated in ``router.py`` at the package level and then
included in the main application.
"""
