"""Static GrenLoc reference data.

Reference data that never changes at runtime: the parish catalog, grid
constants and regional bounds.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from grenloc.reference.geography import GRENADA_CENTER as GRENADA_CENTER
from grenloc.reference.geography import GRENADA_REGION_BBOX as GRENADA_REGION_BBOX
from grenloc.reference.geography import BoundingBox as BoundingBox
from grenloc.reference.grid import GRID_SIZE_M as GRID_SIZE_M
from grenloc.reference.grid import SEARCH_GRID_SIZE_M as SEARCH_GRID_SIZE_M
from grenloc.reference.parishes import PARISH_FALLBACK as PARISH_FALLBACK
from grenloc.reference.parishes import PARISHES as PARISHES
from grenloc.reference.parishes import PARISHES_BY_CODE as PARISHES_BY_CODE
from grenloc.reference.parishes import ParishBoundary as ParishBoundary
