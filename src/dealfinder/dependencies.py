"""Shared FastAPI dependencies.

Reusable type aliases and dependency functions that routers import.
Defined here (not in main.py) to avoid circular imports when routers
are registered in main.
"""

from typing import Annotated

from fastapi import Depends

from dealfinder.models import Catalog
from dealfinder.repositories.deal import get_catalog

CatalogSnapshot = Annotated[Catalog, Depends(get_catalog)]
