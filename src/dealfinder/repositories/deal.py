"""Deal catalog access.

The catalog is a JSON array of deals read once per process. Callers get the
same immutable tuple on every call, so a request always sees one consistent
snapshot.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from dealfinder.config import settings
from dealfinder.exceptions import CatalogError
from dealfinder.logging import get_logger
from dealfinder.models import Catalog, Deal

logger = get_logger(__name__)

_deals_adapter = TypeAdapter(list[Deal])


def load_catalog(path: Path) -> Catalog:
    """Read and validate the catalog file at path."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise CatalogError(f"Cannot read deal catalog at {path}: {exc.strerror}") from exc

    try:
        deals = _deals_adapter.validate_json(raw)
    except ValidationError as exc:
        raise CatalogError(
            f"Deal catalog at {path} is invalid: {exc.error_count()} validation error(s)"
        ) from exc

    ids = [deal.id for deal in deals]
    if len(set(ids)) != len(ids):
        raise CatalogError(f"Deal catalog at {path} contains duplicate deal ids")

    logger.info("catalog_loaded", path=str(path), deals=len(deals))
    return tuple(deals)


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Return the process-wide catalog snapshot. Also used as a FastAPI dependency."""
    return load_catalog(settings.catalog_path)
