import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from name_resolution_engine.matchers.catalog_matcher import CatalogEntry

logger = logging.getLogger(__name__)


class CatalogLoadError(RuntimeError):
    pass


def catalog_entry_from_record(record: Dict[str, Any]) -> CatalogEntry:
    alternates = record.get("alternativeNames") or []
    return CatalogEntry(
        canonical_name=record["name"],
        alternate_names=tuple(str(alt) for alt in alternates if alt),
        payload=record.get("logo"),
    )


def load_catalog(path: Union[str, Path]) -> List[CatalogEntry]:
    """Read a logo catalog JSON array, keeping source order.

    Each record carries ``name``, an optional ``alternativeNames`` list and
    a ``logo`` URL, which becomes the entry payload.
    """
    catalog_path = Path(path)
    try:
        records = json.loads(catalog_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogLoadError(f"Unable to read catalog at {catalog_path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"Catalog at {catalog_path} is not valid JSON") from exc
    if not isinstance(records, list):
        raise CatalogLoadError(f"Catalog at {catalog_path} must be a JSON array")

    entries: List[CatalogEntry] = []
    for position, record in enumerate(records):
        name = record.get("name") if isinstance(record, dict) else None
        if not isinstance(name, str) or not name.strip():
            logger.warning("Skipping catalog record without a name at index=%s", position)
            continue
        entries.append(catalog_entry_from_record(record))
    logger.info("Loaded %s catalog entries from %s", len(entries), catalog_path)
    return entries
