"""
Client-side style list filtering.

A list is narrowed by independent filters combined with AND: free-text
search over a fixed set of fields, status equality, the document expiry
filter and, for vehicles, the car type. Order of the input is preserved
and nothing is paginated.
"""
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable, Optional, Union

from fleetdesk.models.enums import DocumentFilter, EntityKind, ReviewStatus
from fleetdesk.services.expiry import matches_document_filter

ALL = "all"

# Default searchable fields per entity list
SEARCH_FIELDS: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.DRIVER: ("full_name", "email", "city_name", "fleet_company_name"),
    EntityKind.VEHICLE: ("car_name", "car_number", "car_type", "owner_name"),
    EntityKind.FLEET_PARTNER: ("company_name", "contact_person_name", "email", "city_name"),
}


def _full_name(entity: Any) -> str:
    first = _lookup(entity, "firstname") or ""
    last = _lookup(entity, "lastname") or ""
    return f"{first} {last}".strip()


# Fields derived from others when a row does not carry them
COMPUTED_FIELDS: dict[str, Callable[[Any], Any]] = {
    "full_name": _full_name,
}


def _lookup(entity: Any, name: str) -> Any:
    if isinstance(entity, dict):
        return entity.get(name)
    return getattr(entity, name, None)


def resolve_field(entity: Any, path: str) -> Any:
    """Read a (possibly dotted) field from a dict or object row."""
    value = entity
    for part in path.split("."):
        if value is None:
            break
        value = _lookup(value, part)
    if value is None and path in COMPUTED_FIELDS:
        value = COMPUTED_FIELDS[path](entity)
    return value


def matches_search(entity: Any, query: str, fields: Iterable[str]) -> bool:
    """Case-insensitive substring match against any of the fields; an empty query matches all."""
    needle = query.lower()
    if not needle:
        return True
    for path in fields:
        value = resolve_field(entity, path)
        if value is not None and needle in str(value).lower():
            return True
    return False


def matches_status(entity: Any, status: Union[ReviewStatus, str]) -> bool:
    """Status equality; a missing status reads as in_review."""
    if status == ALL:
        return True
    current = _lookup(entity, "status") or ReviewStatus.IN_REVIEW
    return current == ReviewStatus(status)


def matches_car_type(entity: Any, car_type: str) -> bool:
    """Case-insensitive vehicle type equality; rows without a type never match a type."""
    if car_type == ALL:
        return True
    current = _lookup(entity, "car_type")
    return current is not None and str(current).lower() == car_type.lower()


@dataclass
class EntityFilter:
    """
    Filter state of one list view.

    Attributes:
        search_fields: Field paths the search text is matched against
        search: Free text; only the empty string disables the search filter
        status: "all" or a review status
        document: Document expiry filter
        car_type: "all" or a vehicle type, compared case-insensitively
        today: Reference date for expiry, defaults to the current date
    """
    search_fields: tuple[str, ...] = ()
    search: str = ""
    status: Union[ReviewStatus, str] = ALL
    document: Union[DocumentFilter, str] = DocumentFilter.ALL
    car_type: str = ALL
    today: Optional[date] = None

    @classmethod
    def for_kind(cls, kind: Union[EntityKind, str], **values: Any) -> "EntityFilter":
        return cls(search_fields=SEARCH_FIELDS[EntityKind(kind)], **values)

    def __post_init__(self) -> None:
        # Reject bad filter values up front instead of matching nothing
        if self.status != ALL:
            self.status = ReviewStatus(self.status)
        self.document = DocumentFilter(self.document)

    @property
    def is_active(self) -> bool:
        return (
            self.search != ""
            or self.status != ALL
            or self.document is not DocumentFilter.ALL
            or self.car_type != ALL
        )

    def matches(self, entity: Any) -> bool:
        return (
            matches_search(entity, self.search, self.search_fields)
            and matches_status(entity, self.status)
            and matches_document_filter(
                _lookup(entity, "documents"), self.document, self.today
            )
            and matches_car_type(entity, self.car_type)
        )

    def apply(self, entities: Iterable[Any]) -> list[Any]:
        """Entities matching every active filter, in their original order."""
        return [entity for entity in entities if self.matches(entity)]


def count_by_status(entities: Iterable[Any]) -> dict[str, int]:
    """Approved / in review / rejected counters for list headers."""
    counts = {status.value: 0 for status in ReviewStatus}
    for entity in entities:
        current = _lookup(entity, "status") or ReviewStatus.IN_REVIEW
        key = ReviewStatus(current).value
        counts[key] += 1
    return counts
