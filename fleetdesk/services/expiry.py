"""
Document expiry evaluation.

One implementation shared by driver, vehicle and fleet company documents,
on the server (list/detail responses, dashboard counters, notification scan)
and in the client views.

Classification of a single expiry date, with days = expiry - today in whole
calendar days:

    no date         -> UNKNOWN
    days < 0        -> EXPIRED   (days reported as abs(days))
    days == 0       -> TODAY
    0 < days <= 30  -> EXPIRING
    days > 30       -> VALID
"""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Optional, Union
import logging

from fleetdesk.models.enums import DocumentBucket, DocumentFilter, ExpiryClass

logger = logging.getLogger(__name__)

# Business policy, identical for every document type
EXPIRY_WARNING_DAYS = 30

DateLike = Union[date, datetime, str, None]


@dataclass(frozen=True)
class ExpiryStatus:
    """Expiry class of one document plus the day count shown on its badge."""
    status: ExpiryClass
    days: Optional[int] = None

    @property
    def label(self) -> Optional[str]:
        return expiry_label(self)


@dataclass(frozen=True)
class DocumentSummary:
    """Per-entity roll-up of document expiry classes."""
    expired_count: int = 0
    expiring_count: int = 0
    valid_count: int = 0
    unknown_count: int = 0

    @property
    def has_expired(self) -> bool:
        return self.expired_count > 0

    @property
    def has_expiring(self) -> bool:
        return self.expiring_count > 0

    @property
    def bucket(self) -> DocumentBucket:
        return document_bucket(self)


@dataclass(frozen=True)
class DocumentBucketCounts:
    """Dashboard counters; every entity lands in at most one bucket."""
    expired: int = 0
    expiring: int = 0
    valid: int = 0


def to_date(value: DateLike) -> Optional[date]:
    """
    Truncate a date-like value to its calendar date.

    Accepts date, datetime, ISO-8601 strings (date only or full timestamp)
    and None. Unparseable strings yield None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        logger.warning(f"Ignoring unparseable expiry date {text!r}")
        return None


def evaluate_expiry(expiry_date: DateLike, today: DateLike = None) -> ExpiryStatus:
    """
    Classify an expiry date relative to today.

    Args:
        expiry_date: Document expiry date; None means no expiry on file
        today: Reference date, defaults to the local calendar date

    Returns:
        ExpiryStatus with the class and the day magnitude for the badge
    """
    expiry = to_date(expiry_date)
    if expiry is None:
        return ExpiryStatus(ExpiryClass.UNKNOWN)

    reference = to_date(today) or date.today()
    days = (expiry - reference).days

    if days < 0:
        return ExpiryStatus(ExpiryClass.EXPIRED, abs(days))
    if days == 0:
        return ExpiryStatus(ExpiryClass.TODAY, 0)
    if days <= EXPIRY_WARNING_DAYS:
        return ExpiryStatus(ExpiryClass.EXPIRING, days)
    return ExpiryStatus(ExpiryClass.VALID, days)


def expiry_label(status: ExpiryStatus) -> Optional[str]:
    """Badge text for the urgent classes, None otherwise."""
    days = status.days
    plural = "" if days == 1 else "s"
    if status.status is ExpiryClass.EXPIRED:
        return f"Expired {days} day{plural} ago"
    if status.status is ExpiryClass.TODAY:
        return "Expires Today!"
    if status.status is ExpiryClass.EXPIRING:
        return f"Expires in {days} day{plural}"
    return None


def _expiry_of(document: Any) -> DateLike:
    if isinstance(document, dict):
        return document.get("document_expiry_date")
    return getattr(document, "document_expiry_date", None)


def summarize_documents(
    documents: Optional[Iterable[Any]],
    today: DateLike = None,
) -> DocumentSummary:
    """
    Roll up an entity's documents.

    TODAY and EXPIRING both count as expiring. Documents without an expiry
    date only increase unknown_count.
    """
    reference = to_date(today) or date.today()
    counts = {cls: 0 for cls in ExpiryClass}

    for document in documents or ():
        counts[evaluate_expiry(_expiry_of(document), reference).status] += 1

    return DocumentSummary(
        expired_count=counts[ExpiryClass.EXPIRED],
        expiring_count=counts[ExpiryClass.TODAY] + counts[ExpiryClass.EXPIRING],
        valid_count=counts[ExpiryClass.VALID],
        unknown_count=counts[ExpiryClass.UNKNOWN],
    )


def document_bucket(summary: DocumentSummary) -> DocumentBucket:
    """
    Mutually exclusive bucket for dashboard counting.

    EXPIRED wins over EXPIRING. VALID needs at least one dated, valid
    document; entities with no documents or only undated ones get NONE.
    """
    if summary.has_expired:
        return DocumentBucket.EXPIRED
    if summary.has_expiring:
        return DocumentBucket.EXPIRING
    if summary.valid_count > 0:
        return DocumentBucket.VALID
    return DocumentBucket.NONE


def _documents_of(entity: Any) -> Iterable[Any]:
    if isinstance(entity, dict):
        return entity.get("documents") or ()
    return getattr(entity, "documents", None) or ()


def count_document_buckets(
    entities: Iterable[Any],
    today: DateLike = None,
) -> DocumentBucketCounts:
    """Count entities per document bucket without double counting."""
    reference = to_date(today) or date.today()
    tally = {bucket: 0 for bucket in DocumentBucket}

    for entity in entities:
        summary = summarize_documents(_documents_of(entity), reference)
        tally[summary.bucket] += 1

    return DocumentBucketCounts(
        expired=tally[DocumentBucket.EXPIRED],
        expiring=tally[DocumentBucket.EXPIRING],
        valid=tally[DocumentBucket.VALID],
    )


def matches_document_filter(
    documents: Optional[Iterable[Any]],
    document_filter: Union[DocumentFilter, str],
    today: DateLike = None,
) -> bool:
    """Whether an entity's documents satisfy a list-view document filter."""
    selected = DocumentFilter(document_filter)
    if selected is DocumentFilter.ALL:
        return True

    summary = summarize_documents(documents, today)
    if selected is DocumentFilter.EXPIRED:
        return summary.has_expired
    if selected is DocumentFilter.EXPIRING:
        return summary.has_expiring and not summary.has_expired
    return summary.bucket is DocumentBucket.VALID
