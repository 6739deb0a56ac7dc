from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


@dataclass(frozen=True, slots=True)
class BookRecord:
    """Internal canonical book model.

    Built from one Open Library search document and never mutated afterwards.

    Attributes:
        id: Opaque catalog key (e.g. "/works/OL45883W").
        title: Work title.
        author_names: Author display names in catalog order.
        first_publish_year: Year of first publication if known.
        edition_count: Number of editions if known.
        cover_id: Numeric cover identifier if the work has a cover.
        subjects: Subject headings if provided.
    """

    id: str
    title: str
    author_names: Sequence[str] = ()
    first_publish_year: Optional[int] = None
    edition_count: Optional[int] = None
    cover_id: Optional[int] = None
    subjects: Optional[Sequence[str]] = None


@dataclass(frozen=True, slots=True)
class SearchPage:
    """One parsed page of remote results.

    Attributes:
        num_found: Remote total match count for the title query.
        records: Records on this page, in remote order.
    """

    num_found: int
    records: tuple[BookRecord, ...] = ()


class SearchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class SearchResultState:
    """Snapshot of the current search view.

    Exactly one snapshot is current at a time; every transition replaces it
    wholesale.

    Attributes:
        status: Active lifecycle status.
        records: Post-filtered records for the current descriptor.
        total_found: Remote total for the title query (not the filtered count).
        page: Page number the snapshot belongs to.
        error_message: Failure description while in ERROR.
        query: Effective title the snapshot belongs to.
        returned_count: Records the remote page held before post-filtering.
    """

    status: SearchStatus = SearchStatus.IDLE
    records: tuple[BookRecord, ...] = ()
    total_found: int = 0
    page: int = 1
    error_message: Optional[str] = None
    query: str = ""
    returned_count: int = 0

    @property
    def has_next(self) -> bool:
        # The remote API has no page count, so a non-empty page implies more may follow.
        return self.status is SearchStatus.SUCCESS and self.returned_count > 0

    @property
    def has_previous(self) -> bool:
        return self.page > 1
