"""
Audit Session - In-memory wizard state for a checklist audit.

A session holds the audited URL, the brand type (which selects the category
composition), the current wizard step, and the user's answers, notes, and
links. Scores are never stored: every read recomputes them from the answers.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from threading import Lock
from typing import Dict, List, Optional, Tuple, Union

from seo_checklist.logger import logger
from seo_checklist.services.registry.categories import categories_for_brand_type, find_check
from seo_checklist.services.registry.models import BrandType, Category
from seo_checklist.services.scoring.engine import summarize
from seo_checklist.services.scoring.models import AuditScores, CheckStatus


class SessionNotFoundError(KeyError):
    """No session with the requested id."""


class UnknownCheckError(KeyError):
    """Check id is not part of the session's checklist."""


@dataclass
class AuditSession:
    """Mutable wizard state for one audit."""
    url: str
    brand_type: BrandType = BrandType.GENERAL
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    current_step: int = 0
    statuses: Dict[str, CheckStatus] = field(default_factory=dict)
    notes: Dict[str, str] = field(default_factory=dict)
    links: Dict[str, str] = field(default_factory=dict)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        self.brand_type = BrandType.parse(self.brand_type)

    @property
    def categories(self) -> Tuple[Category, ...]:
        return categories_for_brand_type(self.brand_type)

    @property
    def step_count(self) -> int:
        """Number of category steps (the results screen comes after them)."""
        return len(self.categories)

    @property
    def is_results_screen(self) -> bool:
        return self.current_step >= self.step_count

    @property
    def current_category(self) -> Optional[Category]:
        if self.is_results_screen:
            return None
        return self.categories[self.current_step]

    # --- Answers ---

    def require_check(self, check_id: str):
        if find_check(check_id, self.categories) is None:
            raise UnknownCheckError(check_id)

    def set_status(self, check_id: str, status: Union[CheckStatus, str, None]) -> None:
        """Record a judgment. Unanswered removes the entry."""
        self.require_check(check_id)
        status = CheckStatus.coerce(status)
        if status is CheckStatus.UNANSWERED:
            self.statuses.pop(check_id, None)
        else:
            self.statuses[check_id] = status

    def toggle_status(self, check_id: str, status: Union[CheckStatus, str]) -> Optional[CheckStatus]:
        """Select a status, or clear it when it is already selected.

        Returns:
            The status now recorded, or None if cleared
        """
        status = CheckStatus.coerce(status)
        if self.statuses.get(check_id) is status:
            status = CheckStatus.UNANSWERED
        self.set_status(check_id, status)
        return self.statuses.get(check_id)

    def set_note(self, check_id: str, note: str) -> None:
        self.require_check(check_id)
        _set_or_clear(self.notes, check_id, note)

    def set_link(self, check_id: str, link: str) -> None:
        self.require_check(check_id)
        _set_or_clear(self.links, check_id, link)

    # --- Navigation ---

    def next_step(self) -> int:
        self.current_step = min(self.current_step + 1, self.step_count)
        return self.current_step

    def previous_step(self) -> int:
        self.current_step = max(self.current_step - 1, 0)
        return self.current_step

    def set_brand_type(self, brand_type: Union[BrandType, str]) -> None:
        """Switch the checklist variant. Existing answers are kept."""
        self.brand_type = BrandType.parse(brand_type)
        self.current_step = min(self.current_step, self.step_count)

    # --- Scores ---

    def scores(self) -> AuditScores:
        return summarize(self.categories, self.statuses)


def _set_or_clear(values: Dict[str, str], key: str, value: Optional[str]):
    value = (value or "").strip()
    if value:
        values[key] = value
    else:
        values.pop(key, None)


class SessionStore:
    """Thread-safe in-memory session storage."""

    def __init__(self):
        self._sessions: Dict[str, AuditSession] = {}
        self._lock = Lock()

    def create(self, url: str, brand_type: Union[BrandType, str, None] = None) -> AuditSession:
        session = AuditSession(url=url, brand_type=BrandType.parse(brand_type))
        with self._lock:
            self._sessions[session.id] = session
        logger.info(f"Created audit session {session.id} for {url} ({session.brand_type.value})")
        return session

    def get(self, session_id: str) -> AuditSession:
        with self._lock:
            try:
                return self._sessions[session_id]
            except KeyError:
                raise SessionNotFoundError(session_id) from None

    def delete(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFoundError(session_id)
        logger.info(f"Deleted audit session {session_id}")

    def list_ids(self) -> List[str]:
        with self._lock:
            return list(self._sessions)


# Global session store instance
_session_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Get global session store instance (singleton)."""
    global _session_store
    if _session_store is None:
        _session_store = SessionStore()
    return _session_store
