"""
In-memory tournament store.

Readers take an immutable StoreSnapshot and run the whole query cycle on it,
so a concurrent replace() never changes data under a running query. Derived
values (search index, date facets) are cached for the latest version only.
"""
import json
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple

from matescape.config import Settings, get_settings
from matescape.demo_data import DEMO_TOURNAMENTS
from matescape.models.tournament import Tournament
from matescape.services.facets import DateFacet, date_facets
from matescape.services.ingest import load_tournaments
from matescape.services.searchable_text import SearchIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreSnapshot:
    tournaments: Tuple[Tournament, ...]
    version: int

    def get(self, tournament_id: int) -> Optional[Tournament]:
        for tournament in self.tournaments:
            if tournament.id == tournament_id:
                return tournament
        return None


class TournamentStore:
    def __init__(self, tournaments: Iterable[Tournament] = ()):
        self._lock = threading.Lock()
        self._snapshot = StoreSnapshot(tuple(tournaments), 1)
        self._index: Optional[Tuple[int, SearchIndex]] = None
        self._facets: Optional[Tuple[int, List[DateFacet]]] = None

    def snapshot(self) -> StoreSnapshot:
        with self._lock:
            return self._snapshot

    def replace(self, tournaments: Iterable[Tournament]) -> StoreSnapshot:
        """Swap in a new tournament list and bump the version."""
        with self._lock:
            self._snapshot = StoreSnapshot(tuple(tournaments), self._snapshot.version + 1)
            self._index = None
            self._facets = None
            snapshot = self._snapshot
        logger.info("Tournament store now at version %d with %d tournaments", snapshot.version, len(snapshot.tournaments))
        return snapshot

    def search_index(self, snapshot: StoreSnapshot) -> SearchIndex:
        cached = self._index
        if cached is not None and cached[0] == snapshot.version:
            return cached[1]
        index = SearchIndex(snapshot.tournaments)
        if index.failures:
            logger.warning(
                "%d tournament(s) have malformed dates and are not searchable: %s",
                len(index.failures),
                sorted(index.failures),
            )
        with self._lock:
            if snapshot.version == self._snapshot.version:
                self._index = (snapshot.version, index)
        return index

    def date_facets(self, snapshot: StoreSnapshot) -> List[DateFacet]:
        cached = self._facets
        if cached is not None and cached[0] == snapshot.version:
            return cached[1]
        facets = date_facets(snapshot.tournaments)
        with self._lock:
            if snapshot.version == self._snapshot.version:
                self._facets = (snapshot.version, facets)
        return facets


def read_tournament_records(path: Path) -> List[Any]:
    """Load a JSON array of raw tournament records from disk."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of tournaments")
    return data


def build_store(settings: Optional[Settings] = None) -> TournamentStore:
    """Create a store from TOURNAMENTS_FILE, or the demo data when unset."""
    settings = settings or get_settings()
    if settings.tournaments_file is not None:
        logger.info("Loading tournaments from %s", settings.tournaments_file)
        records = read_tournament_records(settings.tournaments_file)
    else:
        records = DEMO_TOURNAMENTS

    result = load_tournaments(records, strict=settings.strict_ingest)
    if result.rejected:
        logger.warning("Skipped %d invalid tournament record(s)", len(result.rejected))
    return TournamentStore(result.tournaments)


_store: Optional[TournamentStore] = None
_store_lock = threading.Lock()


def get_store() -> TournamentStore:
    """FastAPI dependency: the process-wide store, built on first use."""
    global _store
    with _store_lock:
        if _store is None:
            _store = build_store()
        return _store
