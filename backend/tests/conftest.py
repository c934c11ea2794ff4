import pytest
from fastapi.testclient import TestClient

from matescape.main import app
from matescape.models.tournament import Tournament
from matescape.services.ingest import load_tournaments
from matescape.store import TournamentStore, get_store

# ============================================================================
# Sample data
# ============================================================================
# Order matters: months first appear as June, July, May. Tournaments 1 and 5
# share a date range; tournament 3 uses the single-date record shape.
SAMPLE_RECORDS = [
    {
        "id": 1,
        "name": "Rapid 10|0 & 30|0",
        "startDate": "2025-06-20",
        "endDate": "2025-06-24",
        "type": "rapid",
        "status": "ongoing",
        "players": "07",
        "excelLink": "https://example.com/rapid.xlsx",
    },
    {
        "id": 2,
        "name": "Blitz 5|0",
        "startDate": "2025-06-25",
        "endDate": "2025-06-30",
        "type": "blitz",
        "status": "upcoming",
        "players": "32",
    },
    {
        "id": 3,
        "name": "Bullet 1|0 Arena",
        "date": "2025-07-05",
        "type": "bullet",
        "status": "upcoming",
    },
    {
        "id": 4,
        "name": "Classical 90|30 Open",
        "startDate": "2025-05-10",
        "endDate": "2025-05-18",
        "type": "classical",
        "status": "completed",
        "players": 16,
        "winners": {"gold": "A. Rahman", "silver": "M. Costa", "bronze": "J. Novak"},
    },
    {
        "id": 5,
        "name": "Blitz 3|2 Night",
        "startDate": "2025-06-20",
        "endDate": "2025-06-24",
        "type": "blitz",
        "status": "completed",
    },
]


def _make_tournament(**overrides) -> Tournament:
    """Build a valid tournament, overriding any field by its Python name."""
    data = {
        "id": 100,
        "name": "Test Tournament",
        "start_date": "2025-06-20",
        "end_date": "2025-06-24",
        "type": "rapid",
        "status": "ongoing",
    }
    data.update(overrides)
    return Tournament.model_validate(data)


@pytest.fixture(name="make_tournament")
def make_tournament_fixture():
    return _make_tournament


@pytest.fixture(name="tournaments")
def tournaments_fixture():
    return load_tournaments(SAMPLE_RECORDS).tournaments


@pytest.fixture(name="store")
def store_fixture(tournaments):
    return TournamentStore(tournaments)


@pytest.fixture(name="client")
def client_fixture(store: TournamentStore):
    """Provide a test client backed by the sample store

    Override MUST be set BEFORE TestClient() so startup sees the test store.
    """
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
