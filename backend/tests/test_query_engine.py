"""Query engine: conjunctive search terms plus type and date facets, order preserved."""
import logging

import pytest

from matescape.errors import InvalidFilterError
from matescape.services.query_engine import (
    TournamentQuery,
    filter_tournaments,
    parse_date_filter,
    run_query,
    search_terms,
)
from matescape.services.searchable_text import SearchIndex


def _ids(tournaments):
    return [t.id for t in tournaments]


def test_no_filters_is_identity(tournaments):
    """Empty search and "all" facets return the input unchanged, in order."""
    assert filter_tournaments(tournaments, "", "all", "all") == tournaments


def test_whitespace_only_search_is_no_filter(tournaments):
    assert filter_tournaments(tournaments, "   \t ") == tournaments


def test_self_match_on_name(tournaments):
    """Any query made of a tournament's own name tokens includes it."""
    for t in tournaments:
        for query in (t.name, t.name.split()[0], " ".join(reversed(t.name.split()))):
            assert t in filter_tournaments(tournaments, query)


def test_rapid_scenario(make_tournament):
    t = make_tournament(name="Rapid 10|0", start_date="2025-06-20", end_date="2025-06-24", type="rapid", status="ongoing")
    assert filter_tournaments([t], "jun") == [t]
    assert filter_tournaments([t], "2025-06-20") == [t]
    assert filter_tournaments([t], "july") == []


def test_search_is_conjunctive_and_order_independent(tournaments):
    assert _ids(filter_tournaments(tournaments, "rapid 2025")) == [1]
    assert _ids(filter_tournaments(tournaments, "2025 rapid")) == [1]
    assert filter_tournaments(tournaments, "rapid july") == []


def test_search_is_case_insensitive(tournaments):
    assert _ids(filter_tournaments(tournaments, "JULY")) == [3]
    assert _ids(filter_tournaments(tournaments, "BLITZ")) == [2, 5]


def test_search_matches_date_renderings(tournaments):
    assert _ids(filter_tournaments(tournaments, "20/06")) == [1, 5]
    assert _ids(filter_tournaments(tournaments, "06-25-2025")) == [2]
    # Terms match independently: "25" is also a substring of "2025"
    assert _ids(filter_tournaments(tournaments, "june 25")) == [1, 2, 5]
    assert _ids(filter_tournaments(tournaments, "05-10-2025")) == [4]
    assert _ids(filter_tournaments(tournaments, "may 2025")) == [4]


def test_search_matches_status(tournaments):
    assert _ids(filter_tournaments(tournaments, "completed")) == [4, 5]


def test_type_filter(tournaments):
    assert _ids(filter_tournaments(tournaments, type_filter="blitz")) == [2, 5]
    assert _ids(filter_tournaments(tournaments, type_filter="classical")) == [4]


def test_date_filter(tournaments):
    assert _ids(filter_tournaments(tournaments, date_filter="2025-06-20_2025-06-24")) == [1, 5]


def test_date_filter_single_date_record(tournaments):
    """A single-date record is a one-day range for the date facet."""
    assert _ids(filter_tournaments(tournaments, date_filter="2025-07-05_2025-07-05")) == [3]


def test_filters_combine(tournaments):
    assert _ids(filter_tournaments(tournaments, "night", "blitz", "2025-06-20_2025-06-24")) == [5]
    assert filter_tournaments(tournaments, "rapid", "blitz", "all") == []


def test_unknown_type_filter_raises(tournaments):
    with pytest.raises(InvalidFilterError, match="Unknown tournament type"):
        filter_tournaments(tournaments, type_filter="armageddon")


@pytest.mark.parametrize("bad", ["2025-06-20", "2025-06-20_", "_2025-06-24", "a_b_c"])
def test_malformed_date_filter_raises(bad):
    with pytest.raises(InvalidFilterError):
        parse_date_filter(bad)


def test_parse_date_filter_all():
    assert parse_date_filter("all") is None
    assert parse_date_filter("2025-06-20_2025-06-24") == ("2025-06-20", "2025-06-24")


def test_search_terms_split():
    assert search_terms("  June   2025 ") == ["june", "2025"]
    assert search_terms("") == []
    assert search_terms(None) == []


def test_malformed_date_excluded_from_search_only(make_tournament, caplog):
    """A bad date drops that one tournament from search without failing the query."""
    good = make_tournament(id=1, name="Good Open")
    bad = make_tournament(id=2, name="Broken Open", start_date="2025-13-01")

    with caplog.at_level(logging.WARNING):
        assert filter_tournaments([bad, good], "open") == [good]
    assert "Excluding tournament 2" in caplog.text

    assert filter_tournaments([bad, good], "") == [bad, good]


def test_index_gives_same_result(tournaments):
    index = SearchIndex(tournaments)
    for query in ("jun", "blitz 2025", "20/06", "nothing-here"):
        assert filter_tournaments(tournaments, query, index=index) == filter_tournaments(tournaments, query)


def test_run_query(tournaments):
    query = TournamentQuery(search_term="2025", type_filter="blitz")
    assert _ids(run_query(tournaments, query)) == [2, 5]
