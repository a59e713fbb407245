"""
Tests for the curated gazetteer store.
"""

from __future__ import annotations

import pytest

from wandermint_geo.gazetteer import GazetteerEntry, GazetteerStore, default_store
from wandermint_geo.models import CandidateSource, DestinationCategory


@pytest.fixture(scope="module")
def store():
    return default_store()


def _named(store, name, parent_region=None):
    return [
        e for e in store
        if e.name.lower() == name.lower()
        and (parent_region is None or e.parent_region == parent_region)
    ]


class TestDefaultStore:
    def test_not_empty(self, store):
        assert len(store) > 100

    def test_identities_unique(self, store):
        identities = [e.identity for e in store.all_entries()]
        assert len(identities) == len(set(identities))

    def test_stable_iteration(self, store):
        assert list(store) == list(store)
        assert store.all_entries() == store.all_entries()

    def test_cached(self):
        assert default_store() is default_store()

    def test_countries_have_continent_parent(self, store):
        greece = _named(store, "Greece")
        assert len(greece) == 1
        assert greece[0].parent_region == "Europe"
        assert greece[0].category == DestinationCategory.COUNTRY

    def test_same_name_different_parents(self, store):
        new_york = {e.parent_region: e.category for e in _named(store, "new york")}
        assert new_york == {
            "United States": DestinationCategory.STATE_OR_PROVINCE,
            "New York, United States": DestinationCategory.CITY,
        }

    def test_washington_city_under_district(self, store):
        entries = _named(store, "Washington", parent_region="District of Columbia, United States")
        assert [e.category for e in entries] == [DestinationCategory.CITY]

    def test_canadian_provinces(self, store):
        quebec = _named(store, "Quebec")
        assert quebec[0].parent_region == "Canada"
        assert quebec[0].category == DestinationCategory.STATE_OR_PROVINCE

    def test_popular_destinations_included(self, store):
        for name in ("Santorini", "Bali", "Cancun", "Cusco", "Reykjavik"):
            assert _named(store, name), name

    def test_no_neighborhoods(self, store):
        assert not any("little" in e.name.lower() for e in store)


class TestStoreConstruction:
    def test_from_rows(self):
        store = GazetteerStore.from_rows([
            ("Chicago", "Illinois, United States", "city"),
            ("Illinois", "United States", DestinationCategory.STATE_OR_PROVINCE),
        ])
        assert [e.name for e in store] == ["Chicago", "Illinois"]
        assert store.all_entries()[0].category == DestinationCategory.CITY

    def test_duplicate_rejected(self):
        with pytest.raises(ValueError):
            GazetteerStore.from_rows([
                ("Paris", "France", "city"),
                ("Paris", "France", "city"),
            ])

    def test_unknown_category_rejected(self):
        with pytest.raises(ValueError):
            GazetteerStore.from_rows([("Atlantis", "", "myth")])

    def test_entry_to_candidate(self):
        entry = GazetteerEntry("Chicago", "Illinois, United States", DestinationCategory.CITY)
        c = entry.to_candidate()
        assert c.identity == ("Chicago", "Illinois, United States")
        assert c.source == CandidateSource.CURATED
