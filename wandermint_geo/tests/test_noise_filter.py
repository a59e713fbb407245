"""
Tests for the external-result noise filter.
Pure unit tests, no provider or network required.
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from wandermint_geo.models import Candidate
from wandermint_geo.noise_filter import NoiseFilter, filter_destinations, is_destination


def c(title, subtitle=""):
    return Candidate(title=title, subtitle=subtitle)


class TestRejects:
    @pytest.mark.parametrize("title,subtitle", [
        ("Chicago Ave", "Evanston, IL, United States"),
        ("O'Hare Airport", "Chicago, IL"),
        ("Little Italy", "New York, NY"),
        ("123 Broadway", "New York, NY"),
    ])
    def test_documented_noise(self, title, subtitle):
        assert not is_destination(c(title, subtitle))

    def test_street_addresses(self):
        for title in ("Kentucky St", "Main Avenue", "Ocean Drive", "Sunset Blvd",
                      "Abbey Road", "Penny Lane", "Memory Way", "Court"):
            assert not is_destination(c(title, "Somewhere, United States")), title

    def test_embedded_street_word(self):
        assert not is_destination(c("Ocean Drive Beach", "Miami, FL"))

    def test_digits(self):
        assert not is_destination(c("5th Street", "San Francisco, CA"))
        assert not is_destination(c("Route 66", "Arizona, United States"))

    def test_transit(self):
        assert not is_destination(c("Union Station", "Chicago, IL"))
        assert not is_destination(c("Central", "Metro Line, Hong Kong"))
        assert not is_destination(c("Port Authority Bus Terminal", "New York, NY"))

    def test_shopping(self):
        assert not is_destination(c("Mall of America", "Bloomington, MN"))
        assert not is_destination(c("Eaton Centre", "Toronto, ON"))

    def test_nearby_tier(self):
        assert not is_destination(c("Coffee", "Search Nearby"))

    def test_business_indicators(self):
        assert not is_destination(c("Smith & Sons", "Boston, MA"))
        assert not is_destination(c("Acme LLC", "Denver, CO"))
        assert not is_destination(c("Acme", "Acme Co., Denver, CO"))
        assert not is_destination(c("Willis Tower", "Chicago, IL"))
        assert not is_destination(c("A/B", "Somewhere"))

    def test_length_bounds(self):
        assert not is_destination(c("X", "Somewhere"))
        assert not is_destination(c("Very Long Location Name That Exceeds The Normal Length", "Somewhere"))

    @pytest.mark.parametrize("title,subtitle", [
        ("Centerville", "Ohio, United States"),
        ("Littleton", "Colorado, United States"),
        ("Metropolis", "Illinois, United States"),
        ("Trainville", "Somewhere, United States"),
        ("Columbus", "Ohio, United States"),
        ("Busan", "South Korea"),
    ])
    def test_keyword_inside_a_word(self, title, subtitle):
        assert not is_destination(c(title, subtitle))

    def test_keyword_in_subtitle(self):
        assert not is_destination(c("Departures", "Heathrow Airport"))
        assert not is_destination(c("Food Hall", "Westfield Shopping Centre"))
        assert not is_destination(c("Riverside", "Eastgate Mall, Leeds"))

    @pytest.mark.parametrize("title,subtitle", [
        ("Lincoln", "Nebraska, United States"),
        ("Princeton", "New Jersey, United States"),
        ("Acme Corporation", "Denver, CO"),
        ("Harbour Buildings", "Leith, Scotland"),
    ])
    def test_business_token_inside_a_word(self, title, subtitle):
        assert not is_destination(c(title, subtitle))

    def test_bare_name_without_region(self):
        assert not is_destination(c("Springfield", ""))
        assert not is_destination(c("Springfield", "   "))


class TestAdmits:
    def test_documented_destination(self):
        assert is_destination(c("Springfield", "Illinois, United States"))

    def test_cities_and_states(self):
        for title, subtitle in [
            ("Kentucky", "United States"),
            ("Chicago", "Illinois, United States"),
            ("Louisville", "Kentucky, United States"),
            ("Paris", "France"),
            ("Tokyo", "Japan"),
        ]:
            assert is_destination(c(title, subtitle)), title

    def test_comma_in_title_is_enough_context(self):
        assert is_destination(c("Lyon, France", ""))

    def test_words_containing_street_suffixes(self):
        assert is_destination(c("Stanford", "California, United States"))
        assert is_destination(c("Drakensberg", "South Africa"))

    def test_leading_saint_abbreviation(self):
        assert is_destination(c("St Petersburg", "Russia"))
        assert is_destination(c("St. Louis", "Missouri, United States"))

    def test_non_ascii(self):
        assert is_destination(c("München", "Germany"))


class TestTotality:
    def test_missing_subtitle(self):
        assert not is_destination(SimpleNamespace(title="Chicago"))

    def test_non_string_fields(self):
        assert not is_destination(SimpleNamespace(title=None, subtitle="Illinois"))
        assert not is_destination(SimpleNamespace(title="Chicago", subtitle=42))

    def test_arbitrary_objects(self):
        assert not is_destination(None)
        assert not is_destination({"title": "Chicago", "subtitle": "Illinois"})

    def test_broken_attribute_access(self):
        class Exploding:
            @property
            def title(self):
                raise RuntimeError("boom")

        assert not is_destination(Exploding())


class TestConfigurable:
    def test_extra_keyword(self):
        strict = NoiseFilter(non_destination_keywords={"harbor"})
        assert not strict.admits(c("Harbor View", "Sydney, Australia"))
        # default set no longer applies
        assert strict.admits(c("Union Station", "Chicago, IL"))

    def test_filter_keeps_order(self):
        results = filter_destinations([
            c("Paris", "France"),
            c("Chicago Ave", "Chicago, IL"),
            c("Rome", "Italy"),
        ])
        assert [r.title for r in results] == ["Paris", "Rome"]
