"""Tests for the filter-and-sort query engine."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from listing_engine.data import LISTINGS
from listing_engine.models import FeedState
from listing_engine.query import QueryParams, SortKey, district_facet, evaluate, summarize


def prices(listings):
    return [item.price for item in listings]


def test_default_params_sort_by_price_ascending(catalog):
    assert prices(evaluate(catalog)) == [550, 980, 1150, 1490, 1650]


def test_price_desc_on_full_collection(catalog):
    result = evaluate(catalog, QueryParams(sort="price-desc"))

    assert prices(result) == [1650, 1490, 1150, 980, 550]


def test_two_bedroom_filter_keeps_original_order(catalog):
    result = evaluate(catalog, QueryParams(beds="2", sort="size-asc"))

    assert [item.id for item in result] == [2, 4]
    assert all(item.beds == 2 for item in result)


def test_studio_filter_matches_zero_beds(catalog):
    result = evaluate(catalog, QueryParams(beds="studio"))

    assert [item.id for item in result] == [item.id for item in catalog if item.beds == 0]


def test_numeric_beds_filter_accepts_int(catalog):
    result = evaluate(catalog, QueryParams(beds=3))

    assert [item.id for item in result] == [5]


def test_unknown_beds_choice_imposes_no_constraint(catalog):
    assert len(evaluate(catalog, QueryParams(beds="lots"))) == len(catalog)


def test_equal_bounds_return_exact_price(catalog):
    result = evaluate(catalog, QueryParams(min_price=1150, max_price="1150"))

    assert prices(result) == [1150]


def test_bounds_are_inclusive(catalog):
    result = evaluate(catalog, QueryParams(min_price="980", max_price="1490"))

    assert prices(result) == [980, 1150, 1490]


@pytest.mark.parametrize("bad", ["abc", "", "   ", None, "nan"])
def test_malformed_min_price_is_no_constraint(catalog, bad):
    assert evaluate(catalog, QueryParams(min_price=bad)) == evaluate(catalog, QueryParams())


@pytest.mark.parametrize("text", ["", "   ", "\t"])
def test_blank_text_matches_everything(catalog, text):
    assert len(evaluate(catalog, QueryParams(text=text))) == len(catalog)


def test_text_matches_title_or_district_case_insensitively(catalog):
    by_title = evaluate(catalog, QueryParams(text="STUDIO"))
    by_district = evaluate(catalog, QueryParams(text="lozenets"))

    assert [item.id for item in by_title] == [3]
    assert [item.id for item in by_district] == [1]


def test_district_filter_is_exact(catalog):
    result = evaluate(catalog, QueryParams(district="Център / Center"))

    assert [item.id for item in result] == [4]
    assert evaluate(catalog, QueryParams(district="Center")) == []


def test_filters_combine_with_and(catalog):
    params = QueryParams(text="BR", beds="2", max_price=1200)

    assert [item.id for item in evaluate(catalog, params)] == [2]


@pytest.mark.parametrize("sort", ["price-asc", "price-desc", "size-asc", "size-desc"])
def test_sort_is_stable_for_equal_values(make_listing, sort):
    listings = [
        make_listing("a", price=500, size=40),
        make_listing("b", price=700, size=60),
        make_listing("c", price=500, size=40),
        make_listing("d", price=700, size=60),
        make_listing("e", price=500, size=40),
    ]

    result = evaluate(listings, QueryParams(sort=sort))

    cheap = [item.id for item in result if item.price == 500]
    dear = [item.id for item in result if item.price == 700]
    assert cheap == ["a", "c", "e"]
    assert dear == ["b", "d"]


def test_size_desc(catalog):
    result = evaluate(catalog, QueryParams(sort="size-desc"))

    assert [item.size for item in result] == [120, 92, 88, 65, 38]


def test_evaluate_does_not_mutate_input(catalog):
    before = list(catalog)

    evaluate(catalog, QueryParams(sort="price-desc", beds="2"))

    assert catalog == before


def test_sort_key_parse_unknown_parts():
    assert SortKey.parse("size-desc") == SortKey("size", "desc")
    assert SortKey.parse("rating-asc") == SortKey("size", "asc")
    assert SortKey.parse("price") == SortKey("price", "desc")
    assert SortKey.parse("PRICE-ASC") == SortKey("price", "asc")
    assert SortKey.parse(None) == SortKey()
    assert SortKey.parse("  ") == SortKey()
    assert str(SortKey("size", "desc")) == "size-desc"


def test_district_facet_first_appearance_order(make_listing):
    listings = [
        make_listing(1, district="Center"),
        make_listing(2, district="Lozenets"),
        make_listing(3, district="Center"),
        make_listing(4, district="Buxton"),
    ]

    assert district_facet(listings) == ["Center", "Lozenets", "Buxton"]


def test_summarize_reports_state(catalog):
    assert summarize(FeedState(loading=True), catalog) == "Loading…"
    assert summarize(FeedState(error="boom"), catalog) == "Error"
    assert summarize(FeedState(), catalog[:2]) == "2 result(s)"


def test_results_cannot_change_the_bundled_catalog(catalog):
    result = evaluate(catalog, QueryParams())

    with pytest.raises(AttributeError):
        result[0].tags.append("Renovated")
    with pytest.raises(ValidationError):
        result[0].title = "Renamed"

    assert all("Renovated" not in item.tags for item in LISTINGS)
