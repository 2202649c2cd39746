"""
Tests de los matchers batch: rankings, buckets y estadísticas.
"""

import pytest

from inmomatch.matching import (
    build_user_match_summaries,
    classify_percentage,
    compute_match_statistics,
    count_users_for_listing,
    is_eligible,
    rank_listings_for_user,
    rank_users_for_listing,
)
from inmomatch.matching.batch import summarize_user_matches
from inmomatch.models import ListingMatch

from conftest import blank_profile, make_listing, make_profile


def _portfolio():
    return [
        # 95: escenario de referencia
        make_listing(id="a"),
        # 70: fuera de Palermo -> 30 + 20 + 15 + 3 + 2
        make_listing(id="b", address="Rivadavia 5000", neighborhood="Caballito"),
        # no elegible: es alquiler
        make_listing(id="c", operation="Alquiler"),
        # 95 también: empata con "a"
        make_listing(id="d", address="Báez 300", neighborhood="Las Cañitas"),
        # bajo: precio muy por encima y fuera de zona
        make_listing(id="e", price=900000, neighborhood="Flores", rooms=5),
    ]


class TestRankListingsForUser:

    def test_filters_scores_and_sorts(self, profile):
        matches = rank_listings_for_user(_portfolio(), profile, min_percentage=50)

        assert [m.listing.id for m in matches] == ["a", "d", "b"]
        assert [m.percentage for m in matches] == [95, 95, 70]

    def test_ineligible_listing_never_appears(self, profile):
        listings = _portfolio()
        matches = rank_listings_for_user(listings, profile, min_percentage=0)
        ids = {m.listing.id for m in matches}

        for listing in listings:
            if not is_eligible(listing, profile):
                assert listing.id not in ids

    def test_threshold_is_inclusive(self, profile):
        matches = rank_listings_for_user(_portfolio(), profile, min_percentage=95)
        assert [m.listing.id for m in matches] == ["a", "d"]

    def test_matched_criteria_are_attached(self, profile):
        top = rank_listings_for_user([make_listing()], profile)[0]
        assert top.matched_criteria[0] == "Precio dentro del rango"

    def test_empty_portfolio(self, profile):
        assert rank_listings_for_user([], profile) == []


class TestRankUsersForListing:

    def test_does_not_apply_eligibility(self, listing):
        renter = make_profile(id="renter", operation="Alquiler")
        buyer = make_profile(id="buyer")

        assert not is_eligible(listing, renter)

        matches = rank_users_for_listing(listing, [renter, buyer], min_percentage=50)
        assert {m.user.id for m in matches} == {"renter", "buyer"}

    def test_sorted_descending_with_threshold(self, listing):
        users = [
            blank_profile(id="nobody"),
            make_profile(id="partial", neighborhoods=["Recoleta"]),
            make_profile(id="full"),
        ]

        matches = rank_users_for_listing(listing, users, min_percentage=50)

        assert [m.user.id for m in matches] == ["full", "partial"]
        assert [m.percentage for m in matches] == [95, 70]

    def test_count_matches_ranking_length(self, listing):
        users = [blank_profile(id="x"), make_profile(id="y"), make_profile(id="z", rooms="5")]
        assert count_users_for_listing(listing, users, 50) == len(
            rank_users_for_listing(listing, users, 50)
        )


class TestBuckets:

    @pytest.mark.parametrize(
        "percentage, bucket",
        [
            (100, "high"),
            (90, "high"),
            (89, "medium"),
            (80, "medium"),
            (79, "low"),
            (70, "low"),
            (69, None),
            (0, None),
        ],
    )
    def test_classify_boundaries(self, percentage, bucket):
        assert classify_percentage(percentage) == bucket

    def test_partition_counts(self, profile):
        matches = [
            ListingMatch(listing=make_listing(id=str(p)), percentage=p)
            for p in (95, 90, 89, 80, 79, 70)
        ]

        summary = summarize_user_matches(profile, matches)

        assert summary.total_matches == 6
        assert (summary.matches_high, summary.matches_medium, summary.matches_low) == (2, 2, 2)

    def test_gap_below_seventy_is_preserved(self, profile):
        matches = [
            ListingMatch(listing=make_listing(id=str(p)), percentage=p)
            for p in (92, 75, 65, 55)
        ]

        summary = summarize_user_matches(profile, matches)
        bucketed = summary.matches_high + summary.matches_medium + summary.matches_low

        assert summary.total_matches == 4
        assert bucketed == 2
        assert bucketed < summary.total_matches


class TestUserMatchSummaries:

    def test_only_public_and_available_listings(self, profile):
        listings = [
            make_listing(id="public"),
            make_listing(id="private", visibility="Privada"),
            make_listing(id="reserved", status="Reservada"),
            make_listing(id="gone", status="No disponible"),
        ]

        [summary] = build_user_match_summaries(listings, [profile])

        assert [m.listing.id for m in summary.matches] == ["public"]
        assert summary.total_matches == 1
        assert summary.matches_high == 1

    def test_one_summary_per_user(self, profile):
        users = [profile, blank_profile(id="empty")]
        summaries = build_user_match_summaries(_portfolio(), users)

        assert [s.user.id for s in summaries] == ["user-1", "empty"]
        assert summaries[1].total_matches == 0

    def test_default_threshold_is_seventy(self, profile):
        [summary] = build_user_match_summaries(_portfolio(), [profile])
        assert all(m.percentage >= 70 for m in summary.matches)

    def test_low_threshold_counts_unbucketed_matches(self, profile):
        listings = [
            make_listing(id="top"),
            # 30 + 20 + 15 + 3 + 2 = 70 -> low
            make_listing(id="low", neighborhood="Caballito"),
            # 30 + 20 + 3 + 2 = 55 -> sin bucket
            make_listing(id="gap", neighborhood="Caballito", total_area=10),
        ]

        [summary] = build_user_match_summaries(listings, [profile], min_percentage=50)

        assert summary.total_matches == 3
        assert summary.matches_high + summary.matches_medium + summary.matches_low == 2


class TestStatistics:

    def test_counts_and_averages(self):
        listings = [make_listing(id="a"), make_listing(id="b", operation="Alquiler")]
        users = [make_profile(id="u1"), make_profile(id="u2"), blank_profile(id="u3")]

        stats = compute_match_statistics(listings, users, min_percentage=50)

        # Sin filtro de elegibilidad: ambos listings puntúan 95 para u1 y u2
        assert stats.total_matches == 4
        assert stats.total_listings == 2
        assert stats.total_users == 3
        assert stats.matches_per_listing == {"a": 2, "b": 2}
        assert stats.matches_per_user == {"u1": 2, "u2": 2}
        assert stats.avg_matches_per_listing == 2.0
        assert stats.avg_matches_per_user == 1.3

    def test_empty_inputs(self):
        stats = compute_match_statistics([], [])

        assert stats.total_matches == 0
        assert stats.avg_matches_per_listing == 0.0
        assert stats.avg_matches_per_user == 0.0
