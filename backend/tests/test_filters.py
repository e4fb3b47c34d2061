"""
Tests for eligibility and hard-constraint filtering.
"""
from decimal import Decimal

import pytest

from stylematch.reco.filters import CandidateConstraints, filter_candidates, is_eligible


@pytest.fixture
def partners(approved_partner, pending_partner):
    return {approved_partner.id: approved_partner, pending_partner.id: pending_partner}


def ids(garments):
    return [g.id for g in garments]


class TestEligibility:
    """Visibility, stock and partner approval are always enforced."""

    def test_public_in_stock_approved(self, make_garment, partners):
        assert is_eligible(make_garment(1), partners)

    def test_private_garment_excluded(self, make_garment, partners):
        assert not is_eligible(make_garment(1, visibility="private"), partners)

    def test_visibility_case_insensitive(self, make_garment, partners):
        assert is_eligible(make_garment(1, visibility="Public"), partners)

    @pytest.mark.parametrize("stock", [0, -1, None])
    def test_out_of_stock_excluded(self, make_garment, partners, stock):
        assert not is_eligible(make_garment(1, stock=stock), partners)

    def test_unapproved_partner_excluded(self, make_garment, partners):
        assert not is_eligible(make_garment(1, owner_id=2), partners)

    def test_missing_partner_excluded(self, make_garment, partners):
        assert not is_eligible(make_garment(1, owner_id=99), partners)


class TestConstraints:
    """Tests for the optional AND-combined constraints."""

    def test_no_constraints_keeps_eligible(self, make_garment, partners):
        catalog = [make_garment(1), make_garment(2, visibility="private"), make_garment(3)]
        assert ids(filter_candidates(catalog, CandidateConstraints(), partners)) == [1, 3]

    def test_category_and_color(self, make_garment, partners):
        catalog = [
            make_garment(1, category="dress", color="red"),
            make_garment(2, category="dress", color="blue"),
            make_garment(3, category="shirt", color="red"),
        ]
        constraints = CandidateConstraints(category="dress", color="red")
        assert ids(filter_candidates(catalog, constraints, partners)) == [1]

    def test_brand_is_case_insensitive(self, make_garment, partners):
        catalog = [make_garment(1, brand="Loom & Co"), make_garment(2, brand="Other")]
        constraints = CandidateConstraints(brand="loom & co")
        assert ids(filter_candidates(catalog, constraints, partners)) == [1]

    @pytest.mark.parametrize("term", ["emerald", "studio", "dress", "green"])
    def test_search_matches_any_text_field(self, make_garment, partners, term):
        catalog = [
            make_garment(1, name="Emerald Maxi", brand="Sunday Studio", category="dress", color="green"),
            make_garment(2, name="Plain Tee", brand="Basics", category="tshirt", color="white"),
        ]
        constraints = CandidateConstraints(search=term)
        assert ids(filter_candidates(catalog, constraints, partners)) == [1]

    def test_search_combined_with_category(self, make_garment, partners):
        catalog = [
            make_garment(1, name="Summer Dress", category="dress"),
            make_garment(2, name="Summer Shirt", category="shirt"),
        ]
        constraints = CandidateConstraints(search="summer", category="shirt")
        assert ids(filter_candidates(catalog, constraints, partners)) == [2]

    def test_occasion_keeps_untagged_garments(self, make_garment, partners):
        catalog = [
            make_garment(1, occasion_tags=("party",)),
            make_garment(2, occasion_tags=("business",)),
            make_garment(3, occasion_tags=()),
        ]
        constraints = CandidateConstraints(occasion="party")
        assert ids(filter_candidates(catalog, constraints, partners)) == [1, 3]

    def test_gender_keeps_unconstrained_garments(self, make_garment, partners):
        catalog = [
            make_garment(1, gender="female"),
            make_garment(2, gender="male"),
            make_garment(3, gender=None),
        ]
        constraints = CandidateConstraints(gender="female")
        assert ids(filter_candidates(catalog, constraints, partners)) == [1, 3]

    def test_price_range_inclusive(self, make_garment, partners):
        catalog = [
            make_garment(1, price=Decimal("10.00")),
            make_garment(2, price=Decimal("25.00")),
            make_garment(3, price=Decimal("40.00")),
        ]
        constraints = CandidateConstraints(min_price=10, max_price=25.0)
        assert ids(filter_candidates(catalog, constraints, partners)) == [1, 2]

    def test_exclude_ids_compared_as_strings(self, make_garment, partners):
        catalog = [make_garment(1), make_garment(2)]
        constraints = CandidateConstraints(exclude_ids=frozenset({"2"}))
        assert ids(filter_candidates(catalog, constraints, partners)) == [1]

    def test_duplicate_ids_returned_once(self, make_garment, partners):
        catalog = [make_garment(1, name="first"), make_garment(1, name="second")]
        candidates = filter_candidates(catalog, CandidateConstraints(), partners)
        assert [g.name for g in candidates] == ["first"]

    def test_nothing_matches(self, make_garment, partners):
        catalog = [make_garment(1, color="red")]
        assert filter_candidates(catalog, CandidateConstraints(color="blue"), partners) == []

    def test_as_filters_echo(self):
        echoed = CandidateConstraints(category="dress", min_price=5).as_filters()
        assert echoed["category"] == "dress"
        assert echoed["min_price"] == 5
        assert "exclude_ids" not in echoed
