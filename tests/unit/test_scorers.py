"""
Tests for compat_engine.core.compatibility.scorers — the ten category scorers.

Each scorer is exercised on a near-perfect listing, on representative
mismatches, and on missing data (which must score neutral, never zero).
"""

import pytest

from compat_engine.core.compatibility.base import LIMITED_DATA_REASON, MODERATE_REASON
from compat_engine.core.compatibility.scorers import (
    ArtScorer,
    CommunityScorer,
    FavorScorer,
    GiveawayScorer,
    HolidayScorer,
    JobScorer,
    LearningScorer,
    MarketplaceScorer,
    RentalScorer,
    Scorer,
    ServiceScorer,
    default_scorers,
)
from compat_engine.data.models import JobListing
from compat_engine.utils.constants import Category


def scores(result) -> dict[str, int]:
    return {d.name: d.score for d in result.dimensions}


# ── Registry ────────────────────────────────────────────────────────────────


class TestDefaultScorers:
    def test_one_scorer_per_category(self):
        registry = default_scorers()
        assert set(registry) == {c.value for c in Category}

    def test_all_satisfy_protocol(self):
        for category, scorer in default_scorers().items():
            assert isinstance(scorer, Scorer)
            assert scorer.category == category

    def test_fresh_instances(self):
        assert default_scorers()["jobs"] is not default_scorers()["jobs"]

    @pytest.mark.parametrize("category", [c.value for c in Category])
    def test_missing_category_preferences_give_default(self, category, make_preferences):
        scorer = default_scorers()[category]
        result = scorer.calculate_score(make_preferences(), {"id": "x-1"})
        assert result.overall_score == 50
        assert result.primary_match_reason == LIMITED_DATA_REASON
        assert result.listing_id == "x-1"
        assert result.category == category

    @pytest.mark.parametrize("category", [c.value for c in Category])
    def test_empty_listing_scores_in_range(self, category, make_preferences):
        # Preferences present but the listing carries no data at all
        prefs = make_preferences(**{category: {}})
        scorer = default_scorers()[category]
        result = scorer.calculate_score(prefs, {})
        assert 0 <= result.overall_score <= 100
        assert [d.name for d in result.dimensions] == list(scorer.dimension_names)
        assert all(d.score == 50 or d.score == 100 for d in result.dimensions)


# ── Jobs ────────────────────────────────────────────────────────────────────


@pytest.fixture
def senior_python_prefs(make_preferences):
    return make_preferences(
        jobs={
            "desiredSkills": ["Python", "Django"],
            "minSalary": 100000,
            "maxSalary": 150000,
            "workArrangement": ["remote"],
            "experienceLevel": "senior",
        }
    )


class TestJobScorer:
    def test_perfect_match(self, senior_python_prefs):
        listing = {
            "id": "job-1",
            "requiredSkills": ["python", "django"],
            "salary": 120000,
            "workArrangement": "remote",
            "experienceLevel": "senior",
        }
        result = JobScorer().calculate_score(senior_python_prefs, listing)
        assert result.overall_score == 100
        assert [d.name for d in result.dimensions] == list(JobScorer.dimension_names)
        assert sum(d.weight for d in result.dimensions) == pytest.approx(1.0)
        assert result.improvement_suggestions == []
        assert result.dimensions[0].description == "Your skills are a perfect match!"

    def test_poor_match(self, senior_python_prefs):
        listing = {
            "id": "job-2",
            "skills": ["java"],
            "salary": 20000,
            "workArrangement": "onsite",
            "experienceLevel": "entry",
        }
        result = JobScorer().calculate_score(senior_python_prefs, listing)
        assert scores(result) == {
            "Skills Match": 0,
            "Salary Match": 20,
            "Work Arrangement": 0,
            "Experience Level": 40,
        }
        assert result.overall_score == 11
        assert result.primary_match_reason == MODERATE_REASON
        assert result.improvement_suggestions == [
            "Improve your skills match match by updating your preferences.",
            "Improve your work arrangement match by updating your preferences.",
            "Improve your salary match match by updating your preferences.",
        ]

    def test_salary_range_uses_midpoint(self, senior_python_prefs):
        listing = {"id": "job-3", "salary": {"min": 90000, "max": 130000}}
        result = JobScorer().calculate_score(senior_python_prefs, listing)
        salary = result.get_dimension("Salary Match")
        assert salary.score == 100
        assert "$110000" in salary.description

    def test_work_arrangement_as_string(self, make_preferences):
        prefs = make_preferences(jobs={"workArrangement": "hybrid"})
        result = JobScorer().calculate_score(prefs, {"workArrangement": "hybrid"})
        assert scores(result)["Work Arrangement"] == 100

    def test_missing_data_is_neutral(self, make_preferences):
        result = JobScorer().calculate_score(make_preferences(jobs={}), {"id": "job-4"})
        assert all(d.score == 50 for d in result.dimensions)
        assert result.overall_score == 50

    def test_malformed_salary_dropped(self, senior_python_prefs):
        listing = {"id": "job-5", "salary": "lots", "skills": ["python"]}
        result = JobScorer().calculate_score(senior_python_prefs, listing)
        assert scores(result)["Salary Match"] == 50
        assert scores(result)["Skills Match"] == 50  # 1 of 2 desired

    def test_accepts_typed_listing(self, senior_python_prefs):
        listing = JobListing(id="job-6", required_skills=["python", "django"])
        result = JobScorer().calculate_score(senior_python_prefs, listing)
        assert scores(result)["Skills Match"] == 100
        assert result.listing_id == "job-6"


# ── Rentals ─────────────────────────────────────────────────────────────────


@pytest.fixture
def rental_prefs(make_preferences):
    return make_preferences(
        rentals={
            "rentalTypes": ["apartment"],
            "maxPrice": 2000,
            "location": "Downtown Seattle",
            "minDuration": 6,
            "maxDuration": 12,
            "requiredAmenities": ["parking", "washer"],
        }
    )


class TestRentalScorer:
    def test_perfect_match(self, rental_prefs):
        listing = {
            "id": "r-1",
            "rentalType": "apartment",
            "price": 1500,
            "location": "downtown seattle",
            "amenities": ["Parking garage", "Washer/Dryer"],
            "duration": 12,
        }
        result = RentalScorer().calculate_score(rental_prefs, listing)
        assert result.overall_score == 100

    @pytest.mark.parametrize("price,expected", [(1600, 100), (1900, 90), (2400, 80)])
    def test_price_tiers(self, rental_prefs, price, expected):
        result = RentalScorer().calculate_score(rental_prefs, {"price": price})
        assert scores(result)["Price"] == expected

    def test_partial_amenities(self, make_preferences):
        prefs = make_preferences(rentals={"requiredAmenities": ["parking", "pool"]})
        result = RentalScorer().calculate_score(prefs, {"amenities": ["parking"]})
        assert scores(result)["Amenities"] == 50

    def test_different_location(self, rental_prefs):
        result = RentalScorer().calculate_score(rental_prefs, {"location": "Tacoma"})
        location = result.get_dimension("Location")
        assert location.score == 0
        assert location.description == "Located in an area different from your preference"

    def test_missing_location_is_neutral(self, rental_prefs):
        result = RentalScorer().calculate_score(rental_prefs, {"id": "r-2"})
        assert scores(result)["Location"] == 50


# ── Services ────────────────────────────────────────────────────────────────


@pytest.fixture
def service_prefs(make_preferences):
    return make_preferences(
        services={
            "serviceTypes": ["plumbing"],
            "maxPrice": 100,
            "minProviderRating": 4,
            "preferredDistance": 10,
        }
    )


class TestServiceScorer:
    def test_strong_match(self, service_prefs):
        listing = {"type": "plumbing", "price": 60, "providerRating": 4.5, "distance": 5}
        result = ServiceScorer().calculate_score(service_prefs, listing)
        assert scores(result) == {
            "Service Type": 100,
            "Price": 100,
            "Provider Rating": 95,
            "Location": 100,
        }
        assert result.overall_score == 99

    def test_rating_below_minimum(self, service_prefs):
        result = ServiceScorer().calculate_score(service_prefs, {"providerRating": 3})
        assert scores(result)["Provider Rating"] == 60

    def test_near_miss_outscores_exact_minimum(self, make_preferences):
        prefs = make_preferences(services={"minProviderRating": 4.5})
        near = ServiceScorer().calculate_score(prefs, {"providerRating": 4.4})
        exact = ServiceScorer().calculate_score(prefs, {"providerRating": 4.5})
        assert scores(near)["Provider Rating"] == 96
        assert scores(exact)["Provider Rating"] == 90

    def test_default_distances(self, make_preferences):
        result = ServiceScorer().calculate_score(make_preferences(services={}), {})
        location = result.get_dimension("Location")
        assert location.score == 100
        assert "(10 miles)" in location.description

    def test_far_provider(self, service_prefs):
        result = ServiceScorer().calculate_score(service_prefs, {"distance": 15})
        assert scores(result)["Location"] == 50


# ── Marketplace ─────────────────────────────────────────────────────────────


@pytest.fixture
def marketplace_prefs(make_preferences):
    return make_preferences(
        marketplace={
            "itemTypes": ["electronics"],
            "maxPrice": 500,
            "minCondition": "good",
            "maxDistance": 10,
            "preferredBrands": ["Apple"],
        }
    )


class TestMarketplaceScorer:
    def test_strong_match(self, marketplace_prefs):
        listing = {
            "itemType": "electronics",
            "price": 250,
            "condition": "like-new",
            "distance": 5,
            "brand": "Apple",
        }
        result = MarketplaceScorer().calculate_score(marketplace_prefs, listing)
        assert scores(result) == {
            "Item Type": 100,
            "Price": 90,
            "Condition": 95,
            "Distance": 100,
            "Brand": 100,
        }
        assert result.overall_score == 97

    @pytest.mark.parametrize(
        "condition,expected",
        [("new", 100), ("good", 90), ("fair", 60), ("mint", 90)],
    )
    def test_condition(self, marketplace_prefs, condition, expected):
        result = MarketplaceScorer().calculate_score(marketplace_prefs, {"condition": condition})
        assert scores(result)["Condition"] == expected

    def test_condition_far_below(self, make_preferences):
        prefs = make_preferences(marketplace={"minCondition": "new"})
        result = MarketplaceScorer().calculate_score(prefs, {"condition": "poor"})
        assert scores(result)["Condition"] == 0

    def test_own_importance_sets_weight(self, make_preferences):
        prefs = make_preferences(marketplace={"priceImportance": 0.5})
        result = MarketplaceScorer().calculate_score(prefs, {})
        assert result.get_dimension("Price").weight == 0.5

    def test_general_importance_on_five_point_scale(self, make_preferences):
        prefs = make_preferences(marketplace={}, general={"priceImportance": 4})
        result = MarketplaceScorer().calculate_score(prefs, {})
        assert result.get_dimension("Price").weight == pytest.approx(0.8)

    def test_general_importance_on_unit_scale(self, make_preferences):
        prefs = make_preferences(marketplace={}, general={"locationImportance": 0.6})
        result = MarketplaceScorer().calculate_score(prefs, {})
        assert result.get_dimension("Distance").weight == 0.6

    def test_default_importances(self, make_preferences):
        result = MarketplaceScorer().calculate_score(make_preferences(marketplace={}), {})
        weights = {d.name: d.weight for d in result.dimensions}
        assert weights == {
            "Item Type": 0.3,
            "Price": 0.2,
            "Condition": 0.2,
            "Distance": 0.15,
            "Brand": 0.15,
        }

    def test_unrelated_item_type(self, make_preferences):
        prefs = make_preferences(marketplace={"itemTypes": ["electronics", "phones"]})
        result = MarketplaceScorer().calculate_score(prefs, {"itemType": "furniture"})
        assert scores(result)["Item Type"] == 0

    def test_max_budget_alias(self, make_preferences):
        prefs = make_preferences(marketplace={"maxBudget": 100})
        result = MarketplaceScorer().calculate_score(prefs, {"price": 200})
        assert scores(result)["Price"] == 0


# ── Favors ──────────────────────────────────────────────────────────────────


@pytest.fixture
def favor_prefs(make_preferences):
    return make_preferences(
        favors={
            "favorTypes": ["moving"],
            "maxTimeCommitment": 4,
            "maxDistance": 5,
            "compensationPreference": "monetary",
            "minCompensation": 50,
            "reciprocityPreference": "either",
        }
    )


@pytest.fixture
def favor_listing():
    return {
        "id": "f-1",
        "favorType": "moving",
        "compensation": "cash",
        "compensationType": "monetary",
        "compensationAmount": 60,
        "estimatedTime": 2,
        "distance": 3,
        "reciprocity": "one-way",
    }


class TestFavorScorer:
    def test_strong_match(self, favor_prefs, favor_listing):
        result = FavorScorer().calculate_score(favor_prefs, favor_listing)
        assert scores(result) == {
            "Favor Type": 100,
            "Compensation": 100,
            "Time Commitment": 90,
            "Distance": 100,
            "Reciprocity": 90,
        }
        assert result.overall_score == 97

    @pytest.mark.parametrize("amount,expected", [(40, 80), (20, 50)])
    def test_short_compensation(self, favor_prefs, favor_listing, amount, expected):
        favor_listing["compensationAmount"] = amount
        result = FavorScorer().calculate_score(favor_prefs, favor_listing)
        assert scores(result)["Compensation"] == expected

    def test_other_compensation_type(self, favor_prefs, favor_listing):
        favor_listing["compensationType"] = "favor-exchange"
        result = FavorScorer().calculate_score(favor_prefs, favor_listing)
        assert scores(result)["Compensation"] == 60

    def test_same_non_monetary_type(self, make_preferences):
        prefs = make_preferences(favors={"compensationPreference": "barter"})
        listing = {"compensation": "dinner", "compensationType": "barter"}
        result = FavorScorer().calculate_score(prefs, listing)
        assert scores(result)["Compensation"] == 100

    def test_no_compensation_is_neutral(self, favor_prefs, favor_listing):
        del favor_listing["compensation"]
        result = FavorScorer().calculate_score(favor_prefs, favor_listing)
        assert scores(result)["Compensation"] == 50

    def test_zero_distance_is_neutral(self, favor_prefs, favor_listing):
        favor_listing["distance"] = 0
        result = FavorScorer().calculate_score(favor_prefs, favor_listing)
        assert scores(result)["Distance"] == 50

    def test_reciprocity_mismatch(self, make_preferences):
        prefs = make_preferences(favors={"reciprocityPreference": "mutual"})
        result = FavorScorer().calculate_score(prefs, {"reciprocity": "one-way"})
        assert scores(result)["Reciprocity"] == 30


# ── Holiday ─────────────────────────────────────────────────────────────────


@pytest.fixture
def holiday_prefs(make_preferences):
    return make_preferences(
        holiday={
            "preferredDestinations": ["Lisbon"],
            "preferredActivities": ["surfing", "hiking"],
            "maxBudget": 1000,
            "preferredSeasons": ["Summer"],
        }
    )


class TestHolidayScorer:
    def test_perfect_match(self, holiday_prefs):
        listing = {
            "destination": "Lisbon",
            "activities": ["surfing", "hiking"],
            "price": 600,
            "duration": 7,
            "season": "summer",
        }
        result = HolidayScorer().calculate_score(holiday_prefs, listing)
        assert result.overall_score == 100

    def test_default_duration_range(self, holiday_prefs):
        result = HolidayScorer().calculate_score(holiday_prefs, {"duration": 45})
        assert scores(result)["Duration"] == 75

    def test_custom_duration_range(self, make_preferences):
        prefs = make_preferences(holiday={"preferredDuration": {"min": 7, "max": 14}})
        result = HolidayScorer().calculate_score(prefs, {"duration": 10})
        assert scores(result)["Duration"] == 100

    def test_off_season(self, holiday_prefs):
        result = HolidayScorer().calculate_score(holiday_prefs, {"season": "winter"})
        assert scores(result)["Season"] == 30

    def test_partial_activities(self, holiday_prefs):
        result = HolidayScorer().calculate_score(
            holiday_prefs, {"activities": ["surfing", "museums"]}
        )
        assert scores(result)["Activities"] == 33

    def test_missing_duration_is_neutral(self, holiday_prefs):
        result = HolidayScorer().calculate_score(holiday_prefs, {})
        assert scores(result)["Duration"] == 50


# ── Art ─────────────────────────────────────────────────────────────────────


@pytest.fixture
def art_prefs(make_preferences):
    return make_preferences(
        art={
            "preferredMediums": ["oil"],
            "preferredStyles": ["abstract"],
            "maxPrice": 500,
            "favoriteArtists": ["Jane Doe"],
            "preferredFormat": "original",
        }
    )


class TestArtScorer:
    def test_perfect_match(self, art_prefs):
        listing = {
            "medium": "Oil",
            "style": "abstract",
            "price": 300,
            "artist": "jane doe",
            "format": "Original",
        }
        result = ArtScorer().calculate_score(art_prefs, listing)
        assert result.overall_score == 100

    def test_unknown_artist_not_penalised(self, art_prefs):
        result = ArtScorer().calculate_score(art_prefs, {"artist": "Someone Else"})
        assert scores(result)["Artist"] == 50

    def test_format_mismatch(self, art_prefs):
        result = ArtScorer().calculate_score(art_prefs, {"format": "print"})
        assert scores(result)["Format"] == 30

    def test_medium_substring(self, art_prefs):
        result = ArtScorer().calculate_score(art_prefs, {"medium": "oil on canvas"})
        assert scores(result)["Medium"] == 80


# ── Giveaways ───────────────────────────────────────────────────────────────


@pytest.fixture
def giveaway_prefs(make_preferences):
    return make_preferences(
        giveaways={"interests": ["furniture"], "minCondition": "good", "maxDistance": 10}
    )


class TestGiveawayScorer:
    def test_strong_match(self, giveaway_prefs):
        listing = {"itemType": "Furniture", "condition": "like new", "distance": 5}
        result = GiveawayScorer().calculate_score(giveaway_prefs, listing)
        assert scores(result) == {"Item Type": 100, "Condition": 90, "Distance": 100}
        # Distance takes the default location weight: 82 / 0.85 = 96.5
        assert result.overall_score == 96
        assert result.get_dimension("Distance").weight == 0.3

    def test_condition_below_minimum(self, giveaway_prefs):
        result = GiveawayScorer().calculate_score(giveaway_prefs, {"condition": "poor"})
        assert scores(result)["Condition"] == 40

    def test_any_condition_accepted(self, make_preferences):
        prefs = make_preferences(giveaways={})
        result = GiveawayScorer().calculate_score(prefs, {"condition": "poor"})
        assert scores(result)["Condition"] == 100

    @pytest.mark.parametrize("listing", [{"condition": "scratched"}, {}])
    def test_unknown_condition_is_neutral(self, giveaway_prefs, listing):
        result = GiveawayScorer().calculate_score(giveaway_prefs, listing)
        assert scores(result)["Condition"] == 50


# ── Learning ────────────────────────────────────────────────────────────────


@pytest.fixture
def learning_prefs(make_preferences):
    return make_preferences(
        learning={
            "interestedSubjects": ["python"],
            "format": ["online"],
            "skillLevel": "intermediate",
            "maxPrice": 200,
            "preferredDuration": {"min": 4, "max": 12},
        }
    )


class TestLearningScorer:
    def test_perfect_match(self, learning_prefs):
        listing = {
            "subject": "Python",
            "format": "Online",
            "level": "intermediate",
            "price": 100,
            "durationWeeks": 8,
        }
        result = LearningScorer().calculate_score(learning_prefs, listing)
        assert result.overall_score == 100

    @pytest.mark.parametrize("level,expected", [("expert", 33), ("beginner", 67), ("advanced", 67)])
    def test_level_distance(self, learning_prefs, level, expected):
        result = LearningScorer().calculate_score(learning_prefs, {"level": level})
        assert scores(result)["Level"] == expected

    def test_any_level(self, make_preferences):
        prefs = make_preferences(learning={})
        result = LearningScorer().calculate_score(prefs, {"level": "expert"})
        assert scores(result)["Level"] == 100

    def test_format_mismatch(self, learning_prefs):
        result = LearningScorer().calculate_score(learning_prefs, {"format": "in-person"})
        assert scores(result)["Format"] == 30


# ── Community ───────────────────────────────────────────────────────────────


@pytest.fixture
def community_prefs(make_preferences):
    return make_preferences(
        community={
            "interests": ["hiking"],
            "maxDistance": 10,
            "preferredGroupSize": {"min": 5, "max": 20},
            "preferredAgeGroups": ["adults"],
            "frequency": "weekly",
        }
    )


class TestCommunityScorer:
    def test_perfect_match(self, community_prefs):
        listing = {
            "activityType": "hiking",
            "distance": 4,
            "groupSize": 12,
            "ageGroup": "Adults",
            "frequency": "weekly",
        }
        result = CommunityScorer().calculate_score(community_prefs, listing)
        assert result.overall_score == 100

    @pytest.mark.parametrize(
        "frequency,expected",
        [("monthly", 77), ("sometimes", 50)],
    )
    def test_frequency(self, community_prefs, frequency, expected):
        result = CommunityScorer().calculate_score(community_prefs, {"frequency": frequency})
        assert scores(result)["Frequency"] == expected

    def test_opposite_frequencies_keep_thirty(self, make_preferences):
        prefs = make_preferences(community={"frequency": "daily"})
        result = CommunityScorer().calculate_score(prefs, {"frequency": "one-time"})
        assert scores(result)["Frequency"] == 30

    def test_group_too_large(self, community_prefs):
        result = CommunityScorer().calculate_score(community_prefs, {"groupSize": 40})
        assert scores(result)["Group Size"] == 50

    def test_age_group_mismatch(self, community_prefs):
        result = CommunityScorer().calculate_score(community_prefs, {"ageGroup": "teens"})
        assert scores(result)["Age Group"] == 30
