"""
Tests for the predicate combinator.
"""

from datetime import date, datetime, timezone

from sqlalchemy import select

from admin_api.models import Country, PriceOfferLog
from admin_api.services.query.predicates import (
    active_only,
    compose,
    contains,
    day_range,
    equals,
    equals_upper,
    in_range,
    start_of_day,
)


def _names(db_session, predicate) -> list[str]:
    query = select(Country.name).where(predicate).order_by(Country.name)
    return list(db_session.execute(query).scalars().all())


class TestCompose:
    """Tests for compose()."""

    def test_no_terms_matches_everything(self, db_session):
        db_session.add_all([
            Country(iso_code="FRA", name="France", continent="Europe"),
            Country(iso_code="PER", name="Peru", continent="South America", is_deleted=True),
        ])
        db_session.commit()

        assert _names(db_session, compose(None)) == ["France", "Peru"]

    def test_absent_terms_are_skipped(self, db_session):
        db_session.add(Country(iso_code="FRA", name="France", continent="Europe"))
        db_session.commit()

        predicate = compose(
            active_only(Country),
            contains(Country.name, None),
            contains(Country.name, "   "),
            equals(Country.continent, ""),
        )
        assert _names(db_session, predicate) == ["France"]

    def test_terms_are_anded(self, db_session):
        db_session.add_all([
            Country(iso_code="FRA", name="France", continent="Europe"),
            Country(iso_code="FIN", name="Finland", continent="Europe"),
            Country(iso_code="FJI", name="Fiji", continent="Oceania"),
        ])
        db_session.commit()

        predicate = compose(
            active_only(Country),
            contains(Country.name, "f"),
            equals_upper(Country.continent, "europe"),
        )
        assert _names(db_session, predicate) == ["Finland", "France"]


class TestActiveOnly:
    def test_excludes_deleted_rows(self, db_session):
        db_session.add_all([
            Country(iso_code="FRA", name="France", continent="Europe"),
            Country(iso_code="PER", name="Peru", continent="South America", is_deleted=True),
        ])
        db_session.commit()

        assert _names(db_session, compose(active_only(Country))) == ["France"]

    def test_include_deleted_drops_the_condition(self):
        assert active_only(Country, include_deleted=True) is None


class TestContains:
    """Case-insensitive containment with literal wildcards."""

    def test_case_insensitive(self, db_session):
        db_session.add(Country(iso_code="FRA", name="France", continent="Europe"))
        db_session.commit()

        assert _names(db_session, contains(Country.name, "RAN")) == ["France"]
        assert _names(db_session, contains(Country.name, "ran")) == ["France"]

    def test_wildcards_match_literally(self, db_session):
        db_session.add_all([
            Country(iso_code="AAA", name="100% Land", continent="Nowhere"),
            Country(iso_code="BBB", name="1000 Land", continent="Nowhere"),
            Country(iso_code="CCC", name="A_B", continent="Nowhere"),
            Country(iso_code="DDD", name="AXB", continent="Nowhere"),
        ])
        db_session.commit()

        assert _names(db_session, contains(Country.name, "%")) == ["100% Land"]
        assert _names(db_session, contains(Country.name, "_")) == ["A_B"]


class TestRanges:
    """Tests for in_range() and day_range()."""

    def _seed_logs(self, db_session, make_price_log):
        for cents in (100, 200, 300):
            make_price_log(cents, fare_id="YOW")

    def _cents(self, db_session, predicate) -> list[int]:
        query = (
            select(PriceOfferLog.offer_price_cents)
            .where(predicate)
            .order_by(PriceOfferLog.offer_price_cents)
        )
        return list(db_session.execute(query).scalars().all())

    def test_inclusive_bounds(self, db_session, seed_fare, make_price_log):
        self._seed_logs(db_session, make_price_log)
        predicate = in_range(PriceOfferLog.offer_price_cents, 100, 200)
        assert self._cents(db_session, predicate) == [100, 200]

    def test_one_sided_bounds(self, db_session, seed_fare, make_price_log):
        self._seed_logs(db_session, make_price_log)
        assert self._cents(db_session, in_range(PriceOfferLog.offer_price_cents, 200)) == [200, 300]
        assert self._cents(db_session, in_range(PriceOfferLog.offer_price_cents, None, 200)) == [100, 200]

    def test_no_bounds_is_absent(self):
        assert in_range(PriceOfferLog.offer_price_cents) is None

    def test_conflicting_bounds_match_nothing(self, db_session, seed_fare, make_price_log):
        self._seed_logs(db_session, make_price_log)
        predicate = in_range(PriceOfferLog.offer_price_cents, 300, 100)
        assert self._cents(db_session, predicate) == []

    def test_day_range_covers_whole_end_day(self, db_session, seed_fare, make_price_log):
        make_price_log(100, fare_id="YOW", when=datetime(2024, 5, 1, 0, 0, tzinfo=timezone.utc))
        make_price_log(200, fare_id="YOW", when=datetime(2024, 5, 3, 23, 59, tzinfo=timezone.utc))
        make_price_log(300, fare_id="YOW", when=datetime(2024, 5, 4, 0, 0, tzinfo=timezone.utc))

        predicate = day_range(PriceOfferLog.timestamp, date(2024, 5, 1), date(2024, 5, 3))
        assert self._cents(db_session, predicate) == [100, 200]

    def test_start_of_day_is_utc_midnight(self):
        midnight = start_of_day(datetime(2024, 5, 3, 17, 45))
        assert midnight == datetime(2024, 5, 3, 0, 0, tzinfo=timezone.utc)
