"""
Unit tests for the empty-result diagnostic.
"""

import pytest
from quran_search.core import diagnose_empty_result, search
from quran_search.models import ConflictKind, SearchOptions


class TestDiagnoseEmptyResult:
    """Test explanations for empty filtered searches."""

    def test_sura_id_mismatch(self, context, settings):
        """Test a sura id that does not belong to the sura name."""
        options = SearchOptions(sura_name="الناس", sura_id=1)
        assert search("الناس", context, options, settings=settings).is_empty

        report = diagnose_empty_result("الناس", context, options, settings)

        assert report.kind == ConflictKind.SURA_ID_MISMATCH
        assert report.sura_id == 114
        assert report.juz_id == 30
        assert "114" in report.message
        assert "الناس" in report.message

    def test_juz_mismatch(self, context, settings):
        """Test a juz that does not contain the sura."""
        options = SearchOptions(sura_id=114, juz_id=1)
        assert search("الناس", context, options, settings=settings).is_empty

        report = diagnose_empty_result("الناس", context, options, settings)

        assert report.kind == ConflictKind.JUZ_MISMATCH
        assert report.juz_id == 30
        assert "30" in report.message

    def test_juz_mismatch_by_name(self, context, settings):
        """Test the juz check with a sura name instead of an id."""
        options = SearchOptions(sura_name="An-Nas", juz_id=1)
        report = diagnose_empty_result("الناس", context, options, settings)

        assert report.kind == ConflictKind.JUZ_MISMATCH
        assert "An-Nas" in report.message

    def test_filters_too_narrow(self, context, settings):
        """Test a query found only outside the filters."""
        options = SearchOptions(sura_id=1)
        assert search("الناس", context, options, settings=settings).is_empty

        report = diagnose_empty_result("الناس", context, options, settings)

        assert report.kind == ConflictKind.FILTERS_TOO_NARROW
        assert report.sura_id == 114

    def test_no_results(self, context, settings):
        """Test a query found nowhere."""
        report = diagnose_empty_result("زلزلة", context, SearchOptions(sura_id=1), settings)

        assert report.kind == ConflictKind.NO_RESULTS
        assert report.sura_id is None
        assert report.message

    def test_agreeing_name_falls_through(self, context, settings):
        """Test that a name/id pair that agrees moves on to the next check."""
        options = SearchOptions(sura_name="الناس", sura_id=114, juz_id=1)
        report = diagnose_empty_result("الناس", context, options, settings)

        assert report.kind == ConflictKind.JUZ_MISMATCH

    def test_strategy_switches_are_kept(self, context, settings):
        """Test that probes keep the disabled strategies disabled."""
        options = SearchOptions(sura_id=1, fuzzy=False)
        report = diagnose_empty_result("الرحين", context, options, settings)

        assert report.kind == ConflictKind.NO_RESULTS

    @pytest.mark.parametrize("query", ["", "   "])
    def test_empty_query(self, context, settings, query):
        """Test that an empty query is reported as having no results."""
        report = diagnose_empty_result(query, context, SearchOptions(sura_id=1), settings)
        assert report.kind == ConflictKind.NO_RESULTS
