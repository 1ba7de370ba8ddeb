"""Tests for the filter stage."""

from explorer.services.filtering_service import FilteringService, filtering_service


class TestQueryFilter:
    """Free-text matching on title and description."""

    def test_empty_query_keeps_everything(self, make_show):
        shows = [make_show(show_id="1"), make_show(show_id="2")]
        assert filtering_service.filter(shows, "") == shows

    def test_matches_title_case_insensitively(self, make_show):
        crime = make_show(show_id="1", title="True Crime Stories")
        comedy = make_show(show_id="2", title="Comedy Hour")

        result = filtering_service.filter([crime, comedy], "crime")

        assert result == [crime]

    def test_matches_description(self, make_show):
        show = make_show(title="Weekly", description="Deep dives into HISTORY")
        assert filtering_service.filter([show], "history") == [show]

    def test_unicode_casefold(self, make_show):
        show = make_show(title="Straße der Geschichten")
        assert filtering_service.filter([show], "STRASSE") == [show]

    def test_no_match_returns_empty(self, make_show):
        assert filtering_service.filter([make_show(title="Comedy Hour")], "science") == []


class TestCategoryFilter:
    """Genre membership filtering."""

    def test_keeps_shows_with_category(self, make_show):
        a = make_show(show_id="a", genres=[1, 4])
        b = make_show(show_id="b", genres=[2])
        c = make_show(show_id="c", genres=[4])

        assert filtering_service.filter([a, b, c], category_id=4) == [a, c]

    def test_empty_genres_never_match(self, make_show):
        show = make_show(genres=[])
        assert filtering_service.filter([show], category_id=1) == []

    def test_none_category_disables_filter(self, make_show):
        shows = [make_show(show_id="1", genres=[]), make_show(show_id="2", genres=[3])]
        assert filtering_service.filter(shows, category_id=None) == shows


class TestCombinedFilter:

    def test_predicates_combine_with_and(self, make_show):
        match = make_show(show_id="1", title="Crime Weekly", genres=[15])
        wrong_genre = make_show(show_id="2", title="Crime Daily", genres=[4])
        wrong_text = make_show(show_id="3", title="Music Hour", genres=[15])

        result = filtering_service.filter([match, wrong_genre, wrong_text], "crime", 15)

        assert result == [match]

    def test_preserves_input_order_and_source(self, make_show):
        shows = [make_show(show_id=str(i), title=f"Crime {i}") for i in (3, 1, 2)]
        original = list(shows)

        result = filtering_service.filter(shows, "crime")

        assert [s.id for s in result] == ["3", "1", "2"]
        assert shows == original
        assert result is not shows

    def test_matches_query_expects_casefolded_needle(self, make_show):
        show = make_show(title="Science Friday")
        assert FilteringService.matches_query(show, "science")
        assert not FilteringService.matches_query(show, "SCIENCE")
