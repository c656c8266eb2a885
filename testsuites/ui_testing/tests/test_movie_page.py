"""
================================================================================
Movie Page UI Tests (Playwright)
================================================================================

Runs the movie page object against local HTML replicas of the booking site:
  - Detail page checks (name, poster, booking option, about section)
  - Fallback chains when generated class names drift
  - Page-load quorum
  - Navigation clicks

================================================================================
"""

import allure
import pytest

from testsuites.ui_testing.framework.locators import Locator
from testsuites.ui_testing.framework.page_base import NavigationError
from testsuites.ui_testing.pages.movie_page import MoviePage


@allure.epic("UI Testing")
@allure.feature("Movie Details")
class TestMovieDetails:
    """Movie detail page checks."""

    @allure.story("Happy Path")
    @allure.title("Selecting a recommended movie opens its detail page")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke
    def test_select_first_recommended_movie(self, movie_page: MoviePage, fixture_url):
        movie_page.navigate_to_url(fixture_url("movie_listing.html"))

        movie_page.select_first_recommended_movie()

        assert movie_page.page.url.endswith("movie_detail.html")
        assert movie_page.is_movie_details_page_loaded()

    @allure.story("Happy Path")
    @allure.title("Detail page shows name, poster and booking option")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    def test_detail_page_elements(self, movie_page: MoviePage, fixture_url):
        movie_page.navigate_to_url(fixture_url("movie_detail.html"))

        assert movie_page.is_movie_name_displayed()
        assert movie_page.is_poster_displayed()
        assert movie_page.is_booking_option_available()
        assert movie_page.is_detailed_page_displayed()

    @allure.story("Markup Drift")
    @allure.title("About section is found through a fallback locator")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    def test_about_section_fallback(self, movie_page: MoviePage, fixture_url):
        movie_page.navigate_to_url(fixture_url("movie_detail_drifted.html"))

        assert movie_page.is_detailed_page_displayed()
        assert not movie_page.is_movie_name_displayed()
        assert "About the movie" in movie_page.get_locator_health_report()

    @allure.story("Markup Drift")
    @allure.title("Drifted detail page still passes the page-load quorum")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    def test_quorum_on_drifted_page(self, movie_page: MoviePage, fixture_url):
        movie_page.navigate_to_url(fixture_url("movie_detail_drifted.html"))

        assert movie_page.is_movie_details_page_loaded()

    @allure.story("Negative Path")
    @allure.title("Listing page is not mistaken for a detail page")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    def test_quorum_fails_on_listing(self, movie_page: MoviePage, fixture_url):
        movie_page.navigate_to_url(fixture_url("movie_listing.html"))

        assert not movie_page.is_movie_details_page_loaded()

    @allure.story("Negative Path")
    @allure.title("Absent element is reported as not displayed")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    def test_absent_element_not_displayed(self, movie_page: MoviePage, fixture_url):
        movie_page.navigate_to_url(fixture_url("movie_detail.html"))

        assert movie_page.is_displayed(Locator.css("#definitely-not-on-this-page")) is False
        assert movie_page.resolve_element(
            Locator.css("#definitely-not-on-this-page"), max_retries=2
        ) is None


@allure.epic("UI Testing")
@allure.feature("Navigation")
class TestMovieNavigation:
    """Navigation actions from the movie listing."""

    @allure.story("Happy Path")
    @allure.title("Now Showing link is visible on the listing")
    @pytest.mark.P1
    def test_in_cinemas_link_on_listing(self, movie_page: MoviePage, fixture_url):
        movie_page.navigate_to_url(fixture_url("movie_listing.html"))

        assert movie_page.is_in_cinemas_near_you_link_displayed()

    @allure.story("Happy Path")
    @allure.title("Explore upcoming movies, then return through the Movies tab")
    @pytest.mark.P1
    def test_upcoming_and_back(self, movie_page: MoviePage, fixture_url):
        movie_page.navigate_to_url(fixture_url("movie_listing.html"))

        movie_page.click_explore_upcoming_movies()
        assert movie_page.page.url.endswith("upcoming_movies.html")
        # Only the text fallback matches here
        assert movie_page.is_in_cinemas_near_you_link_displayed()

        movie_page.click_movies_tab()
        assert movie_page.page.url.endswith("movie_listing.html")

    @allure.story("Negative Path")
    @allure.title("Clicking a missing navigation target raises NavigationError")
    @pytest.mark.P2
    def test_click_missing_target(self, movie_page: MoviePage, fixture_url):
        movie_page.navigate_to_url(fixture_url("movie_detail.html"))

        with pytest.raises(NavigationError) as exc_info:
            movie_page.click_movies_tab()

        assert exc_info.value.locator == MoviePage.MOVIES_TAB
