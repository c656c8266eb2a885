"""
================================================================================
Movie Page Object
================================================================================

Movie listing and movie detail pages of the booking site.

The site's markup uses auto-generated class names (e.g. `sc-qswwm9-6`) that
drift between deployments, so several checks use ordered fallback chains that
go from the exact site locator to progressively looser text matches.

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.diagnostics import ElementSampler, PageDiagnostics
from testsuites.ui_testing.framework.locators import Locator, LocatorChain
from testsuites.ui_testing.framework.page_base import BasePage, NavigationError


class MoviePage(BasePage):
    """Movie listing / detail page object."""

    URL_PATH = "/explore/movies"

    RECOMMENDED_MOVIES = Locator.xpath(
        "//div[contains(@class,'sc-133848s-3')]"
        "//a[@class='sc-133848s-11 sc-lnhrs7-5 ctsexn bHVBt']",
        "Recommended movies",
    )
    MOVIE_NAME = Locator.xpath("//h1[@class='sc-qswwm9-6 ea-drWB']", "Movie name")
    MOVIE_POSTER = Locator.xpath("//section[@class='sc-bsek5f-0 jNOshi']", "Movie poster")
    MOVIE_DETAILED = Locator.xpath(
        "//h4[contains(@class,'sc-o4g232-2') and contains(text(),'About the movie')]",
        "About the movie",
    )
    BOOKING_OPTION = Locator.xpath(
        "//div[@class='sc-qswwm9-8 fNtHgG']//button//span[text()='Book tickets']",
        "Book tickets",
    )
    MOVIES_TAB = Locator.xpath("//a[text()='Movies']", "Movies tab")
    EXPLORE_UPCOMING_MOVIES = Locator.xpath(
        "//a//img[@alt='Coming Soon']", "Explore upcoming movies"
    )

    ABOUT_SECTION = LocatorChain.of(
        "About the movie",
        Locator.xpath("//h4[normalize-space()='About the movie']"),
        Locator.xpath("//h4[contains(text(),'About the movie')]"),
        Locator.xpath("//h4[contains(text(),'About')]"),
        Locator.xpath(
            "//h4[contains(translate(text(),'ABCDEFGHIJKLMNOPQRSTUVWXYZ',"
            "'abcdefghijklmnopqrstuvwxyz'),'about')]"
        ),
        MOVIE_DETAILED,
    )

    IN_CINEMAS_NEAR_YOU = LocatorChain.of(
        "In Cinemas Near You",
        Locator.xpath("//img[@alt='Now Showing']"),
        Locator.xpath("//a//img[@alt='Now Showing']"),
        Locator.xpath("//img[contains(@alt,'Now Showing')]"),
        Locator.xpath("//*[contains(text(),'In Cinemas Near You')]"),
        Locator.xpath("//a[contains(text(),'In Cinemas Near You')]"),
        Locator.xpath("//*[contains(text(),'Now Showing')]"),
    )

    # Page-load indicators (looser than the exact locators above)
    NAME_INDICATOR = Locator.xpath("//h1[contains(@class,'sc-qswwm9')]", "Movie name")
    INFO_INDICATOR = Locator.xpath(
        "//*[contains(text(),'About') or contains(text(),'movie') "
        "or contains(text(),'Cast') or contains(text(),'Director')]",
        "Movie info",
    )
    BOOKING_INDICATOR = Locator.xpath(
        "//*[contains(text(),'Book') or contains(text(),'tickets')]",
        "Booking option",
    )

    ABOUT_DIAGNOSTICS = PageDiagnostics([ElementSampler("h4", ("text", "class"), limit=5)])
    CINEMAS_DIAGNOSTICS = PageDiagnostics([
        ElementSampler("img", ("alt", "src"), limit=10),
        ElementSampler(
            "a",
            ("text", "href"),
            limit=20,
            keywords=("cinema", "now", "showing"),
        ),
    ])

    @allure.step("Open movies page")
    def open(self) -> "MoviePage":
        """Navigate to the movies listing."""
        self.navigate()
        return self

    @allure.step("Select first recommended movie")
    def select_first_recommended_movie(self) -> None:
        """
        Click the first movie of the recommended list.

        Raises:
            NavigationError: If no recommended movie appears in time
        """
        try:
            self.click_first(self.RECOMMENDED_MOVIES)
        except NavigationError as e:
            raise NavigationError(
                f"Failed to select a recommended movie: {e}", self.RECOMMENDED_MOVIES
            ) from e

    @allure.step("Check movie name is displayed")
    def is_movie_name_displayed(self) -> bool:
        return self.is_displayed(self.MOVIE_NAME)

    @allure.step("Check poster is displayed")
    def is_poster_displayed(self) -> bool:
        return self.is_displayed(self.MOVIE_POSTER)

    @allure.step("Check 'About the movie' section is displayed")
    def is_detailed_page_displayed(self) -> bool:
        return self.is_displayed_any_of(self.ABOUT_SECTION, self.ABOUT_DIAGNOSTICS)

    @allure.step("Check movie details page loaded")
    def is_movie_details_page_loaded(self) -> bool:
        """Two of name / info / booking indicators must be visible."""
        return self.is_page_loaded_by_quorum(
            {
                "Movie Name": lambda: self.is_displayed(self.NAME_INDICATOR),
                "Movie Info": lambda: self.is_displayed(self.INFO_INDICATOR),
                "Booking Option": lambda: self.is_displayed(self.BOOKING_INDICATOR),
            },
            pairs=[
                ("Movie Name", "Movie Info"),
                ("Movie Name", "Booking Option"),
                ("Movie Info", "Booking Option"),
            ],
        )

    @allure.step("Check booking option is available")
    def is_booking_option_available(self) -> bool:
        return self.is_displayed(self.BOOKING_OPTION)

    @allure.step("Click Movies tab")
    def click_movies_tab(self) -> None:
        self.click(self.MOVIES_TAB, settle_seconds=1.0)

    @allure.step("Click Explore Upcoming Movies")
    def click_explore_upcoming_movies(self) -> None:
        self.click(self.EXPLORE_UPCOMING_MOVIES, settle_seconds=2.0)

    @allure.step("Check 'In Cinemas Near You' link is displayed")
    def is_in_cinemas_near_you_link_displayed(self) -> bool:
        return self.is_displayed_any_of(self.IN_CINEMAS_NEAR_YOU, self.CINEMAS_DIAGNOSTICS)


__all__ = [
    "MoviePage",
]
