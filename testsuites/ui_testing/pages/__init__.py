"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the movie booking site.

Each page class encapsulates:
    - Element locators (single locators and fallback chains)
    - Page-specific navigation actions
    - Verification methods returning booleans

Author: Automation Team
License: MIT
================================================================================
"""

from .movie_page import MoviePage

__all__ = [
    "MoviePage",
]
