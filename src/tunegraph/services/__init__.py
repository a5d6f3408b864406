"""
Services combining the graphs into recommendation artifacts.
"""

from .recommendations import RecommendationService
from .records import Playlist, RadioQueue, SongSummary, UserSuggestion
from .search import SearchService
from .similarity import SimilarityIndex
from .social import SocialService

__all__ = [
    "RecommendationService",
    "SearchService",
    "SimilarityIndex",
    "SocialService",
    "Playlist",
    "RadioQueue",
    "SongSummary",
    "UserSuggestion",
]
