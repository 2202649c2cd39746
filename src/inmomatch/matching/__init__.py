"""
Motor de matching.

Filtro de elegibilidad + scoring ponderado + rankings batch
entre propiedades y preferencias de clientes.
"""

from inmomatch.matching.batch import (
    build_user_match_summaries,
    classify_percentage,
    compute_match_statistics,
    count_users_for_listing,
    rank_listings_for_user,
    rank_users_for_listing,
)
from inmomatch.matching.eligibility import is_eligible
from inmomatch.matching.neighborhoods import (
    NEIGHBORHOOD_HIERARCHY,
    expand_neighborhoods,
    matches_neighborhood,
)
from inmomatch.matching.scorer import MatchScorer, MatchWeights, score_match

__all__ = [
    "is_eligible",
    "MatchScorer",
    "MatchWeights",
    "score_match",
    "NEIGHBORHOOD_HIERARCHY",
    "expand_neighborhoods",
    "matches_neighborhood",
    "rank_listings_for_user",
    "rank_users_for_listing",
    "count_users_for_listing",
    "build_user_match_summaries",
    "classify_percentage",
    "compute_match_statistics",
]
