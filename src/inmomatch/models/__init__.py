"""
Modelos de datos del sistema.

- Listing: propiedad publicada (snapshot inmutable)
- UserProfile: cliente y sus preferencias de búsqueda
- Resultados de matching: MatchScore, ListingMatch, UserMatch, resúmenes
"""

from inmomatch.models.listing import (
    Currency,
    Listing,
    ListingStatus,
    ListingVisibility,
    OperationType,
    PropertyType,
)
from inmomatch.models.user import RoomsPreference, UserProfile
from inmomatch.models.match import (
    ListingMatch,
    MatchScore,
    MatchStatistics,
    UserMatch,
    UserMatchSummary,
)

__all__ = [
    # Propiedades
    "Listing",
    "PropertyType",
    "OperationType",
    "Currency",
    "ListingStatus",
    "ListingVisibility",
    # Usuarios
    "UserProfile",
    "RoomsPreference",
    # Matching
    "MatchScore",
    "ListingMatch",
    "UserMatch",
    "UserMatchSummary",
    "MatchStatistics",
]
