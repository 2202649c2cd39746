"""
Resultados del motor de matching.

Valores finales para la capa de presentación: el porcentaje y la
lista de criterios no se recalculan fuera del motor.
"""

from dataclasses import dataclass, field

from inmomatch.models.listing import Listing
from inmomatch.models.user import UserProfile


@dataclass(frozen=True)
class MatchScore:
    """Compatibilidad entre una propiedad y un perfil."""

    percentage: int  # 0 a 100
    matched_criteria: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ListingMatch:
    """Propiedad anotada con su score para un usuario."""

    listing: Listing
    percentage: int
    matched_criteria: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UserMatch:
    """Usuario anotado con su score para una propiedad."""

    user: UserProfile
    percentage: int
    matched_criteria: list[str] = field(default_factory=list)


@dataclass
class UserMatchSummary:
    """
    Resumen de matches de un usuario sobre toda la cartera disponible.

    Los buckets solo cubren [70, 100]: con un mínimo menor a 70 la suma
    de buckets puede ser menor a total_matches.
    """

    user: UserProfile
    matches: list[ListingMatch]
    total_matches: int
    matches_high: int
    matches_medium: int
    matches_low: int


@dataclass
class MatchStatistics:
    """Estadísticas agregadas del dashboard de matching."""

    total_matches: int
    total_listings: int
    total_users: int
    avg_matches_per_listing: float
    avg_matches_per_user: float
    matches_per_listing: dict[str, int] = field(default_factory=dict)
    matches_per_user: dict[str, int] = field(default_factory=dict)
