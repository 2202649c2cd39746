"""
Matchers batch sobre colecciones en memoria.

Componen el filtro de elegibilidad y el scorer. Son funciones puras:
sin I/O ni estado compartido; los datos llegan ya resueltos por los
repositorios.
"""

import math
from collections.abc import Iterable, Sequence
from typing import Optional

from inmomatch.matching.eligibility import is_eligible
from inmomatch.matching.scorer import MatchScorer, DEFAULT_SCORER
from inmomatch.models import (
    Listing,
    ListingMatch,
    MatchStatistics,
    UserMatch,
    UserMatchSummary,
    UserProfile,
)

# Límites inferiores de los buckets del resumen global
HIGH_MATCH_MIN = 90
MEDIUM_MATCH_MIN = 80
LOW_MATCH_MIN = 70

DEFAULT_MIN_PERCENTAGE = 50
DEFAULT_SUMMARY_MIN_PERCENTAGE = LOW_MATCH_MIN


def rank_listings_for_user(
    listings: Iterable[Listing],
    profile: UserProfile,
    min_percentage: int = DEFAULT_MIN_PERCENTAGE,
    scorer: Optional[MatchScorer] = None,
) -> list[ListingMatch]:
    """
    Propiedades elegibles para un usuario, ordenadas por score.

    Args:
        listings: Cartera candidata
        profile: Preferencias del usuario
        min_percentage: Score mínimo (inclusive) para conservar un match
        scorer: Scorer a usar (por defecto pesos estándar)

    Returns:
        ListingMatch ordenados de mayor a menor; empates conservan el orden de entrada
    """
    scorer = scorer or DEFAULT_SCORER
    matches = []

    for listing in listings:
        if not is_eligible(listing, profile):
            continue

        result = scorer.score(listing, profile)
        if result.percentage < min_percentage:
            continue

        matches.append(
            ListingMatch(
                listing=listing,
                percentage=result.percentage,
                matched_criteria=result.matched_criteria,
            )
        )

    matches.sort(key=lambda m: m.percentage, reverse=True)
    return matches


def rank_users_for_listing(
    listing: Listing,
    users: Iterable[UserProfile],
    min_percentage: int = DEFAULT_MIN_PERCENTAGE,
    scorer: Optional[MatchScorer] = None,
) -> list[UserMatch]:
    """
    Usuarios interesados en una propiedad, ordenados por score.

    A diferencia del ranking por usuario, acá no se aplica el filtro
    de elegibilidad: solo el umbral de porcentaje.
    """
    scorer = scorer or DEFAULT_SCORER
    matches = []

    for user in users:
        result = scorer.score(listing, user)
        if result.percentage >= min_percentage:
            matches.append(
                UserMatch(
                    user=user,
                    percentage=result.percentage,
                    matched_criteria=result.matched_criteria,
                )
            )

    matches.sort(key=lambda m: m.percentage, reverse=True)
    return matches


def count_users_for_listing(
    listing: Listing,
    users: Iterable[UserProfile],
    min_percentage: int = DEFAULT_MIN_PERCENTAGE,
    scorer: Optional[MatchScorer] = None,
) -> int:
    """Cantidad de usuarios que superan el umbral para una propiedad."""
    scorer = scorer or DEFAULT_SCORER
    return sum(
        1 for user in users if scorer.score(listing, user).percentage >= min_percentage
    )


def classify_percentage(percentage: int) -> Optional[str]:
    """
    Bucket de severidad de un match.

    Returns:
        "high" (>= 90), "medium" ([80, 90)), "low" ([70, 80)) o None debajo de 70
    """
    if percentage >= HIGH_MATCH_MIN:
        return "high"
    if percentage >= MEDIUM_MATCH_MIN:
        return "medium"
    if percentage >= LOW_MATCH_MIN:
        return "low"
    return None


def summarize_user_matches(
    profile: UserProfile,
    matches: Sequence[ListingMatch],
) -> UserMatchSummary:
    """Arma el resumen de un usuario a partir de sus matches ya rankeados."""
    buckets = {"high": 0, "medium": 0, "low": 0}
    for match in matches:
        bucket = classify_percentage(match.percentage)
        if bucket is not None:
            buckets[bucket] += 1

    return UserMatchSummary(
        user=profile,
        matches=list(matches),
        total_matches=len(matches),
        matches_high=buckets["high"],
        matches_medium=buckets["medium"],
        matches_low=buckets["low"],
    )


def build_user_match_summaries(
    listings: Iterable[Listing],
    users: Iterable[UserProfile],
    min_percentage: int = DEFAULT_SUMMARY_MIN_PERCENTAGE,
    scorer: Optional[MatchScorer] = None,
) -> list[UserMatchSummary]:
    """
    Resumen de matches de cada usuario sobre la cartera pública y disponible.

    Los matches entre min_percentage y 70 (si el mínimo es menor a 70)
    cuentan en total_matches pero no caen en ningún bucket.
    """
    candidates = [
        listing for listing in listings if listing.is_public and listing.is_available
    ]

    return [
        summarize_user_matches(
            user,
            rank_listings_for_user(candidates, user, min_percentage, scorer),
        )
        for user in users
    ]


def _round_one_decimal(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def compute_match_statistics(
    listings: Sequence[Listing],
    users: Sequence[UserProfile],
    min_percentage: int = DEFAULT_MIN_PERCENTAGE,
    scorer: Optional[MatchScorer] = None,
) -> MatchStatistics:
    """
    Estadísticas del dashboard: matches por propiedad y por usuario.

    Cuenta cada par (propiedad, usuario) con score >= min_percentage,
    sin filtro de elegibilidad.
    """
    scorer = scorer or DEFAULT_SCORER
    total = 0
    per_listing: dict[str, int] = {}
    per_user: dict[str, int] = {}

    for listing in listings:
        per_listing[listing.id] = 0
        for user in users:
            if scorer.score(listing, user).percentage < min_percentage:
                continue
            total += 1
            per_listing[listing.id] += 1
            per_user[user.id] = per_user.get(user.id, 0) + 1

    return MatchStatistics(
        total_matches=total,
        total_listings=len(listings),
        total_users=len(users),
        avg_matches_per_listing=_round_one_decimal(total / len(listings)) if listings else 0.0,
        avg_matches_per_user=_round_one_decimal(total / len(users)) if users else 0.0,
        matches_per_listing=per_listing,
        matches_per_user=per_user,
    )
