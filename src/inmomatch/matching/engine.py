"""
Motor de matching sobre los repositorios.

Resuelve IDs contra Supabase, trae las colecciones en paralelo y
delega el cálculo en los matchers batch (puros).
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

import structlog

from inmomatch.config import get_settings
from inmomatch.database import ListingRepository, UserRepository
from inmomatch.exceptions import RecordNotFoundError
from inmomatch.matching.batch import (
    build_user_match_summaries,
    compute_match_statistics,
    rank_listings_for_user,
    rank_users_for_listing,
)
from inmomatch.matching.scorer import MatchScorer
from inmomatch.models import (
    Listing,
    ListingMatch,
    MatchScore,
    MatchStatistics,
    UserMatch,
    UserMatchSummary,
    UserProfile,
)

logger = structlog.get_logger()


@dataclass
class UserMatches:
    """Matches de un usuario sobre la cartera disponible."""

    user: UserProfile
    matches: list[ListingMatch]
    total_matches: int


@dataclass
class ListingMatches:
    """Usuarios que matchean con una propiedad."""

    listing: Listing
    matches: list[UserMatch]
    total_matches: int


class MatchingEngine:
    """
    Fachada del matching para la capa de presentación.

    Flujo:
    1. Resolver el usuario/propiedad pedido (error si no existe)
    2. Traer las colecciones necesarias (en paralelo cuando son varias)
    3. Filtrar por elegibilidad, puntuar y rankear
    """

    def __init__(
        self,
        listing_repo: Optional[ListingRepository] = None,
        user_repo: Optional[UserRepository] = None,
        scorer: Optional[MatchScorer] = None,
    ):
        self.settings = get_settings()
        self.listing_repo = listing_repo or ListingRepository()
        self.user_repo = user_repo or UserRepository()
        self.scorer = scorer or MatchScorer()

    def _min_percentage(self, value: Optional[int]) -> int:
        return self.settings.match_min_percentage if value is None else value

    async def _get_user(self, user_id: str) -> UserProfile:
        user = await asyncio.to_thread(self.user_repo.get_by_id, user_id)
        if user is None:
            raise RecordNotFoundError("Usuario", user_id)
        return user

    async def _get_listing(self, listing_id: str) -> Listing:
        listing = await asyncio.to_thread(self.listing_repo.get_by_id, listing_id)
        if listing is None:
            raise RecordNotFoundError("Propiedad", listing_id)
        return listing

    async def matches_for_user(
        self,
        user_id: str,
        min_percentage: Optional[int] = None,
    ) -> UserMatches:
        """
        Propiedades disponibles que matchean con un usuario.

        Raises:
            RecordNotFoundError: Si el usuario no existe
        """
        min_percentage = self._min_percentage(min_percentage)
        user, listings = await asyncio.gather(
            self._get_user(user_id),
            asyncio.to_thread(self.listing_repo.get_available),
        )

        matches = rank_listings_for_user(listings, user, min_percentage, self.scorer)
        logger.info(
            "Matches para usuario",
            user_id=user_id,
            candidates=len(listings),
            matches=len(matches),
            min_percentage=min_percentage,
        )
        return UserMatches(user=user, matches=matches, total_matches=len(matches))

    async def matches_for_listing(
        self,
        listing_id: str,
        min_percentage: Optional[int] = None,
    ) -> ListingMatches:
        """
        Usuarios cuyo perfil matchea con una propiedad.

        Raises:
            RecordNotFoundError: Si la propiedad no existe
        """
        min_percentage = self._min_percentage(min_percentage)
        listing, users = await asyncio.gather(
            self._get_listing(listing_id),
            asyncio.to_thread(self.user_repo.get_all),
        )

        matches = rank_users_for_listing(listing, users, min_percentage, self.scorer)
        logger.info(
            "Matches para propiedad",
            listing_id=listing_id,
            users=len(users),
            matches=len(matches),
            min_percentage=min_percentage,
        )
        return ListingMatches(listing=listing, matches=matches, total_matches=len(matches))

    async def match_pair(self, listing_id: str, user_id: str) -> MatchScore:
        """Score individual entre una propiedad y un usuario."""
        listing, user = await asyncio.gather(
            self._get_listing(listing_id),
            self._get_user(user_id),
        )
        return self.scorer.score(listing, user)

    async def user_match_summaries(
        self,
        min_percentage: Optional[int] = None,
    ) -> list[UserMatchSummary]:
        """Resumen por usuario (con buckets alta/media/baja) sobre toda la base."""
        if min_percentage is None:
            min_percentage = self.settings.summary_min_percentage

        listings, users = await asyncio.gather(
            asyncio.to_thread(self.listing_repo.get_available_public),
            asyncio.to_thread(self.user_repo.get_all),
        )

        summaries = build_user_match_summaries(listings, users, min_percentage, self.scorer)
        logger.info(
            "Resumen de matches generado",
            users=len(users),
            listings=len(listings),
            total_matches=sum(s.total_matches for s in summaries),
        )
        return summaries

    async def statistics(self, min_percentage: Optional[int] = None) -> MatchStatistics:
        """Estadísticas agregadas sobre propiedades disponibles y usuarios."""
        min_percentage = self._min_percentage(min_percentage)
        listings, users = await asyncio.gather(
            asyncio.to_thread(self.listing_repo.get_available),
            asyncio.to_thread(self.user_repo.get_all),
        )
        return compute_match_statistics(listings, users, min_percentage, self.scorer)
