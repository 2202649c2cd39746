"""
Repositorios de solo lectura sobre Supabase.

Entregan snapshots validados (Listing, UserProfile) al motor de matching.
"""

from typing import Optional

import structlog
from pydantic import ValidationError

from inmomatch.config import LISTINGS_TABLE, USERS_TABLE
from inmomatch.database.supabase_client import get_supabase_client, SupabaseClient
from inmomatch.models import (
    Listing,
    ListingStatus,
    ListingVisibility,
    UserProfile,
)

logger = structlog.get_logger()


class BaseRepository:
    """Clase base para repositorios."""

    TABLE: str = ""

    def __init__(self, client: Optional[SupabaseClient] = None):
        self._client = client or get_supabase_client()

    @property
    def client(self) -> SupabaseClient:
        return self._client

    def _execute(self, query, operation: str) -> list[dict]:
        try:
            return query.execute().data or []
        except Exception as e:
            logger.error(
                "Error consultando Supabase",
                table=self.TABLE,
                operation=operation,
                error=str(e),
            )
            raise


class ListingRepository(BaseRepository):
    """Repositorio de propiedades."""

    TABLE = LISTINGS_TABLE

    def get_all(
        self,
        status: Optional[ListingStatus] = None,
        visibility: Optional[ListingVisibility] = None,
    ) -> list[Listing]:
        """
        Obtiene la cartera, opcionalmente filtrada por estado/visibilidad.

        Returns:
            Propiedades ordenadas de la más nueva a la más vieja
        """
        query = self.client.table(self.TABLE).select("*")

        if status is not None:
            query = query.eq("estado", status.value)
        if visibility is not None:
            query = query.eq("visibilidad", visibility.value)

        rows = self._execute(query.order("fecha_creacion", desc=True), "get_all")
        listings = _validate_rows(Listing, rows, self.TABLE)

        logger.info(
            "Propiedades obtenidas",
            total=len(listings),
            status=status.value if status else None,
            visibility=visibility.value if visibility else None,
        )
        return listings

    def get_available(self) -> list[Listing]:
        """Propiedades en estado Disponible."""
        return self.get_all(status=ListingStatus.DISPONIBLE)

    def get_available_public(self) -> list[Listing]:
        """Propiedades disponibles y de visibilidad pública."""
        return self.get_all(
            status=ListingStatus.DISPONIBLE,
            visibility=ListingVisibility.PUBLICA,
        )

    def get_by_id(self, listing_id: str) -> Optional[Listing]:
        """Obtiene una propiedad por su UUID."""
        query = self.client.table(self.TABLE).select("*").eq("id", listing_id).limit(1)
        rows = self._execute(query, "get_by_id")
        return Listing.model_validate(rows[0]) if rows else None


class UserRepository(BaseRepository):
    """Repositorio de clientes (usuarios con rol 'user')."""

    TABLE = USERS_TABLE

    def get_all(self) -> list[UserProfile]:
        """Obtiene todos los clientes con sus preferencias."""
        query = (
            self.client.table(self.TABLE)
            .select("*")
            .eq("rol", "user")
            .order("fecha_creacion", desc=True)
        )
        rows = self._execute(query, "get_all")
        users = _validate_rows(UserProfile, rows, self.TABLE)

        logger.info("Usuarios obtenidos", total=len(users))
        return users

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Obtiene un usuario por su UUID."""
        query = self.client.table(self.TABLE).select("*").eq("id", user_id).limit(1)
        rows = self._execute(query, "get_by_id")
        return UserProfile.model_validate(rows[0]) if rows else None


def _validate_rows(model, rows: list[dict], table: str) -> list:
    """Valida filas crudas; las filas malformadas se descartan con warning."""
    records = []
    for row in rows:
        try:
            records.append(model.model_validate(row))
        except ValidationError as e:
            logger.warning(
                "Fila inválida descartada",
                table=table,
                id=row.get("id"),
                errors=e.error_count(),
            )
    return records
