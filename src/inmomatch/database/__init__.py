"""
Módulo de base de datos.

Provee acceso de lectura a Supabase para propiedades y usuarios.
"""

from inmomatch.database.supabase_client import get_supabase_client, SupabaseClient
from inmomatch.database.repositories import (
    ListingRepository,
    UserRepository,
)

__all__ = [
    "get_supabase_client",
    "SupabaseClient",
    "ListingRepository",
    "UserRepository",
]
