"""
Jerarquía de barrios.

Un barrio "grupo" (ej: Palermo) se expande a sus sub-barrios antes de
comparar contra la ubicación de la propiedad. Nombres fuera de la
tabla pasan sin cambios.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

NEIGHBORHOOD_HIERARCHY: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "Palermo": (
            "Palermo",
            "Palermo Chico",
            "Palermo Botánico",
            "Palermo Soho",
            "Palermo Hollywood",
            "Palermo Viejo",
            "Palermo Nuevo",
            "Las Cañitas",
        ),
    }
)


def expand_neighborhoods(
    neighborhoods: Iterable[str],
    hierarchy: Mapping[str, Iterable[str]] = NEIGHBORHOOD_HIERARCHY,
) -> list[str]:
    """
    Normaliza y expande una lista de barrios.

    Args:
        neighborhoods: Barrios tal como los cargó el usuario
        hierarchy: Tabla grupo -> sub-barrios

    Returns:
        Barrios sin espacios extremos, expandidos y sin duplicados
        (se conserva el orden de primera aparición)
    """
    expanded: dict[str, None] = {}

    for neighborhood in neighborhoods:
        name = neighborhood.strip()
        if not name:
            continue
        for member in hierarchy.get(name, (name,)):
            expanded.setdefault(member, None)

    return list(expanded)


def matches_neighborhood(
    search_text: str,
    neighborhoods: Iterable[str],
    hierarchy: Mapping[str, Iterable[str]] = NEIGHBORHOOD_HIERARCHY,
) -> bool:
    """True si algún barrio expandido aparece (sin distinguir mayúsculas) en el texto."""
    haystack = search_text.lower()
    return any(
        name.lower() in haystack
        for name in expand_neighborhoods(neighborhoods, hierarchy)
    )
