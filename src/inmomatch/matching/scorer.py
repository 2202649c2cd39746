"""
Scoring de compatibilidad propiedad-usuario.

Suma aditiva de criterios independientes sobre un pozo fijo de 100
puntos. Cada criterio otorga crédito total, parcial (near-miss) o nulo
y, cuando corresponde, registra una etiqueta legible.

Criterios (puntos máximos):
- Precio: 30
- Ubicación: 25
- Ambientes: 20
- M2 totales: 15
- Cochera: 5
- Amenities: 3
- Antigüedad: 2

Un criterio que no se puede evaluar (preferencia vacía) aporta 0 y
el pozo sigue siendo 100: las preferencias vacías no inflan el score.
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import astuple, dataclass
from typing import Optional

from inmomatch.matching.neighborhoods import NEIGHBORHOOD_HIERARCHY, matches_neighborhood
from inmomatch.models import Listing, MatchScore, UserProfile

# (puntos, etiqueta) de un criterio individual
CriterionResult = tuple[float, Optional[str]]

_SKIPPED: CriterionResult = (0.0, None)


@dataclass(frozen=True)
class MatchWeights:
    """Puntos máximos por criterio. Deben sumar exactamente 100."""

    price: float = 30
    neighborhood: float = 25
    rooms: float = 20
    area: float = 15
    parking: float = 5
    amenities: float = 3
    age: float = 2

    @property
    def total(self) -> float:
        return sum(astuple(self))


# Decaimiento del precio por encima del máximo: (% excedido <=, fracción, etiqueta)
PRICE_OVER_STEPS = (
    (5, 0.75, "Precio ligeramente por encima"),
    (10, 0.50, "Precio moderadamente por encima"),
    (20, 0.25, None),
    (30, 0.10, None),
)

# Precio por debajo del mínimo: (% faltante <=, fracción, etiqueta)
PRICE_UNDER_STEPS = (
    (10, 0.85, "Precio ligeramente por debajo"),
    (20, 0.70, None),
)
PRICE_UNDER_FLOOR_FRACTION = 0.50

# Superficie por debajo del mínimo: (% faltante <=, fracción, etiqueta)
AREA_UNDER_STEPS = (
    (5, 0.80, "M2 ligeramente menor"),
    (10, 0.60, None),
    (20, 0.30, None),
)

ROOMS_NEAR_FRACTIONS = {1: 0.60, 2: 0.25}


def round_half_up(value: float) -> int:
    """Redondeo al entero más cercano, con .5 hacia arriba."""
    return math.floor(value + 0.5)


def _step_fraction(deviation_pct: float, steps) -> Optional[tuple[float, Optional[str]]]:
    for limit, fraction, label in steps:
        if deviation_pct <= limit:
            return fraction, label
    return None


class MatchScorer:
    """
    Calcula el porcentaje de compatibilidad entre una propiedad y un perfil.

    No consulta el filtro de elegibilidad: los consumidores batch
    filtran antes de puntuar cuando corresponde.
    """

    def __init__(
        self,
        weights: Optional[MatchWeights] = None,
        hierarchy: Mapping[str, Iterable[str]] = NEIGHBORHOOD_HIERARCHY,
    ):
        self.weights = weights or MatchWeights()
        if not math.isclose(self.weights.total, 100):
            raise ValueError(
                f"Los pesos deben sumar 100 (suman {self.weights.total})"
            )
        self.hierarchy = hierarchy

    def score(self, listing: Listing, profile: UserProfile) -> MatchScore:
        """
        Evalúa todos los criterios en orden y redondea solo la suma final.

        Returns:
            MatchScore con porcentaje 0-100 y etiquetas en orden de evaluación
        """
        results = (
            self.price_points(listing, profile),
            self.neighborhood_points(listing, profile),
            self.rooms_points(listing, profile),
            self.area_points(listing, profile),
            self.parking_points(listing, profile),
            self.amenities_points(listing, profile),
            self.age_points(listing, profile),
        )

        total = sum(points for points, _ in results)
        criteria = [label for _, label in results if label]
        percentage = max(0, min(100, round_half_up(total)))

        return MatchScore(percentage=percentage, matched_criteria=criteria)

    def price_points(self, listing: Listing, profile: UserProfile) -> CriterionResult:
        if profile.price_min is None and profile.price_max is None:
            return _SKIPPED

        weight = self.weights.price
        floor = profile.price_min if profile.price_min is not None else 0.0
        ceiling = profile.price_max if profile.price_max is not None else math.inf
        price = listing.price

        if floor <= price <= ceiling:
            return weight, "Precio dentro del rango"

        if price > ceiling:
            if ceiling <= 0:
                return _SKIPPED
            over_pct = (price - ceiling) * 100 / ceiling
            step = _step_fraction(over_pct, PRICE_OVER_STEPS)
            if step is None:
                return _SKIPPED
            fraction, label = step
            return weight * fraction, label

        under_pct = (floor - price) * 100 / floor
        fraction, label = _step_fraction(under_pct, PRICE_UNDER_STEPS) or (
            PRICE_UNDER_FLOOR_FRACTION,
            None,
        )
        return weight * fraction, label

    def neighborhood_points(self, listing: Listing, profile: UserProfile) -> CriterionResult:
        if not profile.neighborhoods:
            return _SKIPPED

        if matches_neighborhood(listing.location_text, profile.neighborhoods, self.hierarchy):
            return self.weights.neighborhood, "Ubicación"
        return _SKIPPED

    def rooms_points(self, listing: Listing, profile: UserProfile) -> CriterionResult:
        preference = profile.rooms_preference
        if preference is None:
            return _SKIPPED

        weight = self.weights.rooms

        if preference.open_ended:
            if listing.rooms >= preference.count:
                return weight, "Ambientes"
            shortfall = preference.count - listing.rooms
            return weight * ROOMS_NEAR_FRACTIONS.get(shortfall, 0.0), None

        difference = abs(listing.rooms - preference.count)
        if difference == 0:
            return weight, "Ambientes"
        if difference == 1:
            return weight * ROOMS_NEAR_FRACTIONS[1], "Ambientes cercanos"
        return weight * ROOMS_NEAR_FRACTIONS.get(difference, 0.0), None

    def area_points(self, listing: Listing, profile: UserProfile) -> CriterionResult:
        if profile.min_area is None or listing.total_area is None:
            return _SKIPPED

        weight = self.weights.area
        if listing.total_area >= profile.min_area:
            return weight, "M2 totales"

        under_pct = (profile.min_area - listing.total_area) * 100 / profile.min_area
        step = _step_fraction(under_pct, AREA_UNDER_STEPS)
        if step is None:
            return _SKIPPED
        fraction, label = step
        return weight * fraction, label

    def parking_points(self, listing: Listing, profile: UserProfile) -> CriterionResult:
        if profile.wants_parking and listing.has_parking:
            return self.weights.parking, "Cochera"
        return _SKIPPED

    def amenities_points(self, listing: Listing, profile: UserProfile) -> CriterionResult:
        if not profile.amenities or not listing.amenities:
            return _SKIPPED

        available = {amenity.lower() for amenity in listing.amenities}
        satisfied = sum(1 for amenity in profile.amenities if amenity.lower() in available)
        if not satisfied:
            return _SKIPPED

        fraction = satisfied / len(profile.amenities)
        return self.weights.amenities * fraction, "Amenities"

    def age_points(self, listing: Listing, profile: UserProfile) -> CriterionResult:
        if not profile.age_labels or not listing.age_label:
            return _SKIPPED

        age = listing.age_label.lower()
        if any(label.lower() == age for label in profile.age_labels):
            return self.weights.age, "Antigüedad"
        return _SKIPPED


DEFAULT_SCORER = MatchScorer()


def score_match(listing: Listing, profile: UserProfile) -> MatchScore:
    """Atajo sobre un MatchScorer con pesos y jerarquía por defecto."""
    return DEFAULT_SCORER.score(listing, profile)
