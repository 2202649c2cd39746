"""
Modelo de Usuario y Preferencias de búsqueda.

Cada campo de preferencia es opcional: un campo vacío o ausente
no impone restricción ni suma puntos en el scoring.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inmomatch.models.listing import OperationType, PropertyType


@dataclass(frozen=True)
class RoomsPreference:
    """Ambientes deseados: cantidad exacta ("3") o mínimo abierto ("3+")."""

    count: int
    open_ended: bool = False

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["RoomsPreference"]:
        """
        Interpreta el texto guardado en `preferencias_ambientes`.

        Returns:
            RoomsPreference, o None si el valor está vacío o no es numérico
        """
        if raw is None:
            return None

        text = str(raw).strip()
        open_ended = text.endswith("+")
        if open_ended:
            text = text[:-1].strip()

        try:
            count = int(text)
        except ValueError:
            return None

        return cls(count=count, open_ended=open_ended)


class UserProfile(BaseModel):
    """
    Cliente de la inmobiliaria con sus preferencias de búsqueda.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    # Identificadores
    id: str = Field(..., description="UUID del usuario")
    email: Optional[str] = Field(None)
    full_name: Optional[str] = Field(None)

    # Tipo y operación
    categories: list[PropertyType] = Field(
        default_factory=list, alias="preferencias_tipo", description="Vacío = cualquiera"
    )
    operation: Optional[OperationType] = Field(
        None, alias="preferencias_operacion", description="None = cualquiera"
    )

    # Precio
    price_min: Optional[float] = Field(None, alias="preferencias_precio_min")
    price_max: Optional[float] = Field(None, alias="preferencias_precio_max")

    # Ubicación
    neighborhoods: list[str] = Field(
        default_factory=list, alias="preferencias_ubicacion", description="Barrios aceptables"
    )

    # Características físicas
    rooms: Optional[str] = Field(
        None, alias="preferencias_ambientes", description="'2' exacto o '2+' como mínimo"
    )
    min_area: Optional[float] = Field(None, alias="preferencias_m2_min")
    amenities: list[str] = Field(default_factory=list, alias="preferencias_amenities")
    age_labels: list[str] = Field(default_factory=list, alias="preferencias_antiguedad")

    # Requisitos (must-have)
    wants_parking: Optional[bool] = Field(None, alias="preferencias_cochera")
    requires_financing: Optional[bool] = Field(None, alias="preferencias_apto_credito")
    requires_professional_use: Optional[bool] = Field(
        None, alias="preferencias_apto_profesional"
    )
    requires_pets_allowed: Optional[bool] = Field(None, alias="preferencias_apto_mascotas")

    @field_validator(
        "categories", "neighborhoods", "amenities", "age_labels", mode="before"
    )
    @classmethod
    def _none_as_empty(cls, value):
        return value if value is not None else []

    @field_validator("rooms", mode="before")
    @classmethod
    def _rooms_as_text(cls, value):
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @property
    def rooms_preference(self) -> Optional[RoomsPreference]:
        return RoomsPreference.parse(self.rooms)
