"""
Modelo de Propiedad (listing).

Snapshot inmutable de una propiedad tal como la entrega el store remoto.
Los atributos usan nombres en inglés; los nombres de columna de la tabla
`propiedades` se aceptan como alias para validar filas crudas directamente.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PropertyType(str, Enum):
    """Tipos de propiedad soportados."""

    CASA = "Casa"
    DEPARTAMENTO = "Departamento"
    TERRENO = "Terreno"
    COMERCIAL = "Comercial"
    PH = "PH"
    LOCAL = "Local"
    OFICINA = "Oficina"
    GALPON = "Galpon"


class OperationType(str, Enum):
    """Tipo de operación: venta o alquiler."""

    VENTA = "Venta"
    ALQUILER = "Alquiler"


class Currency(str, Enum):
    USD = "USD"
    ARS = "ARS"


class ListingStatus(str, Enum):
    DISPONIBLE = "Disponible"
    RESERVADA = "Reservada"
    NO_DISPONIBLE = "No disponible"


class ListingVisibility(str, Enum):
    PUBLICA = "Publica"
    PRIVADA = "Privada"


class Listing(BaseModel):
    """
    Propiedad publicada por la inmobiliaria.

    Solo incluye los campos que consume el motor de matching más
    los flags de estado/visibilidad usados por el resumen global.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    # Identificación
    id: str = Field(..., description="UUID de la propiedad")
    category: PropertyType = Field(..., alias="tipo", description="Tipo de propiedad")
    operation: OperationType = Field(..., alias="operacion", description="Venta o Alquiler")

    # Precio
    price: float = Field(..., ge=0, alias="precio", description="Precio publicado")
    currency: Currency = Field(Currency.USD, alias="moneda", description="Moneda del precio")

    # Dimensiones
    total_area: Optional[float] = Field(None, ge=0, alias="m2_totales", description="Superficie total m²")
    covered_area: Optional[float] = Field(None, ge=0, alias="m2_cubiertos", description="Superficie cubierta m²")
    rooms: int = Field(0, alias="ambientes", description="Cantidad de ambientes")

    # Aptitudes
    financing_ok: Optional[bool] = Field(None, alias="apto_credito")
    professional_ok: Optional[bool] = Field(None, alias="apto_profesional")
    pets_allowed: Optional[bool] = Field(None, alias="apto_mascotas")
    has_parking: Optional[bool] = Field(None, alias="cochera")

    # Características
    amenities: list[str] = Field(default_factory=list, description="Amenities declarados")
    age_label: Optional[str] = Field(
        None, alias="antiguedad", description="Antigüedad: años como texto o rango"
    )

    # Ubicación
    address: str = Field("", alias="direccion", description="Calle y altura")
    neighborhood: str = Field("", alias="barrio", description="Barrio")
    region: str = Field("", alias="provincia", description="Provincia/Región")

    # Estado
    status: ListingStatus = Field(ListingStatus.DISPONIBLE, alias="estado")
    visibility: ListingVisibility = Field(ListingVisibility.PUBLICA, alias="visibilidad")

    @field_validator("amenities", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return value if value is not None else []

    @field_validator("rooms", mode="before")
    @classmethod
    def _none_as_zero(cls, value):
        return value if value is not None else 0

    @field_validator("address", "neighborhood", "region", mode="before")
    @classmethod
    def _none_as_blank(cls, value):
        return value if value is not None else ""

    @property
    def location_text(self) -> str:
        """Dirección + barrio + provincia en minúsculas, para búsquedas por substring."""
        return f"{self.address} {self.neighborhood} {self.region}".lower()

    @property
    def is_available(self) -> bool:
        return self.status == ListingStatus.DISPONIBLE

    @property
    def is_public(self) -> bool:
        return self.visibility == ListingVisibility.PUBLICA
