"""
Excepciones del sistema.

El núcleo de scoring no lanza errores: solo la capa de servicio
(resolución de IDs, configuración) tiene fallas recuperables.
"""


class InmomatchError(Exception):
    """Error base de inmomatch."""


class ConfigurationError(InmomatchError):
    """Configuración faltante o inválida (ej: credenciales de Supabase)."""


class RecordNotFoundError(InmomatchError, LookupError):
    """Un ID no corresponde a ningún registro del store."""

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} no encontrado: {record_id}")
