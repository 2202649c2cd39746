"""
inmomatch: motor de matching del CRM inmobiliario.

Calcula la compatibilidad entre propiedades y preferencias de clientes
para rankear propiedades por cliente, clientes por propiedad y
resumir los matches de toda la base.
"""

__version__ = "0.1.0"
