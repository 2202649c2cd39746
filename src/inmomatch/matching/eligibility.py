"""
Filtro de elegibilidad.

Condiciones excluyentes: si una propiedad no las cumple, nunca se
considera match para ese usuario, sin importar su score.
"""

from inmomatch.models import Listing, OperationType, UserProfile


def is_eligible(listing: Listing, profile: UserProfile) -> bool:
    """
    Evalúa los requisitos must-have del usuario contra la propiedad.

    Un campo de preferencia vacío no impone restricción. El requisito
    de mascotas solo aplica cuando el usuario busca alquiler.
    """
    if profile.categories and listing.category not in profile.categories:
        return False

    if profile.operation is not None and profile.operation != listing.operation:
        return False

    if profile.requires_financing and listing.financing_ok is not True:
        return False

    if profile.requires_professional_use and listing.professional_ok is not True:
        return False

    if (
        profile.operation == OperationType.ALQUILER
        and profile.requires_pets_allowed
        and listing.pets_allowed is not True
    ):
        return False

    return True
