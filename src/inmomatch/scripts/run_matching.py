"""
Script para ejecutar el matching sobre la base completa.

Sin argumentos genera el resumen por usuario (buckets alta/media/baja).

Uso:
    python -m inmomatch.scripts.run_matching
    python -m inmomatch.scripts.run_matching --min-percentage 60
    python -m inmomatch.scripts.run_matching --user-id <uuid>
    python -m inmomatch.scripts.run_matching --listing-id <uuid>
    python -m inmomatch.scripts.run_matching --stats
"""

import argparse
import asyncio
import sys
from typing import Optional

import structlog

from inmomatch.config import get_settings
from inmomatch.exceptions import InmomatchError, RecordNotFoundError
from inmomatch.log_config import configure_logging
from inmomatch.matching.engine import MatchingEngine

logger = structlog.get_logger()


async def run_matching(
    min_percentage: Optional[int] = None,
    user_id: Optional[str] = None,
    listing_id: Optional[str] = None,
    stats: bool = False,
) -> None:
    """Ejecuta el modo de matching pedido y loguea los resultados."""
    engine = MatchingEngine()

    if user_id:
        result = await engine.matches_for_user(user_id, min_percentage)
        for match in result.matches:
            logger.info(
                "Propiedad",
                listing_id=match.listing.id,
                percentage=match.percentage,
                criteria=", ".join(match.matched_criteria),
            )
        logger.info("Total de matches", user_id=user_id, total=result.total_matches)
        return

    if listing_id:
        result = await engine.matches_for_listing(listing_id, min_percentage)
        for match in result.matches:
            logger.info(
                "Usuario",
                user_id=match.user.id,
                name=match.user.full_name,
                percentage=match.percentage,
                criteria=", ".join(match.matched_criteria),
            )
        logger.info("Total de matches", listing_id=listing_id, total=result.total_matches)
        return

    if stats:
        statistics = await engine.statistics(min_percentage)
        logger.info(
            "Estadísticas de matching",
            total_matches=statistics.total_matches,
            listings=statistics.total_listings,
            users=statistics.total_users,
            avg_per_listing=statistics.avg_matches_per_listing,
            avg_per_user=statistics.avg_matches_per_user,
        )
        return

    summaries = await engine.user_match_summaries(min_percentage)
    for summary in summaries:
        logger.info(
            "Resumen de usuario",
            user_id=summary.user.id,
            name=summary.user.full_name,
            total=summary.total_matches,
            alta=summary.matches_high,
            media=summary.matches_medium,
            baja=summary.matches_low,
        )


def main():
    """Entry point del script."""
    parser = argparse.ArgumentParser(
        description="Calcula matches entre propiedades y clientes"
    )
    parser.add_argument(
        "--min-percentage",
        type=int,
        default=None,
        help="Porcentaje mínimo de match (por defecto, el de la configuración)",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--user-id", help="Rankear propiedades para un usuario")
    group.add_argument("--listing-id", help="Rankear usuarios para una propiedad")
    group.add_argument(
        "--stats",
        action="store_true",
        help="Estadísticas agregadas de matching",
    )

    args = parser.parse_args()
    configure_logging(get_settings().log_level)

    logger.info("Iniciando matching...")

    try:
        asyncio.run(
            run_matching(
                min_percentage=args.min_percentage,
                user_id=args.user_id,
                listing_id=args.listing_id,
                stats=args.stats,
            )
        )
        sys.exit(0)
    except KeyboardInterrupt:
        logger.info("Matching interrumpido por usuario")
        sys.exit(130)
    except RecordNotFoundError as e:
        logger.error("Registro inexistente", entity=e.entity, id=e.record_id)
        sys.exit(1)
    except InmomatchError as e:
        logger.error("Error de configuración", error=str(e))
        sys.exit(1)
    except Exception as e:
        logger.error("Error fatal en matching", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
