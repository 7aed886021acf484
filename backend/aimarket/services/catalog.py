"""
Module Catalog

Fixed list of purchasable AI agent modules, seeded at import time and
read-only afterwards.
"""
from typing import List, Optional
import logging

from ..models.modules import Module

logger = logging.getLogger(__name__)

# Display name for module ids that are not in the catalog
FALLBACK_MODULE_NAME = "Module IA"


# Module catalog - 3 modules
MODULE_CATALOG: List[Module] = [
    Module(
        id="audit-agent",
        name="Audit IA",
        description="Audit automatique de vos données et recommandations actionnables.",
        deliverable="Rapport d'audit priorisé avec recommandations chiffrées",
        eta="48h",
        price="49.00",
        tags=["audit", "data", "recommandations"],
        inputs=["Export CRM ou ERP", "Tableaux de bord existants", "Objectifs trimestriels"],
        outputs=["Rapport d'audit", "Liste d'actions priorisées", "Score de maturité data"],
    ),
    Module(
        id="growth-agent",
        name="Growth IA",
        description="Plans marketing optimisés par IA avec priorisation des actions.",
        deliverable="Plan marketing sur 90 jours avec calendrier d'exécution",
        eta="72h",
        price="79.00",
        tags=["marketing", "acquisition", "growth"],
        inputs=["Persona cible", "Historique des campagnes", "Budget mensuel"],
        outputs=["Plan d'acquisition", "Calendrier éditorial", "KPIs de suivi"],
    ),
    Module(
        id="ops-agent",
        name="Ops IA",
        description="Automatisation des opérations internes et alertes intelligentes.",
        deliverable="Cartographie des processus et scénarios d'automatisation",
        eta="5 jours",
        price="99.00",
        tags=["operations", "automatisation", "alertes"],
        inputs=["Processus actuels", "Outils utilisés", "Points de friction"],
        outputs=["Scénarios d'automatisation", "Règles d'alerte", "Runbook opérationnel"],
    ),
]


def list_modules() -> List[Module]:
    """Return the full catalog in display order."""
    return list(MODULE_CATALOG)


def get_module_by_id(module_id: Optional[str]) -> Optional[Module]:
    """
    Get specific module by ID.

    Args:
        module_id: Module identifier

    Returns:
        Module or None if not found
    """
    if not module_id:
        return None
    for module in MODULE_CATALOG:
        if module.id == module_id:
            return module
    return None


def resolve_module_name(module_id: Optional[str]) -> str:
    """Catalog name for `module_id`, or the generic fallback for unknown ids."""
    module = get_module_by_id(module_id)
    if module is None:
        logger.debug(f"Module {module_id!r} not in catalog, using fallback name")
        return FALLBACK_MODULE_NAME
    return module.name
