"""Investment verdicts shown in the results panel and the PDF report."""

from __future__ import annotations

from amcapital.domain.models.report import Recommendation
from amcapital.domain.models.result import CalculationResult
from amcapital.domain.models.simulation import SimulationConfig

# Gross-yield thresholds (%)
EXCELLENT_THRESHOLD = 8.0
GOOD_THRESHOLD = 5.0
FAIR_THRESHOLD = 3.0
RECOMMENDED_THRESHOLD = 7.0


def get_recommendation(gross_return: float) -> Recommendation:
    """Classify a gross yield."""
    if gross_return >= EXCELLENT_THRESHOLD:
        return Recommendation(
            level="excellent",
            message=(
                "Excellent investissement ! Ce bien présente une rentabilité très attractive "
                "supérieure à 8%. Les conditions sont favorables pour un investissement "
                "locatif de qualité."
            ),
        )
    if gross_return >= GOOD_THRESHOLD:
        return Recommendation(
            level="good",
            message=(
                "Bon investissement. Avec un rendement entre 5% et 8%, ce bien offre une "
                "rentabilité correcte dans le contexte actuel du marché immobilier."
            ),
        )
    if gross_return >= FAIR_THRESHOLD:
        return Recommendation(
            level="fair",
            message=(
                "Investissement correct mais prudence recommandée. Le rendement est dans la "
                "moyenne basse du marché. Vérifiez les possibilités d'optimisation."
            ),
        )
    return Recommendation(
        level="weak",
        message=(
            "Attention : rendement faible. Ce bien présente un rendement inférieur aux "
            "standards du marché. Il est recommandé de revoir les paramètres ou chercher "
            "d'autres opportunités."
        ),
    )


def get_detailed_recommendations(
    config: SimulationConfig,
    result: CalculationResult,
) -> list[tuple[str, str]]:
    """Titled advice paragraphs for the recommendations page."""
    recommendations: list[tuple[str, str]] = []

    if result.gross_return >= RECOMMENDED_THRESHOLD:
        recommendations.append((
            "Investissement recommandé",
            "Ce bien présente une excellente rentabilité. Nous recommandons de procéder "
            "rapidement à l'acquisition en négociant si possible le prix d'achat pour "
            "optimiser encore davantage le rendement.",
        ))

    if config.is_short_term:
        recommendations.append((
            "Location courte durée",
            "La location Airbnb nécessite une gestion active et une veille réglementaire "
            "constante. Assurez-vous de respecter les réglementations locales et de prévoir "
            "du temps pour la gestion.",
        ))

    recommendations.append((
        "Optimisations possibles",
        "Considérez les travaux d'amélioration qui pourraient augmenter le loyer, la "
        "recherche de financements avantageux, et l'optimisation fiscale (statut LMNP, "
        "SCI, etc.).",
    ))
    recommendations.append((
        "Points de vigilance",
        "Vérifiez l'état du bien, l'environnement proche, les projets d'urbanisme, la "
        "demande locative locale et préparez une provision pour les travaux imprévus.",
    ))
    return recommendations
