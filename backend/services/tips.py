# services/tips.py
from __future__ import annotations
import random
from typing import Dict, List, Optional

ECO_TIPS: Dict[str, List[str]] = {
    "bicycle": [
        "Pedalar reduz emissões de CO2 em 100% comparado a veículos motorizados",
        "Melhora sua saúde cardiovascular",
        "Não contribui para congestionamentos urbanos",
    ],
    "car": [
        "Considere caronas para reduzir emissões por passageiro",
        "Mantenha pneus calibrados para melhor eficiência",
        "Evite acelerações bruscas e frenagens",
    ],
    "bus": [
        "Transporte público é mais eficiente que carros individuais",
        "Reduz congestionamento nas cidades",
        "Opção econômica para viagens longas",
    ],
    "truck": [
        "Para cargas pesadas, considere consolidação de fretes",
        "Otimize rotas para reduzir quilometragem",
        "Considere veículos elétricos quando disponíveis",
    ],
}

IMPACT_INFO: Dict[str, str] = {
    "co2_equivalent": "1 tonelada de CO2 equivale a plantar cerca de 40 árvores por ano",
    "global_warming": "O transporte responde por cerca de 14% das emissões globais de gases de efeito estufa",
    "brazil_transport": "No Brasil, o transporte é responsável por aproximadamente 30% das emissões de CO2",
}


def get_random_tip(mode: str, rng: Optional[random.Random] = None) -> str:
    """Random eco tip for ``mode``; empty string when the mode has none."""
    tips = ECO_TIPS.get(mode, [])
    if not tips:
        return ""
    return (rng or random).choice(tips)
