# services/routes/presets.py
from __future__ import annotations
from typing import List

from models.routes import Route

# (origin, destination, km). Road distances between Brazilian cities.
_BRAZIL_ROUTES = [
    ("São Paulo, SP", "Rio de Janeiro, RJ", 430),
    ("São Paulo, SP", "Brasília, DF", 1015),
    ("Rio de Janeiro, RJ", "Brasília, DF", 1148),
    ("São Paulo, SP", "Belo Horizonte, MG", 586),
    ("Rio de Janeiro, RJ", "Belo Horizonte, MG", 434),
    ("Brasília, DF", "Belo Horizonte, MG", 716),
    ("São Paulo, SP", "Salvador, BA", 1962),
    ("Rio de Janeiro, RJ", "Salvador, BA", 1649),
    ("Brasília, DF", "Salvador, BA", 1446),
    ("São Paulo, SP", "Recife, PE", 2653),
    ("Rio de Janeiro, RJ", "Recife, PE", 2340),
    ("Brasília, DF", "Recife, PE", 2205),
    ("São Paulo, SP", "Porto Alegre, RS", 1109),
    ("Rio de Janeiro, RJ", "Porto Alegre, RS", 1554),
    ("Brasília, DF", "Porto Alegre, RS", 2027),
    ("São Paulo, SP", "Curitiba, PR", 408),
    ("Rio de Janeiro, RJ", "Curitiba, PR", 852),
    ("Brasília, DF", "Curitiba, PR", 1368),
    ("São Paulo, SP", "Fortaleza, CE", 3120),
    ("Rio de Janeiro, RJ", "Fortaleza, CE", 2807),
    ("Brasília, DF", "Fortaleza, CE", 2200),
    ("São Paulo, SP", "Manaus, AM", 3939),
    ("Rio de Janeiro, RJ", "Manaus, AM", 3626),
    ("Brasília, DF", "Manaus, AM", 2933),
    ("São Paulo, SP", "Campinas, SP", 95),
    ("Rio de Janeiro, RJ", "Niterói, RJ", 13),
    ("Belo Horizonte, MG", "Ouro Preto, MG", 100),
    ("São Paulo, SP", "Santos, SP", 72),
    ("Rio de Janeiro, RJ", "Angra dos Reis, RJ", 156),
    ("Brasília, DF", "Goiânia, GO", 209),
    ("São Paulo, SP", "Ribeirão Preto, SP", 313),
    ("Rio de Janeiro, RJ", "Vitória, ES", 522),
    ("Belo Horizonte, MG", "Juiz de Fora, MG", 260),
    ("Porto Alegre, RS", "Gramado, RS", 115),
    ("Curitiba, PR", "Foz do Iguaçu, PR", 630),
    ("Salvador, BA", "Feira de Santana, BA", 108),
    ("Recife, PE", "Olinda, PE", 7),
    ("Fortaleza, CE", "Caucaia, CE", 20),
    ("Manaus, AM", "Manacapuru, AM", 68),
]


def brazil_routes() -> List[Route]:
    return [
        Route(origin=o, destination=d, distance_km=km) for o, d, km in _BRAZIL_ROUTES
    ]
