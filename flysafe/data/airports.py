"""
Norwegian airport registry

Fixed list of airports used for red zone checks. Coordinates are WGS84.
Built once at import and never modified.

Sources: Avinor AIS, ICAO location indicators.

Note: `code` is not unique (ENST appears twice). Treat it as a display
label and never key a lookup on it.
"""
from typing import Iterable, Tuple

from flysafe.models import Airport, AirportClass, AirportStats, PointModel


def _airport(name: str, code: str, lat: float, lon: float, airport_class: AirportClass) -> Airport:
    return Airport(
        name=name,
        code=code,
        location=PointModel(lat=lat, lon=lon),
        airport_class=airport_class,
    )


AIRPORTS: Tuple[Airport, ...] = (
    # PRIMARY AIRPORTS (Major airports with jet capacity)
    _airport("Oslo Lufthavn, Gardermoen", "ENGM", 60.1939, 11.1004, AirportClass.PRIMARY),
    _airport("Bergen Lufthavn, Flesland", "ENBR", 60.2934, 5.2181, AirportClass.PRIMARY),
    _airport("Stavanger Lufthavn, Sola", "ENZV", 58.8767, 5.6378, AirportClass.PRIMARY),
    _airport("Trondheim Lufthavn, Værnes", "ENVA", 63.4578, 10.9242, AirportClass.PRIMARY),
    _airport("Bodø Lufthavn", "ENBO", 67.2692, 14.3653, AirportClass.PRIMARY),
    _airport("Tromsø Lufthavn, Langnes", "ENTC", 69.6833, 18.9167, AirportClass.PRIMARY),
    _airport("Kristiansand Lufthavn, Kjevik", "ENCN", 58.2044, 8.0853, AirportClass.PRIMARY),
    _airport("Haugesund Lufthavn, Karmøy", "ENHD", 59.3453, 5.2084, AirportClass.PRIMARY),
    _airport("Ålesund Lufthavn, Vigra", "ENAL", 62.5625, 6.1197, AirportClass.PRIMARY),
    _airport("Sandefjord Lufthavn, Torp", "ENTO", 59.1867, 10.2586, AirportClass.PRIMARY),

    # REGIONAL AIRPORTS - NORD-NORGE
    _airport("Alta Lufthavn", "ENAT", 69.9761, 23.3717, AirportClass.REGIONAL),
    _airport("Bardufoss Lufthavn", "ENDU", 69.0558, 18.5404, AirportClass.REGIONAL),
    _airport("Brønnøysund Lufthavn, Brønnøy", "ENBN", 65.4611, 12.2175, AirportClass.REGIONAL),
    _airport("Harstad/Narvik Lufthavn, Evenes", "ENEV", 68.4913, 16.6781, AirportClass.REGIONAL),
    _airport("Hasvik Lufthavn", "ENHK", 70.4867, 22.1397, AirportClass.REGIONAL),
    _airport("Hammerfest Lufthavn", "ENHF", 70.6797, 23.6686, AirportClass.REGIONAL),
    _airport("Kirkenes Lufthavn, Høybuktmoen", "ENKR", 69.7258, 29.8922, AirportClass.REGIONAL),
    _airport("Mehamn Lufthavn", "ENMH", 71.0297, 27.8267, AirportClass.REGIONAL),
    _airport("Mo i Rana Lufthavn, Røssvoll", "ENRA", 66.3639, 14.3014, AirportClass.REGIONAL),
    _airport("Molde Lufthavn, Årø", "ENML", 62.7447, 7.2625, AirportClass.REGIONAL),
    _airport("Mosjøen Lufthavn, Kjærstad", "ENMS", 65.7839, 13.2149, AirportClass.REGIONAL),

    _airport("Røros Lufthavn", "ENRS", 62.5781, 11.3425, AirportClass.REGIONAL),
    _airport("Svolvær Lufthavn, Helle", "ENSH", 68.2433, 14.6692, AirportClass.REGIONAL),
    _airport("Sørkjosen Lufthavn", "ENSR", 69.7868, 20.9594, AirportClass.REGIONAL),
    _airport("Stokmarknes Lufthavn, Skagen", "ENST", 68.5789, 15.0334, AirportClass.REGIONAL),
    _airport("Sandnessjøen Lufthavn, Stokka", "ENST", 65.9568, 12.4689, AirportClass.REGIONAL),
    _airport("Leknes Lufthavn", "ENLK", 68.1525, 13.6094, AirportClass.REGIONAL),
    _airport("Vardø Lufthavn, Svartnes", "ENSS", 70.3554, 31.0449, AirportClass.REGIONAL),
    _airport("Vadsø Lufthavn", "ENVD", 70.0653, 29.8447, AirportClass.REGIONAL),
    _airport("Andøya Lufthavn", "ENAN", 69.2925, 16.1442, AirportClass.REGIONAL),
    _airport("Berlevåg Lufthavn", "ENBV", 70.8714, 29.0342, AirportClass.REGIONAL),
    _airport("Båtsfjord Lufthavn", "ENBS", 70.6005, 29.6914, AirportClass.REGIONAL),
    _airport("Honningsvåg Lufthavn, Valan", "ENHV", 71.0097, 25.9836, AirportClass.REGIONAL),
    _airport("Lakselv Lufthavn, Banak", "ENNA", 70.0688, 24.9735, AirportClass.REGIONAL),
    _airport("Værøy Helikopterhavn", "ENVR", 67.6547, 12.7258, AirportClass.REGIONAL),

    # REGIONAL AIRPORTS - VESTLANDET
    _airport("Florø Lufthavn", "ENFL", 61.5836, 5.0247, AirportClass.REGIONAL),
    _airport("Førde Lufthavn, Bringeland", "ENBL", 61.3911, 5.7572, AirportClass.REGIONAL),
    _airport("Ørsta-Volda Lufthavn, Hovden", "ENOV", 62.1800, 6.0747, AirportClass.REGIONAL),
    _airport("Sandane Lufthavn, Anda", "ENSD", 61.8300, 6.1058, AirportClass.REGIONAL),
    _airport("Sunndalsøra Lufthavn, Vinnu", "ENSU", 62.6567, 8.6811, AirportClass.REGIONAL),

    # REGIONAL AIRPORTS - MIDT-NORGE
    _airport("Kristiansund Lufthavn, Kvernberget", "ENKB", 63.1118, 7.8245, AirportClass.REGIONAL),
    _airport("Ørland Lufthavn", "ENOL", 63.6989, 9.6040, AirportClass.REGIONAL),
    _airport("Rørvik Lufthavn, Ryum", "ENRM", 64.8383, 11.1461, AirportClass.REGIONAL),
    _airport("Namsos Lufthavn, Høknesøra", "ENNM", 64.4722, 11.5786, AirportClass.REGIONAL),
    _airport("Oppdal Lufthavn, Fagerhaug", "ENOP", 62.6513, 9.8516, AirportClass.REGIONAL),

    # REGIONAL AIRPORTS - ØSTLANDET
    _airport("Sogndal Lufthavn, Haukåsen", "ENSG", 61.1561, 7.1378, AirportClass.REGIONAL),
    _airport("Notodden Lufthavn", "ENNO", 59.5656, 9.2122, AirportClass.REGIONAL),
    _airport("Fagernes Lufthavn, Leirin", "ENFG", 61.0156, 9.2881, AirportClass.REGIONAL),
    _airport("Skien Lufthavn, Geiteryggen", "ENSN", 59.1850, 9.5669, AirportClass.REGIONAL),
    _airport("Dagali Lufthavn", "ENDI", 60.4167, 8.5077, AirportClass.REGIONAL),

    # REGIONAL AIRPORTS - SØRLANDET
    _airport("Lista Lufthavn", "ENLI", 58.0994, 6.6261, AirportClass.REGIONAL),

    # REGIONAL AIRPORTS - SVALBARD
    _airport("Svalbard Lufthavn, Longyear", "ENSB", 78.2461, 15.4656, AirportClass.REGIONAL),

    # PRIVATE AIRPORTS & AIRFIELDS (relevant for drone safety)
    _airport("Moss Lufthavn, Rygge", "ENRY", 59.3789, 10.7856, AirportClass.PRIVATE),
    _airport("Stord Lufthavn, Sørstokken", "ENSO", 59.7919, 5.3408, AirportClass.PRIVATE),
    _airport("Kjeller Flyplass", "ENKJ", 59.9683, 11.0367, AirportClass.PRIVATE),
    _airport("Rakkestad Flyplass, Åstorp", "ENRK", 59.3686, 11.3450, AirportClass.PRIVATE),
    _airport("Tønsberg Flyplass, Jarlsberg", "ENJB", 59.2842, 10.2592, AirportClass.PRIVATE),
)


def airport_stats(airports: Iterable[Airport] = AIRPORTS) -> AirportStats:
    """Count airports per class"""
    airports = list(airports)
    counts = {airport_class: 0 for airport_class in AirportClass}
    for airport in airports:
        counts[airport.airport_class] += 1

    return AirportStats(
        primary=counts[AirportClass.PRIMARY],
        regional=counts[AirportClass.REGIONAL],
        private=counts[AirportClass.PRIVATE],
        total=len(airports),
    )
