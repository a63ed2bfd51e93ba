"""
Pattern tables for pulling location hints out of free text.

Three families, all applied by the extractor:
    CITY_TO_COUNTRY         lower-cased substring match of historical city names
    EVENT_PATTERNS          named battles and events
    CIVILIZATION_PATTERNS   civilization, country and ethnonym terms
"""

import re

CITY_TO_COUNTRY: dict[str, str] = {
    "rome": "IT", "florence": "IT", "venice": "IT", "naples": "IT", "milan": "IT",
    "paris": "FR", "versailles": "FR", "lyon": "FR",
    "london": "GB", "edinburgh": "GB", "oxford": "GB", "york": "GB",
    "berlin": "DE", "munich": "DE", "hamburg": "DE", "vienna": "AT",
    "moscow": "RU", "leningrad": "RU", "stalingrad": "RU", "saint petersburg": "RU",
    "st. petersburg": "RU", "st petersburg": "RU",
    "beijing": "CN", "peking": "CN", "shanghai": "CN", "xian": "CN", "nanjing": "CN",
    "tokyo": "JP", "kyoto": "JP", "osaka": "JP", "edo": "JP",
    "cairo": "EG", "alexandria": "EG", "memphis": "EG",
    "athens": "GR", "sparta": "GR", "corinth": "GR",
    "carthage": "TN", "istanbul": "TR", "constantinople": "TR", "byzantium": "TR",
    "new york": "US", "washington": "US", "boston": "US", "philadelphia": "US",
    "baghdad": "IQ", "babylon": "IQ", "nineveh": "IQ",
    "jerusalem": "IL", "bethlehem": "IL",
    "damascus": "SY", "aleppo": "SY",
    "delhi": "IN", "agra": "IN", "bombay": "IN", "mumbai": "IN", "calcutta": "IN",
    "amsterdam": "NL", "antwerp": "BE", "brussels": "BE",
    "madrid": "ES", "seville": "ES", "barcelona": "ES", "toledo": "ES",
    "lisbon": "PT", "samarkand": "UZ", "bukhara": "UZ",
    "timbuktu": "ML",
}


def _compile(table: list[tuple[str, list[str]]]) -> list[tuple[re.Pattern, list[str]]]:
    return [(re.compile(pattern, re.IGNORECASE), countries) for pattern, countries in table]


EVENT_PATTERNS: list[tuple[re.Pattern, list[str]]] = _compile([
    (r"\bstalingrad\b", ["RU", "DE"]),
    (r"\bconstantinople\b", ["TR", "GR"]),
    (r"\bpearl harbor\b", ["US", "JP"]),
    (r"\bwaterloo\b", ["BE", "FR", "GB", "NL"]),
    (r"\bgettysburg\b", ["US"]),
    (r"\btrafalgar\b", ["GB", "FR", "ES"]),
    (r"\bd-day|normandy landing", ["FR", "DE", "GB", "US", "CA"]),
    (r"\bhiroshima|nagasaki\b", ["JP", "US"]),
    (r"\bmarathon\b", ["GR", "IR"]),
    (r"\bthermopylae\b", ["GR", "IR"]),
    (r"\bhastings\b", ["GB", "FR"]),
    (r"\bmos(cow|kva)\b", ["RU", "FR"]),
    (r"\bamerican revolution", ["US", "GB"]),
    (r"\bfrench revolution", ["FR"]),
    (r"\brussi(a|an) revolution", ["RU"]),
    (r"\bcivil war\b", ["US"]),
    (r"\bcrimean\b", ["UA", "RU", "TR", "GB", "FR"]),
    (r"\bspanish armada\b", ["ES", "GB"]),
    (r"\bnapoleon.{0,20}russia", ["FR", "RU"]),
    (r"\bjapan(ese)? samurai\b", ["JP"]),
    (r"\bsamurai.{0,20}japan", ["JP"]),
    (r"\bpharaoh|sphinx|pyramid", ["EG"]),
    (r"\bviking.{0,20}raid", ["NO", "SE", "DK", "GB"]),
    (r"\bcrusad", ["IL", "LB", "SY", "FR", "DE", "GB"]),
    (r"\bblack plague|black death\b", ["FR", "DE", "IT", "GB", "ES"]),
    (r"\bopium war\b", ["CN", "GB"]),
    (r"\bboxer rebellion\b", ["CN", "GB", "US", "DE", "FR"]),
])

CIVILIZATION_PATTERNS: list[tuple[re.Pattern, list[str]]] = _compile([
    (r"\brome\b|\broman\b", ["IT"]),
    (r"\bgreek\b|\bgreece\b|\bhellen", ["GR"]),
    (r"\begypt(ian)?\b", ["EG"]),
    (r"\bpersia(n)?\b", ["IR"]),
    (r"\bchina\b|\bchinese\b|\bhan dynasty\b", ["CN"]),
    (r"\bjapan(ese)?\b", ["JP"]),
    (r"\bmesopotamia\b", ["IQ", "SY"]),
    (r"\bbabylon(ian)?\b", ["IQ"]),
    (r"\baztec\b", ["MX"]),
    (r"\binca\b", ["PE"]),
    (r"\bmaya\b", ["MX", "GT", "BZ"]),
    (r"\bindian?\b|\bindus\b", ["IN"]),
    (r"\bafrica(n)?\b", ["EG", "NG", "ET", "ZA"]),
    (r"\bscandina(via|vian)\b", ["NO", "SE", "DK"]),
    (r"\bviking\b", ["NO", "SE", "DK"]),
    (r"\bbyzantin(e|um)\b", ["TR", "GR"]),
    (r"\bmongol\b", ["MN", "CN"]),
    (r"\bkievan rus\b", ["UA", "RU"]),
    (r"\barab(ic|ia)?\b", ["SA", "IQ", "SY", "EG"]),
    (r"\bamerica(n)?\b|\busa\b|\bu\.s\.a?\.\b", ["US"]),
    (r"\bkolkata|bengal\b", ["IN", "BD"]),
    (r"\bkhmer\b", ["KH"]),
    (r"\bmughal\b", ["IN", "PK", "AF"]),
    (r"\bsong dynasty\b", ["CN"]),
    (r"\btang dynasty\b", ["CN"]),
])
