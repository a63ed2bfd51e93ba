"""
Static period mappings and country-code reference data.
"""

# Historical periods / empires → ISO 3166-1 alpha-2 codes of the modern
# countries that made up (or were significantly influenced by) that era.
REGION_MAPPINGS: dict[str, list[str]] = {
    "Roman Empire": ["IT", "FR", "ES", "GR", "TR", "EG", "GB"],
    "Viking Age": ["NO", "SE", "DK", "IS", "GB", "IE"],
    "British Empire": ["GB", "IN", "CA", "AU", "ZA", "NZ"],
    "Medieval Europe": ["FR", "DE", "IT", "ES", "GB"],
    "Ancient Greece": ["GR", "TR", "IT"],
}

REGION_TIMEFRAMES: dict[str, str] = {
    "Roman Empire": "27 BC-476 AD",
    "Viking Age": "793-1066",
    "British Empire": "1583-1997",
    "Medieval Europe": "500-1500",
    "Ancient Greece": "800 BC-146 BC",
}

# Country / region names for the no-AI fallback path. Multi-word names are
# listed before the single words they contain so they win the substring scan.
NAME_TO_CODE: dict[str, str] = {
    # Europe
    "france": "FR", "germany": "DE", "spain": "ES", "italy": "IT", "portugal": "PT",
    "greece": "GR", "turkey": "TR", "russia": "RU", "ukraine": "UA", "poland": "PL",
    "austria": "AT", "switzerland": "CH", "netherlands": "NL", "belgium": "BE",
    "sweden": "SE", "norway": "NO", "denmark": "DK", "finland": "FI", "ireland": "IE",
    "iceland": "IS", "hungary": "HU", "romania": "RO", "bulgaria": "BG", "serbia": "RS",
    # Middle East / North Africa
    "egypt": "EG", "iran": "IR", "iraq": "IQ", "syria": "SY", "jordan": "JO",
    "saudi arabia": "SA", "israel": "IL", "lebanon": "LB",
    "libya": "LY", "tunisia": "TN", "algeria": "DZ", "morocco": "MA",
    # Central / East Asia
    "china": "CN", "japan": "JP", "korea": "KR", "mongolia": "MN",
    "kazakhstan": "KZ", "uzbekistan": "UZ", "afghanistan": "AF", "pakistan": "PK",
    "india": "IN", "vietnam": "VN", "thailand": "TH", "indonesia": "ID",
    # Africa
    "south africa": "ZA", "nigeria": "NG", "ethiopia": "ET", "kenya": "KE",
    # Americas
    "united states": "US", "usa": "US", "america": "US", "canada": "CA",
    "mexico": "MX", "brazil": "BR", "argentina": "AR", "peru": "PE", "colombia": "CO",
    # Oceania
    "australia": "AU", "new zealand": "NZ",
    # British Isles
    "england": "GB", "great britain": "GB", "britain": "GB",
    "united kingdom": "GB", "scotland": "GB", "wales": "GB",
}

# ISO 3166-1 alpha-2 codes accepted from the AI lookup boundary.
VALID_COUNTRY_CODES: frozenset[str] = frozenset("""
AD AE AF AG AI AL AM AO AQ AR AS AT AU AW AX AZ
BA BB BD BE BF BG BH BI BJ BL BM BN BO BQ BR BS BT BV BW BY BZ
CA CC CD CF CG CH CI CK CL CM CN CO CR CU CV CW CX CY CZ
DE DJ DK DM DO DZ
EC EE EG EH ER ES ET
FI FJ FK FM FO FR
GA GB GD GE GF GG GH GI GL GM GN GP GQ GR GS GT GU GW GY
HK HM HN HR HT HU
ID IE IL IM IN IO IQ IR IS IT
JE JM JO JP
KE KG KH KI KM KN KP KR KW KY KZ
LA LB LC LI LK LR LS LT LU LV LY
MA MC MD ME MF MG MH MK ML MM MN MO MP MQ MR MS MT MU MV MW MX MY MZ
NA NC NE NF NG NI NL NO NP NR NU NZ
OM
PA PE PF PG PH PK PL PM PN PR PS PT PW PY
QA
RE RO RS RU RW
SA SB SC SD SE SG SH SI SJ SK SL SM SN SO SR SS ST SV SX SY SZ
TC TD TF TG TH TJ TK TL TM TN TO TR TT TV TW TZ
UA UG UM US UY UZ
VA VC VE VG VI VN VU
WF WS
XK
YE YT
ZA ZM ZW
""".split())
