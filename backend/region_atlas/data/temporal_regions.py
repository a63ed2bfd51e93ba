"""
Year-aware historical region mappings.

Each period carries the country set at its peak extent (``default``) and an
ordered list of slices; the first slice matching the requested years wins.
Negative years are BC (-27 is 27 BC).
"""

from region_atlas.models import TemporalMapping, TemporalSlice

S = TemporalSlice

TEMPORAL_MODIFIERS: dict[str, TemporalMapping] = {

    # ── Roman Empire ──
    "Roman Empire": TemporalMapping(
        default=[
            "IT", "FR", "ES", "GR", "TR", "EG", "GB", "DE", "AT", "CH",
            "PT", "MA", "TN", "LY", "IL", "SY", "LB", "RO", "BG", "RS", "AL", "HR",
        ],
        slices=[
            S(before=-509, countries=["IT"],
              note="Regal Rome — city-state on the Tiber"),
            S(range=(-509, -27), remove=["GB", "DE", "AT", "CH", "TN", "LY", "MA"],
              note="Roman Republic — Italy + Sicily + early provinces (Gaul, Hispania, Africa)"),
            S(range=(-27, 117),
              note="Imperial peak (Augustus → Trajan) — maximum expansion"),
            S(range=(117, 285), remove=["GB", "DE"],
              note="Post-Trajan contraction — Dacia retained, Mesopotamia abandoned"),
            S(range=(285, 395),
              note="Diocletian Tetrarchy → unified empire still intact"),
            S(range=(395, 476), countries=["IT", "ES", "FR", "GB", "PT", "AT"],
              note="Western Roman Empire only (395–476 AD)"),
            S(after=476, countries=["TR", "GR", "EG", "SY", "LB", "IL", "BG", "RS", "RO", "IT"],
              note="Byzantine (Eastern Roman) continuation after 476"),
        ],
    ),

    # ── Viking Age ──
    "Viking Age": TemporalMapping(
        default=["NO", "SE", "DK", "IS", "GB", "IE", "FR", "RU"],
        slices=[
            S(range=(793, 850), countries=["NO", "SE", "DK", "GB", "IE"],
              note="Early raids — Scandinavian homelands + coastal British Isles"),
            S(range=(851, 910),
              note="Expansion — Normandy raids, Kievan Rus beginnings, Iceland settled"),
            S(range=(911, 999), add=["UA", "BY", "IT", "ES", "MA"],
              note="Peak influence — Varangian routes, Normandy duchy, Mediterranean raids"),
            S(range=(1000, 1066), add=["GL", "US"],
              note="Late Viking — Leif Erikson reaches Vinland; Norman England imminent"),
            S(after=1066, countries=["NO", "SE", "DK", "IS", "GB", "FR"],
              note="Post-Conquest — Viking identity fading into Norman/Scandinavian kingdoms"),
        ],
    ),

    # ── British Empire ──
    "British Empire": TemporalMapping(
        default=[
            "GB", "IN", "CA", "AU", "ZA", "NZ", "NG", "KE", "EG", "PK", "BD",
            "MY", "SG", "GH", "ZW", "ZM", "UG", "TZ", "SD", "IR", "IQ", "JO", "IL",
            "PG", "FJ", "MT", "CY",
        ],
        slices=[
            S(range=(1583, 1700), countries=["GB", "US", "CA", "IE", "IN", "JM"],
              note="Early colonial — Virginia, East India Company beginnings"),
            S(range=(1700, 1783), remove=["ZA", "AU", "NZ", "NG", "KE", "SD", "TZ"], add=["US"],
              note="First Empire — American colonies; Caribbean slave trade peak"),
            S(range=(1783, 1850), remove=["US"], add=["AU", "ZA", "NZ"],
              note="Second Empire — loss of America; expansion in Asia-Pacific"),
            S(range=(1850, 1920),
              note='Imperial zenith — "empire on which the sun never sets"'),
            S(range=(1920, 1947),
              note="Peak territory — post-WWI League mandates included"),
            S(range=(1947, 1970),
              remove=["IN", "PK", "BD", "MY", "SG", "GH", "NG", "ZW", "UG", "TZ", "KE", "SD"],
              note="Decolonization — South Asian independence, African nations follow"),
            S(after=1970, countries=["GB", "AU", "CA", "NZ", "FJ", "PG", "MT", "CY"],
              note="Commonwealth remnants — Crown realms and UK Overseas Territories"),
        ],
    ),

    # ── Mongol Empire ──
    "Mongol Empire": TemporalMapping(
        default=[
            "MN", "CN", "RU", "KZ", "KG", "UZ", "TM", "AF", "IR", "UA",
            "PL", "HU", "IQ", "SY", "TR", "KR", "VN", "MM",
        ],
        slices=[
            S(range=(1206, 1227), countries=["MN", "CN", "KZ", "KG", "UZ", "TM", "AF", "IR", "RU"],
              note="Genghis Khan conquests — Central Asia and Northern China"),
            S(range=(1227, 1259),
              note="Rapid expansion under successors — reaches Poland, Hungary, Persia, Korea"),
            S(range=(1260, 1294), remove=["HU", "PL", "SY", "TR"],
              note="Four stable khanates — peak coherent empire under Kublai Khan"),
            S(range=(1294, 1368), remove=["HU", "PL", "SY", "TR", "KR", "VN", "MM"],
              note="Fragmentation — Yuan, Ilkhanate, Chagatai Khanate, Golden Horde"),
            S(after=1368, countries=["MN", "KZ", "KG", "UZ", "TM", "RU"],
              note="Post-Yuan collapse — successor khanates only"),
        ],
    ),

    # ── Ottoman Empire ──
    "Ottoman Empire": TemporalMapping(
        default=[
            "TR", "GR", "BG", "RS", "RO", "HU", "EG", "IL", "LB", "SY",
            "IQ", "SA", "JO", "LY", "TN", "DZ", "AL", "MK", "BA", "ME",
        ],
        slices=[
            S(range=(1299, 1453), countries=["TR", "GR", "BG", "RS", "MK", "AL"],
              note="Early Ottoman — Anatolia and the Balkans before Constantinople"),
            S(range=(1453, 1520), add=["RO", "EG", "SY", "IL", "LB"],
              note="Post-Constantinople — expansion into Levant and North Africa"),
            S(range=(1520, 1683),
              note="Ottoman zenith — Suleiman the Magnificent, siege of Vienna (1683)"),
            S(range=(1683, 1800), remove=["HU", "RO"],
              note="Beginning of decline — Hungary ceded after Vienna"),
            S(range=(1800, 1878), remove=["GR", "RS", "BG", "MK", "AL"],
              note="Nationalist independence movements — western Balkans lost"),
            S(after=1878, countries=["TR", "EG", "SY", "IL", "LB", "IQ", "SA", "JO", "LY", "TN", "DZ"],
              note="Late Ottoman — Anatolia + Arab provinces; Balkan territories mostly lost"),
        ],
    ),

    # ── World War I ──
    "World War I": TemporalMapping(
        default=[
            "FR", "DE", "GB", "IT", "RU", "AT", "TR", "HU", "RS", "BG",
            "RO", "BE", "US", "CA", "AU", "NZ", "IN", "GR", "PL",
        ],
        slices=[
            S(range=(1914, 1915), countries=["FR", "DE", "GB", "RU", "AT", "TR", "HU", "RS", "BG", "BE"],
              note="Opening phase — Western Front, Eastern Front, Gallipoli"),
            S(range=(1915, 1917), add=["RO", "GR", "IT"],
              note="Middle phase — Italy (1915) and Romania join the Entente"),
            S(range=(1917, 1918), add=["US"], remove=["RU"],
              note="US entry (April 1917); Russia exits after Revolution"),
        ],
    ),

    # ── World War II ──
    "World War II": TemporalMapping(
        default=[
            "DE", "FR", "GB", "IT", "RU", "US", "JP", "CN", "PL", "NL",
            "BE", "NO", "DK", "GR", "HU", "RO", "BG", "AU", "CA", "NZ", "IN", "PH", "MY", "ID",
        ],
        slices=[
            S(range=(1939, 1941),
              countries=["DE", "FR", "GB", "IT", "RU", "PL", "NL", "BE", "NO", "DK", "GR", "HU", "RO", "BG"],
              note="European theater — before Operation Barbarossa and Pearl Harbor"),
            S(range=(1941, 1942), add=["US", "JP", "CN", "AU", "PH", "MY", "ID"],
              note="Global war — Pearl Harbor opens Pacific theater, Germany invades USSR"),
            S(range=(1942, 1945),
              note="Full global conflict — all major theaters active simultaneously"),
        ],
    ),

    # ── Cold War ──
    "Cold War": TemporalMapping(
        default=[
            "US", "RU", "DE", "GB", "FR", "PL", "CZ", "HU", "RO", "BG",
            "CN", "KR", "KP", "VN", "CU", "AF",
        ],
        slices=[
            S(range=(1947, 1955), countries=["US", "RU", "GB", "FR", "DE", "KR", "KP", "CN"],
              note="Early Cold War — Berlin blockade, Korean War, NATO & Warsaw Pact founding"),
            S(range=(1955, 1962), add=["CU", "VN", "PL", "CZ", "HU", "RO", "BG"],
              note="Escalation — Cuban Missile Crisis, Sputnik, space race"),
            S(range=(1962, 1975), add=["VN", "AF", "CL", "BR", "EG", "SY", "AO", "ET"],
              note="Proxy wars — Vietnam, Middle East conflicts, Latin American coups"),
            S(range=(1975, 1991),
              note="Late Cold War — Soviet–Afghan War, Reagan doctrine, Glasnost"),
            S(after=1991, countries=["US", "RU"],
              note="Post-Cold War — Soviet dissolution, unipolar moment"),
        ],
    ),

    # ── Ancient Egypt ──
    "Ancient Egypt": TemporalMapping(
        default=["EG", "SD", "LY", "IL", "SY", "LB"],
        slices=[
            S(range=(-3100, -2181), countries=["EG"],
              note="Old Kingdom — unified pharaonic state; pyramid age"),
            S(range=(-2181, -2055), countries=["EG"],
              note="First Intermediate Period — regional fragmentation"),
            S(range=(-2055, -1650), countries=["EG", "SD"],
              note="Middle Kingdom — Nubia incorporated; classical literary period"),
            S(range=(-1650, -1550), countries=["EG"],
              note="Hyksos period — Canaanite rulers in the delta"),
            S(range=(-1550, -1070), countries=["EG", "SD", "IL", "SY", "LB"],
              note="New Kingdom — imperial expansion into Levant and Nubia"),
            S(range=(-1070, -332), countries=["EG", "SD"],
              note="Late Period — Libyan / Nubian / Persian / Saite dynasties"),
            S(after=-332, countries=["EG"],
              note="Ptolemaic Egypt — Hellenistic dynasty after Alexander"),
        ],
    ),

    # ── Ancient Greece ──
    "Ancient Greece": TemporalMapping(
        default=["GR", "TR", "IT", "SY", "EG", "IL", "AF", "IR", "PK", "IN"],
        slices=[
            S(range=(-800, -480), countries=["GR", "TR", "IT", "FR", "LY"],
              note="Archaic period — city-state formation, colonial expansion westward"),
            S(range=(-480, -323), countries=["GR", "TR", "IT"],
              note="Classical period — Persian Wars, Peloponnesian War, Socrates & Plato"),
            S(range=(-323, -146),
              note="Hellenistic era — Alexander's conquests; successor kingdoms"),
            S(after=-146, countries=["GR", "TR"],
              note="Roman province of Achaea — Greek culture persists under Rome"),
        ],
    ),

    # ── Medieval Europe ──
    "Medieval Europe": TemporalMapping(
        default=[
            "FR", "DE", "IT", "ES", "GB", "PT", "PL", "CZ", "AT", "CH",
            "BE", "NL", "HU", "RO", "DK", "SE", "NO",
        ],
        slices=[
            S(range=(500, 800), countries=["FR", "DE", "IT", "ES", "GB", "BE", "NL"],
              note="Early Medieval — Frankish Kingdom, Anglo-Saxon England, Visigoths"),
            S(range=(800, 1000), add=["PL", "CZ", "HU", "DK", "NO", "SE"],
              note="Carolingian era — Charlemagne; Christianisation of Eastern Europe"),
            S(range=(1000, 1300),
              note="High Medieval — feudalism, Crusades, Gothic cathedrals"),
            S(range=(1300, 1500),
              note="Late Medieval — Black Death, Hundred Years' War, early Renaissance"),
        ],
    ),

    # ── Silk Road ──
    "Silk Road": TemporalMapping(
        default=["CN", "KZ", "UZ", "TM", "IR", "TR", "IQ", "SY", "IL", "IT", "GR", "IN", "PK", "AF", "KG"],
        slices=[
            S(range=(-200, 200), countries=["CN", "KZ", "UZ", "TM", "IR", "IQ", "SY", "TR", "GR", "IT"],
              note="Han Dynasty to Roman Empire — primary east–west overland axis"),
            S(range=(200, 600), add=["IN", "PK", "AF"],
              note="Byzantine–Sassanid era — southern (Indian Ocean) routes more active"),
            S(range=(600, 1200),
              note="Islamic Golden Age — Arab merchants dominate the Middle section"),
            S(range=(1200, 1400), add=["MN", "RU", "UA"],
              note="Mongol Pax — safe overland passage from China to Persia"),
            S(after=1400, countries=["CN", "IN", "IR", "TR", "IT"],
              note="Maritime routes rising — overland Silk Road declining after 1453"),
        ],
    ),

    # ── Feudal Japan ──
    "Feudal Japan": TemporalMapping(
        default=["JP"],
        slices=[
            S(range=(1185, 1336), countries=["JP"],
              note="Kamakura Shogunate — samurai rise to power"),
            S(range=(1336, 1573), countries=["JP"],
              note="Muromachi / Sengoku — warring states; Ashikaga Shogunate"),
            S(range=(1573, 1615), countries=["JP"],
              note="Azuchi-Momoyama — Oda Nobunaga and Toyotomi Hideyoshi unify Japan"),
            S(range=(1615, 1868), countries=["JP"],
              note="Edo Period — Tokugawa Shogunate; closed-country (sakoku) policy"),
        ],
    ),

    # ── Han Dynasty ──
    "Han Dynasty": TemporalMapping(
        default=["CN", "VN", "KR", "MN", "KZ"],
        slices=[
            S(range=(-206, 9),
              note="Western Han — consolidation after Qin; Silk Road opened"),
            S(range=(9, 25), countries=["CN"],
              note="Xin Dynasty interregnum (Wang Mang)"),
            S(range=(25, 220), countries=["CN", "VN", "KR", "MN"],
              note="Eastern Han — recovery; Buddhism enters China"),
        ],
    ),

    # ── Byzantine Empire ──
    "Byzantine Empire": TemporalMapping(
        default=["TR", "GR", "BG", "RS", "RO", "EG", "IL", "LB", "SY", "IT", "AL"],
        slices=[
            S(range=(395, 565),
              note="Early Byzantine — Justinian reconquests peak; Code of Justinian"),
            S(range=(565, 717), remove=["EG", "IL", "SY", "LB"],
              note="Arab conquests — loss of Levant and North Africa to Umayyad Caliphate"),
            S(range=(717, 1071), remove=["IT", "RO"],
              note="Middle Byzantine — Macedonian dynasty; golden age of culture"),
            S(range=(1071, 1204), remove=["BG", "RS", "RO"],
              note="Seljuk pressure — Manzikert (1071) loses Anatolia; Balkans fragmented"),
            S(range=(1204, 1261), countries=["GR"],
              note="Latin occupation of Constantinople (Fourth Crusade)"),
            S(after=1261, countries=["TR", "GR"],
              note="Palaiologos dynasty — rump state until the fall of Constantinople (1453)"),
        ],
    ),

    # ── Crusades ──
    "Crusades": TemporalMapping(
        default=["IL", "LB", "SY", "JO", "TR", "GR", "EG", "FR", "DE", "GB", "IT"],
        slices=[
            S(range=(1095, 1149), countries=["IL", "LB", "SY", "JO", "TR", "FR", "DE", "GB", "IT"],
              note="First and Second Crusades — Jerusalem captured (1099)"),
            S(range=(1149, 1189), add=["EG"],
              note="Crusader states at greatest extent; Saladin rises"),
            S(range=(1189, 1291),
              note="Later Crusades — Richard I, Frederick II, Louis IX; Jerusalem changes hands"),
            S(after=1291, countries=["CY", "GR", "FR"],
              note="Fall of Acre — Crusader remnants in Cyprus and Rhodes only"),
        ],
    ),

    # ── Napoleonic Era ──
    "Napoleonic Era": TemporalMapping(
        default=[
            "FR", "DE", "IT", "ES", "PT", "PL", "NL", "BE", "AT", "RU",
            "GB", "DK", "NO", "SY", "EG",
        ],
        slices=[
            S(range=(1789, 1799), countries=["FR", "BE", "NL", "DE", "IT"],
              note="French Revolutionary Wars — France vs. First and Second Coalitions"),
            S(range=(1799, 1807),
              note="Consulate and early Empire — Austerlitz, Trafalgar; peak expansion"),
            S(range=(1807, 1812),
              note="Continental System — Peninsular War in Spain and Portugal"),
            S(range=(1812, 1815), add=["RU"],
              note="Russian campaign, 1813 Leipzig, Waterloo — final collapse"),
        ],
    ),

    # ── Colonial Americas ──
    "Colonial Americas": TemporalMapping(
        default=[
            "US", "CA", "MX", "BR", "AR", "PE", "CO", "VE", "CL", "BO",
            "PY", "UY", "CU", "DO", "HT", "ES", "PT", "GB", "FR", "NL",
        ],
        slices=[
            S(range=(1492, 1580), countries=["MX", "PE", "CO", "VE", "CU", "ES", "PT", "BR"],
              note="Early colonisation — Aztec and Inca Empires conquered"),
            S(range=(1580, 1700), add=["US", "CA", "GB", "FR", "NL"],
              note="Expansion — English, French, Dutch North American colonies"),
            S(range=(1700, 1776),
              note="Peak colonial era — all major European powers established"),
            S(range=(1776, 1830),
              note="Independence era — USA (1776); Latin American revolutions (1810–1830)"),
            S(after=1830,
              countries=["US", "CA", "MX", "BR", "AR", "PE", "CO", "CL", "VE", "BO", "PY", "UY", "CU", "DO", "HT"],
              note="Post-colonial independent nations (Canada still British Dominion)"),
        ],
    ),
}
