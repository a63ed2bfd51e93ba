"""Prompt builders for the region-lookup assistant."""


def build_region_assistant_prompt() -> str:
    return (
        "You are a historical geography expert. "
        "Given a historical country, empire, kingdom or era, you name the modern-day countries "
        "that should be highlighted on a map, as ISO 3166-1 alpha-2 codes. "
        "Always respond with a single JSON object and nothing else."
    )


def build_region_lookup_prompt(
    period: str,
    start_year: int | None = None,
    end_year: int | None = None,
    title: str | None = None,
) -> str:
    if start_year is not None and end_year is not None:
        years_line = f"Year range: {_format_year(start_year)} to {_format_year(end_year)}\n"
    else:
        years_line = ""
    title_line = f'Media title: "{title}"\n' if title else ""

    return (
        f'You are a historical geography expert. Given: "{period}"\n'
        f"{years_line}"
        f"{title_line}"
        "Determine:\n"
        "\t1.\tIs this a specific COUNTRY, an EMPIRE/KINGDOM, or a historical ERA/PERIOD?\n"
        "\t2.\tWhat modern-day country codes (ISO 3166-1 alpha-2) should be highlighted on a map"
        + (" for that year range?\n" if years_line else "?\n")
        + "\t3.\tWhat timeframe does this represent?\n"
        "Respond ONLY with valid JSON, no markdown:\n"
        "{\n"
        '"type": "country" | "empire" | "era",\n'
        '"countries": ["US", "FR", "GB"],\n'
        '"timeframe": "793-1066 AD",\n'
        '"description": "Brief context (max 20 words)"\n'
        "}\n"
        "Examples:\n"
        '\t"France" -> {"type":"country","countries":["FR"],"timeframe":"","description":"Modern European nation"}\n'
        '\t"Aztec Empire" -> {"type":"empire","countries":["MX"],"timeframe":"1345-1521",'
        '"description":"Pre-Columbian Mesoamerican civilization in central Mexico"}\n'
        '\t"Silk Road" -> {"type":"era","countries":["CN","KZ","UZ","IR","TR","IT"],'
        '"timeframe":"130 BC-1453 AD","description":"Ancient trade routes connecting East and West"}'
    )


def _format_year(year: int) -> str:
    return f"{-year} BC" if year < 0 else f"{year} AD"
