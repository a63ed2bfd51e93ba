"""
Region inference pipeline.

Resolves (era, start year, end year, optional title/description) to a set of
ISO country codes by walking the tiers in a fixed order:

    cache -> temporal -> custom -> static -> text analysis (+AI) -> AI -> fallback

The first tier that produces countries wins. Non-fallback results are written
back to the inference cache.
"""

import time

from region_atlas.data.temporal_regions import TEMPORAL_MODIFIERS
from region_atlas.logging import get_logger
from region_atlas.models import (
    Confidence,
    InferenceParams,
    RegionResult,
    RegionSource,
    TemporalMapping,
)
from region_atlas.services.custom_mappings import CustomMappingService
from region_atlas.services.region_ai import RegionAIClient
from region_atlas.services.region_cache import RegionCacheService, is_cacheable
from region_atlas.services.static_mappings import find_static_key, lookup_static
from region_atlas.services.temporal import resolve_temporal
from region_atlas.services.text_extraction import extract_from_text, text_analysis_confidence

logger = get_logger('services.region_inference')


def _elapsed_ms(t0: float) -> str:
    return f"{(time.perf_counter() - t0) * 1000:.0f}ms"


def _range_label(params: InferenceParams) -> str:
    return f"{params.start_year}–{params.end_year}"


def temporal_confidence(note: str) -> Confidence:
    """Slice-specific answers are high confidence; the peak-period default is medium."""
    return Confidence.MEDIUM if "Default" in note else Confidence.HIGH


class RegionInferenceService:
    """Orchestrates the resolution tiers over injected collaborators."""

    def __init__(
        self,
        cache: RegionCacheService,
        custom: CustomMappingService,
        ai_client: RegionAIClient,
        temporal_table: dict[str, TemporalMapping] | None = None,
    ):
        self.cache = cache
        self.custom = custom
        self.ai_client = ai_client
        self.temporal_table = temporal_table if temporal_table is not None else TEMPORAL_MODIFIERS

    async def infer_regions(self, params: InferenceParams) -> RegionResult:
        """
        Infer the countries for a media item.

        Never raises: storage and AI failures degrade to the next tier and, at
        worst, to an empty low-confidence fallback.

        :param params: Era, year range and optional title/description
        :type params: InferenceParams
        :return: Countries with confidence, reasoning and the tier that produced them
        :rtype: RegionResult
        """
        t0 = time.perf_counter()

        cached = await self.cache.read_inference(params)
        if cached:
            logger.info(
                f'cache hit: "{params.era}" ({_range_label(params)}) '
                f'source={cached.source.value} confidence={cached.confidence.value} '
                f'countries=[{",".join(cached.countries)}]'
            )
            return cached

        result = await self._resolve(params, t0)
        await self._write_through(params, result)
        return result

    async def _resolve(self, params: InferenceParams, t0: float) -> RegionResult:
        for tier in (self._from_temporal, self._from_custom, self._from_static):
            result = await tier(params)
            if result:
                logger.info(
                    f'{result.source.value}: "{params.era}" ({_range_label(params)}) '
                    f'-> {len(result.countries)} countries, confidence={result.confidence.value} '
                    f'({_elapsed_ms(t0)})'
                )
                return result

        result = await self._from_text_and_ai(params)
        if result:
            logger.info(
                f'{result.source.value}: "{params.era}" ({_range_label(params)}) '
                f'-> {",".join(result.countries)} confidence={result.confidence.value} '
                f'({_elapsed_ms(t0)})'
            )
            return result

        logger.warning(f'fallback (no data found): "{params.era}" ({_elapsed_ms(t0)})')
        return RegionResult(
            countries=[],
            confidence=Confidence.LOW,
            reasoning=f'No mapping found for "{params.era}" in the {_range_label(params)} range',
            source=RegionSource.FALLBACK,
        )

    async def _write_through(self, params: InferenceParams, result: RegionResult) -> None:
        if not is_cacheable(result):
            return
        await self.cache.write_inference(params, result)

    # ── Tiers ──

    async def _from_temporal(self, params: InferenceParams) -> RegionResult | None:
        temporal = resolve_temporal(params.era, params.start_year, params.end_year, self.temporal_table)
        if temporal is None:
            return None
        return RegionResult(
            countries=temporal.countries,
            confidence=temporal_confidence(temporal.note),
            reasoning=temporal.note,
            source=RegionSource.TEMPORAL,
        )

    async def _from_custom(self, params: InferenceParams) -> RegionResult | None:
        mapping = await self.custom.find_countries(params.era)
        if mapping is None:
            return None
        return RegionResult(
            countries=mapping.countries,
            confidence=Confidence.MEDIUM,
            reasoning=f'Custom mapping for "{mapping.period}"',
            source=RegionSource.CUSTOM,
        )

    async def _from_static(self, params: InferenceParams) -> RegionResult | None:
        countries = lookup_static(params.era)
        if not countries:
            return None
        key = find_static_key(params.era) or countries[0]
        return RegionResult(
            countries=countries,
            confidence=Confidence.MEDIUM,
            reasoning=f'Hardcoded mapping for "{key}" (not year-adjusted)',
            source=RegionSource.HARDCODED,
        )

    async def _from_text_and_ai(self, params: InferenceParams) -> RegionResult | None:
        text = " ".join([params.era, params.title or "", params.description or ""])
        text_countries = extract_from_text(text)

        text_result = None
        if text_countries:
            text_result = RegionResult(
                countries=text_countries,
                confidence=text_analysis_confidence(len(text_countries), params.year_span),
                reasoning="Extracted location hints from title/description text",
                source=RegionSource.TITLE_ANALYSIS,
            )
            logger.info(
                f'title-analysis: "{params.era}" + "{params.title or ""}" '
                f'-> {",".join(text_countries)}, asking AI to refine'
            )

        ai_data = await self.ai_client.fetch_ai_regions(params)
        if ai_data is None or not ai_data.countries:
            return text_result

        if text_result:
            return RegionResult(
                countries=ai_data.countries,
                confidence=ai_data.confidence,
                reasoning=ai_data.reasoning or text_result.reasoning,
                suggestions=[", ".join(text_countries)],
                source=RegionSource.AI,
            )
        return RegionResult(
            countries=ai_data.countries,
            confidence=ai_data.confidence,
            reasoning=ai_data.reasoning or f'AI inference for "{params.era}" ({_range_label(params)})',
            suggestions=ai_data.suggestions,
            source=RegionSource.AI,
        )
