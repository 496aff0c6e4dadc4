# feedclean/quality/engine.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..core import Batch, EmptySeries, Key, Metric, Provider
from .cleaner import DEFAULT_CONFIG, CleanerConfig, GapStatistics, clean_series
from .statistics import DispersionSummary, summarize

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProviderReport:
    cleaned: Provider
    gaps: GapStatistics = field(default_factory=GapStatistics)
    summaries: dict[Key, DispersionSummary] = field(default_factory=dict, repr=False)
    skipped: tuple[Key, ...] = ()


@dataclass(frozen=True, slots=True)
class CleaningReport:
    """
    Result of one run over a Batch.

    - cleaned: same providers and metrics as the input, minus skipped metrics
    - gaps: provider id -> GapStatistics, one entry per input provider
    - summaries: provider id -> metric key -> DispersionSummary
    - skipped: (provider id, metric key) pairs that had no numeric readings
    """
    cleaned: Batch
    gaps: dict[Key, GapStatistics] = field(default_factory=dict)
    summaries: dict[Key, dict[Key, DispersionSummary]] = field(default_factory=dict, repr=False)
    skipped: tuple[tuple[Key, Key], ...] = ()

    @property
    def total_gaps(self) -> GapStatistics:
        return GapStatistics.combine(self.gaps.values())


def clean_provider(
    provider: Provider,
    *,
    config: CleanerConfig = DEFAULT_CONFIG,
) -> ProviderReport:
    """
    Clean every metric of `provider` and fold their gap statistics.

    A metric without readings is skipped (left out of the cleaned provider)
    and does not stop its siblings.
    """
    cleaned: dict[Key, Metric] = {}
    summaries: dict[Key, DispersionSummary] = {}
    per_metric: list[GapStatistics] = []
    skipped: list[Key] = []

    for key, metric in provider.items():
        try:
            summary = summarize(metric)
        except EmptySeries:
            logger.warning(
                "provider %r metric %r has no numeric readings; skipped",
                provider.provider_id,
                key,
            )
            skipped.append(key)
            continue

        result = clean_series(metric.series, summary, config=config)
        logger.debug(
            "provider %r metric %r: kept %d of %d, longest run %d",
            provider.provider_id,
            key,
            result.cleaned.n,
            metric.n,
            result.gaps.max_gap_run,
        )
        cleaned[key] = metric.with_series(result.cleaned)
        summaries[key] = summary
        per_metric.append(result.gaps)

    return ProviderReport(
        cleaned=provider.with_metrics(cleaned),
        gaps=GapStatistics.combine(per_metric),
        summaries=summaries,
        skipped=tuple(skipped),
    )


def clean_batch(
    batch: Batch,
    *,
    config: CleanerConfig = DEFAULT_CONFIG,
) -> CleaningReport:
    """Clean every provider of `batch`; providers never affect each other."""
    providers: dict[Key, Provider] = {}
    gaps: dict[Key, GapStatistics] = {}
    summaries: dict[Key, dict[Key, DispersionSummary]] = {}
    skipped: list[tuple[Key, Key]] = []

    for pid, provider in batch.items():
        report = clean_provider(provider, config=config)
        providers[pid] = report.cleaned
        gaps[pid] = report.gaps
        summaries[pid] = report.summaries
        skipped.extend((pid, key) for key in report.skipped)

    logger.debug(
        "batch cleaned: %d provider(s), %d reading(s) in, %d out",
        len(batch),
        batch.n_readings,
        sum(p.n_readings for p in providers.values()),
    )
    return CleaningReport(
        cleaned=Batch(providers=providers, meta=batch.meta.copy()),
        gaps=gaps,
        summaries=summaries,
        skipped=tuple(skipped),
    )
