"""Combine feature summaries into the five character scores."""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from .config import (
    BALANCE_DEFAULT,
    DYNAMIC,
    SCORE_LABELS,
    SCORE_OFFSETS,
    SCORE_ORDER,
    SCORE_TABLE,
    SILENCE_RATIO,
    ScoreTerm,
)
from .utils.aggregation import AggregatedFeatures
from .utils.normalization import apply_normalizer, clamp_percent, normalize_dynamic_complexity

logger = logging.getLogger(__name__)


@dataclass
class CharacterScores:
    """The five perceptual scores of one recording, each nominally 0-100."""

    aggressiveness: float = 0.0
    tonality: float = 0.0
    softness: float = 0.0
    high_low_balance: float = 0.0
    density: float = 0.0

    def items(self) -> list[tuple[str, float]]:
        """(label, score) pairs in display order."""
        return [(SCORE_LABELS[name], getattr(self, name)) for name in SCORE_ORDER]

    def to_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in SCORE_ORDER}


class ScoreComposer:
    """
    Evaluate the weighted score table against aggregated features.

    Each term normalizes one statistic onto 0-100; a score is the weighted
    sum of its terms plus any fixed offset. The weighted sum itself is not
    clamped.
    """

    def __init__(
        self,
        table: Optional[Mapping[str, Sequence[ScoreTerm]]] = None,
        offsets: Optional[Mapping[str, float]] = None,
    ):
        self.table = table if table is not None else SCORE_TABLE
        self.offsets = offsets if offsets is not None else SCORE_OFFSETS

    def compose(self, aggregated: AggregatedFeatures) -> CharacterScores:
        """
        Compute all five scores.

        Args:
            aggregated: Summaries, silence ratio and dynamic complexity

        Returns:
            CharacterScores
        """
        scores = CharacterScores(
            aggressiveness=self.weighted_score("aggressiveness", aggregated),
            tonality=self.weighted_score("tonality", aggregated),
            softness=self.weighted_score("softness", aggregated),
            high_low_balance=self.high_low_balance(aggregated),
            density=self.weighted_score("density", aggregated),
        )
        logger.debug(f"Scores: {scores.to_dict()}")
        return scores

    def weighted_score(self, name: str, aggregated: AggregatedFeatures) -> float:
        """Weighted sum of one score's terms plus its offset."""
        total = sum(term.weight * self.term_value(term, aggregated) for term in self.table[name])
        return total + self.offsets.get(name, 0.0)

    @staticmethod
    def term_value(term: ScoreTerm, aggregated: AggregatedFeatures) -> float:
        """Normalized 0-100 contribution of a single term, before weighting."""
        if term.normalizer == DYNAMIC:
            return normalize_dynamic_complexity(aggregated.dynamic_complexity)

        if term.statistic == SILENCE_RATIO:
            raw = aggregated.silence_ratio
        else:
            raw = getattr(aggregated.summary(term.feature), term.statistic)

        return apply_normalizer(term.normalizer, raw, term.scale)

    @staticmethod
    def high_low_balance(aggregated: AggregatedFeatures) -> float:
        """
        Share of spectral energy above the band split, as a percentage.

        Neutral (50) when neither band carries energy.
        """
        low = aggregated.summary("low_energy").mean
        high = aggregated.summary("high_energy").mean
        total = low + high
        if total == 0:
            return BALANCE_DEFAULT
        return clamp_percent(high / total * 100.0)

    def breakdown(self, aggregated: AggregatedFeatures) -> dict[str, list[dict[str, Any]]]:
        """Normalized value and weight of every term, per weighted score."""
        return {
            name: [
                {
                    "feature": term.feature,
                    "statistic": term.statistic,
                    "weight": term.weight,
                    "normalized": self.term_value(term, aggregated),
                }
                for term in terms
            ]
            for name, terms in self.table.items()
        }


def compose_scores(aggregated: AggregatedFeatures) -> CharacterScores:
    """Compute the five scores with the standard score table."""
    return ScoreComposer().compose(aggregated)
