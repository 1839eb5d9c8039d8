"""
Eligibility Engine

Main orchestrator around the scoring pipeline.
This is the primary entry point for computing transfer eligibility.
"""

import logging
from typing import Any, Dict, Optional, Union

from .contracts import (
    ScoringData,
    ScoringThresholds,
    DEFAULT_THRESHOLDS,
    TransferEligibilityResult,
    VisaScoreResult,
)
from .aggregator import calculate_transfer_eligibility
from .metrics import aggregate_metrics
from .visa_scorers import (
    calculate_schengen_score,
    calculate_o1_score,
    calculate_p1_score,
    calculate_uk_gbe_score,
    calculate_esc_score,
)
from .constants import VisaType

logger = logging.getLogger(__name__)


class EligibilityEngine:
    """
    Transfer eligibility engine.

    Pipeline flow:
    1. Metrics Aggregation - Reconcile minutes and caps once
    2. Visa Scoring - Schengen, O-1, P-1, UK GBE
    3. ESC Gating - ESC scored against the GBE result from step 2
    4. Aggregation - Overall verdict, shortfalls, merged recommendations

    The engine holds no state between calls.
    """

    def __init__(self, thresholds: Optional[ScoringThresholds] = None):
        """
        Initialize the eligibility engine.

        Args:
            thresholds: Optional threshold overrides. Defaults apply if None.
        """
        self.thresholds = thresholds or DEFAULT_THRESHOLDS
        self.version = "1.0.0"

    def evaluate(self, data: ScoringData) -> TransferEligibilityResult:
        """
        Compute every visa score and the overall verdict.

        Args:
            data: Player data bundle with resolved league band

        Returns:
            TransferEligibilityResult
        """
        result = calculate_transfer_eligibility(data, self.thresholds)
        logger.debug(
            "Eligibility for player %s: overall=%s minutes=%s senior_caps=%s",
            data.player.id or "anonymous",
            result.overall_status,
            result.total_minutes_verified,
            result.senior_caps,
        )
        return result

    def evaluate_from_dict(self, payload: Dict[str, Any]) -> TransferEligibilityResult:
        """
        Compute eligibility from a dictionary payload.

        Convenience method for API integration. Raises pydantic's
        ValidationError when the payload does not fit ScoringData.
        """
        data = ScoringData.model_validate(payload)
        return self.evaluate(data)

    def score_visa(
        self,
        data: ScoringData,
        visa_type: Union[VisaType, str]
    ) -> VisaScoreResult:
        """
        Score a single visa category.

        Useful for refreshing one card of a dashboard. ESC scores GBE first
        and gates on that result.

        Raises:
            ValueError: Unknown visa type
        """
        visa_type = VisaType(visa_type)
        agg = aggregate_metrics(data, self.thresholds)

        if visa_type == VisaType.SCHENGEN:
            return calculate_schengen_score(data, self.thresholds, agg)
        if visa_type == VisaType.O1:
            return calculate_o1_score(data, self.thresholds, agg)
        if visa_type == VisaType.P1:
            return calculate_p1_score(data, self.thresholds, agg)

        gbe = calculate_uk_gbe_score(data, self.thresholds, agg)
        if visa_type == VisaType.UK_GBE:
            return gbe
        return calculate_esc_score(data, gbe, self.thresholds, agg)


# Convenience function for simple usage
def get_transfer_eligibility(
    data: ScoringData,
    thresholds: Optional[ScoringThresholds] = None
) -> TransferEligibilityResult:
    """
    Convenience function to compute transfer eligibility.

    Args:
        data: Player data bundle
        thresholds: Optional threshold overrides

    Returns:
        TransferEligibilityResult
    """
    engine = EligibilityEngine(thresholds)
    return engine.evaluate(data)
