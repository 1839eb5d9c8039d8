"""
Engine Runner

Orchestrates the eligibility pipeline for a stored player:
1. Fetches the player's rows via adapter
2. Runs the eligibility engine
3. Upserts the assessment snapshot

This is a pure orchestration layer - NO scoring, NO business logic.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Tuple

from sqlalchemy.orm import Session

from ..models import PlayerRow, TransferEligibilityAssessment
from .adapter import fetch_player, build_scoring_data
from .contracts import ScoringThresholds, TransferEligibilityResult
from .engine import EligibilityEngine
from .constants import ASSESSMENT_VALIDITY_DAYS

logger = logging.getLogger(__name__)


def _assessment_fields(
    result: TransferEligibilityResult,
    now: datetime
) -> Dict[str, Any]:
    """Flatten an engine result into assessment columns."""
    return {
        "total_minutes_verified": result.total_minutes_verified,
        "club_minutes": result.club_minutes,
        "international_minutes": result.international_minutes,
        "video_minutes": result.video_minutes,
        "total_caps": result.total_caps,
        "senior_caps": result.senior_caps,
        "continental_appearances": result.continental_appearances,
        "overall_status": result.overall_status,
        "schengen_score": result.schengen.score,
        "schengen_status": result.schengen.status,
        "o1_score": result.o1.score,
        "o1_status": result.o1.status,
        "p1_score": result.p1.score,
        "p1_status": result.p1.status,
        "uk_gbe_score": result.uk_gbe.score,
        "uk_gbe_status": result.uk_gbe.status,
        "esc_score": result.esc.score,
        "esc_status": result.esc.status,
        "esc_eligible": result.esc_eligible,
        "minutes_needed": result.minutes_needed,
        "caps_needed": result.caps_needed,
        "recommendations": list(result.recommendations),
        "visa_breakdown": {
            "schengen": result.schengen.model_dump(mode="json"),
            "o1": result.o1.model_dump(mode="json"),
            "p1": result.p1.model_dump(mode="json"),
            "uk_gbe": result.uk_gbe.model_dump(mode="json"),
            "esc": result.esc.model_dump(mode="json"),
        },
        "calculated_at": now,
        "valid_until": now + timedelta(days=ASSESSMENT_VALIDITY_DAYS),
    }


def save_assessment(
    db: Session,
    player_id: str,
    result: TransferEligibilityResult
) -> TransferEligibilityAssessment:
    """
    Create or update the player's assessment snapshot.

    One row per player; an existing row is updated in place.
    """
    fields = _assessment_fields(result, datetime.utcnow())

    assessment = (
        db.query(TransferEligibilityAssessment)
        .filter(TransferEligibilityAssessment.player_id == player_id)
        .first()
    )
    if assessment is None:
        logger.info(f"Creating eligibility assessment for player {player_id}")
        assessment = TransferEligibilityAssessment(player_id=player_id, **fields)
        db.add(assessment)
    else:
        logger.info(f"Updating eligibility assessment {assessment.id} for player {player_id}")
        for name, value in fields.items():
            setattr(assessment, name, value)

    db.flush()
    return assessment


def run_transfer_eligibility(
    db: Session,
    player_id: str,
    thresholds: Optional[ScoringThresholds] = None
) -> Optional[Tuple[PlayerRow, TransferEligibilityResult, TransferEligibilityAssessment]]:
    """
    Main entry point for stored players.

    Args:
        db: Database session
        player_id: Player to assess
        thresholds: Optional threshold overrides

    Returns:
        (player row, engine result, assessment snapshot), or None when the
        player does not exist
    """
    player_row = fetch_player(db, player_id)
    if player_row is None:
        logger.warning(f"Player {player_id} not found for eligibility assessment")
        return None

    data = build_scoring_data(db, player_row)
    logger.info(
        f"Scoring player {player_id}: league band {data.league_band}, "
        f"{len(data.metrics)} metrics rows, {len(data.videos)} videos, "
        f"{len(data.international_records)} international records"
    )

    result = EligibilityEngine(thresholds).evaluate(data)
    assessment = save_assessment(db, player_id, result)

    logger.info(f"Player {player_id} overall eligibility: {result.overall_status}")
    return player_row, result, assessment
