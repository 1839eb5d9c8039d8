"""
Eligibility API Routes

Exposes the transfer eligibility engine via REST API.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from db import get_db
from .logic.contracts import ScoringData
from .logic.engine import EligibilityEngine
from .logic.aggregator import minutes_status
from .logic.runner import run_transfer_eligibility

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/eligibility", tags=["eligibility"])

engine = EligibilityEngine()


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/calculate", summary="Calculate transfer eligibility")
def calculate(data: ScoringData):
    """
    Score all five visa types for an already assembled player bundle.

    **Request Body:** `ScoringData` (player, metrics, videos, video insights,
    international records, invitation letters, league band)

    **Response:** overall verdict, reconciled totals, per-visa scores and
    up to five merged recommendations
    """
    try:
        result = engine.evaluate(data)
        return result.model_dump(mode="json")

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Eligibility calculation failed")
        return JSONResponse(
            status_code=500,
            content={"error": str(e)}
        )


@router.post("/calculate/{visa_type}", summary="Calculate a single visa score")
def calculate_visa(visa_type: str, data: ScoringData):
    """Score one visa type. `esc` scores UK GBE first and gates on it."""
    try:
        result = engine.score_visa(data, visa_type)
        return result.model_dump(mode="json")

    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown visa type: {visa_type}")
    except Exception as e:
        logger.exception(f"Visa calculation failed for {visa_type}")
        return JSONResponse(
            status_code=500,
            content={"error": str(e)}
        )


@router.get("/players/{player_id}", summary="Assess a stored player")
def assess_player(player_id: str, db: Session = Depends(get_db)):
    """
    Load a stored player, compute eligibility and persist the assessment.

    The league band comes from the player's most recent invitation letter.
    """
    try:
        outcome = run_transfer_eligibility(db, player_id)
        if outcome is None:
            raise HTTPException(status_code=404, detail="Player not found")

        player, result, assessment = outcome
        return {
            "assessment": assessment.to_dict(),
            "player": {
                "id": player.id,
                "name": f"{player.first_name} {player.last_name}",
                "position": player.position,
                "nationality": player.nationality,
                "current_club": player.current_club_name,
                "market_value": player.market_value,
            },
            "minutes_breakdown": _minutes_breakdown(result),
            "visa_scores": {
                visa.visa_type.value: visa.model_dump(mode="json")
                for visa in result.visa_results()
            },
            "overall_status": result.overall_status,
            "recommendations": result.recommendations,
            "caps_needed": result.caps_needed,
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Eligibility assessment failed for player {player_id}")
        db.rollback()
        return JSONResponse(
            status_code=500,
            content={"error": str(e)}
        )


def _minutes_breakdown(result) -> Dict[str, Any]:
    """Minutes summary shown beside the visa cards."""
    return {
        "club": result.club_minutes,
        "international": result.international_minutes,
        "video": result.video_minutes,
        "total": result.total_minutes_verified,
        "minimum": engine.thresholds.minimum_minutes,
        "needed": result.minutes_needed,
        "status": minutes_status(result.total_minutes_verified, engine.thresholds).value,
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Eligibility engine health check")
def health_check():
    """Check if eligibility engine is operational."""
    return {"status": "ok", "engine": "eligibility", "version": engine.version}
