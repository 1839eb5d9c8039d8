"""
Data Adapter for the Eligibility Engine

Reads a player's rows from the production tables and transforms them into
the ScoringData input contract.

This is a pure READ + TRANSFORM layer:
- NO scoring logic
- NO DB writes
"""

from typing import Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from ..models import (
    PlayerRow,
    PlayerMetricsRow,
    VideoRow,
    VideoInsightsRow,
    PlayerInternationalRecordRow,
    InvitationLetterRow,
)
from .contracts import (
    ScoringData,
    Player,
    PlayerMetrics,
    Video,
    VideoInsights,
    PlayerInternationalRecord,
    InvitationLetter,
)
from .constants import DEFAULT_LEAGUE_BAND


def resolve_league_band(letters: Sequence[InvitationLetter]) -> int:
    """
    League band of the most recent invitation letter.

    Args:
        letters: Invitation letters, newest first

    Returns:
        Target league band, or the default band when none is on file
    """
    if letters and letters[0].target_league_band:
        return letters[0].target_league_band
    return DEFAULT_LEAGUE_BAND


def _first_insight_per_video(
    videos: Sequence[VideoRow],
    insights: Sequence[VideoInsightsRow]
) -> List[VideoInsightsRow]:
    """Keep one insight row per video, in video order."""
    by_video: Dict[str, VideoInsightsRow] = {}
    for insight in insights:
        by_video.setdefault(insight.video_id, insight)
    return [by_video[v.id] for v in videos if v.id in by_video]


def fetch_player(db: Session, player_id: str) -> Optional[PlayerRow]:
    return db.get(PlayerRow, player_id)


def build_scoring_data(db: Session, player_row: PlayerRow) -> ScoringData:
    """
    Load every row the engine reads for a player.

    Args:
        db: Database session
        player_row: Player already fetched by the caller

    Returns:
        ScoringData with the league band resolved
    """
    player_id = player_row.id

    metrics_rows = (
        db.query(PlayerMetricsRow)
        .filter(PlayerMetricsRow.player_id == player_id)
        .order_by(PlayerMetricsRow.updated_at.desc())
        .all()
    )
    video_rows = (
        db.query(VideoRow)
        .filter(VideoRow.player_id == player_id)
        .order_by(VideoRow.upload_date.desc())
        .all()
    )
    insight_rows: List[VideoInsightsRow] = []
    if video_rows:
        insight_rows = (
            db.query(VideoInsightsRow)
            .filter(VideoInsightsRow.video_id.in_([v.id for v in video_rows]))
            .order_by(VideoInsightsRow.created_at.asc())
            .all()
        )
    record_rows = (
        db.query(PlayerInternationalRecordRow)
        .filter(PlayerInternationalRecordRow.player_id == player_id)
        .order_by(PlayerInternationalRecordRow.created_at.desc())
        .all()
    )
    letter_rows = (
        db.query(InvitationLetterRow)
        .filter(InvitationLetterRow.player_id == player_id)
        .order_by(InvitationLetterRow.uploaded_at.desc())
        .all()
    )

    letters = [InvitationLetter.model_validate(r, from_attributes=True) for r in letter_rows]

    return ScoringData(
        player=Player.model_validate(player_row, from_attributes=True),
        metrics=[PlayerMetrics.model_validate(r, from_attributes=True) for r in metrics_rows],
        videos=[Video.model_validate(r, from_attributes=True) for r in video_rows],
        video_insights=[
            VideoInsights.model_validate(r, from_attributes=True)
            for r in _first_insight_per_video(video_rows, insight_rows)
        ],
        international_records=[
            PlayerInternationalRecord.model_validate(r, from_attributes=True) for r in record_rows
        ],
        invitation_letters=letters,
        league_band=resolve_league_band(letters),
    )
