"""Display derivations for an AnalysisResult.

Nothing here touches Streamlit, so the view logic can be tested without a
running app. The result itself is never modified.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

import plotly.graph_objects as go

from resume_match.constants.ui_constants import UIConstants
from resume_match.models.data_models import AnalysisResult, ScoreBand

GAP_COLOR = "#e5e7eb"


def get_score_band(score: int) -> ScoreBand:
    """Map a match percentage to its display tier."""
    if score >= UIConstants.EXCELLENT_THRESHOLD:
        return ScoreBand.EXCELLENT
    if score >= UIConstants.GOOD_THRESHOLD:
        return ScoreBand.GOOD
    if score >= UIConstants.FAIR_THRESHOLD:
        return ScoreBand.FAIR
    return ScoreBand.POOR


def gauge_values(score: int) -> Tuple[int, int]:
    """Return the (match, gap) segments of the score donut."""
    return score, 100 - score


@dataclass(frozen=True)
class ResultView:
    """Everything the results panel renders, in display order."""

    score: int
    band: ScoreBand
    title: str
    summary: str
    matching_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    improvement_tips: List[str] = field(default_factory=list)

    @property
    def matching_placeholder(self) -> str:
        return "" if self.matching_skills else UIConstants.NO_MATCHING_SKILLS

    @property
    def missing_placeholder(self) -> str:
        return "" if self.missing_skills else UIConstants.NO_MISSING_SKILLS

    @property
    def numbered_tips(self) -> List[Tuple[int, str]]:
        return list(enumerate(self.improvement_tips, start=1))


def build_result_view(result: AnalysisResult) -> ResultView:
    """Derive the display model for a result."""
    return ResultView(
        score=result.match_percentage,
        band=get_score_band(result.match_percentage),
        title=result.job_title_detected or UIConstants.DEFAULT_JOB_TITLE,
        summary=result.summary,
        matching_skills=list(result.matching_skills),
        missing_skills=list(result.missing_skills),
        improvement_tips=list(result.improvement_tips),
    )


def build_gauge_figure(view: ResultView) -> go.Figure:
    """Donut chart with the score in the middle, colored by band."""
    match, gap = gauge_values(view.score)
    figure = go.Figure(
        go.Pie(
            values=[match, gap],
            labels=["Match", "Gap"],
            hole=0.75,
            sort=False,
            direction="clockwise",
            rotation=0,
            marker={"colors": [view.band.color, GAP_COLOR]},
            textinfo="none",
            hoverinfo="label+value",
        )
    )
    figure.update_layout(
        showlegend=False,
        margin={"t": 10, "b": 10, "l": 10, "r": 10},
        height=240,
        annotations=[
            {
                "text": f"<b>{view.score}%</b><br><span style='font-size:10px'>MATCH SCORE</span>",
                "showarrow": False,
                "font": {"size": 32, "color": view.band.color},
            }
        ],
    )
    return figure
