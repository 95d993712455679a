"""Outcome of one fetch-and-rank pipeline run."""

from dataclasses import dataclass
from typing import Literal

from nearby_stops.domain.models.errors import NearbyStopsError
from nearby_stops.domain.models.ranked_stop import RankedStop
from nearby_stops.domain.models.stop_record import StopRecord

PipelineStage = Literal["location", "feed"]


@dataclass(frozen=True)
class RefreshOutcome:
    """Either a ranked sequence or the failure of one pipeline stage."""

    ranked: list[RankedStop] | None = None
    stops: list[StopRecord] | None = None
    error: NearbyStopsError | None = None
    stage: PipelineStage | None = None
    superseded: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and self.ranked is not None

    @classmethod
    def success(cls, ranked: list[RankedStop], stops: list[StopRecord]) -> "RefreshOutcome":
        return cls(ranked=ranked, stops=stops)

    @classmethod
    def failure(cls, stage: PipelineStage, error: NearbyStopsError) -> "RefreshOutcome":
        return cls(error=error, stage=stage)
