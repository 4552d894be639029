"""
Repository churn statistics endpoint.
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Query
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from repo_stats.api.deps import CallerCredential, StatsCache
from repo_stats.config import settings
from repo_stats.core.exceptions import UpstreamUnavailableError
from repo_stats.services.repository_stats import (
    RepositoryStatsError,
    RepositoryStatsService,
    StatsRequest,
)

router = APIRouter(prefix="/repository-stats", tags=["repository-stats"])
logger = logging.getLogger(__name__)


# --- Response Models ---


class RepositoryStatsResponse(BaseModel):
    """Churn totals for the allow-listed repositories of an organization."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_lines_added: int
    total_lines_deleted: int
    total_net_lines: int
    repository_count: int
    last_updated: str


# --- Endpoints ---


@router.get("", response_model=RepositoryStatsResponse)
async def get_repository_stats(
    authorization: CallerCredential,
    cache: StatsCache,
    org: str | None = Query(None, description="GitHub organization login"),
    since: str | None = Query(None, description="ISO date, defaults to 30 days ago"),
    until: str | None = Query(None, description="ISO date, defaults to now"),
) -> RepositoryStatsResponse:
    """
    Get line churn for the organization's target repositories.

    Results are cached per credential and query for an hour. When GitHub
    cannot be queried the response carries a fixed historical estimate.
    """
    request = StatsRequest(
        org_name=org or settings.default_org,
        since=since,
        until=until,
        authorization=authorization,
    )

    try:
        stats = await RepositoryStatsService(cache).get_stats(request)
    except RepositoryStatsError as e:
        raise UpstreamUnavailableError(e.message) from None

    return RepositoryStatsResponse.model_validate(asdict(stats))
