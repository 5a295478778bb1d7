"""Revenue aggregation and optimization suggestions across creator platforms."""

import logging
import random
from datetime import datetime, timezone
from typing import Any, Optional

import httpx

from video_studio.models.monetization import (
    OptimizationSuggestion,
    PlatformCredential,
    RevenueEntry,
    RevenueSummary,
)
from video_studio.services.platforms import PatreonAPI, TikTokAPI, YouTubeAPI

logger = logging.getLogger(__name__)

LOW_REVENUE_THRESHOLD = 100
LOW_ENGAGEMENT_THRESHOLD = 0.05

# Upper bounds for simulated revenue, exclusive
SIMULATED_REVENUE_CEILING = {"youtube": 1000, "tiktok": 500}


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class MonetizationService:
    """Aggregate per-platform revenue with per-platform failure isolation."""

    def __init__(
        self,
        simulation_mode: bool = True,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the MonetizationService.

        Args:
            simulation_mode: Fill in placeholder revenue where no real metric exists
            timeout: Outbound request timeout in seconds
            transport: Optional httpx transport for platform calls
            rng: Random source for simulated figures (optional)
        """
        self.simulation_mode = simulation_mode
        self.timeout = timeout
        self.transport = transport
        self.rng = rng or random.Random()

    def _simulated_revenue(self, platform: str) -> float:
        if not self.simulation_mode:
            return 0.0
        return float(self.rng.randrange(SIMULATED_REVENUE_CEILING[platform]))

    async def _fetch_platform(
        self, credential: PlatformCredential
    ) -> tuple[float, dict[str, Any]]:
        if credential.type == "youtube":
            if credential.api_key and credential.channel_id:
                youtube = YouTubeAPI(
                    credential.api_key,
                    credential.channel_id,
                    self.timeout,
                    self.transport,
                    self.rng,
                )
                stats = await youtube.get_channel_stats()
                return self._simulated_revenue("youtube"), stats

        elif credential.type == "tiktok":
            if credential.access_token:
                tiktok = TikTokAPI(
                    credential.access_token, self.simulation_mode, self.timeout, self.transport
                )
                stats = await tiktok.get_user_info()
                return self._simulated_revenue("tiktok"), stats

        elif credential.type == "patreon":
            if credential.access_token:
                patreon = PatreonAPI(
                    credential.access_token, self.simulation_mode, self.timeout, self.transport
                )
                campaign = await patreon.get_campaign_info()
                return float(campaign["monthlyRevenue"]), campaign

        return 0.0, {}

    async def aggregate_revenue(
        self, credentials: list[PlatformCredential]
    ) -> list[RevenueEntry]:
        """
        Fetch revenue and stats for every credential, one entry per credential.

        A failing platform yields a zero-revenue entry with ``error`` set and
        never aborts the others.

        Args:
            credentials: Platform credentials in request order

        Returns:
            List of RevenueEntry in the same order as ``credentials``
        """
        entries: list[RevenueEntry] = []

        for credential in credentials:
            try:
                revenue, stats = await self._fetch_platform(credential)
                entries.append(
                    RevenueEntry(
                        platform=credential.type,
                        revenue=max(0.0, revenue),
                        stats=stats,
                        last_updated=_now_iso(),
                    )
                )
            except Exception as e:
                logger.error(f"Error fetching {credential.type} data: {e}")
                entries.append(
                    RevenueEntry(
                        platform=credential.type,
                        revenue=0.0,
                        stats={},
                        error=str(e) or "Unknown error",
                        last_updated=_now_iso(),
                    )
                )

        return entries

    async def summarize(self, credentials: list[PlatformCredential]) -> RevenueSummary:
        """Aggregate revenue and attach the total and suggestions."""
        entries = await self.aggregate_revenue(credentials)
        return RevenueSummary(
            platforms=entries,
            total_revenue=total_revenue(entries),
            suggestions=get_optimization_suggestions(entries),
            last_updated=_now_iso(),
        )


def total_revenue(entries: list[RevenueEntry]) -> float:
    return sum(entry.revenue for entry in entries)


def calculate_projected_revenue(
    current_revenue: float, growth_rate: float, months: int = 12
) -> float:
    """
    Compound ``current_revenue`` by ``growth_rate`` percent per month.

    Args:
        current_revenue: Revenue for the current month
        growth_rate: Monthly growth in percent (5 means 5%)
        months: Number of months to project

    Returns:
        Projected monthly revenue after ``months`` months
    """
    return current_revenue * (1 + growth_rate / 100) ** months


def get_optimization_suggestions(
    entries: list[RevenueEntry],
) -> list[OptimizationSuggestion]:
    """Suggest improvements for low-revenue or low-engagement platforms."""
    suggestions: list[OptimizationSuggestion] = []

    for entry in entries:
        label = entry.platform or "an unidentified platform"
        if entry.revenue < LOW_REVENUE_THRESHOLD:
            suggestions.append(
                OptimizationSuggestion(
                    platform=entry.platform,
                    type="low_revenue",
                    message=f"Consider increasing posting frequency on {label}",
                    priority="high",
                )
            )

        engagement = entry.stats.get("engagement")
        if (
            isinstance(engagement, (int, float))
            and not isinstance(engagement, bool)
            and engagement < LOW_ENGAGEMENT_THRESHOLD
        ):
            suggestions.append(
                OptimizationSuggestion(
                    platform=entry.platform,
                    type="low_engagement",
                    message=f"Improve content engagement on {label}",
                    priority="medium",
                )
            )

    return suggestions


def mock_revenue_summary() -> RevenueSummary:
    """Static dashboard payload shown before any platform is connected."""
    now = _now_iso()
    return RevenueSummary(
        platforms=[
            RevenueEntry(
                platform="youtube",
                revenue=2450.50,
                stats={"subscribers": 15420, "videos": 47},
                last_updated=now,
            ),
            RevenueEntry(
                platform="tiktok",
                revenue=890.25,
                stats={"followers": 8750, "videos": 23},
                last_updated=now,
            ),
            RevenueEntry(
                platform="patreon",
                revenue=1200.00,
                stats={"patrons": 156, "posts": 12},
                last_updated=now,
            ),
        ],
        total_revenue=4540.75,
        suggestions=[
            OptimizationSuggestion(
                platform="instagram",
                type="not_connected",
                message="Connect Instagram to increase revenue potential",
                priority="medium",
            )
        ],
        last_updated=now,
    )


def create_monetization_service(
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> MonetizationService:
    """Create a MonetizationService instance using application settings."""
    from video_studio.config import get_settings

    settings = get_settings()
    return MonetizationService(
        simulation_mode=settings.simulation_mode,
        timeout=settings.http_timeout_seconds,
        transport=transport,
    )
