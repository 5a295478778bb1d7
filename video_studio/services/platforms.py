"""Creator platform API clients (YouTube, TikTok, Patreon)."""

import logging
import random
from datetime import datetime, timezone
from typing import Any, Optional

import httpx

from video_studio.utils.errors import PlatformAPIError

logger = logging.getLogger(__name__)

YOUTUBE_CHANNELS_URL = "https://www.googleapis.com/youtube/v3/channels"
YOUTUBE_SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"
TIKTOK_USER_INFO_URL = "https://open-api.tiktok.com/platform/oauth/connect/v1/user/info/"
PATREON_CAMPAIGNS_URL = "https://www.patreon.com/api/oauth2/v2/campaigns"

DEMO_TIKTOK_USER = {
    "username": "demo_user",
    "displayName": "Demo User",
    "followerCount": 8750,
    "followingCount": 123,
    "likesCount": 45670,
}

DEMO_PATREON_CAMPAIGN = {
    "name": "AI Video Studio",
    "patronCount": 156,
    "monthlyRevenue": 1200.00,
}


class PlatformClient:
    """Shared HTTP plumbing for platform clients."""

    platform: str = "unknown"

    def __init__(
        self,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout = timeout
        self.transport = transport

    async def _get_json(
        self,
        url: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """
        GET a JSON document from the platform.

        Raises:
            PlatformAPIError: On transport failure or a non-2xx response
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(url, params=params, headers=headers)
        except httpx.HTTPError as e:
            raise PlatformAPIError(self.platform, 0, str(e))

        if not response.is_success:
            raise PlatformAPIError(self.platform, response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise PlatformAPIError(self.platform, response.status_code, f"invalid JSON: {e}")


class YouTubeAPI(PlatformClient):
    """YouTube Data API v3 client for one channel."""

    platform = "youtube"

    def __init__(
        self,
        api_key: str,
        channel_id: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(timeout, transport)
        self.api_key = api_key
        self.channel_id = channel_id
        self.rng = rng or random.Random()

    async def get_channel_stats(self) -> dict[str, Any]:
        """
        Fetch subscriber, view and video counts for the channel.

        Raises:
            PlatformAPIError: If the API call fails or the channel is missing
        """
        data = await self._get_json(
            YOUTUBE_CHANNELS_URL,
            params={"part": "statistics,snippet", "id": self.channel_id, "key": self.api_key},
        )
        try:
            channel = data["items"][0]
            statistics = channel["statistics"]
            return {
                "subscribers": int(statistics["subscriberCount"]),
                "totalViews": int(statistics["viewCount"]),
                "videoCount": int(statistics["videoCount"]),
                "title": channel["snippet"]["title"],
            }
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise PlatformAPIError(self.platform, 200, f"unexpected channel payload: {e}")

    async def get_recent_videos(self, max_results: int = 10) -> list[dict[str, Any]]:
        """Fetch the channel's most recent uploads, newest first."""
        data = await self._get_json(
            YOUTUBE_SEARCH_URL,
            params={
                "part": "snippet",
                "channelId": self.channel_id,
                "maxResults": max_results,
                "order": "date",
                "type": "video",
                "key": self.api_key,
            },
        )
        try:
            return [
                {
                    "id": item["id"]["videoId"],
                    "title": item["snippet"]["title"],
                    "description": item["snippet"]["description"],
                    "thumbnail": item["snippet"]["thumbnails"]["medium"]["url"],
                    "publishedAt": item["snippet"]["publishedAt"],
                }
                for item in data.get("items", [])
            ]
        except (KeyError, TypeError) as e:
            raise PlatformAPIError(self.platform, 200, f"unexpected search payload: {e}")

    async def get_video_analytics(self) -> dict[str, int]:
        """
        Simulated analytics.

        The Analytics API needs OAuth, so these figures are random placeholders.
        """
        return {
            "views": self.rng.randrange(10000),
            "revenue": self.rng.randrange(100),
            "engagement": self.rng.randrange(1000),
        }


class TikTokAPI(PlatformClient):
    """TikTok Open API client for the authorized user."""

    platform = "tiktok"

    def __init__(
        self,
        access_token: str,
        simulation_mode: bool = True,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(timeout, transport)
        self.access_token = access_token
        self.simulation_mode = simulation_mode

    async def get_user_info(self) -> dict[str, Any]:
        """
        Fetch follower and like counts.

        In simulation mode an unreachable API yields demo figures instead of an error.
        """
        try:
            data = await self._get_json(
                TIKTOK_USER_INFO_URL,
                headers={"Authorization": f"Bearer {self.access_token}"},
            )
            user = data["data"]
            return {
                "username": user["username"],
                "displayName": user["display_name"],
                "followerCount": user["follower_count"],
                "followingCount": user["following_count"],
                "likesCount": user["likes_count"],
            }
        except (PlatformAPIError, KeyError, TypeError) as e:
            logger.error(f"TikTok API error: {e}")
            if not self.simulation_mode:
                if isinstance(e, PlatformAPIError):
                    raise
                raise PlatformAPIError(self.platform, 200, f"unexpected user payload: {e}")
            return dict(DEMO_TIKTOK_USER)

    async def get_video_list(self) -> list[dict[str, Any]]:
        # No video list scope yet; static sample
        now = datetime.now(timezone.utc).isoformat()
        return [
            {
                "id": "1",
                "title": "AI Video Creation Tips",
                "viewCount": 12500,
                "likeCount": 890,
                "shareCount": 45,
                "createTime": now,
            },
            {
                "id": "2",
                "title": "Monetization Strategies",
                "viewCount": 8300,
                "likeCount": 567,
                "shareCount": 23,
                "createTime": now,
            },
        ]


class PatreonAPI(PlatformClient):
    """Patreon API v2 client for the creator's campaign."""

    platform = "patreon"

    def __init__(
        self,
        access_token: str,
        simulation_mode: bool = True,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(timeout, transport)
        self.access_token = access_token
        self.simulation_mode = simulation_mode

    async def get_campaign_info(self) -> dict[str, Any]:
        """
        Fetch patron count and monthly pledges (converted from cents).

        In simulation mode an unreachable API yields demo figures instead of an error.
        """
        try:
            data = await self._get_json(
                PATREON_CAMPAIGNS_URL,
                headers={"Authorization": f"Bearer {self.access_token}"},
                params={
                    "include": "creator",
                    "fields[campaign]": "creation_name,patron_count,pledge_sum",
                },
            )
            attributes = data["data"][0]["attributes"]
            return {
                "name": attributes["creation_name"],
                "patronCount": attributes["patron_count"],
                "monthlyRevenue": attributes["pledge_sum"] / 100,
            }
        except (PlatformAPIError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Patreon API error: {e}")
            if not self.simulation_mode:
                if isinstance(e, PlatformAPIError):
                    raise
                raise PlatformAPIError(self.platform, 200, f"unexpected campaign payload: {e}")
            return dict(DEMO_PATREON_CAMPAIGN)

    async def get_recent_posts(self) -> list[dict[str, Any]]:
        now = datetime.now(timezone.utc).isoformat()
        return [
            {
                "id": "1",
                "title": "Behind the Scenes: AI Video Creation",
                "publishedAt": now,
                "likesCount": 23,
                "commentsCount": 8,
            },
            {
                "id": "2",
                "title": "Monthly Revenue Report",
                "publishedAt": now,
                "likesCount": 45,
                "commentsCount": 12,
            },
        ]
