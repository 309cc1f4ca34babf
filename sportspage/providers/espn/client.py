"""ESPN API HTTP client.

Handles raw HTTP requests to ESPN endpoints.
No data transformation - just fetch and return JSON.
Every failure resolves to None so one bad request only empties its own slice.
"""

import logging
import ssl
import threading
import time

import httpx

from sportspage.core import League

logger = logging.getLogger(__name__)

ESPN_BASE_URL = "https://site.api.espn.com/apis/site/v2/sports"
ESPN_STANDINGS_URL = "https://site.web.api.espn.com/apis/v2/sports"

# Rate limiting defaults
DEFAULT_REQUESTS_PER_SECOND = 10.0  # Max sustained request rate
DEFAULT_BURST_SIZE = 30  # One refresh issues ~40 requests


class RateLimiter:
    """Token bucket rate limiter for API requests.

    Allows bursts up to bucket_size, then limits to rate requests/second.
    Thread-safe for concurrent use.
    """

    def __init__(self, rate: float = DEFAULT_REQUESTS_PER_SECOND, bucket_size: int = DEFAULT_BURST_SIZE):
        self._rate = rate
        self._bucket_size = bucket_size
        self._tokens = float(bucket_size)
        self._last_update = time.monotonic()
        self._lock = threading.Lock()

    def acquire(self) -> None:
        """Block until a token is available."""
        with self._lock:
            now = time.monotonic()
            elapsed = now - self._last_update
            self._tokens = min(self._bucket_size, self._tokens + elapsed * self._rate)
            self._last_update = now

            if self._tokens >= 1.0:
                self._tokens -= 1.0
                return

            wait_time = (1.0 - self._tokens) / self._rate
            self._tokens = 0.0

        # Wait outside the lock
        time.sleep(wait_time)


class ESPNClient:
    """Low-level ESPN API client with rate limiting.

    retry_count=1 means a single attempt; periodic refresh is the
    recovery mechanism.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        retry_count: int = 1,
        retry_delay: float = 1.0,
        requests_per_second: float = DEFAULT_REQUESTS_PER_SECOND,
        burst_size: int = DEFAULT_BURST_SIZE,
    ):
        self._timeout = timeout
        self._retry_count = max(1, retry_count)
        self._retry_delay = retry_delay
        self._client: httpx.Client | None = None
        self._lock = threading.Lock()
        self._rate_limiter = RateLimiter(rate=requests_per_second, bucket_size=burst_size)

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            with self._lock:
                # Double-check after acquiring lock
                if self._client is None:
                    self._client = httpx.Client(
                        timeout=self._timeout,
                        limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
                        headers={"User-Agent": "sportspage/1.0"},
                    )
        return self._client

    def _is_ssl_error(self, error: Exception) -> bool:
        """Check if an error is SSL-related."""
        if isinstance(error, ssl.SSLError):
            return True
        error_str = str(error).lower()
        return "ssl" in error_str or "eof occurred" in error_str

    def _request(self, url: str, params: dict | None = None) -> dict | None:
        """Make HTTP request with rate limiting. Returns None on any failure."""
        for attempt in range(self._retry_count):
            try:
                self._rate_limiter.acquire()

                client = self._get_client()
                response = client.get(url, params=params)
                response.raise_for_status()
                return response.json()
            except httpx.HTTPStatusError as e:
                logger.warning("[ESPN] HTTP %s for %s", e.response.status_code, url)
            except ValueError as e:
                # Body was not JSON
                logger.warning("[ESPN] Invalid JSON from %s: %s", url, e)
                return None
            except (httpx.RequestError, RuntimeError, OSError) as e:
                # RuntimeError: "Cannot send a request, as the client has been closed"
                # OSError: "Bad file descriptor" from stale connections
                logger.warning("[ESPN] Request failed for %s: %s", url, e)

                if self._is_ssl_error(e):
                    logger.info("[ESPN] SSL error detected, resetting connection pool")
                    self._reset_client()

            if attempt < self._retry_count - 1:
                time.sleep(self._retry_delay * (attempt + 1))

        return None

    def _reset_client(self) -> None:
        """Reset the HTTP client to clear stale connections."""
        with self._lock:
            if self._client:
                try:
                    self._client.close()
                except (httpx.HTTPError, RuntimeError, OSError) as e:
                    logger.debug("[ESPN] Ignoring error while closing client: %s", e)
                self._client = None

    def get_scoreboard(self, league: League, date_str: str) -> dict | None:
        """Fetch scoreboard for a league on a given date.

        Args:
            league: League to fetch
            date_str: Date in YYYYMMDD format

        Returns:
            Raw ESPN response or None on error
        """
        url = f"{ESPN_BASE_URL}/{league.feed_path}/scoreboard"
        return self._request(url, {"dates": date_str})

    def get_standings(self, league: League) -> dict | None:
        """Fetch standings groups for a league.

        Standings live on a different host than the rest of the site API.
        """
        url = f"{ESPN_STANDINGS_URL}/{league.feed_path}/standings"
        return self._request(url)

    def get_teams(self, league: League) -> dict | None:
        """Fetch all teams for a league."""
        url = f"{ESPN_BASE_URL}/{league.feed_path}/teams"
        return self._request(url, {"limit": 1000})

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None
