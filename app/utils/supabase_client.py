"""
Supabase Client Configuration
Async client handle for the clientes and usuarios tables
"""

from typing import Optional

from supabase import acreate_client, AsyncClient
import structlog

from app.config import Settings

logger = structlog.get_logger(__name__)


class SupabaseClient:
    """Supabase client wrapper, created once per application lifespan"""

    def __init__(self, settings: Settings):
        self.url: str = settings.supabase_url
        self.key: str = settings.supabase_key
        self.client: Optional[AsyncClient] = None

    async def initialize(self):
        """Create the async client if credentials are present"""
        if not (self.url and self.key):
            logger.warning("Supabase credentials not found in environment")
            return

        try:
            self.client = await acreate_client(self.url, self.key)
            logger.info("Supabase client initialized successfully", url=self.url)
        except Exception as e:
            logger.error("Failed to initialize Supabase client", error=str(e))
            self.client = None

    def get_client(self) -> Optional[AsyncClient]:
        """Get Supabase client instance"""
        return self.client

    def is_available(self) -> bool:
        """Check if Supabase is available and configured"""
        return self.client is not None

    async def close(self):
        """Close the postgrest HTTP session and drop the client"""
        if self.client is None:
            return

        try:
            await self.client.postgrest.aclose()
            logger.info("Supabase client closed")
        except Exception as e:
            logger.error("Failed to close Supabase client", error=str(e))
        finally:
            self.client = None
