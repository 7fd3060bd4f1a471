from dataclasses import dataclass
from typing import Optional

import httpx

from core.api import ApiClient, AuthApi, CatalogApi, SessionManager
from core.config_loader import ApiConfig, AppConfig
from core.skill_gap_service import SkillGapService


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    The API client, both endpoint wrappers and the skill gap service share
    one SessionManager, so a token refresh triggered by any of them is seen
    by all.
    """
    config: AppConfig
    session_manager: SessionManager
    api_client: ApiClient
    auth: AuthApi
    catalog: CatalogApi
    skill_gap_service: SkillGapService

    @classmethod
    def build(
        cls,
        config: AppConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration
            transport: Optional httpx transport for the API client

        Returns:
            Fully wired AppContext instance (anonymous session)
        """
        session_manager = SessionManager()
        api_client = cls._build_api_client(config.api, session_manager, transport)

        auth = AuthApi(api_client)
        catalog = CatalogApi(api_client)

        skill_gap_service = SkillGapService(
            catalog=catalog,
            auth=auth,
            analysis_config=config.analysis,
            export_config=config.export,
        )

        return cls(
            config=config,
            session_manager=session_manager,
            api_client=api_client,
            auth=auth,
            catalog=catalog,
            skill_gap_service=skill_gap_service,
        )

    @staticmethod
    def _build_api_client(
        api_config: ApiConfig,
        session_manager: SessionManager,
        transport: Optional[httpx.AsyncBaseTransport]
    ) -> ApiClient:
        """Build the job catalog client from configuration."""
        return ApiClient(
            base_url=api_config.base_url,
            api_prefix=api_config.api_prefix,
            request_timeout_seconds=api_config.request_timeout_seconds,
            session_manager=session_manager,
            transport=transport,
        )

    async def close(self):
        await self.api_client.close()
