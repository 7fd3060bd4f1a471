import yaml
import os
import logging
from typing import Optional
from pydantic import BaseModel, Field

from core.ranking.filters import SortBy

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"


class ApiConfig(BaseModel):
    """Upstream job catalog service."""
    base_url: str = "http://localhost:8000"
    api_prefix: str = "/api/v1"
    request_timeout_seconds: float = 30.0


class ThresholdsConfig(BaseModel):
    """Lower bounds of the match distribution buckets (percent)."""
    excellent: int = 80
    good: int = 60
    fair: int = 40


class AnalysisConfig(BaseModel):
    """
    Configuration for cohort analysis (ranking, skill demand, summary).
    """
    top_skills_limit: int = 10  # Compact skill demand view
    default_sort_by: SortBy = SortBy.MISSING_SKILLS_ASC
    thresholds: ThresholdsConfig = Field(default_factory=ThresholdsConfig)


class ExportConfig(BaseModel):
    filename: str = "skill-analysis.csv"
    output_dir: str = "."
    line_terminator: str = "\n"  # "\n" or "\r\n"


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080
    login_rate_limit: str = "5/minute"
    cors_origins: list = Field(default_factory=lambda: ["*"])


class AppConfig(BaseModel):
    api: ApiConfig = Field(default_factory=ApiConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    web: WebConfig = Field(default_factory=WebConfig)


def load_config(config_path: Optional[str] = None) -> AppConfig:
    config_path = config_path or os.environ.get("SKILLSCOUT_CONFIG", DEFAULT_CONFIG_PATH)

    # If not found at relative path (e.g. running from another directory), try the repo root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", os.path.basename(config_path))

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.warning(f"Config file {config_path} not found, using defaults")

    # Allow env var override for the upstream API URL
    env_api_url = os.environ.get("SKILLSCOUT_API_URL")
    if env_api_url:
        if data.get('api') is None:
            data['api'] = {}
        data['api']['base_url'] = env_api_url

    # Allow env var override for the web server bind address
    env_web_host = os.environ.get("WEB_HOST")
    env_web_port = os.environ.get("WEB_PORT")
    if env_web_host or env_web_port:
        if data.get('web') is None:
            data['web'] = {}
        if env_web_host:
            data['web']['host'] = env_web_host
        if env_web_port:
            data['web']['port'] = int(env_web_port)

    return AppConfig(**data)
