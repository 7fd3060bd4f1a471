"""API Module - Job catalog client, session handling and endpoint wrappers."""
from core.api.session import AuthState, Session, SessionManager
from core.api.client import ApiClient, RequestContext, error_for_status
from core.api.auth import AuthApi, UserProfile, parse_skills_input
from core.api.catalog import CatalogApi, Page, SkillSearchRequest, parse_recommendation
from core.api.generations import GenerationGuard

__all__ = [
    'AuthState', 'Session', 'SessionManager',
    'ApiClient', 'RequestContext', 'error_for_status',
    'AuthApi', 'UserProfile', 'parse_skills_input',
    'CatalogApi', 'Page', 'SkillSearchRequest', 'parse_recommendation',
    'GenerationGuard'
]
