"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from bloglist.adapters.memory_repositories import (
    InMemoryBlogRepository,
    InMemorySessionRepository,
    InMemoryUserRepository,
)
from bloglist.adapters.supabase_blog_repository import SupabaseBlogRepository
from bloglist.adapters.supabase_user_repository import SupabaseUserRepository
from bloglist.config import Settings, parse_storage_backend
from bloglist.services.blogs import BlogRepository, BlogService
from bloglist.services.maintenance import ResetService
from bloglist.services.ranking import RankingService
from bloglist.services.sessions import SessionRepository, SessionService
from bloglist.services.users import UserRepository, UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    session_service: SessionService
    blog_service: BlogService
    ranking_service: RankingService
    reset_service: ResetService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    backend = parse_storage_backend(resolved_settings.storage_backend)

    user_repository: UserRepository
    blog_repository: BlogRepository
    if backend == "supabase":
        if not (
            resolved_settings.supabase_url and resolved_settings.supabase_service_key
        ):
            raise ValueError(
                "supabase_url and supabase_service_key are required for Supabase storage"
            )
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        user_repository = SupabaseUserRepository(supabase_client)
        blog_repository = SupabaseBlogRepository(supabase_client)
    else:
        user_repository = InMemoryUserRepository()
        blog_repository = InMemoryBlogRepository()
    # Sessions are process-local regardless of the storage backend.
    session_repository = InMemorySessionRepository()

    return assemble_container(
        resolved_settings,
        user_repository=user_repository,
        blog_repository=blog_repository,
        session_repository=session_repository,
    )


def assemble_container(
    settings: Settings,
    *,
    user_repository: UserRepository,
    blog_repository: BlogRepository,
    session_repository: SessionRepository,
) -> AppContainer:
    """Build services on top of the given repositories."""
    user_service = UserService(
        user_repository, min_credential_length=settings.min_credential_length
    )
    session_service = SessionService(
        user_repository=user_repository,
        session_repository=session_repository,
        token_bytes=settings.session_token_bytes,
    )
    blog_service = BlogService(blog_repository, session_service)
    return AppContainer(
        settings=settings,
        user_service=user_service,
        session_service=session_service,
        blog_service=blog_service,
        ranking_service=RankingService(blog_service),
        reset_service=ResetService(
            user_repository=user_repository,
            session_repository=session_repository,
            blog_repository=blog_repository,
        ),
    )
