# healthblog/dependencies/dependencies.py

"""Repository, service and query-parameter dependencies."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from healthblog.configs.settings import DEFAULT_PAGE_SIZE, MAX_PAGE_NUMBER, MAX_PAGE_SIZE
from healthblog.db import SessionFactory, get_session, get_session_factory
from healthblog.repositories import (
    BlogRepository,
    CategoryRepository,
    SubscriberRepository,
    UserRepository,
)
from healthblog.schemas.blog import BlogFilters
from healthblog.services import (
    AdminService,
    AuthService,
    BlogService,
    BookmarkService,
    CategoryService,
    NewsletterService,
)

SessionDep = Annotated[AsyncSession, Depends(get_session)]
SessionFactoryDep = Annotated[SessionFactory, Depends(get_session_factory)]


def get_user_repository(session: SessionDep) -> UserRepository:
    return UserRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    return BlogRepository(session)


def get_category_repository(session: SessionDep) -> CategoryRepository:
    return CategoryRepository(session)


def get_subscriber_repository(session: SessionDep) -> SubscriberRepository:
    return SubscriberRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
CategoryRepoDep = Annotated[CategoryRepository, Depends(get_category_repository)]
SubscriberRepoDep = Annotated[SubscriberRepository, Depends(get_subscriber_repository)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    return AuthService(user_repo)


def get_blog_service(blog_repo: BlogRepoDep, user_repo: UserRepoDep) -> BlogService:
    return BlogService(blog_repo, user_repo)


def get_bookmark_service(user_repo: UserRepoDep, blog_repo: BlogRepoDep) -> BookmarkService:
    return BookmarkService(user_repo, blog_repo)


def get_category_service(category_repo: CategoryRepoDep) -> CategoryService:
    return CategoryService(category_repo)


def get_newsletter_service(subscriber_repo: SubscriberRepoDep) -> NewsletterService:
    return NewsletterService(subscriber_repo)


def get_admin_service(
    user_repo: UserRepoDep,
    blog_repo: BlogRepoDep,
    session_factory: SessionFactoryDep,
) -> AdminService:
    """
    Dependency to get AdminService.

    The session factory lets dashboard counts run on their own sessions.
    """
    return AdminService(user_repo, blog_repo, session_factory)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
BookmarkServiceDep = Annotated[BookmarkService, Depends(get_bookmark_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
NewsletterServiceDep = Annotated[NewsletterService, Depends(get_newsletter_service)]
AdminServiceDep = Annotated[AdminService, Depends(get_admin_service)]


@dataclass(frozen=True)
class PageQuery:
    """
    Query container for pagination.

    Parameters
    ----------
    page : int
        1-based page number.
    limit : int
        Page size.
    """

    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE


def get_page_query(
    page: Annotated[
        int,
        Query(ge=1, le=MAX_PAGE_NUMBER, description="Page number (1-based)"),
    ] = 1,
    limit: Annotated[
        int,
        Query(ge=1, le=MAX_PAGE_SIZE, description="Maximum number of records per page"),
    ] = DEFAULT_PAGE_SIZE,
) -> PageQuery:
    return PageQuery(page=page, limit=limit)


PageQueryDep = Annotated[PageQuery, Depends(get_page_query)]


def split_tags(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated tag list, dropping blanks."""
    if not raw:
        return ()
    return tuple(tag for part in raw.split(",") if (tag := part.strip()))


def get_blog_filters(
    category: Annotated[str | None, Query(description="Exact category name")] = None,
    tags: Annotated[str | None, Query(description="Comma-separated tags (any match)")] = None,
    search: Annotated[
        str | None,
        Query(description="Case-insensitive text to find in title or content"),
    ] = None,
) -> BlogFilters:
    """
    Dependency to construct `BlogFilters` from query parameters.

    Returns
    -------
    BlogFilters
        Filters to AND together; blank values are ignored.
    """
    return BlogFilters(
        category=category.strip() if category and category.strip() else None,
        tags=split_tags(tags),
        search=search if search and search.strip() else None,
    )


BlogFiltersDep = Annotated[BlogFilters, Depends(get_blog_filters)]
