from healthblog.dependencies.dependencies import (
    AdminServiceDep,
    AuthServiceDep,
    BlogFiltersDep,
    BlogRepoDep,
    BlogServiceDep,
    BookmarkServiceDep,
    CategoryRepoDep,
    CategoryServiceDep,
    NewsletterServiceDep,
    PageQuery,
    PageQueryDep,
    SessionDep,
    SessionFactoryDep,
    SubscriberRepoDep,
    UserRepoDep,
    get_blog_filters,
    get_page_query,
    split_tags,
)

__all__ = [
    "AdminServiceDep",
    "AuthServiceDep",
    "BlogFiltersDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "BookmarkServiceDep",
    "CategoryRepoDep",
    "CategoryServiceDep",
    "NewsletterServiceDep",
    "PageQuery",
    "PageQueryDep",
    "SessionDep",
    "SessionFactoryDep",
    "SubscriberRepoDep",
    "UserRepoDep",
    "get_blog_filters",
    "get_page_query",
    "split_tags",
]
