"""
Dishka DI Container Setup.

Two providers:
- UseCaseProvider (here): builds use cases from the ABSTRACT repository ports
- PrismaProvider (persistence.py): maps the ports to Prisma implementations

Tests swap PrismaProvider for one that hands out in-memory repositories:

    container = create_container(InMemoryProvider(...))

Flow:
  Container → provides → PrismaThreadRepository → to → AddThreadUseCase
                                    ↓
                            uses ThreadRepository interface
"""

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from src.application.commands.comments import AddCommentUseCase, DeleteCommentUseCase
from src.application.commands.threads import AddThreadUseCase
from src.application.queries.threads import GetDetailThreadUseCase
from src.domain.ports.repositories import CommentRepository, ThreadRepository


class UseCaseProvider(Provider):
    """
    Registers the use cases.

    Each handler asks for ThreadRepository / CommentRepository (abstract);
    whichever repository provider is installed next to this one resolves them.
    """

    @provide(scope=Scope.REQUEST)
    def get_add_thread_use_case(
        self, thread_repository: ThreadRepository
    ) -> AddThreadUseCase:
        return AddThreadUseCase(thread_repository)

    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> AddCommentUseCase:
        return AddCommentUseCase(thread_repository, comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> DeleteCommentUseCase:
        return DeleteCommentUseCase(thread_repository, comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_detail_thread_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> GetDetailThreadUseCase:
        return GetDetailThreadUseCase(thread_repository, comment_repository)


def create_container(*repository_providers: Provider) -> AsyncContainer:
    """
    Create and configure the DI container.

    Without arguments the Prisma-backed repositories are used. The import is
    deferred because the Prisma client only exists after `prisma generate`.
    """
    if not repository_providers:
        from src.setup.ioc.persistence import PrismaProvider

        repository_providers = (PrismaProvider(),)

    return make_async_container(UseCaseProvider(), *repository_providers)
