"""
Dependency Injection Container implementing Factory and Singleton patterns.
Provides centralized dependency management with lazy initialization.
"""

from functools import lru_cache
from typing import Optional

from codeshelf.application.use_cases.auth_use_cases import AuthUseCases
from codeshelf.application.use_cases.snippet_use_cases import SnippetUseCases
from codeshelf.application.use_cases.tag_use_cases import TagUseCases
from codeshelf.domain.repositories.interfaces import (
    SnippetRepository,
    TagRepository,
    UserRepository,
)
from codeshelf.domain.services.complexity_service import ComplexityAnalysisService
from codeshelf.infrastructure.persistence.memory_repositories import (
    InMemorySnippetRepository,
    InMemoryTagRepository,
    InMemoryUserRepository,
)
from codeshelf.infrastructure.persistence.repositories import (
    MongoSnippetRepository,
    MongoTagRepository,
    MongoUserRepository,
)
from codeshelf.infrastructure.security.tokens import TokenService
from codeshelf.shared.config import settings


class DependencyContainer:
    """
    Dependency injection container managing application-wide dependencies.
    Implements Singleton pattern for repositories and use cases.

    Repository adapters are picked from ``settings.storage_backend`` the
    first time they are requested and cached afterwards.
    """

    _instance: Optional["DependencyContainer"] = None

    def __new__(cls) -> "DependencyContainer":
        """
        Ensure single instance of container (Singleton pattern).

        Returns:
            Singleton DependencyContainer instance
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def uses_mongodb(self) -> bool:
        return settings.storage_backend == "mongodb"

    # ===== Repository Factories =====

    @lru_cache(maxsize=1)
    def get_user_repository(self) -> UserRepository:
        """
        Get singleton user repository instance.

        Returns:
            UserRepository implementation (MongoDB or in-memory)
        """
        return MongoUserRepository() if self.uses_mongodb else InMemoryUserRepository()

    @lru_cache(maxsize=1)
    def get_snippet_repository(self) -> SnippetRepository:
        """
        Get singleton snippet repository instance.

        Returns:
            SnippetRepository implementation (MongoDB or in-memory)
        """
        return MongoSnippetRepository() if self.uses_mongodb else InMemorySnippetRepository()

    @lru_cache(maxsize=1)
    def get_tag_repository(self) -> TagRepository:
        return MongoTagRepository() if self.uses_mongodb else InMemoryTagRepository()

    # ===== Service Factories =====

    @lru_cache(maxsize=1)
    def get_token_service(self) -> TokenService:
        return TokenService()

    @lru_cache(maxsize=1)
    def get_complexity_service(self) -> ComplexityAnalysisService:
        return ComplexityAnalysisService()

    # ===== Use Case Factories =====

    @lru_cache(maxsize=1)
    def get_auth_use_cases(self) -> AuthUseCases:
        """
        Get singleton auth use cases instance.

        Returns:
            AuthUseCases with injected user repository and token service
        """
        return AuthUseCases(self.get_user_repository(), self.get_token_service())

    @lru_cache(maxsize=1)
    def get_snippet_use_cases(self) -> SnippetUseCases:
        """
        Get singleton snippet use cases instance.

        Returns:
            SnippetUseCases with injected snippet and user repositories
        """
        return SnippetUseCases(
            self.get_snippet_repository(),
            self.get_user_repository(),
            analyzer=self.get_complexity_service(),
            auto_analyze=settings.auto_analyze_complexity,
            max_code_length=settings.max_code_length,
        )

    @lru_cache(maxsize=1)
    def get_tag_use_cases(self) -> TagUseCases:
        return TagUseCases(self.get_tag_repository())

    def clear_cache(self) -> None:
        """
        Clear all cached dependencies.
        Useful for testing or resetting container state.
        """
        self.get_user_repository.cache_clear()
        self.get_snippet_repository.cache_clear()
        self.get_tag_repository.cache_clear()
        self.get_token_service.cache_clear()
        self.get_complexity_service.cache_clear()
        self.get_auth_use_cases.cache_clear()
        self.get_snippet_use_cases.cache_clear()
        self.get_tag_use_cases.cache_clear()


# ===== Global Container Instance =====

container = DependencyContainer()
