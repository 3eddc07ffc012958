"""Shared pytest fixtures and configuration."""

from datetime import date

import pytest

from roster.students import InMemoryStudentRepository, StudentService

# Fixed "today" so age and future-date checks are deterministic
TODAY = date(2024, 6, 15)


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def repository() -> InMemoryStudentRepository:
    """Create an empty in-memory repository."""
    return InMemoryStudentRepository()


@pytest.fixture
def service(repository: InMemoryStudentRepository) -> StudentService:
    """Create a StudentService over the shared repository with a fixed clock."""
    return StudentService(repository, clock=lambda: TODAY)
