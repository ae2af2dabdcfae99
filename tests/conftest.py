"""
Pytest configuration and shared fixtures.
"""

import os
import sys
from datetime import date, timedelta
from typing import Optional

import pytest

sys.path.append(os.path.join(os.getcwd(), "src"))

from planscope.entities import Allocation, Cycle, CycleType, Epic, Person, Project, Team  # noqa: E402


QUARTER_ID = "q1-2024"


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> None:
    """Set up test environment variables."""
    os.environ.setdefault("APP_ENV", "test")
    os.environ.setdefault("DEBUG", "true")


# =============================================================================
# Entity Creation Helpers
# =============================================================================

def make_allocation(
    alloc_id: str,
    team_id: str,
    iteration_number: int,
    percentage: float,
    epic_id: Optional[str] = None,
    cycle_id: str = QUARTER_ID,
    run_work_category_id: Optional[str] = None,
) -> Allocation:
    """Helper to create allocations."""
    return Allocation(
        id=alloc_id,
        team_id=team_id,
        cycle_id=cycle_id,
        iteration_number=iteration_number,
        percentage=percentage,
        epic_id=epic_id,
        run_work_category_id=run_work_category_id,
    )


def make_iterations(count: int, quarter_id: str = QUARTER_ID):
    """Helper to create consecutive two-week iterations of a quarter."""
    start = date(2024, 1, 1)
    return [
        Cycle(
            id=f"iter{i + 1}",
            name=f"Q1 2024 - Iteration {i + 1}",
            type=CycleType.ITERATION,
            start_date=start + timedelta(days=14 * i),
            end_date=start + timedelta(days=14 * i + 13),
            parent_cycle_id=quarter_id,
        )
        for i in range(count)
    ]


def make_epics(project_id: str, count: int, prefix: str = "epic"):
    """Helper to create epics of one project."""
    return [
        Epic(id=f"{prefix}{i + 1}", name=f"Epic {i + 1}", project_id=project_id)
        for i in range(count)
    ]


@pytest.fixture
def allocation():
    """Fixture exposing the allocation helper."""
    return make_allocation


@pytest.fixture
def create_epics():
    """Fixture exposing the epic helper."""
    return make_epics


@pytest.fixture
def create_iterations():
    """Fixture exposing the iteration helper."""
    return make_iterations


# =============================================================================
# Test Data Fixtures
# =============================================================================

@pytest.fixture
def teams():
    return [
        Team(id="team1", name="Frontend Team", capacity=40),
        Team(id="team2", name="Backend Team", capacity=40),
    ]


@pytest.fixture
def iterations():
    return make_iterations(6)


@pytest.fixture
def projects():
    return [Project(id="proj1", name="Mobile App", status="active")]


@pytest.fixture
def epics():
    return [
        Epic(id="epic1", name="User Authentication", project_id="proj1"),
        Epic(id="epic2", name="Dashboard", project_id="proj1"),
    ]


@pytest.fixture
def people():
    return [
        Person(id="person1", name="John Doe", team_id="team1", role_id="role1"),
    ]
