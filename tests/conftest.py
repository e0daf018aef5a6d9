"""Shared fixtures for the test suite."""

import pytest

from surat_ui.data.demo_letters import DEMO_USERS
from surat_ui.models.letter import Letter
from surat_ui.services.letter_service_demo import DemoLetterService
from surat_ui.session import Session


def make_letter(letter_id: int, **overrides) -> Letter:
    """Build a letter with sensible defaults for tests."""
    values = dict(
        id=letter_id,
        reference_number=f"{letter_id}/SP/EP/I/2025",
        company_id=1,
        category_id=1,
        subject=f"Perihal {letter_id}",
        recipient=f"Tujuan {letter_id}",
        letter_date="2025-01-05",
        company_name="PT. EZRA",
        company_code="EP",
        category_name="Penawaran",
        category_code="SP",
    )
    values.update(overrides)
    return Letter(**values)


@pytest.fixture
def super_admin():
    return next(user for user in DEMO_USERS if user.is_super_admin)


@pytest.fixture
def admin():
    return next(user for user in DEMO_USERS if not user.is_super_admin)


@pytest.fixture
def super_admin_service(super_admin):
    """Demo service logged in as the super admin."""
    return DemoLetterService(Session(token="demo-token-1", user=super_admin))


@pytest.fixture
def admin_service(admin):
    """Demo service logged in as the company admin."""
    return DemoLetterService(Session(token="demo-token-2", user=admin))
