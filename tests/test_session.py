"""Tests for the explicit session object."""

from surat_ui.models.letter import User
from surat_ui.session import Session


class TestSession:
    """Tests for the session lifecycle and role helpers."""

    def test_new_session_is_anonymous(self):
        session = Session()

        assert not session.is_authenticated
        assert session.auth_headers() == {}
        assert session.company_scope is None

    def test_start_and_end(self, admin):
        session = Session()

        session.start("token-1", admin)
        assert session.is_authenticated
        assert session.auth_headers() == {"Authorization": "Bearer token-1"}

        session.end()
        assert not session.is_authenticated
        assert session.user is None

    def test_admin_is_scoped_to_company(self, admin):
        assert Session("t", admin).company_scope == admin.company_id

    def test_super_admin_is_not_scoped(self, super_admin):
        session = Session("t", super_admin)

        assert session.is_super_admin
        assert session.company_scope is None

    def test_dict_round_trip(self, admin):
        restored = Session.from_dict(Session("t", admin).to_dict())

        assert restored.token == "t"
        assert restored.user == admin

    def test_from_empty_dict(self):
        assert not Session.from_dict({}).is_authenticated
        assert not Session.from_dict(None).is_authenticated

    def test_update_user(self, admin):
        session = Session("t", admin)
        renamed = User(id=admin.id, name="Baru", email=admin.email, role=admin.role, company_id=1)

        session.update_user(renamed)

        assert session.user.name == "Baru"
