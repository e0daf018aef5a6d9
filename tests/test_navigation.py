"""Tests for the role-gated menu."""

from surat_ui.navigation import can_open, menu_for


class TestMenu:
    """Tests for menu_for and can_open."""

    def test_logged_out_sees_nothing(self):
        assert menu_for(None) == []
        assert not can_open(None, "data-surat")

    def test_admin_menu(self, admin):
        ids = [item.id for item in menu_for(admin)]

        assert ids == ["dashboard", "data-surat", "tambah-surat", "kategori-surat", "laporan"]
        assert not can_open(admin, "data-perusahaan")

    def test_super_admin_sees_companies(self, super_admin):
        assert can_open(super_admin, "data-perusahaan")
        assert len(menu_for(super_admin)) == 6

    def test_dashboard_is_home(self, admin):
        assert menu_for(admin)[0].route == "/"

    def test_routes_are_unique(self, super_admin):
        routes = [item.route for item in menu_for(super_admin)]

        assert len(routes) == len(set(routes))
