"""
Role-gated navigation menu.

Every user sees the dashboard and the letter, category and report
pages; the company list is reserved for super admins. The profile page
is reached from the user box under the menu. The server enforces the
same rules, the menu only hides what would be refused.
"""

from dataclasses import dataclass
from typing import List, Tuple

from surat_ui.models.letter import ROLE_ADMIN, ROLE_SUPER_ADMIN, User


@dataclass(frozen=True, slots=True)
class MenuItem:
    """One entry of the sidebar."""

    id: str
    label: str
    icon: str
    route: str
    roles: Tuple[str, ...]


_EVERYONE = (ROLE_ADMIN, ROLE_SUPER_ADMIN)
_SUPER_ADMIN_ONLY = (ROLE_SUPER_ADMIN,)

MENU_ITEMS: Tuple[MenuItem, ...] = (
    MenuItem("dashboard", "Dashboard", "layout-dashboard", "/", _EVERYONE),
    MenuItem("data-surat", "Data Surat", "file-text", "/surat", _EVERYONE),
    MenuItem("tambah-surat", "Tambah Surat", "file-plus", "/surat/tambah", _EVERYONE),
    MenuItem("kategori-surat", "Kategori Surat", "folder-open", "/kategori", _EVERYONE),
    MenuItem("laporan", "Laporan Surat", "clipboard-list", "/laporan", _EVERYONE),
    MenuItem("data-perusahaan", "Data Perusahaan", "building-2", "/perusahaan", _SUPER_ADMIN_ONLY),
)


def menu_for(user: User | None) -> List[MenuItem]:
    """Return the menu entries the user's role may open; none when logged out."""
    if user is None:
        return []
    return [item for item in MENU_ITEMS if user.role in item.roles]


def can_open(user: User | None, item_id: str) -> bool:
    """Check whether the user may open the menu entry with item_id."""
    return any(item.id == item_id for item in menu_for(user))
