"""
Page shell for authenticated pages.

Every page gets the role-gated sidebar and the header. The user box at
the bottom of the sidebar links to the profile page and holds the
logout button.
"""

import reflex as rx

from surat_ui import config
from surat_ui.models.reflex_models import MenuItemModel
from surat_ui.navigation import MENU_ITEMS
from surat_ui.state import PROFILE_ROUTE, AuthState


def page_shell(title: str, subtitle: str, *children: rx.Component) -> rx.Component:
    """
    Wrap page content with the sidebar and header.

    Args:
        title: Page heading.
        subtitle: Muted text under the heading.
        children: Page body components.

    Returns:
        The complete page component.
    """
    return rx.box(
        sidebar(),
        rx.box(
            page_header(title, subtitle),
            *children,
            class_name="app-container",
        ),
        class_name="app-shell",
    )


def page_header(title: str, subtitle: str) -> rx.Component:
    """Build the text area at the top of the page."""
    return rx.box(
        rx.heading(title, size="6", as_="h1"),
        rx.text(subtitle, class_name="muted"),
        class_name="page-header",
    )


def sidebar() -> rx.Component:
    return rx.box(
        rx.box(
            rx.icon("mail", class_name="title-icon"),
            rx.text(config.APP_TITLE, class_name="brand"),
            class_name="sidebar-brand",
        ),
        rx.vstack(
            rx.foreach(AuthState.menu_items, _menu_link),
            spacing="1",
            width="100%",
        ),
        rx.spacer(),
        rx.box(
            rx.link(
                rx.text(AuthState.user_name, weight="medium"),
                rx.text(AuthState.role_label, class_name="muted"),
                rx.cond(
                    AuthState.user_company != "",
                    rx.text(AuthState.user_company, class_name="muted"),
                ),
                href=PROFILE_ROUTE,
                underline="none",
                title="Profil Saya",
            ),
            rx.button(
                rx.icon("log-out", size=16),
                "Keluar",
                variant="soft",
                color_scheme="gray",
                width="100%",
                on_click=AuthState.logout,
            ),
            class_name="sidebar-user",
        ),
        class_name="sidebar",
    )


def _menu_link(item: MenuItemModel) -> rx.Component:
    return rx.link(
        rx.hstack(
            _menu_icon(item.icon),
            rx.text(item.label),
            align="center",
            spacing="2",
        ),
        href=item.route,
        class_name="menu-link",
        underline="none",
    )


def _menu_icon(icon: rx.Var) -> rx.Component:
    """Icons must be known at compile time, so match the menu's icon names."""
    return rx.match(
        icon,
        *[(item.icon, rx.icon(item.icon, size=18)) for item in MENU_ITEMS],
        rx.icon("circle", size=18),
    )
