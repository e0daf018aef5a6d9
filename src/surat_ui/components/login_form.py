"""Login page component."""

import reflex as rx

from surat_ui import config
from surat_ui.state import AuthState


def login_page() -> rx.Component:
    """
    Build the centered login card.

    Returns:
        The login page component.
    """
    return rx.center(
        rx.box(
            rx.vstack(
                rx.icon("mail", size=40, class_name="title-icon"),
                rx.heading(config.APP_TITLE, size="6", as_="h1"),
                rx.text(config.APP_SUBTITLE, class_name="muted"),
                rx.input(
                    placeholder="Email",
                    type="email",
                    value=AuthState.login_email,
                    on_change=AuthState.set_login_email,
                    width="100%",
                ),
                rx.input(
                    placeholder="Password",
                    type="password",
                    value=AuthState.login_password,
                    on_change=AuthState.set_login_password,
                    width="100%",
                ),
                rx.cond(
                    AuthState.login_error != "",
                    rx.callout(AuthState.login_error, icon="triangle-alert", color_scheme="red", width="100%"),
                ),
                rx.button(
                    "Masuk",
                    loading=AuthState.is_submitting,
                    on_click=AuthState.login,
                    width="100%",
                ),
                spacing="4",
                align="center",
            ),
            class_name="card login-card",
        ),
        class_name="app-shell login-shell",
        min_height="100vh",
    )
