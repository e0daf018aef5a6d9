"""Profile page: account details, profile form and password change."""

import reflex as rx

from surat_ui.state import ProfileState


def profile_view() -> rx.Component:
    """Build the profile page body."""
    return rx.grid(
        rx.vstack(_account_card(), _profile_form(), spacing="4", width="100%"),
        _password_form(),
        columns="2",
        spacing="4",
    )


def _account_card() -> rx.Component:
    return rx.box(
        rx.hstack(
            rx.icon("circle-user", size=40, class_name="title-icon"),
            rx.vstack(
                rx.heading(ProfileState.user_name, size="4"),
                rx.text(ProfileState.user_email, class_name="muted"),
                spacing="1",
            ),
            align="center",
        ),
        rx.hstack(
            rx.badge(ProfileState.role_label, variant="soft"),
            rx.cond(
                ProfileState.user_company != "",
                rx.badge(ProfileState.user_company, variant="outline"),
            ),
            margin_top="1em",
        ),
        class_name="card summary-card",
        width="100%",
    )


def _profile_form() -> rx.Component:
    return rx.box(
        rx.text("Informasi Profil", class_name="label"),
        _field(
            "Nama",
            rx.input(value=ProfileState.profile_name, on_change=ProfileState.set_profile_name),
        ),
        _field(
            "Email",
            rx.input(
                value=ProfileState.profile_email,
                on_change=ProfileState.set_profile_email,
                type="email",
            ),
        ),
        rx.button(
            "Simpan Perubahan",
            on_click=ProfileState.save_profile,
            loading=ProfileState.is_saving_profile,
            disabled=(ProfileState.profile_name == "") | (ProfileState.profile_email == ""),
            margin_top="1em",
        ),
        class_name="card summary-card",
        width="100%",
    )


def _password_form() -> rx.Component:
    return rx.box(
        rx.text("Ubah Password", class_name="label"),
        _field(
            "Password Saat Ini",
            rx.input(
                value=ProfileState.current_password,
                on_change=ProfileState.set_current_password,
                type="password",
            ),
        ),
        _field(
            "Password Baru",
            rx.input(
                value=ProfileState.new_password,
                on_change=ProfileState.set_new_password,
                type="password",
            ),
        ),
        _field(
            "Konfirmasi Password Baru",
            rx.input(
                value=ProfileState.confirm_password,
                on_change=ProfileState.set_confirm_password,
                type="password",
            ),
        ),
        rx.cond(
            ProfileState.password_error != "",
            rx.callout(ProfileState.password_error, icon="triangle-alert", color_scheme="red"),
        ),
        rx.button(
            "Ubah Password",
            on_click=ProfileState.change_password,
            loading=ProfileState.is_saving_password,
            margin_top="1em",
        ),
        class_name="card summary-card",
        width="100%",
    )


def _field(label: str, control: rx.Component) -> rx.Component:
    return rx.box(rx.text(label, class_name="label"), control, width="100%", margin_top="0.75em")
