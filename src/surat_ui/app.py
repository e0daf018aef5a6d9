"""
Reflex application entry point for the letter numbering UI.

This module initializes the Reflex app and registers the pages.
"""

import reflex as rx

from surat_ui import config
from surat_ui.components import (
    category_list,
    company_list,
    dashboard_view,
    delete_dialog,
    edit_dialog,
    filter_panel,
    letter_results,
    login_page,
    new_letter_form,
    page_shell,
    profile_view,
    report_view,
)
from surat_ui.lib import logs
from surat_ui.state import (
    LETTERS_ROUTE,
    PROFILE_ROUTE,
    AuthState,
    DashboardState,
    LetterState,
    LookupState,
    NewLetterState,
    ProfileState,
    ReportState,
)

LOG = logs.logger(__file__)

LOG.info("Letter service: %s", config.SERVICE_KIND)
if config.SERVICE_KIND == "impl":
    LOG.info("API URL: %s", config.API_URL)

_FONT_URL = "https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500&family=Source+Sans+3:ital,wght@0,300;0,400;0,500;0,600;0,700;1,400&display=swap"


def index() -> rx.Component:
    return page_shell(
        "Dashboard",
        "Sistem Penomoran Surat Otomatis",
        dashboard_view(),
    )


def letters() -> rx.Component:
    """
    Build the letter list page.

    Returns:
        The page component with filters, table and dialogs.
    """
    return page_shell(
        "Data Surat",
        "Cari, saring dan kelola surat yang sudah bernomor.",
        rx.hstack(
            rx.spacer(),
            rx.link(
                rx.button(rx.icon("file-plus", size=16), "Tambah Surat"),
                href="/surat/tambah",
            ),
        ),
        filter_panel(),
        letter_results(),
        edit_dialog(),
        delete_dialog(),
    )


def new_letter() -> rx.Component:
    return page_shell(
        "Tambah Surat",
        "Nomor surat dibuat otomatis setelah disimpan.",
        new_letter_form(),
    )


def categories() -> rx.Component:
    return page_shell("Kategori Surat", "Kategori dan kode yang dipakai pada nomor surat.", category_list())


def companies() -> rx.Component:
    return page_shell("Data Perusahaan", "Perusahaan dan kode yang dipakai pada nomor surat.", company_list())


def report() -> rx.Component:
    return page_shell("Laporan Surat", "Ringkasan jumlah surat per periode.", report_view())


def profile() -> rx.Component:
    return page_shell("Profil Saya", "Kelola informasi akun dan password Anda.", profile_view())


def login() -> rx.Component:
    return login_page()


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(index, route="/", title=config.APP_TITLE, on_load=DashboardState.on_load)
app.add_page(
    letters,
    route=LETTERS_ROUTE,
    title=f"Data Surat - {config.APP_TITLE}",
    on_load=LetterState.on_load,
)
app.add_page(
    new_letter,
    route="/surat/tambah",
    title=f"Tambah Surat - {config.APP_TITLE}",
    on_load=NewLetterState.on_load,
)
app.add_page(
    categories,
    route="/kategori",
    title=f"Kategori Surat - {config.APP_TITLE}",
    on_load=[AuthState.require_login, LookupState.load_lookups],
)
app.add_page(
    companies,
    route="/perusahaan",
    title=f"Data Perusahaan - {config.APP_TITLE}",
    on_load=[AuthState.require_super_admin, LookupState.load_lookups],
)
app.add_page(
    report,
    route="/laporan",
    title=f"Laporan Surat - {config.APP_TITLE}",
    on_load=ReportState.on_load,
)
app.add_page(
    profile,
    route=PROFILE_ROUTE,
    title=f"Profil Saya - {config.APP_TITLE}",
    on_load=ProfileState.on_load,
)
app.add_page(
    login,
    route="/login",
    title=f"Login - {config.APP_TITLE}",
    on_load=AuthState.redirect_if_logged_in,
)


def main() -> None:
    """Entrypoint used by the `surat-ui` script."""
    # In production, use `reflex run` instead
    import subprocess
    import sys

    subprocess.run([sys.executable, "-m", "reflex", "run", "--port", str(config.APP_PORT)])


if __name__ == "__main__":
    main()
