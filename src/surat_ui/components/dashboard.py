"""
Dashboard page components.

Three headline figures, the letters per month for the last year, the
letters per company and the five most recent letters.
"""

import reflex as rx

from surat_ui.models.reflex_models import CountRowModel, LetterModel
from surat_ui.state import LETTERS_ROUTE, DashboardState


def dashboard_view() -> rx.Component:
    """Build the dashboard body."""
    return rx.cond(
        DashboardState.is_loading,
        rx.box(
            rx.box(class_name="spinner"),
            rx.text("Memuat dashboard...", class_name="muted"),
            class_name="card loading-state",
        ),
        rx.box(
            rx.grid(
                _figure("Total Surat", "file-text", DashboardState.total_letters),
                _figure("Surat Bulan Ini", "calendar", DashboardState.letters_this_month),
                _figure("Total Perusahaan", "building-2", DashboardState.total_companies),
                columns="3",
                spacing="4",
            ),
            rx.grid(
                _count_card("Surat 12 Bulan Terakhir", DashboardState.monthly),
                _count_card("Surat per Perusahaan", DashboardState.by_company),
                columns="2",
                spacing="4",
            ),
            _recent_letters(),
        ),
    )


def _figure(title: str, icon: str, value) -> rx.Component:
    return rx.box(
        rx.hstack(rx.icon(icon, class_name="title-icon"), rx.text(title, class_name="label")),
        rx.heading(value, size="8"),
        class_name="card summary-card",
    )


def _count_card(title: str, rows: list[CountRowModel]) -> rx.Component:
    return rx.box(
        rx.text(title, class_name="label"),
        rx.foreach(rows, _count_row),
        class_name="card summary-card",
    )


def _count_row(row: CountRowModel) -> rx.Component:
    return rx.hstack(
        rx.text(row.name),
        rx.spacer(),
        rx.badge(row.count, variant="soft"),
        width="100%",
    )


def _recent_letters() -> rx.Component:
    return rx.box(
        rx.hstack(
            rx.text("Surat Terbaru", class_name="label"),
            rx.spacer(),
            rx.link("Lihat semua", href=LETTERS_ROUTE),
        ),
        rx.cond(
            DashboardState.recent.length() > 0,
            rx.table.root(
                rx.table.header(
                    rx.table.row(
                        rx.table.column_header_cell("Nomor Surat"),
                        rx.table.column_header_cell("Tanggal"),
                        rx.table.column_header_cell("Perusahaan"),
                        rx.table.column_header_cell("Perihal"),
                    )
                ),
                rx.table.body(rx.foreach(DashboardState.recent, _recent_row)),
                variant="surface",
                class_name="letter-table",
            ),
            rx.text("Belum ada surat.", class_name="muted"),
        ),
        class_name="card results",
    )


def _recent_row(letter: LetterModel) -> rx.Component:
    return rx.table.row(
        rx.table.cell(rx.text(letter.reference_number, class_name="mono")),
        rx.table.cell(letter.formatted_short_date),
        rx.table.cell(letter.company_name),
        rx.table.cell(letter.subject),
    )
