"""
Report (laporan) page components.

Shows the total count for the selected period plus breakdowns per
company and per category, followed by the matching letters.
"""

import reflex as rx

from surat_ui.components.filter_panel import filter_select
from surat_ui.models.reflex_models import CountRowModel, LetterModel
from surat_ui.state import MONTH_OPTIONS, ReportState


def report_view() -> rx.Component:
    """
    Build the report page body.

    Returns:
        Filters, summary cards and the letter table.
    """
    return rx.box(
        _filters(),
        rx.cond(
            ReportState.is_loading,
            rx.box(
                rx.box(class_name="spinner"),
                rx.text("Memuat laporan...", class_name="muted"),
                class_name="card loading-state",
            ),
            rx.box(
                rx.grid(
                    _total_card(),
                    _count_card("Per Perusahaan", "building-2", ReportState.by_company),
                    _count_card("Per Kategori", "folder-open", ReportState.by_category),
                    columns="3",
                    spacing="4",
                ),
                _letters_table(),
            ),
        ),
    )


def _filters() -> rx.Component:
    return rx.box(
        rx.box(
            rx.cond(
                ReportState.is_super_admin,
                filter_select(
                    "Perusahaan",
                    ReportState.company_filter,
                    ReportState.set_company_filter,
                    rx.foreach(
                        ReportState.companies,
                        lambda company: rx.select.item(company.name, value=company.value),
                    ),
                ),
            ),
            filter_select(
                "Kategori",
                ReportState.category_filter,
                ReportState.set_category_filter,
                rx.foreach(
                    ReportState.categories,
                    lambda category: rx.select.item(category.name, value=category.value),
                ),
            ),
            filter_select(
                "Tahun",
                ReportState.year_filter,
                ReportState.set_year_filter,
                rx.foreach(ReportState.years, lambda year: rx.select.item(year, value=year)),
            ),
            filter_select(
                "Bulan",
                ReportState.month_filter,
                ReportState.set_month_filter,
                *[rx.select.item(name, value=value) for value, name in MONTH_OPTIONS],
            ),
            class_name="filter-row",
        ),
        class_name="card search-card",
    )


def _total_card() -> rx.Component:
    return rx.box(
        rx.text("Total Surat", class_name="label"),
        rx.heading(ReportState.total, size="8"),
        class_name="card summary-card",
    )


def _count_card(title: str, icon: str, rows: list[CountRowModel]) -> rx.Component:
    return rx.box(
        rx.hstack(rx.icon(icon, class_name="title-icon"), rx.text(title, class_name="label")),
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


def _letters_table() -> rx.Component:
    return rx.table.root(
        rx.table.header(
            rx.table.row(
                rx.table.column_header_cell("Nomor Surat"),
                rx.table.column_header_cell("Tanggal"),
                rx.table.column_header_cell("Perusahaan"),
                rx.table.column_header_cell("Kategori"),
                rx.table.column_header_cell("Perihal"),
            )
        ),
        rx.table.body(rx.foreach(ReportState.letters, _letter_row)),
        variant="surface",
        class_name="letter-table",
    )


def _letter_row(letter: LetterModel) -> rx.Component:
    return rx.table.row(
        rx.table.cell(rx.text(letter.reference_number, class_name="mono")),
        rx.table.cell(letter.formatted_date),
        rx.table.cell(letter.company_name),
        rx.table.cell(letter.category_name),
        rx.table.cell(letter.subject),
    )
