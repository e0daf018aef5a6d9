"""
Letter results display component.

Handles the letter table, loading state and empty state.
"""

import reflex as rx

from surat_ui.components.pagination import pagination_controls
from surat_ui.models.reflex_models import LetterModel
from surat_ui.state import LetterState


def letter_results() -> rx.Component:
    """
    Build the letter results container.

    Displays the loading state, empty state or the letter table based on
    the current state.

    Returns:
        The results container component.
    """
    return rx.box(
        rx.cond(
            LetterState.is_loading & (LetterState.total_items == 0),
            _loader(),
            rx.cond(LetterState.is_empty, _empty(), _results()),
        ),
        id="results-container",
    )


def _results() -> rx.Component:
    return rx.box(
        rx.box(
            rx.text(LetterState.summary_text, class_name="muted"),
            rx.cond(LetterState.is_loading, rx.spinner(size="2")),
            class_name="results-summary",
        ),
        rx.table.root(
            rx.table.header(
                rx.table.row(
                    rx.table.column_header_cell("No"),
                    rx.table.column_header_cell("Nomor Surat"),
                    rx.table.column_header_cell("Tanggal"),
                    rx.table.column_header_cell("Perusahaan"),
                    rx.table.column_header_cell("Kategori"),
                    rx.table.column_header_cell("Perihal"),
                    rx.table.column_header_cell("Tujuan"),
                    rx.table.column_header_cell("Bukti"),
                    rx.table.column_header_cell("Aksi"),
                )
            ),
            rx.table.body(
                rx.foreach(
                    LetterState.letters,
                    lambda letter, index: letter_row(letter, index),
                )
            ),
            variant="surface",
            class_name="letter-table",
        ),
        pagination_controls(),
        class_name="card results",
    )


def letter_row(letter: LetterModel, index) -> rx.Component:
    """Build one table row; numbering continues across pages."""
    return rx.table.row(
        rx.table.cell(index + 1 + LetterState.row_offset),
        rx.table.cell(rx.text(letter.reference_number, class_name="mono")),
        rx.table.cell(letter.formatted_short_date),
        rx.table.cell(letter.company_name),
        rx.table.cell(rx.badge(letter.category_name, variant="soft")),
        rx.table.cell(letter.subject),
        rx.table.cell(letter.recipient),
        rx.table.cell(_evidence_link(letter)),
        rx.table.cell(
            rx.hstack(
                rx.icon_button(
                    rx.icon("pencil", size=16),
                    variant="ghost",
                    on_click=LetterState.start_edit(letter.id),
                    title="Edit surat",
                ),
                rx.icon_button(
                    rx.icon("trash-2", size=16),
                    variant="ghost",
                    color_scheme="red",
                    on_click=LetterState.confirm_delete(letter.id),
                    title="Hapus surat",
                ),
                spacing="1",
            )
        ),
    )


def _evidence_link(letter: LetterModel) -> rx.Component:
    """Link to the uploaded evidence file, or a dash when there is none."""
    return rx.cond(
        letter.evidence_file != "",
        rx.link(
            rx.hstack(rx.icon("paperclip", size=14), rx.text("Lihat"), spacing="1", align="center"),
            href=letter.evidence_file,
            is_external=True,
        ),
        rx.text("-", class_name="muted"),
    )


def _empty() -> rx.Component:
    """Build the empty state when no letters match."""
    return rx.box(
        rx.icon("file-x", class_name="empty-icon", size=60),
        rx.heading("Tidak ada surat", size="3", as_="h3"),
        rx.cond(
            LetterState.has_filters,
            rx.text("Tidak ada surat yang cocok dengan filter.", class_name="muted"),
            rx.text("Belum ada surat.", class_name="muted"),
        ),
        class_name="card empty-state",
    )


def _loader() -> rx.Component:
    """Build the loading indicator for the first fetch."""
    return rx.box(
        rx.box(class_name="spinner"),
        rx.text("Memuat surat...", class_name="muted"),
        class_name="card loading-state",
    )
