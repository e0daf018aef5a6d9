"""Pagination controls for the letter table."""

import reflex as rx

from surat_ui.models.pagination import ELLIPSIS
from surat_ui.state import PAGE_SIZE_CHOICES, LetterState


def pagination_controls() -> rx.Component:
    """
    Build the page size select, page text and page number buttons.

    Returns:
        The pagination bar component.
    """
    return rx.box(
        rx.hstack(
            rx.text("Tampilkan", class_name="muted"),
            rx.select(
                PAGE_SIZE_CHOICES,
                value=LetterState.page_size,
                on_change=LetterState.set_page_size,
                size="1",
            ),
            rx.text(LetterState.page_text, class_name="muted"),
            align="center",
            spacing="2",
        ),
        rx.hstack(
            rx.icon_button(
                rx.icon("chevron-left", size=16),
                variant="soft",
                disabled=~LetterState.has_previous,
                on_click=LetterState.previous_page,
            ),
            rx.foreach(LetterState.page_labels, _page_button),
            rx.icon_button(
                rx.icon("chevron-right", size=16),
                variant="soft",
                disabled=~LetterState.has_next,
                on_click=LetterState.next_page,
            ),
            spacing="1",
        ),
        class_name="pagination",
    )


def _page_button(label: rx.Var) -> rx.Component:
    return rx.cond(
        label == ELLIPSIS,
        rx.text(ELLIPSIS, class_name="page-ellipsis"),
        rx.button(
            label,
            size="1",
            variant=rx.cond(label == LetterState.current_page_label, "solid", "soft"),
            on_click=LetterState.go_to_page(label),
        ),
    )
