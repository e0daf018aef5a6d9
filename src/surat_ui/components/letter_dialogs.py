"""
Edit and delete dialogs for the letter table.

The reference number is fixed once assigned, so the edit dialog only
changes the subject and recipient.
"""

import reflex as rx

from surat_ui.state import LetterState


def edit_dialog() -> rx.Component:
    """Build the dialog that edits a letter's subject and recipient."""
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title("Edit Surat"),
            rx.dialog.description(
                rx.text("Nomor surat: ", rx.text.span(LetterState.edit_reference, class_name="mono")),
            ),
            rx.vstack(
                _field(
                    "Perihal",
                    rx.text_area(
                        value=LetterState.edit_subject,
                        on_change=LetterState.set_edit_subject,
                        width="100%",
                    ),
                ),
                _field(
                    "Tujuan",
                    rx.input(
                        value=LetterState.edit_recipient,
                        on_change=LetterState.set_edit_recipient,
                        width="100%",
                    ),
                ),
                spacing="3",
                width="100%",
            ),
            rx.hstack(
                rx.dialog.close(rx.button("Batal", variant="soft", color_scheme="gray")),
                rx.button("Simpan", on_click=LetterState.save_edit),
                justify="end",
                spacing="3",
                margin_top="1em",
            ),
        ),
        open=LetterState.edit_open,
        on_open_change=LetterState.set_edit_open,
    )


def delete_dialog() -> rx.Component:
    """Build the confirmation dialog for deleting a letter."""
    return rx.alert_dialog.root(
        rx.alert_dialog.content(
            rx.alert_dialog.title("Hapus Surat"),
            rx.alert_dialog.description(
                rx.text(
                    "Surat ",
                    rx.text.span(LetterState.delete_reference, class_name="mono"),
                    " akan dihapus permanen. Lanjutkan?",
                )
            ),
            rx.hstack(
                rx.alert_dialog.cancel(rx.button("Batal", variant="soft", color_scheme="gray")),
                rx.alert_dialog.action(
                    rx.button("Hapus", color_scheme="red", on_click=LetterState.delete_letter)
                ),
                justify="end",
                spacing="3",
                margin_top="1em",
            ),
        ),
        open=LetterState.delete_open,
        on_open_change=LetterState.set_delete_open,
    )


def _field(label: str, control: rx.Component) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="label"),
        control,
        width="100%",
    )
