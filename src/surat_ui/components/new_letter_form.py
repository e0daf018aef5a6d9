"""
New letter form.

The reference number is generated by the server; after a successful
submit the assigned number is shown above the cleared form.
"""

import reflex as rx

from surat_ui.state import LETTERS_ROUTE, NewLetterState


def new_letter_form() -> rx.Component:
    """
    Build the create-letter form.

    Returns:
        The form card component.
    """
    return rx.box(
        rx.cond(
            NewLetterState.created_number != "",
            rx.callout(
                rx.text(
                    "Nomor surat: ",
                    rx.text.span(NewLetterState.created_number, class_name="mono", weight="bold"),
                ),
                icon="circle-check",
                color_scheme="green",
                class_name="created-number",
            ),
        ),
        rx.vstack(
            _field(
                "Perusahaan",
                rx.select.root(
                    rx.select.trigger(placeholder="Pilih perusahaan"),
                    rx.select.content(
                        rx.foreach(
                            NewLetterState.companies,
                            lambda company: rx.select.item(
                                f"{company.name} ({company.code})", value=company.value
                            ),
                        )
                    ),
                    value=NewLetterState.company_id,
                    on_change=NewLetterState.set_company_id,
                    # Admins are fixed to their own company
                    disabled=~NewLetterState.is_super_admin,
                ),
            ),
            _field(
                "Kategori",
                rx.select.root(
                    rx.select.trigger(placeholder="Pilih kategori"),
                    rx.select.content(
                        rx.foreach(
                            NewLetterState.categories,
                            lambda category: rx.select.item(
                                f"{category.name} ({category.code})", value=category.value
                            ),
                        )
                    ),
                    value=NewLetterState.category_id,
                    on_change=NewLetterState.set_category_id,
                ),
            ),
            _field(
                "Tanggal Surat",
                rx.input(
                    type="date",
                    value=NewLetterState.letter_date,
                    on_change=NewLetterState.set_letter_date,
                ),
            ),
            _field(
                "Perihal",
                rx.text_area(
                    placeholder="Perihal surat",
                    value=NewLetterState.subject,
                    on_change=NewLetterState.set_subject,
                ),
            ),
            _field(
                "Tujuan",
                rx.input(
                    placeholder="Tujuan surat",
                    value=NewLetterState.recipient,
                    on_change=NewLetterState.set_recipient,
                ),
            ),
            rx.cond(
                NewLetterState.form_error != "",
                rx.text(NewLetterState.form_error, color_scheme="red"),
            ),
            rx.hstack(
                rx.link(rx.button("Kembali", variant="soft", color_scheme="gray"), href=LETTERS_ROUTE),
                rx.button(
                    rx.icon("save", size=16),
                    "Simpan",
                    loading=NewLetterState.is_saving,
                    on_click=NewLetterState.submit,
                ),
                justify="end",
                spacing="3",
                width="100%",
            ),
            spacing="4",
            width="100%",
        ),
        class_name="card form-card",
    )


def _field(label: str, control: rx.Component) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="label"),
        control,
        class_name="form-field",
        width="100%",
    )
