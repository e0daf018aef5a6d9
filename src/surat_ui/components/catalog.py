"""
Category and company management.

Both pages list their entries with edit and delete actions and share
the same dialog layout. Codes are upper-cased as they are typed since
they end up in reference numbers.
"""

import reflex as rx

from surat_ui.models.letter import COMPANY_ACTIVE, COMPANY_INACTIVE
from surat_ui.models.reflex_models import CategoryModel, CompanyModel
from surat_ui.state import CatalogState


def category_list() -> rx.Component:
    """Build the category table with its create, edit and delete dialogs."""
    return rx.box(
        _toolbar("Tambah Kategori", CatalogState.open_new_category),
        rx.table.root(
            rx.table.header(
                rx.table.row(
                    rx.table.column_header_cell("Kode"),
                    rx.table.column_header_cell("Nama Kategori"),
                    rx.table.column_header_cell("Aksi"),
                )
            ),
            rx.table.body(rx.foreach(CatalogState.categories, _category_row)),
            variant="surface",
        ),
        _category_dialog(),
        _delete_dialog(
            "Hapus Kategori",
            CatalogState.category_delete_name,
            CatalogState.category_delete_open,
            CatalogState.set_category_delete_open,
            CatalogState.delete_category,
        ),
        class_name="card results",
    )


def company_list() -> rx.Component:
    """Build the company table with its create, edit and delete dialogs."""
    return rx.box(
        _toolbar("Tambah Perusahaan", CatalogState.open_new_company),
        rx.table.root(
            rx.table.header(
                rx.table.row(
                    rx.table.column_header_cell("Kode"),
                    rx.table.column_header_cell("Nama Perusahaan"),
                    rx.table.column_header_cell("Status"),
                    rx.table.column_header_cell("Aksi"),
                )
            ),
            rx.table.body(rx.foreach(CatalogState.companies, _company_row)),
            variant="surface",
        ),
        _company_dialog(),
        _delete_dialog(
            "Hapus Perusahaan",
            CatalogState.company_delete_name,
            CatalogState.company_delete_open,
            CatalogState.set_company_delete_open,
            CatalogState.delete_company,
        ),
        class_name="card results",
    )


def _toolbar(label: str, on_click) -> rx.Component:
    return rx.hstack(
        rx.spacer(),
        rx.button(rx.icon("plus", size=16), label, on_click=on_click),
        margin_bottom="1em",
    )


def _actions(on_edit, on_delete) -> rx.Component:
    return rx.hstack(
        rx.icon_button(rx.icon("pencil", size=16), variant="ghost", on_click=on_edit, title="Edit"),
        rx.icon_button(
            rx.icon("trash-2", size=16),
            variant="ghost",
            color_scheme="red",
            on_click=on_delete,
            title="Hapus",
        ),
        spacing="1",
    )


def _category_row(category: CategoryModel) -> rx.Component:
    return rx.table.row(
        rx.table.cell(rx.badge(category.code, variant="outline")),
        rx.table.cell(category.name),
        rx.table.cell(
            _actions(
                CatalogState.open_edit_category(category.id),
                CatalogState.confirm_delete_category(category.id),
            )
        ),
    )


def _company_row(company: CompanyModel) -> rx.Component:
    return rx.table.row(
        rx.table.cell(rx.badge(company.code, variant="outline")),
        rx.table.cell(company.name),
        rx.table.cell(
            rx.badge(
                company.status,
                color_scheme=rx.cond(company.status == COMPANY_ACTIVE, "green", "gray"),
            )
        ),
        rx.table.cell(
            _actions(
                CatalogState.open_edit_company(company.id),
                CatalogState.confirm_delete_company(company.id),
            )
        ),
    )


def _category_dialog() -> rx.Component:
    return _form_dialog(
        CatalogState.category_dialog_title,
        CatalogState.category_dialog_open,
        CatalogState.set_category_dialog_open,
        CatalogState.save_category,
        _field(
            "Nama Kategori",
            rx.input(
                value=CatalogState.category_form_name,
                on_change=CatalogState.set_category_form_name,
                placeholder="Contoh: Penawaran",
                width="100%",
            ),
        ),
        _field(
            "Kode Kategori",
            rx.input(
                value=CatalogState.category_form_code,
                on_change=CatalogState.set_category_form_code,
                placeholder="Contoh: SP",
                class_name="mono",
                width="100%",
            ),
        ),
    )


def _company_dialog() -> rx.Component:
    return _form_dialog(
        CatalogState.company_dialog_title,
        CatalogState.company_dialog_open,
        CatalogState.set_company_dialog_open,
        CatalogState.save_company,
        _field(
            "Nama Perusahaan",
            rx.input(
                value=CatalogState.company_form_name,
                on_change=CatalogState.set_company_form_name,
                placeholder="Contoh: PT. EZRA",
                width="100%",
            ),
        ),
        _field(
            "Kode Perusahaan",
            rx.input(
                value=CatalogState.company_form_code,
                on_change=CatalogState.set_company_form_code,
                placeholder="Contoh: EP",
                class_name="mono",
                width="100%",
            ),
        ),
        _field(
            "Status",
            rx.select.root(
                rx.select.trigger(width="100%"),
                rx.select.content(
                    rx.select.item("Aktif", value=COMPANY_ACTIVE),
                    rx.select.item("Tidak Aktif", value=COMPANY_INACTIVE),
                ),
                value=CatalogState.company_form_status,
                on_change=CatalogState.set_company_form_status,
            ),
        ),
    )


def _form_dialog(title, is_open, on_open_change, on_save, *fields: rx.Component) -> rx.Component:
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title(title),
            rx.vstack(*fields, spacing="3", width="100%"),
            rx.hstack(
                rx.dialog.close(rx.button("Batal", variant="soft", color_scheme="gray")),
                rx.button("Simpan", on_click=on_save),
                justify="end",
                spacing="3",
                margin_top="1em",
            ),
        ),
        open=is_open,
        on_open_change=on_open_change,
    )


def _delete_dialog(title: str, name, is_open, on_open_change, on_delete) -> rx.Component:
    return rx.alert_dialog.root(
        rx.alert_dialog.content(
            rx.alert_dialog.title(title),
            rx.alert_dialog.description(
                rx.text(rx.text.span(name, weight="bold"), " akan dihapus permanen. Lanjutkan?")
            ),
            rx.hstack(
                rx.alert_dialog.cancel(rx.button("Batal", variant="soft", color_scheme="gray")),
                rx.alert_dialog.action(rx.button("Hapus", color_scheme="red", on_click=on_delete)),
                justify="end",
                spacing="3",
                margin_top="1em",
            ),
        ),
        open=is_open,
        on_open_change=on_open_change,
    )


def _field(label: str, control: rx.Component) -> rx.Component:
    return rx.box(rx.text(label, class_name="label"), control, width="100%")
