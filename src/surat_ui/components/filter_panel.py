"""
Filter panel component for the letter list.

Provides the search input plus company, category, year and month selects.
"""

import reflex as rx

from surat_ui.models.common import ALL
from surat_ui.state import MONTH_OPTIONS, LetterState


def filter_panel() -> rx.Component:
    """
    Build the filter panel above the letter table.

    Returns:
        The filter panel component.
    """
    return rx.box(
        rx.box(
            rx.icon("search", class_name="input-icon"),
            rx.input(
                placeholder="Cari nomor surat, perihal, tujuan...",
                value=LetterState.search,
                on_change=LetterState.set_search,
                class_name="search-input",
                debounce=300,
            ),
            class_name="input-with-icon",
        ),
        rx.box(
            # Admins only see their own company, so the select is super admin only
            rx.cond(
                LetterState.is_super_admin,
                filter_select(
                    "Perusahaan",
                    LetterState.company_filter,
                    LetterState.set_company_filter,
                    rx.foreach(
                        LetterState.companies,
                        lambda company: rx.select.item(company.name, value=company.value),
                    ),
                ),
            ),
            filter_select(
                "Kategori",
                LetterState.category_filter,
                LetterState.set_category_filter,
                rx.foreach(
                    LetterState.categories,
                    lambda category: rx.select.item(category.name, value=category.value),
                ),
            ),
            filter_select(
                "Tahun",
                LetterState.year_filter,
                LetterState.set_year_filter,
                rx.foreach(LetterState.years, lambda year: rx.select.item(year, value=year)),
            ),
            filter_select(
                "Bulan",
                LetterState.month_filter,
                LetterState.set_month_filter,
                *[rx.select.item(name, value=value) for value, name in MONTH_OPTIONS],
            ),
            rx.cond(
                LetterState.has_filters,
                rx.button(
                    rx.icon("x", size=16),
                    "Reset",
                    variant="soft",
                    color_scheme="gray",
                    on_click=LetterState.reset_filters,
                ),
            ),
            class_name="filter-row",
        ),
        class_name="card search-card",
    )


def filter_select(label: str, value, on_change, *items) -> rx.Component:
    """Build a labelled select whose first option clears the filter."""
    return rx.box(
        rx.text(label, class_name="label"),
        rx.select.root(
            rx.select.trigger(placeholder=label),
            rx.select.content(
                rx.select.item("Semua", value=ALL),
                *items,
            ),
            value=value,
            on_change=on_change,
        ),
        class_name="filter-field",
    )
