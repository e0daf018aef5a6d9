"""
Reflex-compatible models for the letter UI.

These models extend rx.Base so they can be used with rx.foreach and
other Reflex reactive components. Select widgets need string values,
so ids are also exposed as strings.
"""

import reflex as rx

from surat_ui.models.letter import Category, Company, CountRow, Letter, serialize_letter
from surat_ui.navigation import MenuItem


class LetterModel(rx.Base):
    """A letter row as rendered in tables and dialogs."""

    id: int = 0
    reference_number: str = ""
    company_id: int = 0
    category_id: int = 0
    subject: str = ""
    recipient: str = ""
    letter_date: str = ""
    formatted_date: str = ""
    formatted_short_date: str = ""
    company_name: str = ""
    company_code: str = ""
    category_name: str = ""
    category_code: str = ""
    created_by_name: str = ""
    evidence_file: str = ""


class CompanyModel(rx.Base):
    """Company option for selects and the company list."""

    id: int = 0
    value: str = ""
    name: str = ""
    code: str = ""
    status: str = ""


class CategoryModel(rx.Base):
    """Category option for selects and the category list."""

    id: int = 0
    value: str = ""
    name: str = ""
    code: str = ""


class CountRowModel(rx.Base):
    """One row of a report breakdown."""

    name: str = ""
    count: int = 0


class MenuItemModel(rx.Base):
    """Sidebar entry."""

    id: str = ""
    label: str = ""
    icon: str = ""
    route: str = ""


def to_letter_model(letter: Letter) -> LetterModel:
    """
    Convert a Letter to a LetterModel.

    Args:
        letter: Domain letter.

    Returns:
        LetterModel instance with display dates filled in.
    """
    data = serialize_letter(letter)
    data["evidence_file"] = data.get("evidence_file") or ""
    data = {key: value for key, value in data.items() if key in LetterModel.__fields__}
    return LetterModel(**data)


def to_company_model(company: Company) -> CompanyModel:
    return CompanyModel(
        id=company.id,
        value=str(company.id),
        name=company.name,
        code=company.code,
        status=company.status,
    )


def to_category_model(category: Category) -> CategoryModel:
    return CategoryModel(
        id=category.id, value=str(category.id), name=category.name, code=category.code
    )


def to_count_row_model(row: CountRow) -> CountRowModel:
    return CountRowModel(name=row.name, count=row.count)


def to_menu_item_model(item: MenuItem) -> MenuItemModel:
    return MenuItemModel(id=item.id, label=item.label, icon=item.icon, route=item.route)
