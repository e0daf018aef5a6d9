"""
Reusable Reflex UI components for the letter numbering application.

This package provides modular, composable components:
- layout: Sidebar and page shell for authenticated pages
- filter_panel: Search input and filter selects
- letter_table: Paginated letter table with loading and empty states
- pagination: Page size select and page number buttons
- letter_dialogs: Edit and delete dialogs
- login_form: Login card
- new_letter_form: Create-letter form
- report: Summary report
- catalog: Category and company lists with create/edit/delete dialogs
- dashboard: Headline figures and recent letters
- profile: Profile and password forms
"""

from surat_ui.components.catalog import category_list, company_list
from surat_ui.components.dashboard import dashboard_view
from surat_ui.components.filter_panel import filter_panel
from surat_ui.components.layout import page_shell
from surat_ui.components.letter_dialogs import delete_dialog, edit_dialog
from surat_ui.components.letter_table import letter_results
from surat_ui.components.login_form import login_page
from surat_ui.components.new_letter_form import new_letter_form
from surat_ui.components.profile import profile_view
from surat_ui.components.report import report_view

__all__ = [
    "category_list",
    "company_list",
    "dashboard_view",
    "delete_dialog",
    "edit_dialog",
    "filter_panel",
    "letter_results",
    "login_page",
    "new_letter_form",
    "page_shell",
    "profile_view",
    "report_view",
]
