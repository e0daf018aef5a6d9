"""Reflex configuration for the letter numbering UI."""

import reflex as rx

config = rx.Config(
    app_name="surat_ui",
    # Use the src directory structure
    app_module_import="surat_ui.app",
)
