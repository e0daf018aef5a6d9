"""
Static and demo data for the letter UI.

This package contains fixture data used by DemoLetterService for
development, testing, and demonstrations without the REST API.

Modules:
- demo_letters: Companies, categories, users and letters
"""
