"""
Service factory for the letter UI.

This module provides the get_letter_service() factory that returns the
appropriate LetterService implementation based on configuration.

Available Implementations:
- demo: In-memory service with fixture letters (no API required)
- impl: REST API service over httpx

Unlike a process-wide singleton, each call builds a new service bound
to the given Session, so two users never share a token. Configure the
default via the SURAT_UI_SERVICE environment variable.
"""

from typing import Callable, Dict

from surat_ui import config
from surat_ui.data.demo_letters import new_demo_store
from surat_ui.lib import logs
from surat_ui.services.letter_service import LetterService
from surat_ui.services.letter_service_demo import DemoLetterService
from surat_ui.services.letter_service_impl import LetterServiceImpl
from surat_ui.session import Session

LOG = logs.logger(__file__)

# Fixtures shared by every demo service in this process
_DEMO_STORE = new_demo_store()

_SERVICE_REGISTRY: Dict[str, Callable[[Session], LetterService]] = {
    "demo": lambda session: DemoLetterService(session, store=_DEMO_STORE),
    "impl": lambda session: LetterServiceImpl(session),
}


def get_letter_service(kind: str | None = None, session: Session | None = None) -> LetterService:
    """Return a letter service of the given (or configured) kind bound to session."""
    resolved_kind = (kind or config.SERVICE_KIND).lower()
    LOG.debug("get_letter_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown letter service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory(session if session is not None else Session())


__all__ = [
    "DemoLetterService",
    "LetterService",
    "LetterServiceImpl",
    "get_letter_service",
]
