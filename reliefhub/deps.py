# reliefhub/deps.py
from dataclasses import dataclass

from fastapi import Request

from reliefhub.core.config import Settings
from reliefhub.repos.base import DocumentStore
from reliefhub.services.payments import PaymentService


@dataclass
class AppContext:
    """Everything a handler needs, built once per application."""

    settings: Settings
    store: DocumentStore
    payments: PaymentService


def get_context(request: Request) -> AppContext:
    return request.app.state.context
