"""
Application and environment models — the config store's view of an app.
"""

from __future__ import annotations

from pydantic import BaseModel


class Application(BaseModel):
    """An application registered in the config store."""

    name: str
    domain: str = ""


class Environment(BaseModel):
    """A deployment environment belonging to one application."""

    app: str = ""
    name: str
    region: str = ""
    account_id: str = ""
    prod: bool = False
