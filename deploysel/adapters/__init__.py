"""Adapters — prompters and collaborator implementations.

Public re-exports for convenient access.
"""

from deploysel.adapters.base import Prompter, PromptConfig
from deploysel.adapters.inventory import InventoryError, InventoryStore, InventoryWorkspace
from deploysel.adapters.mock import MockPrompter, PromptCall
from deploysel.adapters.terminal import TerminalPrompter

__all__ = [
    "InventoryError",
    "InventoryStore",
    "InventoryWorkspace",
    "MockPrompter",
    "PromptCall",
    "PromptConfig",
    "Prompter",
    "TerminalPrompter",
]
