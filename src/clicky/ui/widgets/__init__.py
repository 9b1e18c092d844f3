"""UI widgets for clicky."""

from .card import CardWidget
from .card_detail import CardDetailPanel
from .card_form import CardFormPanel
from .column import EmptyColumnMessage, KanbanColumn
from .dialogs import ConfirmDeleteDialog, MoveCardDialog
from .help import HelpPanel
from .status_bar import StatusBar

__all__ = [
    "CardDetailPanel",
    "CardFormPanel",
    "CardWidget",
    "ConfirmDeleteDialog",
    "EmptyColumnMessage",
    "HelpPanel",
    "KanbanColumn",
    "MoveCardDialog",
    "StatusBar",
]
