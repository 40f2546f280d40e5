"""Playable scenarios."""

from escaperoom.scenarios.wizards_lab import WizardsLab, create_wizards_lab

__all__ = ["WizardsLab", "create_wizards_lab"]
