"""Confirmation providers.

Every yes/no decision the orchestrator takes (proceed, show diff, edit
PKGBUILD) goes through a Decisions object, so unattended runs and tests can
answer without a terminal.
"""

import logging
from abc import ABC, abstractmethod

import typer

from aurctl.core.errors import AbortedError

logger = logging.getLogger(__name__)


class Decisions(ABC):
    """Answers yes/no questions."""

    @abstractmethod
    def confirm(self, question: str) -> bool:
        """Ask a question whose default answer is yes.

        Args:
            question: Human-readable question, without the [Y/n] suffix.

        Returns:
            True if the answer is yes.
        """


class InteractiveDecisions(Decisions):
    """Asks on the terminal; an empty answer means yes."""

    def confirm(self, question: str) -> bool:
        """Prompt on stdin.

        Raises:
            AbortedError: If the prompt is interrupted or stdin is closed.
        """
        try:
            return typer.confirm(f":: {question}", default=True)
        except typer.Abort as e:
            logger.debug("Prompt %r interrupted", question)
            raise AbortedError("operation cancelled") from e


class AssumeYes(Decisions):
    """Answers yes to everything, for --noconfirm and scripted runs.

    The orchestrator does not ask the optional review questions in
    --noconfirm runs, so in practice only the batch gate reaches it.
    """

    def confirm(self, question: str) -> bool:
        """Return True without asking."""
        logger.debug("Assuming yes: %s", question)
        return True


def get_decisions(noconfirm: bool) -> Decisions:
    """Pick the decision provider for a run.

    Args:
        noconfirm: Whether every question should be answered yes.

    Returns:
        AssumeYes when noconfirm is set, InteractiveDecisions otherwise.
    """
    if noconfirm:
        return AssumeYes()
    return InteractiveDecisions()
