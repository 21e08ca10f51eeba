"""Colored cascade logger — ANSI-colored console logging for multi-step deletes.

Cascading admin deletes (a client with its projects, milestones, invoices and
messages) run as a sequence of independent deletes with no surrounding
transaction. Logging each stage makes a partial failure easy to reconcile
by hand.

Color scheme:
    Blue    — Projects / Milestones
    Yellow  — Invoices
    Magenta — Messages
    Cyan    — Account (client + user)
    Red     — Errors
    Gray    — Counts / Timing
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


# ── Cascade Stage Definitions ────────────────────────────────────────

class CascadeStage:
    """Predefined cascade stages as (label, color) pairs."""

    PROJECTS = ("PROJECTS", _Colors.BLUE)
    MILESTONES = ("MILESTONES", _Colors.BLUE)
    INVOICES = ("INVOICES", _Colors.YELLOW)
    MESSAGES = ("MESSAGES", _Colors.MAGENTA)
    ACCOUNT = ("ACCOUNT", _Colors.CYAN)
    CASCADE = ("CASCADE", _Colors.WHITE)


# ── CascadeLogger ────────────────────────────────────────────────────

class CascadeLogger:
    """Color-coded logger for cascading deletes.

    Usage:
        log = CascadeLogger()
        with log.timed_step(CascadeStage.INVOICES, "Deleting invoices", client_id=cid):
            removed = await InvoiceEntity.delete_many(store, ids)
        log.count(CascadeStage.INVOICES, removed)
    """

    def __init__(self, component_name: str = "CascadeDelete"):
        self._logger = logging.getLogger(component_name)

    @staticmethod
    def _details(kwargs: dict[str, Any]) -> str:
        if not kwargs:
            return ""
        details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
        return f" {_Colors.GRAY}({details}){_Colors.RESET}"

    def step_start(self, stage: tuple[str, str], message: str, **kwargs: Any) -> None:
        label, color = stage
        self._logger.info(
            f"{color}{_Colors.BOLD}[{label}]{_Colors.RESET} {color}{message}{_Colors.RESET}"
            + self._details(kwargs)
        )

    def step_complete(self, stage: tuple[str, str], message: str, **kwargs: Any) -> None:
        label, color = stage
        self._logger.info(
            f"{color}[{label}]{_Colors.RESET} {_Colors.GREEN}✓ {message}{_Colors.RESET}"
            + self._details(kwargs)
        )

    def step_error(self, stage: tuple[str, str], message: str, error: Exception | None = None) -> None:
        label, _ = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}[{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def count(self, stage: tuple[str, str], removed: int) -> None:
        label, _ = stage
        self._logger.info(f"   {_Colors.GRAY}├─ {label.lower()} removed: {removed}{_Colors.RESET}")

    @contextmanager
    def timed_step(self, stage: tuple[str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed time.

        A failure is logged with the stage that broke and re-raised; earlier
        stages stay deleted.
        """
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} — failed after {elapsed:.2f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(stage, f"{message} — {elapsed:.2f}s")
