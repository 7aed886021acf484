"""
Brief Service

Records briefs submitted for a module in the bounded brief log.
"""
import string
import time
from datetime import datetime, timezone
from typing import List, Optional
import logging

from ..exceptions import ValidationError
from ..models.briefs import Brief
from .catalog import resolve_module_name
from .recent_log import RecentLog

logger = logging.getLogger(__name__)

_BASE36_DIGITS = string.digits + string.ascii_uppercase


def to_base36(value: int) -> str:
    """Uppercase base-36 representation of a non-negative integer."""
    if value < 0:
        raise ValueError("to_base36 expects a non-negative integer")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def new_brief_id(now_ms: Optional[int] = None) -> str:
    """Brief id minted from the current time in epoch milliseconds."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"BRF-{to_base36(now_ms)}"


class BriefService:
    """Brief recorder bound to one brief log."""

    def __init__(self, brief_log: RecentLog[Brief]):
        self.brief_log = brief_log

    def submit(
        self,
        module: Optional[str],
        module_name: Optional[str] = None,
        outputs: Optional[List[str]] = None,
        context: Optional[str] = None,
        goals: Optional[str] = None,
        sources: Optional[List[str]] = None
    ) -> Brief:
        """
        Record a brief.

        Args:
            module: Module id (required)
            module_name: Display name; resolved from the catalog when absent
            outputs: Expected outputs
            context: Business context
            goals: Objectives
            sources: Data sources

        Returns:
            The recorded Brief

        Raises:
            ValidationError: If module is missing (nothing is recorded)
        """
        if not module:
            raise ValidationError("Missing module")

        brief = Brief(
            id=new_brief_id(),
            module=module,
            module_name=module_name or resolve_module_name(module),
            outputs=outputs or [],
            context=context or "",
            goals=goals or "",
            sources=sources or [],
            created_at=datetime.now(timezone.utc),
        )
        self.brief_log.record(brief)

        logger.info(f"Recorded brief {brief.id} for module {module}")
        return brief
