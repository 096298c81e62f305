"""BaseService — abstract foundation for bugintake services.

Every service receives the resolved :class:`BugintakeSettings` at
construction time and reads its options from there.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bugintake.config.settings import BugintakeSettings


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class IntakeService(BaseService):
            def validate_text(self, raw_text: str) -> ServiceResult:
                required = self._settings.intake.required
                ...
    """

    def __init__(self, settings: BugintakeSettings) -> None:
        self._settings = settings

    @property
    def project_root(self) -> Path:
        return self._settings.project_root
