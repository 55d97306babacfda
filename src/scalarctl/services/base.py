"""BaseService — shared plumbing for scalarctl services.

Services receive the frozen :class:`ScalarSettings` at construction and
turn type expressions and raw CLI text into domain calls.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from scalarctl.domain.registry import resolve_scalar
from scalarctl.services.result import ServiceResult

if TYPE_CHECKING:
    from scalarctl.config.settings import ScalarSettings
    from scalarctl.domain.types import GraphQLType

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Helpers return either the resolved object or a failed
    :class:`ServiceResult` that the caller should return as-is::

        scalar = self._resolve(op, expression)
        if isinstance(scalar, ServiceResult):
            return scalar
    """

    def __init__(self, settings: ScalarSettings | None = None) -> None:
        if settings is None:
            from scalarctl.config.settings import ScalarSettings

            settings = ScalarSettings()
        self._settings = settings

    def _resolve(self, op: str, expression: str) -> GraphQLType | ServiceResult:
        """Resolve a type expression, mapping lookup errors to results."""
        try:
            return resolve_scalar(expression)
        except KeyError as exc:
            logger.debug("Unknown type expression %r", expression)
            return ServiceResult.fail(op, "UNKNOWN_TYPE", str(exc.args[0]), expression=expression)
        except ValueError as exc:
            return ServiceResult.fail(op, "INVALID_EXPRESSION", str(exc), expression=expression)

    def _decode(self, op: str, raw: str, *, as_string: bool = False) -> Any:
        """Decode raw CLI text into an untyped value.

        Text is parsed as JSON unless *as_string* is set or JSON parsing
        is disabled in ``[validation]``.
        """
        if as_string or not self._settings.validation.parse_json:
            return raw
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            return ServiceResult.fail(
                op,
                "INVALID_INPUT",
                f"Input is not valid JSON ({exc.msg}); pass --raw-string to send it as text",
                raw=raw,
            )
