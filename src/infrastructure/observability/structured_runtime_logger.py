import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from src.config.settings import settings


class StructuredRuntimeLogger:
    """
    JSON-lines logger for pipeline and tool-server paths.
    Callers pass counts and identifiers, never the problem text itself.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, service: Optional[str] = None):
        self._logger = logger or logging.getLogger("runtime")
        self._service = service or settings.SERVICE_NAME

    def _payload(self, event_type: str, fields: Dict[str, Any]) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": self._service,
            "event_type": event_type,
        }
        payload.update(fields)
        return json.dumps(payload, default=str, ensure_ascii=True)

    def emit(self, event_type: str, **fields: Any) -> None:
        self._logger.info(self._payload(event_type, fields))

    def emit_error(self, event_type: str, error: BaseException, **fields: Any) -> None:
        fields.setdefault("error_type", type(error).__name__)
        fields.setdefault("error", str(error))
        self._logger.error(self._payload(event_type, fields))
