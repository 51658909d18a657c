from types import MappingProxyType
from typing import Any, Callable

import structlog

from assetpath.utils.logging import get_logging_page_id

# Fields extracted from site model objects passed as logging context
_EXTRACTORS: dict[str, Callable[[Any], dict[str, Any]]] = {
    "page": lambda page: {"page_id": get_logging_page_id(page)},
    "site": lambda site: {"site_version": getattr(site, "version", None)},
    "collection": lambda collection: {
        "collection_label": getattr(collection, "label", None)
    },
    "document": lambda document: {"document_id": getattr(document, "id", None)},
}
EXTRACTORS = MappingProxyType(_EXTRACTORS)


class AssetPathLogger:
    """
    A structured logging wrapper around structlog for the asset path tag.

    Every log needs a message and an `event_code`; warnings also need a
    `reason` and `reason_code`. Site model objects passed as context are
    replaced by their identifiers:

    - `page` -> `page_id` (the page's id, or its url when it has none)
    - `site` -> `site_version`
    - `collection` -> `collection_label`
    - `document` -> `document_id`

    Explicit fields (e.g. `document_id=...`) win over extracted ones, and
    fields with `None` values are left out:

        structured_logger = AssetPathLogger.get_logger(__name__)
        structured_logger.warning(
            "No document matched the requested id.",
            event_code="asset_path_document_not_found",
            reason="The id does not belong to any document in the site collections",
            reason_code="document_id_unmatched",
            page=page,
        )
    """

    def __init__(self, logger):
        self._logger = logger

    @classmethod
    def get_logger(cls, name: str) -> "AssetPathLogger":
        """Wrap the structlog logger "structlog.<name>", routed by LOGGING."""
        return cls(structlog.get_logger(f"structlog.{name}"))

    def log(self, level: str, message: str, *, event_code: str, **context: Any):
        if not message:
            raise ValueError("Log message is required.")
        if not event_code:
            raise ValueError("Structured logs must include an 'event_code' field.")
        if level == "warning" and (
            not context.get("reason") or not context.get("reason_code")
        ):
            raise ValueError("Warnings must include both 'reason' and 'reason_code'.")

        context_data = {"event_code": event_code}
        for context_key, extractor in EXTRACTORS.items():
            context_object = context.pop(context_key, None)
            if context_object is not None:
                for key, value in extractor(context_object).items():
                    if value is not None:
                        context_data[key] = value

        for key, value in context.items():
            if value is not None:
                context_data[key] = value

        getattr(self._logger, level)(message, **context_data)

    def debug(self, message: str, *, event_code: str, **kwargs):
        self.log("debug", message, event_code=event_code, **kwargs)

    def warning(
        self, message: str, *, event_code: str, reason: str, reason_code: str, **kwargs
    ):
        self.log(
            "warning",
            message,
            event_code=event_code,
            reason=reason,
            reason_code=reason_code,
            **kwargs,
        )
