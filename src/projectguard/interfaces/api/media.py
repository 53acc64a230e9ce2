"""JSON media handler aware of database value types."""

import functools
import json
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

import falcon.media


def _default(value: object) -> object:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, UUID):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def json_handler() -> falcon.media.JSONHandler:
    return falcon.media.JSONHandler(
        dumps=functools.partial(json.dumps, default=_default, ensure_ascii=False),
        loads=json.loads,
    )


def install_json_handler(app) -> None:
    handler = json_handler()
    app.req_options.media_handlers.update({falcon.MEDIA_JSON: handler})
    app.resp_options.media_handlers.update({falcon.MEDIA_JSON: handler})
