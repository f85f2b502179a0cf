from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, PlainSerializer

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def parse_bridge_date(value: Any) -> Optional[datetime]:
    """Parse a bridge timestamp (``yyyy-MM-dd'T'HH:mm:ss``, bridge UTC).

    The bridge reports unset dates as the literal ``"none"``.
    """
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected a date string, got {type(value).__name__}")
    if value == "none":
        return None
    return datetime.strptime(value, DATE_FORMAT)


BridgeDateTime = Annotated[
    Optional[datetime],
    BeforeValidator(parse_bridge_date),
    PlainSerializer(lambda d: d.strftime(DATE_FORMAT) if d else "none", return_type=str),
]
