from datetime import datetime, timezone
from typing import Optional

from assistants import AssistantsClient


def get_client() -> AssistantsClient:
    return AssistantsClient()


def format_timestamp(value: Optional[int]) -> str:
    if not value:
        return "-"
    return datetime.fromtimestamp(value, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def dump_models(items) -> list:
    return [item.model_dump(mode="json") for item in items]
