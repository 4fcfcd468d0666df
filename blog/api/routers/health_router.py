import time

import pendulum
from fastapi import APIRouter, status

from blog.models.response import Health

STARTED_AT = time.monotonic()

router = APIRouter()


@router.get("", response_model=Health, status_code=status.HTTP_200_OK)
def get_health() -> Health:
    return Health(
        status="OK",
        timestamp=pendulum.now("UTC").to_iso8601_string(),
        uptime=round(time.monotonic() - STARTED_AT, 3),
    )
