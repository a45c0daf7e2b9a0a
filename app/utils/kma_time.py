# app/utils/kma_time.py

from datetime import datetime, timedelta, timezone
from typing import NamedTuple, Optional

# 한국은 서머타임이 없으므로 tz 데이터베이스 대신 고정 오프셋 사용
KST_OFFSET = timedelta(hours=9)

# 초단기실황: 매시 정각 생성, 약 40분 후 제공
NOWCAST_LAG = timedelta(minutes=40)

# 단기예보: 02, 05, ..., 23시 발표, 약 10~20분 후 제공
FORECAST_LAG = timedelta(minutes=20)
FORECAST_BASE_TIMES = ("0200", "0500", "0800", "1100", "1400", "1700", "2000", "2300")


class BaseDateTime(NamedTuple):
    base_date: str  # YYYYMMDD
    base_time: str  # HHMM


def to_kst(instant: Optional[datetime] = None) -> datetime:
    """
    UTC 시각에 9시간을 더한 KST 벽시계 시각(naive)을 반환합니다.
    tz 정보가 없는 datetime은 UTC로 간주합니다.
    """
    if instant is None:
        instant = datetime.now(timezone.utc)
    elif instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)

    utc = instant.astimezone(timezone.utc).replace(tzinfo=None)
    return utc + KST_OFFSET


def format_yyyymmdd(value: datetime) -> str:
    return value.strftime("%Y%m%d")


def now_base(instant: Optional[datetime] = None) -> BaseDateTime:
    """초단기실황(getUltraSrtNcst) 조회용 base_date/base_time"""
    base = to_kst(instant) - NOWCAST_LAG
    return BaseDateTime(format_yyyymmdd(base), f"{base.hour:02d}00")


def forecast_base(instant: Optional[datetime] = None) -> BaseDateTime:
    """
    단기예보(getVilageFcst) 조회용 base_date/base_time

    지연 보정한 시각 이하의 가장 최근 발표 시각을 고른다.
    02:00 이전이면 전날 23:00 발표분을 사용한다.
    """
    base = to_kst(instant) - FORECAST_LAG
    hhmm = f"{base.hour:02d}{base.minute:02d}"

    if hhmm < FORECAST_BASE_TIMES[0]:
        prev_day = base - timedelta(days=1)
        return BaseDateTime(format_yyyymmdd(prev_day), FORECAST_BASE_TIMES[-1])

    selected = FORECAST_BASE_TIMES[0]
    for candidate in FORECAST_BASE_TIMES:
        if candidate <= hhmm:
            selected = candidate

    return BaseDateTime(format_yyyymmdd(base), selected)


def seconds_until_next_hour_kst(instant: Optional[datetime] = None) -> int:
    """다음 KST 정시까지 남은 초 (브라우저 캐시 만료 시각 계산용)"""
    kst = to_kst(instant)
    next_hour = kst.replace(minute=0, second=0, microsecond=0) + timedelta(hours=1)
    return max(0, int((next_hour - kst).total_seconds()))
