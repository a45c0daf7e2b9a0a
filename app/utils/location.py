# app/utils/location.py

import math
from typing import NamedTuple

# 기상청 동네예보 격자 정의 (Lambert Conformal Conic)
RE = 6371.00877  # 지구 반경(km)
GRID = 5.0       # 격자 간격(km)
SLAT1 = 30.0     # 표준위도 1
SLAT2 = 60.0     # 표준위도 2
OLON = 126.0     # 기준점 경도
OLAT = 38.0      # 기준점 위도
XO = 43          # 기준점 X 격자
YO = 136         # 기준점 Y 격자

DEGRAD = math.pi / 180.0


class InvalidCoordinate(ValueError):
    """위도/경도가 유한한 숫자가 아닐 때 발생"""

    def __init__(self, lat, lon):
        super().__init__(f"lat/lon must be finite numbers (lat={lat!r}, lon={lon!r})")
        self.lat = lat
        self.lon = lon


class GridCell(NamedTuple):
    nx: int
    ny: int


def _projection_constants():
    re = RE / GRID
    slat1 = SLAT1 * DEGRAD
    slat2 = SLAT2 * DEGRAD
    olat = OLAT * DEGRAD

    sn = math.tan(math.pi * 0.25 + slat2 * 0.5) / math.tan(math.pi * 0.25 + slat1 * 0.5)
    sn = math.log(math.cos(slat1) / math.cos(slat2)) / math.log(sn)
    sf = math.tan(math.pi * 0.25 + slat1 * 0.5)
    sf = pow(sf, sn) * math.cos(slat1) / sn
    ro = math.tan(math.pi * 0.25 + olat * 0.5)
    ro = re * sf / pow(ro, sn)
    return re, sn, sf, ro


# 입력과 무관한 상수이므로 import 시 한 번만 계산
_RE, _SN, _SF, _RO = _projection_constants()


def _is_finite(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def map_to_grid(lat: float, lon: float) -> GridCell:
    """
    위도/경도 -> 기상청 격자(NX, NY) 변환

    반올림은 기상청 공개 알고리즘과 동일하게 floor(x + 0.5)를 사용한다.
    round()로 바꾸면 일부 경계 좌표에서 다른 격자가 나온다.
    """
    if not (_is_finite(lat) and _is_finite(lon)):
        raise InvalidCoordinate(lat, lon)

    ra = math.tan(math.pi * 0.25 + lat * DEGRAD * 0.5)
    ra = _RE * _SF / pow(ra, _SN)

    theta = lon * DEGRAD - OLON * DEGRAD
    if theta > math.pi:
        theta -= 2.0 * math.pi
    if theta < -math.pi:
        theta += 2.0 * math.pi
    theta *= _SN

    nx = int(math.floor(ra * math.sin(theta) + XO + 0.5))
    ny = int(math.floor(_RO - ra * math.cos(theta) + YO + 0.5))

    return GridCell(nx, ny)


project = map_to_grid
