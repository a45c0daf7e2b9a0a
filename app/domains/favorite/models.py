# app/domains/favorite/models.py

from sqlalchemy import Column, String, Float, BigInteger, UniqueConstraint
from app.core.database import Base

class Favorite(Base):
    __tablename__ = "favorites"

    id = Column(String(36), primary_key=True)               # uuid4
    client_id = Column(String(64), nullable=False, index=True)  # X-Client-Id 헤더 값

    district_raw = Column(String(100), nullable=False)      # "서울특별시-종로구"
    label = Column(String(100), nullable=False)             # "서울특별시 종로구"
    alias = Column(String(30), nullable=False)              # 사용자가 붙인 별칭

    lat = Column(Float, nullable=False)
    lon = Column(Float, nullable=False)

    created_at = Column(BigInteger, nullable=False)         # epoch milliseconds

    # 같은 클라이언트가 같은 지역을 두 번 저장하지 못하도록
    __table_args__ = (
        UniqueConstraint('client_id', 'district_raw', name='uix_favorite_client_district'),
    )
