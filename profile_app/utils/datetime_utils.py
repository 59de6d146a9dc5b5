# profile_app/utils/datetime_utils.py
"""
프로젝트 전체에서 일관된 시간 처리를 위한 유틸리티 모듈

- 백엔드는 모든 시각을 UTC 로 다룹니다.
- 문서에 저장되는 시각은 ISO-8601 문자열이며, 정렬이 문자열 비교로도
  올바르게 동작하도록 항상 마이크로초까지 같은 포맷으로 생성합니다.
"""

from datetime import datetime, timezone


class DateTimeUtils:
    """시간/날짜 처리를 위한 중앙화된 유틸리티 클래스"""

    @staticmethod
    def now() -> datetime:
        """현재 시간을 UTC timezone-aware datetime으로 반환"""
        return datetime.now(timezone.utc)

    @staticmethod
    def to_iso(dt: datetime) -> str:
        """datetime 을 고정 폭 ISO 문자열로 변환 (naive 인 경우 UTC 로 가정)"""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc).isoformat(timespec='microseconds')

    @staticmethod
    def now_iso() -> str:
        """created_at 필드용 현재 시각 문자열"""
        return DateTimeUtils.to_iso(DateTimeUtils.now())
