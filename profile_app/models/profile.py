# profile_app/models/profile.py
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

@dataclass
class Profile:
    """
    'profiles' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    name 을 제외한 성격 유형 필드는 모두 자유 형식의 선택 값입니다.
    """
    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    mbti: Optional[str] = None
    enneagram: Optional[str] = None
    variant: Optional[str] = None
    tritype: Optional[Any] = None
    socionics: Optional[str] = None
    sloan: Optional[str] = None
    psyche: Optional[str] = None
    image: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        # 값이 없는 필드는 저장하지 않아야 스키마 검증에서 '누락'으로 보고됩니다.
        return {k: v for k, v in asdict(self).items() if v is not None}
