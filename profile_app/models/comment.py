# profile_app/models/comment.py
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

@dataclass
class Comment:
    """
    'comments' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    likes 는 좋아요 서비스만 증감시키는 비정규화 카운터입니다.
    """
    id: int
    profile_id: int
    user_id: Optional[int]
    created_at: str
    title: Optional[str] = None
    description: Optional[str] = None
    mbti: Optional[str] = None
    enneagram: Optional[str] = None
    zodiac: Optional[str] = None
    likes: int = 0

    def to_document(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}
