# profile_app/models/like.py
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

@dataclass
class Like:
    """'likes' 컬렉션의 문서 구조. (comment_id, user_id) 쌍당 최대 하나만 존재합니다."""
    id: int
    comment_id: int
    user_id: Optional[int]
    created_at: str

    def to_document(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}
