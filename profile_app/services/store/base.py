# profile_app/services/store/base.py
"""
문서 저장소 게이트웨이의 공통 인터페이스

저장소에는 외래 키도, auto-increment 도 없습니다. 이 모듈은 서비스 계층이
사용하는 최소한의 컬렉션 연산과, 최초 기동 시의 컬렉션/카운터 준비(provision)
를 정의합니다.

Invariants:
    - 카운터 문서는 어떤 서비스가 시퀀스를 요청하기 전에 존재해야 합니다.
      provision() 이 컬렉션 준비와 같은 단계에서 카운터를 0 으로 생성합니다.
    - insert_one 은 쓰기 전에 컬렉션 스키마를 검사하고, 위반 시
      DocumentValidationError 를 던집니다.
    - find_one_and_update 는 단일 원자 연산이어야 합니다. (시퀀스 발급 전용)
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from marshmallow import Schema

from profile_app.services.store.validators import (
    CommentDocumentSchema,
    LikeDocumentSchema,
    ProfileDocumentSchema,
)

logger = logging.getLogger(__name__)

# --- 컬렉션 이름 ---
PROFILES = 'profiles'
COMMENTS = 'comments'
LIKES = 'likes'
COUNTERS = 'counters'

# --- 시퀀스 이름 (counters 컬렉션의 문서 키) ---
PROFILE_SEQUENCE = 'profile'
COMMENT_SEQUENCE = 'comment'
LIKE_SEQUENCE = 'like'
SEQUENCE_NAMES = (PROFILE_SEQUENCE, COMMENT_SEQUENCE, LIKE_SEQUENCE)

COLLECTION_VALIDATORS = {
    PROFILES: ProfileDocumentSchema,
    COMMENTS: CommentDocumentSchema,
    LIKES: LikeDocumentSchema,
    COUNTERS: None,
}

ASCENDING = 'asc'
DESCENDING = 'desc'

# (field, op, value). op 는 '==', 'in', '!=' 중 하나
Filter = Tuple[str, str, Any]
OrderBy = Tuple[str, str]

_MISSING = object()


class StoreError(Exception):
    """저장소 연산 실패의 기반 예외."""
    pass


class StoreConnectionError(StoreError):
    pass


class DocumentValidationError(StoreError):
    """
    컬렉션 스키마 검증 실패.

    details 형식:
        {"rules_not_satisfied": [
            {"operator_name": "required", "missing_properties": ["name"]},
            {"operator_name": "properties",
             "properties_not_satisfied": [{"property_name": "user_id", "reasons": [...]}]},
        ]}
    """

    def __init__(self, collection: str, details: Dict[str, Any]):
        super().__init__(f"Document failed validation in '{collection}'")
        self.collection = collection
        self.details = details


def matches(document: Dict[str, Any], filters: Iterable[Filter]) -> bool:
    """문서가 모든 필터 조건을 만족하는지 검사합니다. (Firestore where 의미론)"""
    for field, op, value in filters:
        current = document.get(field, _MISSING)
        if op == '==':
            if current is _MISSING or current != value:
                return False
        elif op == 'in':
            if current is _MISSING or current not in value:
                return False
        elif op == '!=':
            # 필드가 없거나 null 인 문서는 '!=' 조건에 매칭되지 않습니다.
            if current is _MISSING or current is None or current == value:
                return False
        else:
            raise ValueError(f"지원하지 않는 필터 연산자입니다: {op}")
    return True


class DocumentStore(ABC):
    """문서 저장소 백엔드가 구현해야 하는 연산 집합."""

    def __init__(self):
        self.validators: Dict[str, Optional[Schema]] = {}

    # --- 연결 수명주기 ---
    @abstractmethod
    def connect(self, uri: Optional[str] = None) -> Any:
        ...

    @abstractmethod
    def close(self) -> None:
        ...

    @abstractmethod
    def list_collections(self) -> List[str]:
        ...

    # --- 컬렉션 연산 ---
    @abstractmethod
    def find(self, collection: str, filters: Sequence[Filter] = (),
             order_by: Optional[OrderBy] = None) -> List[Dict[str, Any]]:
        ...

    def find_one(self, collection: str, filters: Sequence[Filter]) -> Optional[Dict[str, Any]]:
        docs = self.find(collection, filters)
        return docs[0] if docs else None

    def insert_one(self, collection: str, document: Dict[str, Any], key: Optional[str] = None) -> None:
        """스키마 검증 후 문서를 추가합니다. key 가 없으면 저장소가 문서 키를 생성합니다."""
        self.validate_document(collection, document)
        self._insert(collection, dict(document), key)

    @abstractmethod
    def _insert(self, collection: str, document: Dict[str, Any], key: Optional[str]) -> None:
        ...

    @abstractmethod
    def update_one(self, collection: str, filters: Sequence[Filter], increments: Dict[str, int]) -> bool:
        """첫 번째 매칭 문서의 숫자 필드를 증감합니다. 매칭 여부를 반환합니다."""
        ...

    @abstractmethod
    def delete_one(self, collection: str, filters: Sequence[Filter]) -> bool:
        ...

    @abstractmethod
    def find_one_and_update(self, collection: str, key: str, increments: Dict[str, int]) -> Dict[str, Any]:
        """키로 지정된 문서를 원자적으로 증감하고 갱신 후 문서를 반환합니다. (upsert)"""
        ...

    # --- 스키마 / 준비 ---
    def create_collection(self, name: str, validator: Optional[Schema] = None) -> None:
        self.validators[name] = validator

    def validate_document(self, collection: str, document: Dict[str, Any]) -> None:
        schema = self.validators.get(collection)
        if schema is None:
            return
        errors = schema.validate(document)
        if not errors:
            return

        missing = sorted(
            name for name in errors
            if name in schema.fields and schema.fields[name].required and name not in document
        )
        invalid = sorted(name for name in errors if name not in missing)

        rules = []
        if missing:
            rules.append({"operator_name": "required", "missing_properties": missing})
        if invalid:
            rules.append({
                "operator_name": "properties",
                "properties_not_satisfied": [
                    {"property_name": name, "reasons": errors[name]} for name in invalid
                ],
            })
        raise DocumentValidationError(collection, {"rules_not_satisfied": rules})

    def provision(self) -> bool:
        """
        컬렉션 검증기를 등록하고, 저장소가 비어 있으면 카운터를 시드합니다.
        실제로 시드를 수행했으면 True 를 반환합니다.
        """
        existing = self.list_collections()
        for name, schema_cls in COLLECTION_VALIDATORS.items():
            self.create_collection(name, schema_cls() if schema_cls else None)

        if existing:
            logger.info(f"기존 컬렉션이 존재하여 초기화를 건너뜁니다: {sorted(existing)}")
            return False

        for name in SEQUENCE_NAMES:
            self.insert_one(COUNTERS, {"seq": 0}, key=name)
        logger.info(f"컬렉션 및 시퀀스 카운터 초기화 완료: {list(SEQUENCE_NAMES)}")
        return True
