# profile_app/services/store/memory_store.py
"""
인메모리 문서 저장소

- 단위/통합 테스트와 외부 의존성 없는 로컬 개발용입니다.
- 프로세스 종료 시 모든 데이터가 사라집니다.
- 모든 연산은 하나의 락으로 직렬화되므로 스레드 간 원자성이 보장됩니다.
"""

import copy
import logging
import threading
import uuid
from typing import Any, Dict, List, Optional, Sequence

from profile_app.services.store.base import (
    DESCENDING,
    DocumentStore,
    Filter,
    OrderBy,
    StoreConnectionError,
    matches,
)

logger = logging.getLogger(__name__)


class MemoryStore(DocumentStore):
    """dict 기반 DocumentStore 구현. 컬렉션마다 삽입 순서를 유지합니다."""

    def __init__(self):
        super().__init__()
        self._lock = threading.RLock()
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._connected = False

    def connect(self, uri: Optional[str] = None) -> 'MemoryStore':
        self._connected = True
        logger.info("인메모리 저장소 연결")
        return self

    def close(self) -> None:
        self._connected = False

    def _ensure_connected(self) -> None:
        if not self._connected:
            raise StoreConnectionError("저장소가 연결되지 않았습니다.")

    def list_collections(self) -> List[str]:
        with self._lock:
            return [name for name, docs in self._collections.items() if docs]

    def find(self, collection: str, filters: Sequence[Filter] = (),
             order_by: Optional[OrderBy] = None) -> List[Dict[str, Any]]:
        self._ensure_connected()
        with self._lock:
            docs = [
                copy.deepcopy(doc)
                for doc in self._collections.get(collection, {}).values()
                if matches(doc, filters)
            ]
        if order_by:
            field, direction = order_by
            # 필드가 없는 문서는 정렬 대상에서 제외합니다. (Firestore order_by 와 동일)
            docs = [doc for doc in docs if doc.get(field) is not None]
            docs.sort(key=lambda doc: doc[field], reverse=(direction == DESCENDING))
        return docs

    def _insert(self, collection: str, document: Dict[str, Any], key: Optional[str]) -> None:
        self._ensure_connected()
        with self._lock:
            docs = self._collections.setdefault(collection, {})
            key = key or str(uuid.uuid4())
            if key in docs:
                raise ValueError(f"이미 존재하는 문서입니다: {collection}/{key}")
            docs[key] = copy.deepcopy(document)

    def _first_key(self, collection: str, filters: Sequence[Filter]) -> Optional[str]:
        for key, doc in self._collections.get(collection, {}).items():
            if matches(doc, filters):
                return key
        return None

    def update_one(self, collection: str, filters: Sequence[Filter], increments: Dict[str, int]) -> bool:
        self._ensure_connected()
        with self._lock:
            key = self._first_key(collection, filters)
            if key is None:
                return False
            doc = self._collections[collection][key]
            for field, amount in increments.items():
                doc[field] = doc.get(field, 0) + amount
            return True

    def delete_one(self, collection: str, filters: Sequence[Filter]) -> bool:
        self._ensure_connected()
        with self._lock:
            key = self._first_key(collection, filters)
            if key is None:
                return False
            del self._collections[collection][key]
            return True

    def find_one_and_update(self, collection: str, key: str, increments: Dict[str, int]) -> Dict[str, Any]:
        self._ensure_connected()
        with self._lock:
            doc = self._collections.setdefault(collection, {}).setdefault(key, {})
            for field, amount in increments.items():
                doc[field] = doc.get(field, 0) + amount
            return copy.deepcopy(doc)
