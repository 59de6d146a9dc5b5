"""
문서 저장소 게이트웨이

지원 백엔드:
- Firestore (운영)
- In-memory (테스트, 로컬 개발)
"""

from profile_app.services.store.base import (
    ASCENDING,
    COMMENTS,
    COUNTERS,
    DESCENDING,
    LIKES,
    PROFILES,
    DocumentStore,
    DocumentValidationError,
    StoreConnectionError,
    StoreError,
)
from profile_app.services.store.firestore_store import FirestoreStore
from profile_app.services.store.memory_store import MemoryStore

__all__ = [
    "DocumentStore",
    "DocumentValidationError",
    "StoreError",
    "StoreConnectionError",
    "FirestoreStore",
    "MemoryStore",
    "create_store",
    "PROFILES",
    "COMMENTS",
    "LIKES",
    "COUNTERS",
    "ASCENDING",
    "DESCENDING",
]


def create_store(config) -> DocumentStore:
    """설정의 STORE_BACKEND 값에 맞는 저장소 인스턴스를 생성합니다. (연결 전 상태)"""
    backend = config.get('STORE_BACKEND', 'firestore')
    if backend == 'memory':
        return MemoryStore()
    if backend == 'firestore':
        return FirestoreStore(project_id=config.get('FIREBASE_PROJECT_ID'))
    raise ValueError(f"알 수 없는 저장소 백엔드입니다: {backend}")
