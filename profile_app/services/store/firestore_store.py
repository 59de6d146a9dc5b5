# profile_app/services/store/firestore_store.py
import logging
import os
from typing import Any, Dict, Iterator, List, Optional, Sequence

import firebase_admin
from firebase_admin import credentials, firestore
from google.auth.credentials import AnonymousCredentials

from profile_app.services.store.base import (
    DESCENDING,
    DocumentStore,
    Filter,
    OrderBy,
    StoreConnectionError,
    matches,
)

logger = logging.getLogger(__name__)

# 서버에서 직접 처리하는 연산자. '!=' 는 다른 필드 정렬과 함께 쓰면 복합 인덱스 제약이
# 생기므로 클라이언트에서 거릅니다.
_SERVER_SIDE_OPS = ('==', 'in')


class _EmulatorCredential(credentials.Base):
    """Firestore 에뮬레이터 접속용 익명 인증 정보"""

    def get_credential(self):
        return AnonymousCredentials()


class FirestoreStore(DocumentStore):
    """
    Firestore 기반 DocumentStore 구현.

    - 문서 키는 Firestore 가 생성하고, 정수 `id` 필드가 엔티티 식별자입니다.
    - 카운터 문서는 시퀀스 이름을 문서 키로 사용합니다.
    - 스키마 검증은 Firestore 에 검증기가 없으므로 insert_one 에서 수행됩니다.
    """

    def __init__(self, project_id: Optional[str] = None, app_name: str = 'profile-backend'):
        super().__init__()
        self.project_id = project_id
        self.app_name = app_name
        self._app = None
        self.db = None

    def connect(self, uri: Optional[str] = None) -> Any:
        """
        Firebase 앱을 초기화하고 Firestore 클라이언트를 생성합니다.

        :param uri: 서비스 계정 키 파일 경로. 없으면 에뮬레이터 익명 인증 또는 Application Default Credentials 사용
        """
        try:
            options = {'projectId': self.project_id} if self.project_id else None
            if uri:
                if not os.path.exists(uri):
                    raise FileNotFoundError(f"Firebase 인증 파일을 찾을 수 없습니다: {uri}")
                cred = credentials.Certificate(uri)
            elif os.getenv('FIRESTORE_EMULATOR_HOST'):
                cred = _EmulatorCredential()
            else:
                cred = credentials.ApplicationDefault()
            self._app = firebase_admin.initialize_app(cred, options, name=self.app_name)
            self.db = firestore.client(app=self._app)
            logger.info(f"Firestore 연결 성공 (project: {self._app.project_id})")
            return self.db
        except Exception as e:
            logger.error(f"Firestore 연결 실패: {e}", exc_info=True)
            raise StoreConnectionError(str(e)) from e

    def close(self) -> None:
        if self.db is not None:
            self.db.close()
            self.db = None
        if self._app is not None:
            firebase_admin.delete_app(self._app)
            self._app = None

    def list_collections(self) -> List[str]:
        return [ref.id for ref in self.db.collections()]

    def _snapshots(self, collection: str, filters: Sequence[Filter],
                   order_by: Optional[OrderBy] = None) -> Iterator[Any]:
        query = self.db.collection(collection)
        client_filters = []
        for field, op, value in filters:
            if op in _SERVER_SIDE_OPS:
                query = query.where(filter=firestore.FieldFilter(field, op, value))
            else:
                client_filters.append((field, op, value))

        if order_by:
            field, direction = order_by
            query = query.order_by(
                field,
                direction=firestore.Query.DESCENDING if direction == DESCENDING else firestore.Query.ASCENDING,
            )

        for snapshot in query.stream():
            if matches(snapshot.to_dict(), client_filters):
                yield snapshot

    def find(self, collection: str, filters: Sequence[Filter] = (),
             order_by: Optional[OrderBy] = None) -> List[Dict[str, Any]]:
        return [snapshot.to_dict() for snapshot in self._snapshots(collection, filters, order_by)]

    def _insert(self, collection: str, document: Dict[str, Any], key: Optional[str]) -> None:
        if key:
            # create() 는 같은 키의 문서가 이미 있으면 실패합니다.
            self.db.collection(collection).document(key).create(document)
        else:
            self.db.collection(collection).add(document)

    def _first_snapshot(self, collection: str, filters: Sequence[Filter]) -> Optional[Any]:
        return next(self._snapshots(collection, filters), None)

    def update_one(self, collection: str, filters: Sequence[Filter], increments: Dict[str, int]) -> bool:
        snapshot = self._first_snapshot(collection, filters)
        if snapshot is None:
            return False
        snapshot.reference.update({
            field: firestore.Increment(amount) for field, amount in increments.items()
        })
        return True

    def delete_one(self, collection: str, filters: Sequence[Filter]) -> bool:
        snapshot = self._first_snapshot(collection, filters)
        if snapshot is None:
            return False
        snapshot.reference.delete()
        return True

    def find_one_and_update(self, collection: str, key: str, increments: Dict[str, int]) -> Dict[str, Any]:
        doc_ref = self.db.collection(collection).document(key)
        transaction = self.db.transaction()

        @firestore.transactional
        def _increment_in_transaction(transaction, doc_ref, increments):
            snapshot = doc_ref.get(transaction=transaction)
            data = snapshot.to_dict() if snapshot.exists else {}
            for field, amount in increments.items():
                data[field] = data.get(field, 0) + amount
            transaction.set(doc_ref, data)
            return data

        return _increment_in_transaction(transaction, doc_ref, increments)
