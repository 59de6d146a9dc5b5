# profile_app/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from typing import Optional

from flask import Flask, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

# - 설정 / 오류
from profile_app.core.config import config_by_name
from profile_app.core.errors import ServiceError

# - API 블루프린트
from profile_app.api.profiles.routes import profiles_bp
from profile_app.api.comments.routes import comments_bp
from profile_app.api.likes.routes import likes_bp

# - 서비스 모듈
from profile_app.services.store import create_store
from profile_app.services.sequence_service import SequenceGenerator
from profile_app.services.integrity import ReferenceChecker
from profile_app.api.profiles.services import ProfileService
from profile_app.api.comments.services import CommentService
from profile_app.api.likes.services import LikeService

def create_app(config_name: Optional[str] = None):
    """
    Flask 애플리케이션 팩토리 함수.
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. 문서 저장소 연결 및 컬렉션 준비
    # =====================================================================================
    try:
        store = create_store(app.config)
        store.connect(app.config.get('FIREBASE_CREDENTIALS_PATH'))
        store.provision()
        logging.info("Document store initialized successfully")
    except Exception as e:
        logging.error(f"Failed to initialize document store: {e}")
        raise

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}

    # 5-1. 공용 서비스: 저장소, 시퀀스 발급기, 참조 확인
    app.services['store'] = store
    app.services['sequences'] = SequenceGenerator(store)
    app.services['references'] = ReferenceChecker(store)

    # 5-2. 도메인 서비스
    app.services['profiles'] = ProfileService(store, app.services['sequences'])
    app.services['comments'] = CommentService(store, app.services['sequences'], app.services['references'])
    app.services['likes'] = LikeService(store, app.services['sequences'], app.services['references'])

    # =====================================================================================
    # 6. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(profiles_bp)
    app.register_blueprint(comments_bp)
    app.register_blueprint(likes_bp)

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ServiceError)
    def handle_service_error(err):
        # 응답 형태는 예외의 kind 태그로만 결정됩니다.
        return jsonify(err.to_payload()), err.status_code

    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"error_code": "VALIDATION_ERROR", "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        if isinstance(err, HTTPException):
            return err
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {"error_code": "INTERNAL_SERVER_ERROR", "message": "unexpected server error"}
        return jsonify(response), 500

    # =====================================================================================
    # 8. 로깅 및 앱 반환
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
