# profile_app/core/config.py

import os # 환경 변수를 읽기 위해 사용합니다.

class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # 문서 저장소 백엔드 선택: 'firestore' (운영) 또는 'memory' (로컬 개발/테스트)
    STORE_BACKEND = os.getenv('STORE_BACKEND', 'firestore')
    # Firestore 프로젝트 ID. 인증 파일이 없을 때(Application Default Credentials)에 사용됩니다.
    FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID')
    # 모든 프로필 화면에 동일하게 노출되는 기본 이미지 URL 입니다.
    DEFAULT_PROFILE_IMAGE = os.getenv('DEFAULT_PROFILE_IMAGE', 'https://soulverse.boo.world/images/1.png')

class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True
    # 개발용 Firebase 프로젝트의 서비스 계정 키 파일 경로
    FIREBASE_CREDENTIALS_PATH = os.getenv('DEV_FIREBASE_CREDENTIALS_PATH')

class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False
    # 테스트는 외부 저장소 없이 인메모리 백엔드로 실행합니다.
    STORE_BACKEND = 'memory'
    FIREBASE_CREDENTIALS_PATH = os.getenv('TEST_FIREBASE_CREDENTIALS_PATH')

# FLASK_ENV 값에 따라 create_app 에서 설정 클래스를 선택할 때 사용합니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig
)
