# run.py
import atexit
import logging
import os

from dotenv import load_dotenv

from profile_app import create_app

basedir = os.path.abspath(os.path.dirname(__file__))
# 실행 파일과 같은 디렉터리의 .env 를 명시적으로 로드합니다.
load_dotenv(dotenv_path=os.path.join(basedir, '.env'))

app = create_app()

def shut_down():
    """프로세스 종료 시 저장소 연결을 정리합니다."""
    logging.info("initiating server shutdown...")
    app.services['store'].close()
    logging.info("shutdown complete.")

atexit.register(shut_down)

if __name__ == '__main__':
    host = os.getenv('FLASK_RUN_HOST', '127.0.0.1')
    port = int(os.getenv('FLASK_RUN_PORT', 3000))
    debug = app.config.get('DEBUG', False)
    app.run(host=host, port=port, debug=debug)
