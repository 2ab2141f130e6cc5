"""
Django 로컬 개발 환경 설정

python manage.py runserver --settings=config.settings.local 로 사용합니다.
Browsable API로 세 가지 뷰 스타일을 직접 눌러볼 수 있도록 DEBUG를 켭니다.
"""
from .base import *

# 디버그 모드 강제 활성화
DEBUG = True

# 로컬 개발용 호스트
ALLOWED_HOSTS = ['localhost', '127.0.0.1', '0.0.0.0']

# 로컬에서는 모든 출처 허용 (프론트엔드 개발 서버 연동)
CORS_ALLOW_ALL_ORIGINS = True

# 디버그 툴바 - 뷰 스타일별 쿼리 수 비교용 (USE_DEBUG_TOOLBAR=False로 끌 수 있음)
USE_DEBUG_TOOLBAR = env.bool('USE_DEBUG_TOOLBAR', default=True)
if USE_DEBUG_TOOLBAR:
    INSTALLED_APPS += ['debug_toolbar']
    MIDDLEWARE.insert(0, 'debug_toolbar.middleware.DebugToolbarMiddleware')
    INTERNAL_IPS = ['127.0.0.1', 'localhost']

    # Docker에서 실행 시 Internal IPs 설정
    import socket
    hostname, _, ips = socket.gethostbyname_ex(socket.gethostname())
    INTERNAL_IPS += [".".join(ip.split(".")[:-1] + ["1"]) for ip in ips]

# SQL 로그 출력 여부 (LOG_SQL=True)
LOG_SQL = env.bool('LOG_SQL', default=False)

# 로깅 설정
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': 'DEBUG',
            'propagate': False,
        },
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'django.db.backends': {
            'handlers': ['console'],
            'level': 'DEBUG' if LOG_SQL else 'INFO',
            'propagate': False,
        },
    },
}
