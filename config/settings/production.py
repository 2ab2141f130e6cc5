"""
Django 프로덕션 환경 설정

gunicorn config.wsgi:application 으로 배포할 때 사용합니다.
Admin과 Browsable API 정적 파일은 WhiteNoise가 서빙합니다. (collectstatic 필요)
"""
import dj_database_url
from .base import *

# 디버그 모드
DEBUG = env.bool('DEBUG', default=False)

# 프로덕션 호스트
ALLOWED_HOSTS = env.list('ALLOWED_HOSTS', default=['*'])

# Browsable API 로그인 폼(세션 인증)을 HTTPS 도메인에서 쓰기 위한 CSRF 신뢰 도메인
CSRF_TRUSTED_ORIGINS = env.list('CSRF_TRUSTED_ORIGINS', default=[])

# 리버스 프록시(HTTPS 종료) 뒤에서 실행
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SESSION_COOKIE_SECURE = env.bool('SESSION_COOKIE_SECURE', default=True)
CSRF_COOKIE_SECURE = env.bool('CSRF_COOKIE_SECURE', default=True)

# DATABASE_URL이 있으면 커넥션 재사용 설정으로 교체 (없으면 base의 SQLite)
DATABASE_URL = env('DATABASE_URL', default=None)
if DATABASE_URL:
    DATABASES = {
        'default': dj_database_url.config(
            default=DATABASE_URL,
            conn_max_age=env.int('DB_CONN_MAX_AGE', default=600),
            conn_health_checks=True,
        )
    }

# WhiteNoise 정적 파일 설정
MIDDLEWARE.insert(1, 'whitenoise.middleware.WhiteNoiseMiddleware')
STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

# 도서 API를 호출할 프론트엔드 출처
CORS_ALLOWED_ORIGINS = env.list('CORS_ALLOWED_ORIGINS', default=[])

# 로깅 설정 - 도서 생성/수정/삭제/토글 로그(apps.*)와 4xx/5xx 요청 로그
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': env('APP_LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
        'django.request': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': False,
        },
    },
}
