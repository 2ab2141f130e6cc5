"""
URL 설정

프로젝트의 URL 패턴을 정의합니다.
세 가지 뷰 스타일을 접두사로 구분해서 나란히 노출합니다.
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.http import JsonResponse


def health_check(request):
    """헬스체크 엔드포인트"""
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    # Healthcheck
    path('health/', health_check, name='health_check'),

    # Django 관리자
    path('admin/', admin.site.urls),

    # Browsable API 로그인/로그아웃
    path('api-auth/', include('rest_framework.urls')),

    # 도서 API (APIView / GenericAPIView / ViewSet + Router)
    path('api/', include('apps.books.api_urls')),
]

# 개발 환경에서 미디어/정적 파일 서빙
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)

    # Debug Toolbar
    if getattr(settings, 'USE_DEBUG_TOOLBAR', False):
        from debug_toolbar.toolbar import debug_toolbar_urls
        urlpatterns = debug_toolbar_urls() + urlpatterns
