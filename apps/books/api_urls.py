"""
도서 API URL 라우팅

- ViewSet은 DefaultRouter에 등록하면 URL이 자동으로 만들어집니다.
- APIView / GenericAPIView는 path()로 한 줄씩 연결합니다.
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from . import api_views as views

# DRF 라우터 설정
router = DefaultRouter()
router.register(r'books', views.BookViewSet, basename='book')
router.register(r'catalog', views.BookReadOnlyViewSet, basename='catalog')

urlpatterns = [
    # 스타일 1: APIView
    path('apiview/books/', views.BookListAPIView.as_view(), name='apiview-book-list'),
    path('apiview/books/<int:pk>/', views.BookDetailAPIView.as_view(), name='apiview-book-detail'),
    path('apiview/books/<int:pk>/toggle/', views.BookToggleAPIView.as_view(), name='apiview-book-toggle'),

    # 스타일 2: GenericAPIView + Mixin
    path('generic/books/', views.BookListCreateGenericView.as_view(), name='generic-book-list'),
    path('generic/books/<int:pk>/', views.BookDetailGenericView.as_view(), name='generic-book-detail'),
    path('generic/books/<int:pk>/toggle/', views.BookToggleGenericView.as_view(), name='generic-book-toggle'),

    # 스타일 2-1: Concrete 제네릭 뷰
    path('concrete/books/', views.BookListCreateView.as_view(), name='concrete-book-list'),
    path('concrete/books/<int:pk>/', views.BookRetrieveUpdateDestroyView.as_view(), name='concrete-book-detail'),

    # 스타일 비교표
    path('styles/', views.ViewStyleCatalogView.as_view(), name='view-styles'),

    # 스타일 3: ViewSet + Router
    path('', include(router.urls)),
]
