"""
도서 Admin 모듈

Django Admin에서 도서를 관리합니다.
"""
from django.contrib import admin, messages
from django.utils.html import format_html

from .models import Book


@admin.register(Book)
class BookAdmin(admin.ModelAdmin):
    """도서 Admin"""
    list_display = (
        'title', 'author', 'published_year', 'is_available_display', 'created_at',
    )
    list_filter = ('is_available', 'published_year')
    search_fields = ('title', 'author')
    readonly_fields = ('created_at', 'updated_at')
    actions = ['mark_available', 'mark_checked_out']

    fieldsets = (
        ('도서 정보', {
            'fields': ('title', 'author', 'published_year'),
        }),
        ('대출 상태', {
            'fields': ('is_available',),
        }),
        ('시스템 정보', {
            'classes': ('collapse',),
            'fields': ('created_at', 'updated_at'),
        }),
    )

    @admin.display(description='대출 상태', ordering='is_available')
    def is_available_display(self, obj):
        if obj.is_available:
            return format_html('<span style="color: green;">● 대출 가능</span>')
        return format_html('<span style="color: orange;">● 대출 중</span>')

    @admin.action(description='선택한 도서를 대출 가능으로 변경')
    def mark_available(self, request, queryset):
        updated = queryset.update(is_available=True)
        self.message_user(request, f'{updated}권을 대출 가능으로 변경했습니다.', messages.SUCCESS)

    @admin.action(description='선택한 도서를 대출 중으로 변경')
    def mark_checked_out(self, request, queryset):
        updated = queryset.update(is_available=False)
        self.message_user(request, f'{updated}권을 대출 중으로 변경했습니다.', messages.SUCCESS)
