"""
샘플 도서 데이터 생성 커맨드

사용법:
    python3 manage.py seed_books
    python3 manage.py seed_books --clear
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.books.models import Book

SAMPLE_BOOKS = [
    # (제목, 저자, 출판 연도, 대출 가능 여부)
    ('Two Scoops of Django', 'Daniel Roy Greenfeld', 2020, True),
    ('Django for APIs', 'William S. Vincent', 2022, True),
    ('Fluent Python', 'Luciano Ramalho', 2022, False),
    ('클린 코드', '로버트 C. 마틴', 2013, True),
    ('객체지향의 사실과 오해', '조영호', 2015, True),
    ('토비의 스프링', '이일민', 2012, False),
]


class Command(BaseCommand):
    help = '샘플 도서 데이터를 생성합니다.'

    def add_arguments(self, parser):
        parser.add_argument('--clear', action='store_true', help='생성 전에 모든 도서를 삭제합니다.')

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            deleted, _ = Book.objects.all().delete()
            self.stdout.write(self.style.WARNING(f'기존 도서 {deleted}권을 삭제했습니다.'))

        created_count = 0
        for title, author, published_year, is_available in SAMPLE_BOOKS:
            _, created = Book.objects.get_or_create(
                title=title,
                author=author,
                published_year=published_year,
                defaults={'is_available': is_available},
            )
            if created:
                created_count += 1

        skipped = len(SAMPLE_BOOKS) - created_count
        self.stdout.write(self.style.SUCCESS(
            f'샘플 도서 {created_count}권 생성 (이미 있음: {skipped}권, 전체: {Book.objects.count()}권)'
        ))
