import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Book',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200, verbose_name='제목')),
                ('author', models.CharField(max_length=100, verbose_name='저자')),
                ('published_year', models.PositiveIntegerField(
                    validators=[django.core.validators.MinValueValidator(1, message='1 이상의 연도를 입력하세요.')],
                    verbose_name='출판 연도',
                )),
                ('is_available', models.BooleanField(default=True, verbose_name='대출 가능 여부')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='등록일시')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='수정일시')),
            ],
            options={
                'verbose_name': '도서',
                'verbose_name_plural': '도서 목록',
                'db_table': 'books',
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['title'], name='idx_book_title'),
                    models.Index(fields=['author'], name='idx_book_author'),
                    models.Index(fields=['is_available'], name='idx_book_is_available'),
                ],
            },
        ),
    ]
