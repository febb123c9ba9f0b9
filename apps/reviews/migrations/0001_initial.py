# Generated manually for reviews app

import uuid
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('pubs', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Review',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('content', models.TextField()),
                ('rate', models.PositiveSmallIntegerField(validators=[MinValueValidator(0), MaxValueValidator(5)])),
                ('like_count', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('pub', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reviews', to='pubs.pub')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reviews', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'reviews',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['pub', 'created_at'], name='reviews_pub_created_idx'),
                    models.Index(fields=['user', 'created_at'], name='reviews_user_created_idx'),
                    models.Index(fields=['created_at'], name='reviews_created_at_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ReviewLike',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('review', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='likes', to='reviews.review')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='review_likes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'review_likes',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user'], name='review_likes_user_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('review', 'user'), name='unique_review_like'),
                ],
            },
        ),
    ]
