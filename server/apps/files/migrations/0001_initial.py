import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='StoredFile',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, help_text='Original filename as uploaded', max_length=255)),
                ('data', models.BinaryField(help_text='Framed blob: prefix + gzip payload + suffix')),
                ('mime_type', models.CharField(help_text='Content type supplied by the uploader', max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
            ],
            options={
                'verbose_name': 'Stored file',
                'verbose_name_plural': 'Stored files',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['name', '-created_at'], name='files_name_recent_idx')],
            },
        ),
    ]
