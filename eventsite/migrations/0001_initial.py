from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255)),
                ('teaser', models.TextField(blank=True)),
                ('description', models.TextField(blank=True)),
                ('location', models.CharField(blank=True, max_length=255)),
                ('start_date', models.DateTimeField(blank=True, null=True)),
                ('end_date', models.DateTimeField(blank=True, null=True)),
                ('enabled', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['start_date'],
                'indexes': [models.Index(fields=['enabled', 'start_date'], name='eventsite_event_enabled_idx')],
            },
        ),
        migrations.CreateModel(
            name='ContentNode',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('uuid', models.UUIDField(blank=True, db_index=True, editable=False, null=True)),
                ('kind', models.CharField(choices=[('page', 'Page'), ('home', 'Home')], default='page', max_length=20)),
                ('path', models.CharField(max_length=1000)),
                ('parent_path', models.CharField(blank=True, max_length=1000)),
                ('locale', models.CharField(max_length=10)),
                ('title', models.CharField(max_length=500)),
                ('resource_segment', models.CharField(blank=True, max_length=1000)),
                ('structure_type', models.CharField(default='default', max_length=100)),
                ('workflow_stage', models.CharField(choices=[('test', 'Test'), ('published', 'Published')], default='test', max_length=20)),
                ('author', models.IntegerField(blank=True, null=True)),
                ('navigation_contexts', models.JSONField(blank=True, default=list)),
                ('extensions', models.JSONField(blank=True, default=dict)),
                ('redirect_type', models.CharField(choices=[('none', 'No redirect'), ('internal', 'Internal'), ('external', 'External')], default='none', max_length=20)),
                ('redirect_external', models.CharField(blank=True, max_length=2000)),
                ('content', models.JSONField(blank=True, default=dict)),
                ('published_content', models.JSONField(blank=True, default=dict)),
                ('published_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['path'],
                'unique_together': {('path', 'locale')},
                'indexes': [models.Index(fields=['parent_path', 'locale'], name='eventsite_node_parent_idx')],
            },
        ),
    ]
