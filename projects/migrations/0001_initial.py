from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('type', models.CharField(choices=[('technical_writing', 'Technical Writing'), ('software_engineering', 'Software Engineering'), ('leadership', 'Leadership'), ('hybrid', 'Hybrid')], max_length=32)),
                ('date', models.DateField(blank=True, null=True)),
                ('featured', models.BooleanField(default=False)),
                ('overview', models.TextField()),
                ('challenge', models.TextField(blank=True)),
                ('approach', models.TextField(blank=True)),
                ('outcome', models.TextField(blank=True)),
                ('impact', models.TextField(blank=True)),
                ('technologies', models.JSONField(blank=True, default=list)),
                ('keywords', models.JSONField(blank=True, default=list)),
                ('links', models.JSONField(blank=True, default=list)),
                ('role_types', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Project',
                'verbose_name_plural': 'Projects',
                'ordering': ['-date', '-created_at', 'id'],
            },
        ),
    ]
