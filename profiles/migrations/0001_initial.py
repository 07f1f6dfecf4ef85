from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CareerProfile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('personal_info', models.JSONField(blank=True, default=dict)),
                ('positioning', models.JSONField(blank=True, default=dict)),
                ('value_propositions', models.JSONField(blank=True, default=list)),
                ('professional_mission', models.TextField(blank=True)),
                ('unique_selling_points', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Career Profile',
                'verbose_name_plural': 'Career Profile',
            },
        ),
    ]
