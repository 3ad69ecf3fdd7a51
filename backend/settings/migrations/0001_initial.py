from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="StoreSetting",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("key", models.CharField(max_length=100, unique=True)),
                ("value", models.TextField(blank=True, default="")),
                (
                    "type",
                    models.CharField(
                        choices=[("string", "String"), ("number", "Number"), ("boolean", "Boolean"), ("json", "JSON")],
                        default="string",
                        max_length=50,
                    ),
                ),
                ("description", models.TextField(blank=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Store Setting",
                "verbose_name_plural": "Store Settings",
                "ordering": ["key"],
            },
        ),
    ]
