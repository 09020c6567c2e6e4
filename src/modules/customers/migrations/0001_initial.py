from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("first_name", models.CharField(max_length=100)),
                ("last_name", models.CharField(max_length=100)),
                ("is_active", models.BooleanField(default=True)),
            ],
            options={
                "db_table": "customers",
                "indexes": [
                    models.Index(fields=["is_active"], name="customers_active_idx"),
                    models.Index(
                        fields=["last_name"], name="customers_last_name_idx"
                    ),
                    models.Index(
                        fields=["first_name", "last_name"],
                        name="customers_full_name_idx",
                    ),
                ],
            },
        ),
    ]
