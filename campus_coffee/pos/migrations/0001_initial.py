from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Pos",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("CAFE", "Café"),
                            ("BAKERY", "Bakery"),
                            ("VENDING_MACHINE", "Vending Machine"),
                            ("CAFETERIA", "Cafeteria"),
                        ],
                        db_index=True,
                        max_length=32,
                    ),
                ),
                (
                    "campus",
                    models.CharField(
                        choices=[
                            ("ALTSTADT", "Altstadt"),
                            ("BERGHEIM", "Bergheim"),
                            ("INF", "Im Neuenheimer Feld"),
                        ],
                        db_index=True,
                        max_length=32,
                    ),
                ),
                ("street", models.CharField(max_length=255)),
                ("house_number", models.CharField(max_length=255)),
                ("postal_code", models.IntegerField()),
                ("city", models.CharField(max_length=255)),
            ],
            options={
                "verbose_name": "point of sale",
                "verbose_name_plural": "points of sale",
                "indexes": [
                    models.Index(
                        fields=["campus", "type"], name="pos_campus_type_idx"
                    )
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("name",), name="unique_pos_name")
                ],
            },
        ),
    ]
