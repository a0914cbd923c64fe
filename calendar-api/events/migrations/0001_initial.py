from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("start", models.DateTimeField()),
                ("end", models.DateTimeField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["start", "id"],
                "indexes": [
                    models.Index(fields=["start"], name="event_start_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(end__gte=models.F("start")),
                        name="event_end_not_before_start",
                    ),
                ],
            },
        ),
    ]
