from django.apps import AppConfig


class PosConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "pos"
    verbose_name = "Points of Sale"
