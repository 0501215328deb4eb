from django.apps import AppConfig


class EventsiteConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "eventsite"
    verbose_name = "Event site"
