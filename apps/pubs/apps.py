from django.apps import AppConfig


class PubsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.pubs'
    label = 'pubs'
