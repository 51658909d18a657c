from django.apps.config import AppConfig


class AssetPathAppConfig(AppConfig):
    name = "assetpath"
    verbose_name = "Asset paths"
