from typing import Any, Dict

from django.http import HttpRequest

from assetpath.site import get_default_site


def site_model(request: HttpRequest) -> Dict[str, Any]:
    """
    Expose the configured site model to templates as ``site``.

    Args:
        request:
            The current HTTP request. Included for the context processor
            signature; it is not used.

    Returns:
        dict: ``{"site": Site}`` for the asset_path tag to search.
    """
    return {"site": get_default_site()}
