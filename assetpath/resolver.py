import posixpath
import re

from django.conf import settings

from assetpath.logging import AssetPathLogger
from assetpath.site import get_default_site
from assetpath.utils.logging import get_page_value

structured_logger = AssetPathLogger.get_logger(__name__)

# A dot followed by word characters at the very end, e.g. "/2012/05/post.html"
FILE_EXTENSION_RE = re.compile(r"\.\w+\Z", re.ASCII)
DUPLICATE_SLASHES_RE = re.compile(r"/{2,}")


def get_document_path(page_id, site, *, page=None):
    """
    Return "<collection label>/<slug>" for the document with the given id.

    Collections are searched in order, then the documents within each, and the
    first match wins. An id that matches no document gives an empty path.
    `page` is the page being rendered and is only used for logging.
    """
    for collection in site:
        for document in collection:
            if document.id == page_id:
                structured_logger.debug(
                    "Matched asset owner document.",
                    event_code="asset_path_document_found",
                    collection=collection,
                    document=document,
                    page=page,
                )
                return f"{collection.label}/{site.get_slug(document)}"

    structured_logger.warning(
        "No document matched the requested id.",
        event_code="asset_path_document_not_found",
        reason="The id does not belong to any document in the site collections",
        reason_code="document_id_unmatched",
        requested_id=page_id,
        page=page,
        site=site,
    )
    return ""


def strip_filename(path):
    """
    Drop the last path segment if it looks like a file name.

    "/foo/bar.html" becomes "/foo" and "bar.html" becomes "". Paths without a
    trailing extension are returned unchanged.
    """
    if FILE_EXTENSION_RE.search(path):
        return posixpath.dirname(path)
    return path


def collapse_slashes(url):
    """Replace every run of consecutive slashes with a single slash."""
    return DUPLICATE_SLASHES_RE.sub("/", url)


def resolve_asset_path(filename, page_id=None, *, page=None, site=None):
    """
    Build the URL of an asset stored alongside a post or page.

    Behavior:
        Without a page_id, the current page's id is used. When there is an id,
        the owning document is looked up in the site's collections and its
        "<collection>/<slug>" path is used. When the current page has no id
        either, the page's url is used instead. A trailing file name is stripped
        from the path before the asset directory, path and filename are joined
        onto the site's baseurl and duplicate slashes are collapsed.

    Args:
        filename (str): The asset file name, e.g. "kitten.png".
        page_id (str, optional): Id of the post or page owning the asset.
        page: The page being rendered, a mapping or an object with `id` and
            `url`.
        site (Site, optional): The site model. Defaults to the configured site.

    Returns:
        str: The asset URL, e.g. "/assets/posts/post-title/kitten.png".
    """
    if site is None:
        site = get_default_site()

    if not page_id:
        page_id = get_page_value(page, "id")

    if page_id:
        path = get_document_path(page_id, site, page=page)
    else:
        path = get_page_value(page, "url") or ""

    path = strip_filename(path)

    directory = getattr(settings, "ASSET_PATH_DIRECTORY", "assets")
    asset_url = collapse_slashes(f"{site.baseurl}/{directory}/{path}/{filename}")

    structured_logger.debug(
        "Resolved asset path.",
        event_code="asset_path_resolved",
        asset_url=asset_url,
        page=page,
        site=site,
    )
    return asset_url
