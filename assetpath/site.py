from collections.abc import Mapping

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string
from django.utils.version import get_version_tuple

# Generators from this version on keep the slug in the document's front matter
NESTED_SLUG_VERSION = (3, 0, 0)


class Document:
    """
    A single page or post managed by the site generator.

    `data` holds the document's front matter. Older generators expose the slug
    as a flat attribute instead, which is what `slug` is for.
    """

    def __init__(self, id, data=None, slug=None):
        self.id = id
        self.data = data or {}
        self.slug = slug

    def __repr__(self):
        return f"<Document {self.id!r}>"


class Collection:
    """A named, ordered group of documents, such as "posts"."""

    def __init__(self, label, docs=None):
        self.label = label
        self.docs = list(docs or [])

    def __iter__(self):
        return iter(self.docs)

    def __repr__(self):
        return f"<Collection {self.label!r} ({len(self.docs)} documents)>"


class LegacySlugSchema:
    """Reads the slug from the document's flat `slug` attribute."""

    def get_slug(self, document):
        return getattr(document, "slug", None)


class NestedSlugSchema:
    """Reads the slug from the document's `data` mapping."""

    def get_slug(self, document):
        data = getattr(document, "data", None) or {}
        return data.get("slug")


def get_slug_schema(version):
    """
    Return the slug schema used by sites built with the given generator version.

    Versions are compared numerically, so "10.0" is newer than "3.0.0". A site
    without a version is assumed to be current.
    """
    if version is None:
        return NestedSlugSchema()

    version_tuple = get_version_tuple(str(version))
    # "3" and "3.0" mean 3.0.0
    version_tuple += (0,) * (len(NESTED_SLUG_VERSION) - len(version_tuple))
    if version_tuple >= NESTED_SLUG_VERSION:
        return NestedSlugSchema()

    return LegacySlugSchema()


class Site:
    """
    The in-memory site model queried by the asset_path tag.

    Args:
        collections: A mapping of label to Collection, or an iterable of
            Collections keyed by their own labels. Iteration order is kept.
        config: Site configuration. Only "baseurl" is used.
        version: Version of the generator that built the site. Picks the slug
            schema once, here, instead of on every lookup.
    """

    def __init__(self, collections=None, config=None, version=None):
        if collections is None:
            collections = {}
        elif not isinstance(collections, Mapping):
            collections = {collection.label: collection for collection in collections}

        self.collections = dict(collections)
        self.config = dict(config or {})
        self.version = version
        self.slug_schema = get_slug_schema(version)

    def __iter__(self):
        return iter(self.collections.values())

    def __getitem__(self, label):
        # Lets templates loop over a collection: {% for post in site.posts %}
        return self.collections[label].docs

    def __repr__(self):
        return f"<Site {list(self.collections)!r} version={self.version!r}>"

    @property
    def baseurl(self):
        return self.config.get("baseurl") or ""

    def get_slug(self, document):
        return self.slug_schema.get_slug(document)


def get_default_site():
    """
    Return the site model used when a template context does not provide one.

    Behavior:
        If `ASSET_PATH_SITE_FACTORY` names a callable, its return value is used.
        Otherwise an empty site is built from `ASSET_PATH_BASEURL` and
        `ASSET_PATH_GENERATOR_VERSION`, so asset paths still resolve against
        the current page's url.

    Raises:
        ImproperlyConfigured: If the configured factory cannot be imported.
    """
    factory_path = getattr(settings, "ASSET_PATH_SITE_FACTORY", None)
    if factory_path:
        try:
            factory = import_string(factory_path)
        except ImportError as err:
            raise ImproperlyConfigured(
                f"ASSET_PATH_SITE_FACTORY {factory_path!r} could not be imported"
            ) from err
        return factory()

    return Site(
        config={"baseurl": getattr(settings, "ASSET_PATH_BASEURL", "")},
        version=getattr(settings, "ASSET_PATH_GENERATOR_VERSION", None),
    )
