from django.utils.text import slugify

from assetpath.site import Collection, Document, Site


def create_post(*, date="2013/01/01", title="Post Title", slug=None, legacy=False):
    """
    Build a post document the way the generator ids them: "/<date>/<slug>".
    """
    if slug is None:
        slug = slugify(title)

    document_id = f"/{date}/{slug}"
    if legacy:
        return Document(document_id, slug=slug)
    return Document(document_id, data={"slug": slug, "title": title})


def create_site(*, baseurl="", version=None, legacy=False, extra_collections=()):
    posts = Collection(
        "posts",
        [
            create_post(title="Post Title", legacy=legacy),
            create_post(
                date="2012/05/25", title="Another Post Title", legacy=legacy
            ),
        ],
    )
    if legacy:
        collection_document = Document(
            "/my_collection/document_in_collection", slug="document_in_collection"
        )
    else:
        collection_document = Document(
            "/my_collection/document_in_collection",
            data={"slug": "document_in_collection"},
        )
    my_collection = Collection("my_collection", [collection_document])

    return Site(
        [posts, my_collection, *extra_collections],
        config={"baseurl": baseurl},
        version=version,
    )


def build_site():
    """Site factory referenced from ASSET_PATH_SITE_FACTORY in tests."""
    return create_site(baseurl="/factory")
