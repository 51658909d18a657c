from types import SimpleNamespace
from unittest import mock

from django.test import SimpleTestCase, override_settings

from assetpath.resolver import (
    collapse_slashes,
    get_document_path,
    resolve_asset_path,
    strip_filename,
)
from assetpath.site import Collection, Document, Site

from .utils import create_site


class GetDocumentPathTests(SimpleTestCase):
    def test_post(self):
        site = create_site()
        self.assertEqual(
            get_document_path("/2013/01/01/post-title", site), "posts/post-title"
        )

    def test_collection_document(self):
        site = create_site()
        self.assertEqual(
            get_document_path("/my_collection/document_in_collection", site),
            "my_collection/document_in_collection",
        )

    def test_legacy_site(self):
        site = create_site(version="2.5.3", legacy=True)
        self.assertEqual(
            get_document_path("/2012/05/25/another-post-title", site),
            "posts/another-post-title",
        )

    def test_first_match_wins(self):
        duplicate = Collection(
            "drafts", [Document("/2013/01/01/post-title", data={"slug": "draft"})]
        )
        site = create_site(extra_collections=[duplicate])
        self.assertEqual(
            get_document_path("/2013/01/01/post-title", site), "posts/post-title"
        )

    @mock.patch("assetpath.resolver.structured_logger")
    def test_no_match(self, mock_logger):
        self.assertEqual(get_document_path("/nope", create_site()), "")
        mock_logger.warning.assert_called_once()
        kwargs = mock_logger.warning.call_args.kwargs
        self.assertEqual(kwargs["event_code"], "asset_path_document_not_found")
        self.assertEqual(kwargs["reason_code"], "document_id_unmatched")
        self.assertEqual(kwargs["requested_id"], "/nope")

    @mock.patch("assetpath.resolver.structured_logger")
    def test_no_match_logs_current_page(self, mock_logger):
        page = {"id": "/2020/01/01/gone", "url": "/2020/01/01/gone.html"}
        get_document_path("/2020/01/01/gone", create_site(), page=page)
        self.assertEqual(mock_logger.warning.call_args.kwargs["page"], page)

    @mock.patch("assetpath.resolver.structured_logger")
    def test_match_logs_collection_and_document(self, mock_logger):
        site = create_site()
        get_document_path("/my_collection/document_in_collection", site)
        mock_logger.debug.assert_called_once()
        kwargs = mock_logger.debug.call_args.kwargs
        self.assertEqual(kwargs["event_code"], "asset_path_document_found")
        self.assertEqual(kwargs["collection"].label, "my_collection")
        self.assertEqual(
            kwargs["document"].id, "/my_collection/document_in_collection"
        )
        mock_logger.warning.assert_not_called()


class StripFilenameTests(SimpleTestCase):
    def test_strips_file_names(self):
        self.assertEqual(strip_filename("/foo/bar.html"), "/foo")
        self.assertEqual(strip_filename("foo/bar/index.md"), "foo/bar")
        self.assertEqual(strip_filename("/page-title.html"), "/")
        self.assertEqual(strip_filename("bar.html"), "")

    def test_keeps_directories(self):
        self.assertEqual(strip_filename("/page-title/"), "/page-title/")
        self.assertEqual(strip_filename("posts/post-title"), "posts/post-title")
        self.assertEqual(strip_filename(""), "")

    def test_extension_must_be_at_the_end(self):
        self.assertEqual(strip_filename("/v1.2/docs"), "/v1.2/docs")
        self.assertEqual(strip_filename("/foo/bar."), "/foo/bar.")
        self.assertEqual(strip_filename("/foo/bar.html\n"), "/foo/bar.html\n")


class CollapseSlashesTests(SimpleTestCase):
    def test_collapse(self):
        self.assertEqual(collapse_slashes("//assets///a//b.png"), "/assets/a/b.png")
        self.assertEqual(collapse_slashes("/assets/a/b.png"), "/assets/a/b.png")
        self.assertEqual(collapse_slashes(""), "")

    def test_idempotent(self):
        for value in ["", "/", "//", "a//b///c", "////x////", "no/doubles"]:
            once = collapse_slashes(value)
            self.assertEqual(collapse_slashes(once), once)

    def test_join_boundaries(self):
        for left in range(4):
            for right in range(4):
                url = collapse_slashes("/blog" + "/" * left + "/" * right + "x.png")
                if left + right:
                    self.assertEqual(url, "/blog/x.png")
                else:
                    self.assertEqual(url, "/blogx.png")


class ResolveAssetPathTests(SimpleTestCase):
    def setUp(self):
        self.site = create_site()

    def test_post_id(self):
        self.assertEqual(
            resolve_asset_path("kitten.png", "/2013/01/01/post-title", site=self.site),
            "/assets/posts/post-title/kitten.png",
        )

    def test_current_post(self):
        page = {"id": "/2013/01/01/post-title", "url": "/2013/01/01/post-title.html"}
        self.assertEqual(
            resolve_asset_path("kitten.png", page=page, site=self.site),
            "/assets/posts/post-title/kitten.png",
        )

    def test_empty_id_uses_current_page(self):
        page = SimpleNamespace(id="/2012/05/25/another-post-title", url="/x.html")
        self.assertEqual(
            resolve_asset_path("cover.jpg", "", page=page, site=self.site),
            "/assets/posts/another-post-title/cover.jpg",
        )

    def test_page_without_id_uses_url(self):
        self.assertEqual(
            resolve_asset_path("pirate.mov", page={"url": "/page-title/"}, site=self.site),
            "/assets/page-title/pirate.mov",
        )

    def test_page_url_file_name_is_stripped(self):
        site = Site(config={"baseurl": "/blog"})
        self.assertEqual(
            resolve_asset_path("photo.jpg", page={"url": "/foo/bar.html"}, site=site),
            "/blog/assets/foo/photo.jpg",
        )

    def test_no_page(self):
        self.assertEqual(
            resolve_asset_path("logo.svg", site=self.site), "/assets/logo.svg"
        )

    @mock.patch("assetpath.resolver.structured_logger")
    def test_unmatched_id(self, mock_logger):
        site = create_site(baseurl="/blog")
        self.assertEqual(
            resolve_asset_path("file.ext", "/does/not/exist", site=site),
            "/blog/assets/file.ext",
        )

    @mock.patch("assetpath.resolver.AssetPathLogger.log")
    def test_resolved_path_is_logged_with_page(self, mock_log):
        page = {"url": "/about/"}
        resolve_asset_path("team.jpg", page=page, site=self.site)
        level, message = mock_log.call_args.args
        kwargs = mock_log.call_args.kwargs
        self.assertEqual(level, "debug")
        self.assertEqual(kwargs["event_code"], "asset_path_resolved")
        self.assertEqual(kwargs["asset_url"], "/assets/about/team.jpg")
        self.assertEqual(kwargs["page"], page)

    def test_explicit_id_wins_over_page(self):
        page = {"id": "/2013/01/01/post-title"}
        self.assertEqual(
            resolve_asset_path(
                "image.jpg",
                "/my_collection/document_in_collection",
                page=page,
                site=self.site,
            ),
            "/assets/my_collection/document_in_collection/image.jpg",
        )

    def test_baseurl_slashes(self):
        for baseurl in ["", "/", "/blog", "/blog/", "/blog//", "/blog///"]:
            site = create_site(baseurl=baseurl)
            prefix = baseurl.rstrip("/")
            self.assertEqual(
                resolve_asset_path("kitten.png", "/2013/01/01/post-title", site=site),
                f"{prefix}/assets/posts/post-title/kitten.png",
            )

    def test_filename_with_leading_slashes(self):
        self.assertEqual(
            resolve_asset_path("///kitten.png", "/2013/01/01/post-title", site=self.site),
            "/assets/posts/post-title/kitten.png",
        )

    @override_settings(ASSET_PATH_DIRECTORY="media/")
    def test_asset_directory_setting(self):
        self.assertEqual(
            resolve_asset_path("kitten.png", "/2013/01/01/post-title", site=self.site),
            "/media/posts/post-title/kitten.png",
        )

    @override_settings(ASSET_PATH_BASEURL="/docs", ASSET_PATH_SITE_FACTORY=None)
    def test_default_site(self):
        self.assertEqual(
            resolve_asset_path("diagram.svg", page={"url": "/guide/index.html"}),
            "/docs/assets/guide/diagram.svg",
        )
