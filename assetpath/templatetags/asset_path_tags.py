from django.template import Library, Node, NodeList, TemplateSyntaxError
from django.template.base import Lexer, TextNode, TokenType, VariableNode
from django.utils.html import conditional_escape

from assetpath.parameters import parse_parameters
from assetpath.resolver import resolve_asset_path

register = Library()

MISSING_ARGUMENT_ERROR = (
    "Error processing input, expected syntax: {% asset_path filename [post id] %}"
)


class AssetPathNode(Node):
    """
    Output the URL of an asset stored alongside a post or page.

    The tag takes a file name and, optionally, the id of the post or page the
    asset belongs to. Without an id, the page being rendered (the `page`
    context variable) is used. Documents are looked up in the `site` context
    variable, or the configured default site::

        {% asset_path kitten.png %}
        {% asset_path "document with spaces in name.pdf" /2012/05/25/another-post %}
        {% asset_path image.jpg /my_collection/document_in_collection %}

    Both arguments may contain template variables, which are substituted
    before the arguments are split::

        {% for post in site.posts %}{% asset_path cover.jpg {{ post.id }} %}{% endfor %}
    """

    def __init__(self, markup, nodelist=None):
        self.markup = markup.strip()
        if nodelist is None:
            nodelist = NodeList([TextNode(self.markup)])
        self.nodelist = nodelist

    def render(self, context):
        if not self.markup:
            return MISSING_ARGUMENT_ERROR

        filename, page_id = parse_parameters(self.render_markup(context))
        # Variables that render empty leave no filename
        path = resolve_asset_path(
            filename or "",
            page_id,
            page=context.get("page"),
            site=context.get("site"),
        )

        if context.autoescape:
            path = conditional_escape(path)
        return path

    def render_markup(self, context):
        """Substitute template variables in the raw tag arguments."""
        # Quotes in substituted values must survive for the tokenizer
        autoescape = context.autoescape
        context.autoescape = False
        try:
            return self.nodelist.render(context)
        finally:
            context.autoescape = autoescape

    @classmethod
    def asset_path_tag(cls, parser, token):
        bits = token.contents.split(None, 1)
        markup = bits[1].strip() if len(bits) > 1 else ""

        nodelist = NodeList()
        for markup_token in Lexer(markup).tokenize():
            if markup_token.token_type == TokenType.TEXT:
                node = TextNode(markup_token.contents)
            elif markup_token.token_type == TokenType.VAR:
                if not markup_token.contents:
                    raise TemplateSyntaxError(
                        "Empty variable tag in asset_path arguments"
                    )
                node = VariableNode(parser.compile_filter(markup_token.contents))
            elif markup_token.token_type == TokenType.COMMENT:
                continue
            else:
                raise TemplateSyntaxError(
                    "asset_path arguments may only contain text and variables"
                )
            node.token = markup_token
            node.origin = parser.origin
            nodelist.append(node)

        return cls(markup, nodelist)


register.tag("asset_path", AssetPathNode.asset_path_tag)
