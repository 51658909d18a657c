"""
Tokenizer for the raw argument string of the asset_path tag.

Arguments are separated by a single space. An argument that starts with a
quote character runs until the next occurrence of that same character, so
file names may contain whitespace:

    kitten.png
    "document with spaces in name.pdf" /2012/05/25/another-post-title
"""

from typing import Optional

from assetpath.logging import AssetPathLogger

structured_logger = AssetPathLogger.get_logger(__name__)

QUOTE_CHARACTERS = ('"', "'")


def parse_next_parameter(
    parameter_string: Optional[str], quotes=QUOTE_CHARACTERS
) -> tuple[Optional[str], str]:
    """
    Split the first parameter off a parameter string.

    Behavior:
        Leading and trailing whitespace is stripped first. A quoted parameter
        ends at the next occurrence of its opening quote character; the quotes
        themselves are not part of the value. An unquoted parameter ends at the
        first space. The remainder is returned as-is and is stripped on the next
        call.

        If the closing quote is missing, the rest of the string after the
        opening quote is the value and the remainder is empty.

    Args:
        parameter_string (str or None): The unparsed input.
        quotes (Iterable[str]): Characters that open a quoted parameter.

    Returns:
        tuple: (value, remaining). value is None when the input is empty.
    """
    if parameter_string is None:
        return None, ""

    parameter_string = parameter_string.strip()

    if not parameter_string:
        return None, ""

    quote = parameter_string[0]
    if quote in quotes:
        closing_index = parameter_string.find(quote, 1)
        if closing_index == -1:
            structured_logger.warning(
                "Quoted asset_path parameter is missing its closing quote.",
                event_code="asset_path_unterminated_quote",
                reason="No matching closing quote was found in the parameter string",
                reason_code="quote_unterminated",
                parameter_string=parameter_string,
            )
            return parameter_string[1:], ""

        return parameter_string[1:closing_index], parameter_string[closing_index + 1 :]

    value, _, remaining = parameter_string.partition(" ")
    return value, remaining


def parse_parameters(parameter_string: str) -> tuple[Optional[str], Optional[str]]:
    """
    Parse a tag argument string into (filename, page_id).

    Only the first two parameters are consumed; anything after them is ignored.
    """
    filename, remaining = parse_next_parameter(parameter_string.strip())
    page_id, remaining = parse_next_parameter(remaining)

    return filename, page_id
