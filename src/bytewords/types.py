from typing import Literal, Mapping, NamedTuple

Style = Literal["standard", "uri", "minimal"]
PayloadFormat = Literal["hex", "base64", "raw"]


class StyleParameters(NamedTuple):
    separator: str
    word_length: int


STYLES: Mapping[Style, StyleParameters] = {
    "standard": StyleParameters(" ", 4),
    "uri": StyleParameters("-", 4),
    "minimal": StyleParameters("", 2),
}


def style_parameters(style: Style) -> StyleParameters:
    """Returns separator and token width of a style, raises a ValueError for unknown styles."""
    try:
        return STYLES[style]
    except KeyError:
        raise ValueError(f"Invalid style {style!r}.") from None
