"""
Deterministic mapping rules.

This file exists to make the fixed ComicInfo schema explicit and enforceable.
"""

AGE_RATING = "Adults Only 18+"
GALLERY_URL = "https://nhentai.net/g/{id}/"
TITLE_FORMAT = "[{id}] {title}"
TAG_SEPARATOR = ","

# ComicInfo field -> tag categories projected into it
FIELD_TAG_TYPES = {
    "Writer": ("artist",),
    "Publisher": ("group",),
    "Genre": ("category", "parody"),
    "Tags": ("character", "language", "tag"),
    "Characters": ("character",),
}
LANGUAGE_TAG_TYPES = ("language",)

# only languages ComicInfo readers reliably interpret
LANGUAGE_CODES = {
    "english": "en",
    "chinese": "zh",
    "japanese": "ja",
}

YEAR_RANGE = (-(2**15), 2**15 - 1)  # i16
MONTH_RANGE = (0, 2**8 - 1)  # u8
DAY_RANGE = (0, 2**8 - 1)  # u8

# language-category tags that qualify a gallery rather than name a language
LANGUAGE_QUALIFIERS = ("translated", "rewrite")
