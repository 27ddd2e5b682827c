import pytest

from link_expander_bot.core.metadata_extractor import (
    ImageKind,
    ImageRef,
    MetaKey,
    classify_image,
    extract_meta_fields,
    extract_metadata,
    meta_tag_content,
    parse_html,
)


THREADS_PAGE = """
<html><head>
  <meta property="og:title" content="Hello">
  <meta property="og:title" content="Second title">
  <meta property="og:url" content="https://www.threads.net/@zuck/post/1">
  <meta property="og:description" content="A &quot;quoted&quot; post">
  <meta property="og:image" content="https://img/a.png">
  <meta name="twitter:card" content="summary">
</head><body></body></html>
"""


def test_extract_metadata_reads_first_matching_tags():
    metadata = extract_metadata(parse_html(THREADS_PAGE))
    assert metadata.title == "Hello"
    assert metadata.canonical_url == "https://www.threads.net/@zuck/post/1"
    assert metadata.description == 'A "quoted" post'
    assert metadata.image == "https://img/a.png"
    assert metadata.card_type == "summary"
    assert metadata.image_ref == ImageRef.thumbnail("https://img/a.png")


def test_missing_tags_are_absent_not_errors():
    document = parse_html("<html><head><title>x</title></head></html>")
    fields = extract_meta_fields(document)
    assert list(fields) == list(MetaKey)
    assert all(value is None for value in fields.values())

    metadata = extract_metadata(document)
    assert metadata.title == ""
    assert metadata.image_ref.kind is ImageKind.NONE


def test_name_and_property_attributes_are_not_interchangeable():
    document = parse_html('<meta name="og:title" content="wrong"><meta property="twitter:card" content="x">')
    assert meta_tag_content(document, "property", "og:title") is None
    assert meta_tag_content(document, "name", "twitter:card") is None


def test_selector_values_with_quotes_are_safe():
    document = parse_html("""<meta property='we"ird]' content="ok">""")
    assert meta_tag_content(document, "property", 'we"ird]') == "ok"


def test_tag_without_content_attribute_is_absent():
    document = parse_html('<meta property="og:title"><meta property="og:title" content="later">')
    assert meta_tag_content(document, "property", "og:title") is None


@pytest.mark.parametrize(
    ("image", "card_type", "expected"),
    [
        ("https://img/a.png", "summary", ImageRef.thumbnail("https://img/a.png")),
        ("https://img/a.png", "summary_large_image", ImageRef.content("https://img/a.png")),
        ("https://img/a.png", "", ImageRef.content("https://img/a.png")),
        ("https://img/a.png", "Summary", ImageRef.content("https://img/a.png")),
        ("", "summary", ImageRef.none()),
        (None, "player", ImageRef.none()),
    ],
)
def test_classify_image(image, card_type, expected):
    assert classify_image(image, card_type) == expected


def test_parse_html_tolerates_garbage():
    document = parse_html("<<<not html")
    assert extract_metadata(document).title == ""
