from link_expander_bot.core.link_matcher import LinkFamily, find_links
from link_expander_bot.tests.conftest import TWITTER_MESSAGE


def test_find_links_keeps_only_family_hosts_in_order():
    matches = find_links(TWITTER_MESSAGE, LinkFamily.TWITTER)
    assert [m.host for m in matches] == [
        "twitter.com",
        "x.com",
        "mobile.twitter.com",
        "mobile.x.com",
    ]
    starts = [m.start for m in matches]
    assert starts == sorted(starts)


def test_spans_point_at_exact_link_text():
    text = "see (https://x.com/a/status/1), then https://twitter.com/b."
    matches = find_links(text, LinkFamily.TWITTER)
    assert [text[m.start : m.end] for m in matches] == [
        "https://x.com/a/status/1",
        "https://twitter.com/b",
    ]
    assert matches[0].span == (matches[0].start, matches[0].end)


def test_balanced_parentheses_stay_in_link():
    text = "https://x.com/wiki/Foo_(bar)"
    matches = find_links(text, LinkFamily.TWITTER)
    assert text[matches[0].start : matches[0].end] == text


def test_unrelated_subdomain_and_other_hosts_are_dropped():
    text = "https://weird.link.twitter.com/a https://otherwebsite/test https://threads.net/@x"
    assert find_links(text, LinkFamily.TWITTER) == []


def test_threads_family_matches_both_hosts():
    text = "https://www.threads.net/@zuck/post/1 and https://threads.net/@a"
    matches = find_links(text, LinkFamily.THREADS)
    assert [m.host for m in matches] == ["www.threads.net", "threads.net"]


def test_emails_and_bare_domains_are_not_links():
    text = "mail me at someone@twitter.com or visit twitter.com/foo"
    assert find_links(text, LinkFamily.TWITTER) == []


def test_malformed_urls_are_dropped_silently():
    text = "https://x.com:notaport/a http://[::1/broken https:///nohost"
    assert find_links(text, LinkFamily.TWITTER) == []


def test_offsets_are_string_indices_with_non_ascii_text():
    text = "héllo 🐦 https://x.com/ü done"
    match = find_links(text, LinkFamily.TWITTER)[0]
    assert text[match.start : match.end] == "https://x.com/ü"


def test_empty_text_yields_no_matches():
    assert find_links("", LinkFamily.THREADS) == []
    assert find_links("no links here", LinkFamily.THREADS) == []


def test_control_characters_end_a_link():
    text = "https://threads.net/@a/post/1\x7f https://www.threads.net/@b\x00tail"
    matches = find_links(text, LinkFamily.THREADS)
    assert [text[m.start : m.end] for m in matches] == [
        "https://threads.net/@a/post/1",
        "https://www.threads.net/@b",
    ]
