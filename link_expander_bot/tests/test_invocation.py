import types

from link_expander_bot.core.invocation import InvocationKind, resolve_invocation


def test_direct_text_wins_over_message():
    message = types.SimpleNamespace(content="from message")
    payload = resolve_invocation(text="typed", message=message)
    assert payload.kind is InvocationKind.DIRECT_TEXT
    assert payload.text == "typed"


def test_message_content_used_when_no_text():
    payload = resolve_invocation(message=types.SimpleNamespace(content="hello"))
    assert payload.kind is InvocationKind.REFERENCED_MESSAGE
    assert payload.text == "hello"


def test_empty_direct_text_still_resolves():
    payload = resolve_invocation(text="")
    assert payload.kind is InvocationKind.DIRECT_TEXT
    assert payload.text == ""


def test_nothing_resolvable_returns_none():
    assert resolve_invocation() is None
    assert resolve_invocation(message=types.SimpleNamespace(content=None)) is None
