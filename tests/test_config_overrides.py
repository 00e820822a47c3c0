"""``--set`` override parsing, coercion, and merging into Config."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from lib_layered_config import Config

from hello_world.adapters.config.overrides import (
    ConfigOverride,
    apply_overrides,
    coerce_value,
    parse_override,
)

IDENTIFIER = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]*", fullmatch=True)


@pytest.mark.os_agnostic
def test_parse_override_splits_section_and_key() -> None:
    """The first dot separates section from key."""
    assert parse_override("lib_log_rich.environment=dev") == ConfigOverride(
        section="lib_log_rich", key_path=("environment",), value="dev"
    )


@pytest.mark.os_agnostic
def test_parse_override_keeps_equals_signs_in_value() -> None:
    """Only the first '=' separates path from value."""
    assert parse_override("section.key=a=b").value == "a=b"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("lib_log_rich.environment", "must contain '='"),
        ("environment=dev", "at least one dot"),
        (".environment=dev", "section name is empty"),
        ("lib_log_rich..environment=dev", "empty component"),
        ("lib_log_rich.=dev", "empty component"),
    ],
)
def test_parse_override_rejects_malformed_input(raw: str, message: str) -> None:
    """Malformed overrides raise ValueError naming the problem."""
    with pytest.raises(ValueError, match=message):
        parse_override(raw)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("true", True),
        ("-3", -3),
        ("2.5", 2.5),
        ("null", None),
        ("[1, 2]", [1, 2]),
        ("staging", "staging"),
        ("hello world", "hello world"),
        ("", ""),
    ],
)
def test_coerce_value_prefers_json_then_string(raw: str, expected: object) -> None:
    """JSON literals are decoded; everything else stays a string."""
    assert coerce_value(raw) == expected


@pytest.mark.os_agnostic
def test_apply_overrides_without_overrides_returns_same_instance() -> None:
    """No overrides means no new Config."""
    config = Config({"lib_log_rich": {"environment": "prod"}}, {})

    assert apply_overrides(config, ()) is config


@pytest.mark.os_agnostic
def test_apply_overrides_merges_without_touching_siblings_or_original() -> None:
    """Overrides deep-merge; untouched keys and the source Config survive."""
    config = Config({"lib_log_rich": {"environment": "prod", "service": "greeter"}}, {})

    result = apply_overrides(config, ("lib_log_rich.environment=dev", "extra.nested.flag=true"))

    assert result["lib_log_rich"] == {"environment": "dev", "service": "greeter"}
    assert result["extra"]["nested"]["flag"] is True
    assert config["lib_log_rich"]["environment"] == "prod"


@pytest.mark.os_agnostic
def test_apply_overrides_last_value_wins() -> None:
    """Repeating a key keeps the later value."""
    config = Config({}, {})

    result = apply_overrides(config, ("s.k=1", "s.k=2"))

    assert result["s"]["k"] == 2


@pytest.mark.os_agnostic
@given(section=IDENTIFIER, key=IDENTIFIER, value=st.text(max_size=40))
@settings(max_examples=100)
def test_parse_override_accepts_any_identifier_path(section: str, key: str, value: str) -> None:
    """Every SECTION.KEY=VALUE made of identifiers parses."""
    parsed = parse_override(f"{section}.{key}={value}")

    assert parsed.section == section
    assert parsed.key_path == (key,)


@pytest.mark.os_agnostic
@given(raw=st.text())
@settings(max_examples=200)
def test_coerce_value_never_raises(raw: str) -> None:
    """Arbitrary text coerces to a JSON type or falls back to itself."""
    result = coerce_value(raw)

    assert result is None or isinstance(result, (str, int, float, bool, list, dict))
