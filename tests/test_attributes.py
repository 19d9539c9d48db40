from iptv_playlist.parser.attributes import (
    UNKNOWN_TITLE,
    build_request_headers,
    derive_title,
    extract_attributes,
    parse_cookies,
    parse_duration,
    parse_extinf_fields,
    parse_headers,
    split_duration,
)


def test_attributes_before_comma_and_title_after():
    fields = parse_extinf_fields('-1 tvg-id="x" group-title="News",BBC News HD')

    assert fields.duration == -1.0
    assert fields.title == "BBC News HD"
    assert fields.attributes == {"tvg-id": "x", "group-title": "News"}


def test_duration_parsing():
    assert split_duration("10.5,Foo") == (10.5, ",Foo")
    assert split_duration("abc,Foo")[0] == -1.0
    assert split_duration(",Foo") == (-1.0, ",Foo")
    assert split_duration("")[0] == -1.0


def test_line_starting_with_attribute_has_unknown_duration():
    fields = parse_extinf_fields('tvg-id="x",Foo')

    assert fields.duration == -1.0
    assert fields.attributes == {"tvg-id": "x"}
    assert fields.title == "Foo"


def test_keys_are_lower_cased():
    upper = parse_extinf_fields('-1 TVG-LOGO="http://logo",Foo')
    lower = parse_extinf_fields('-1 tvg-logo="http://logo",Foo')

    assert upper.attributes == lower.attributes == {"tvg-logo": "http://logo"}
    assert upper.title == "Foo"


def test_later_duplicate_key_wins():
    fields = parse_extinf_fields('-1 group-title="A" group-title="B",Foo')

    assert fields.attributes == {"group-title": "B"}
    assert fields.title == "Foo"


def test_unterminated_attribute_is_not_extracted():
    fields = parse_extinf_fields('-1 tvg-logo="http://logo,Foo')

    assert fields.attributes == {}
    assert fields.duration == -1.0


def test_attribute_value_may_contain_commas():
    fields = parse_extinf_fields('-1 group-title="News, Sports",CNN')

    assert fields.attributes == {"group-title": "News, Sports"}
    assert fields.title == "CNN"


def test_title_keeps_inner_commas():
    fields = parse_extinf_fields('-1 group-title="A",News, Weather and More')

    assert fields.title == "News, Weather and More"


def test_empty_title_falls_back():
    assert parse_extinf_fields("-1,").title == UNKNOWN_TITLE
    assert parse_extinf_fields('-1 tvg-id="x"').title == UNKNOWN_TITLE
    assert parse_extinf_fields("").title == UNKNOWN_TITLE


def test_derive_title_removes_every_occurrence_of_a_literal():
    text = ' group-title="News",Daily group-title="News"   recap'
    _, literals = extract_attributes(text)

    assert derive_title(text, literals) == "Daily recap"


def test_parse_headers():
    assert parse_headers("Authorization: Bearer t|X-Custom: v") == {
        "Authorization": "Bearer t",
        "X-Custom": "v",
    }


def test_parse_headers_drops_segments_without_colon():
    assert parse_headers("Authorization: Bearer t|garbage|X-Custom: v") == {
        "Authorization": "Bearer t",
        "X-Custom": "v",
    }


def test_parse_headers_splits_on_first_colon_only():
    assert parse_headers("Referer: https://a.com/x") == {"Referer": "https://a.com/x"}


def test_parse_headers_empty():
    assert parse_headers(None) == {}
    assert parse_headers("") == {}


def test_parse_cookies():
    assert parse_cookies("session=abc; token=a=b;junk;") == {"session": "abc", "token": "a=b"}


def test_user_agent_and_referrer_override_http_headers():
    attributes = {
        "http-headers": "User-Agent: A|X-Token: y|Referer: old",
        "user-agent": "B",
        "referrer": "https://r.example",
    }

    assert build_request_headers(attributes) == {
        "User-Agent": "B",
        "X-Token": "y",
        "Referer": "https://r.example",
    }


def test_unquoted_text_before_comma_is_not_title():
    fields = parse_extinf_fields("-1 catchup-days=7,Name")

    assert fields.title == "Name"
    assert fields.attributes == {}


def test_line_without_comma_has_unknown_title():
    assert parse_extinf_fields("-1 Foo Bar").title == UNKNOWN_TITLE
    assert parse_extinf_fields('-1 group-title="A,B"').title == UNKNOWN_TITLE


def test_unterminated_value_does_not_hide_the_title_comma():
    assert parse_extinf_fields('-1 tvg-logo="http://logo,Foo').title == "Foo"


def test_attributes_after_comma_are_cut_from_title():
    fields = parse_extinf_fields('-1,tvg-id="x" Name')

    assert fields.attributes == {"tvg-id": "x"}
    assert fields.title == "Name"


def test_duration_rejects_non_decimal_spellings():
    assert parse_duration("1_0") == -1.0
    assert parse_duration("inf") == -1.0
    assert parse_duration("nan") == -1.0
    assert parse_duration("0x10") == -1.0
    assert split_duration("1_0,Foo")[0] == -1.0


def test_duration_accepts_decimal_and_exponent():
    assert parse_duration("-1") == -1.0
    assert parse_duration("10.") == 10.0
    assert parse_duration(".5") == 0.5
    assert parse_duration("+2.5e1") == 25.0
