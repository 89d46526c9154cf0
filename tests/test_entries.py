import pytest

from adlistctl.blocker.entries import Active, Disabled, Other, classify, parse_entries, render_entries, split_lines


@pytest.mark.parametrize(
    "content",
    [
        "",
        "\n",
        "http://a.com",
        "http://a.com\n\n\n",
        "# http://a.com\r\nhttp://b.com\r\n",
        "  \t\n#\n# note\nhttp://x\r",
    ],
)
def test_render_reproduces_input(content):
    assert render_entries(parse_entries(content)) == content


def test_split_lines_reports_missing_final_newline():
    assert split_lines("a\nb") == [("a", "\n"), ("b", "")]
    assert split_lines("a\r\n") == [("a", "\r\n")]
    assert split_lines("") == []


def test_classify():
    assert classify("http://a.com") == Active("http://a.com")
    assert classify("#  http://a.com") == Disabled(raw="#  http://a.com", body="http://a.com")
    assert classify("   ") == Other("   ")
    assert classify("#  ") == Other("#  ")


def test_disable_and_enable_round_trip():
    entry = Active("http://a.com", "\r\n")
    disabled = entry.disable()
    assert disabled.render() == "# http://a.com\r\n"
    assert disabled.enable() == entry
