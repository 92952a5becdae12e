from datetime import datetime, timedelta, timezone

import pytest

from primer.github import Issue, IssuesSearchResult, User
from primer.issues import days_ago, format_table, render_html, render_report

CREATED = datetime(2013, 6, 10, 17, 0, tzinfo=timezone.utc)


def _issue(number, login, title, url="https://example.com/issues/1", user_url="https://example.com/u"):
    return Issue(
        number=number,
        html_url=url,
        title=title,
        state="open",
        user=User(login=login, html_url=user_url),
        created_at=CREATED,
    )


def test_format_table_matches_documented_lines():
    result = IssuesSearchResult(
        total_count=13,
        items=[
            _issue(5680, "eaigner", "encoding/json: set key converter on en/decoder"),
            _issue(6050, "gopherbot", "encoding/json: provide tokenizer"),
            _issue(9650, "cespare", "encoding/json: Decoding gives errPhase when unmarshaling map"),
        ],
    )
    assert format_table(result).splitlines() == [
        "13 issues:",
        "#5680    eaigner encoding/json: set key converter on en/decoder",
        "#6050  gopherbot encoding/json: provide tokenizer",
        "#9650    cespare encoding/json: Decoding gives errPhase when unmarshalin",
    ]


def test_format_table_truncates_login():
    result = IssuesSearchResult(total_count=1, items=[_issue(1, "abcdefghijklmnop", "t")])
    line = format_table(result).splitlines()[1]
    assert "abcdefghi " in line
    assert "abcdefghij" not in line


def test_missing_user_is_an_error():
    item = Issue(number=3)
    result = IssuesSearchResult(total_count=1, items=[item])
    for render in (format_table, render_html, render_report):
        with pytest.raises(ValueError):
            render(result)


def test_days_ago_truncates():
    assert days_ago(CREATED, CREATED + timedelta(days=3, hours=23)) == 3
    assert days_ago(CREATED, CREATED) == 0


def test_days_ago_defaults_to_now():
    past = datetime.now(timezone.utc) - timedelta(days=10, hours=1)
    assert days_ago(past) == 10


def test_render_report_matches_documented_output():
    result = IssuesSearchResult(
        total_count=13,
        items=[_issue(5680, "eaigner", "encoding/json: set key converter on en/decoder")],
    )
    now = CREATED + timedelta(days=750, hours=5)
    assert render_report(result, now) == (
        "13 issues:\n"
        "----------------------------------------\n"
        "Number: 5680\n"
        "User:   eaigner\n"
        "Title:  encoding/json: set key converter on en/decoder\n"
        "Age:    750 days\n"
    )


def test_render_report_truncates_title():
    result = IssuesSearchResult(total_count=1, items=[_issue(1, "u", "x" * 100)])
    title_line = render_report(result, CREATED).splitlines()[3]
    assert title_line == "Title:  " + "x" * 64


def test_render_report_empty():
    assert render_report(IssuesSearchResult(total_count=0)) == "0 issues:\n"


def test_render_html_structure():
    result = IssuesSearchResult(
        total_count=1,
        items=[_issue(5680, "eaigner", "title", url="https://example.com/issues/5680")],
    )
    html = render_html(result)
    assert html.startswith("\n<h1>1 issues</h1>\n<table>\n<tr style='text-align: left'>\n")
    assert "<td><a href='https://example.com/issues/5680'>5680</a></td>" in html
    assert "<td><a href='https://example.com/u'>eaigner</a></td>" in html
    assert "<td>open</td>" in html
    assert html.endswith("</tr>\n\n</table>\n")


def test_render_html_escapes_text():
    result = IssuesSearchResult(total_count=1, items=[_issue(1, "u", "<b>&")])
    assert "&lt;b&gt;&amp;" in render_html(result)


def test_render_html_filters_unsafe_links():
    result = IssuesSearchResult(total_count=1, items=[_issue(1, "u", "t", url="javascript:alert(1)")])
    html = render_html(result)
    assert "javascript" not in html
    assert "href='#ZgotmplZ'" in html